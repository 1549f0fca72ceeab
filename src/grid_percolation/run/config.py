"""
Run configuration for the percolation drivers.

The RunConfig loads a YAML document that selects the union-find strategy
used by every grid or disjoint-set the drivers build, plus reporting options
for the command-line interface.
"""

import copy
import yaml
from pathlib import Path
from typing import Any, Dict, Optional


DEFAULTS: Dict[str, Dict[str, bool]] = {
    'union_find': {
        'weighted': True,
        'path_compression': True,
    },
    'report': {
        'summary': False,
    },
}


class RunConfig:
    """
    Loads and validates a run configuration YAML.

    Every section is optional; missing keys fall back to DEFAULTS.

    Example:
        config = RunConfig.from_yaml('config/quick_union.yaml')
        grid = PercolationGrid(10, **config.union_find_options)
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = copy.deepcopy(DEFAULTS)
        self._validate(data or {})
        for section, values in (data or {}).items():
            self._data[section].update(values or {})

    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Run config must be a mapping, got {type(data).__name__}: {path}")

        return cls(data)

    @classmethod
    def default(cls) -> 'RunConfig':
        return cls()

    def _validate(self, data: Dict[str, Any]):
        """Reject unknown sections, unknown keys and non-boolean values."""
        for section, values in data.items():
            if section not in DEFAULTS:
                raise ValueError(f"Unknown config section: '{section}'. "
                                 f"Expected one of {sorted(DEFAULTS)}")
            if values is None:
                continue
            if not isinstance(values, dict):
                raise ValueError(f"Config section '{section}' must be a mapping")
            for key, value in values.items():
                if key not in DEFAULTS[section]:
                    raise ValueError(f"Unknown key '{key}' in config section '{section}'")
                if not isinstance(value, bool):
                    raise ValueError(f"'{section}.{key}' must be true or false, got {value!r}")

    # --- Properties ---

    @property
    def weighted(self) -> bool:
        return self._data['union_find']['weighted']

    @property
    def path_compression(self) -> bool:
        return self._data['union_find']['path_compression']

    @property
    def union_find_options(self) -> Dict[str, bool]:
        """Keyword arguments for DisjointSet and PercolationGrid."""
        return {
            'weighted': self.weighted,
            'path_compression': self.path_compression,
        }

    @property
    def summary(self) -> bool:
        return self._data['report']['summary']

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)
