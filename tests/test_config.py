"""Tests for run configuration."""

import pytest

from grid_percolation.run import RunConfig


class TestRunConfig:
    """Tests for RunConfig loading and validation."""

    def test_defaults(self):
        """Test default options."""
        config = RunConfig.default()

        assert config.weighted is True
        assert config.path_compression is True
        assert config.summary is False

    def test_from_yaml(self, tmp_path):
        """Test loading a partial YAML config."""
        path = tmp_path / "run.yaml"
        path.write_text("union_find:\n  weighted: false\n")

        config = RunConfig.from_yaml(path)

        assert config.union_find_options == {'weighted': False, 'path_compression': True}
        assert config.summary is False

    def test_empty_yaml(self, tmp_path):
        """Test an empty file yields the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert RunConfig.from_yaml(path).to_dict() == RunConfig.default().to_dict()

    def test_missing_file(self, tmp_path):
        """Test a missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            RunConfig.from_yaml(tmp_path / "nope.yaml")

    @pytest.mark.parametrize("data", [
        {'plotting': {}},
        {'union_find': {'rank': True}},
        {'union_find': {'weighted': 'yes'}},
        {'report': ['summary']},
    ])
    def test_invalid(self, data):
        """Test unknown sections, keys and non-boolean values are rejected."""
        with pytest.raises(ValueError):
            RunConfig(data)

    def test_defaults_not_shared(self):
        """Test one config does not change another's defaults."""
        RunConfig({'report': {'summary': True}})

        assert RunConfig.default().summary is False
