"""
Percolation driver for streams of site coordinates.

The stream holds the grid dimension N followed by 1-indexed (row, column)
pairs. Each pair is opened in turn and the grid state is recorded after the
open, which is what the command-line interface reports.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .grid import PercolationGrid
from ..run import RunConfig
from ..stream_utils import parse_sized_pairs


@dataclass
class SiteStep:
    """State of the grid right after one site was opened."""
    row: int
    col: int
    open_sites: int
    percolates: bool

    @property
    def status(self) -> str:
        return "System percolates" if self.percolates else "System does not percolate"


def read_site_stream(text: str) -> Tuple[int, List[Tuple[int, int]]]:
    """
    Parse a site stream.

    Args:
        text: "N i1 j1 i2 j2 ..." separated by whitespace

    Returns:
        Tuple of (N, list of (row, column) pairs)
    """
    return parse_sized_pairs(text)


def simulate_sites(
    n: int,
    sites: Iterable[Tuple[int, int]],
    config: Optional[RunConfig] = None,
) -> Tuple[PercolationGrid, List[SiteStep]]:
    """
    Open a sequence of sites on a fresh N x N grid.

    Sites are validated as they are opened, so an out-of-bounds site raises
    IndexError after the sites before it have been opened.

    Args:
        n: Grid dimension
        sites: (row, column) pairs, 1-indexed
        config: Union-find options (default: RunConfig.default())

    Returns:
        Tuple of (grid, one SiteStep per site)
    """
    config = config or RunConfig.default()
    grid = PercolationGrid(n, **config.union_find_options)

    steps = []
    for row, col in sites:
        grid.open(row, col)
        steps.append(SiteStep(row, col, grid.number_of_open_sites(), grid.percolates()))

    return grid, steps
