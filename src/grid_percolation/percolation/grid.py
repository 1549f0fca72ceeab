"""
Core site percolation on an N x N grid.

Sites are addressed by 1-indexed (row, column) and start out blocked. Opening
a site joins it to its open neighbors in two disjoint-set structures:

- ``connectivity`` holds the N*N sites plus a virtual top and a virtual
  bottom node, so the whole grid percolates exactly when the two virtual
  nodes are connected.
- ``fullness`` holds the N*N sites plus the virtual top only. Once the grid
  percolates, every bottom-row site is connected to the virtual top through
  the virtual bottom in ``connectivity`` (backwash). Keeping the virtual
  bottom out of ``fullness`` means it only reports sites that are really
  reachable from the top.
"""

import numpy as np

from ..union_find import DisjointSet


BLOCKED = 0
OPEN = 1
FULL = 2


class PercolationGrid:
    """
    N x N percolation system.

    Example:
        grid = PercolationGrid(3)
        for row in (1, 2, 3):
            grid.open(row, 1)
        grid.percolates()        # True
        grid.open(3, 3)
        grid.is_full(3, 3)       # False, no backwash
    """

    def __init__(self, n: int, weighted: bool = True, path_compression: bool = True):
        """
        Initialize an N x N grid with every site blocked.

        Args:
            n: Grid dimension (must be positive)
            weighted: Forwarded to both DisjointSet structures
            path_compression: Forwarded to both DisjointSet structures
        """
        if n <= 0:
            raise ValueError(f"Grid dimension must be > 0, got {n}")

        self._n = int(n)
        n_sites = self._n * self._n

        self.connectivity = DisjointSet(n_sites + 2, weighted, path_compression)
        self.fullness = DisjointSet(n_sites + 1, weighted, path_compression)
        self.virtual_top = n_sites
        self.virtual_bottom = n_sites + 1

        self.open_sites = np.zeros(n_sites, dtype=bool)
        self._open_count = 0

    def __repr__(self) -> str:
        return f"PercolationGrid(n={self._n}, open={self._open_count})"

    @property
    def dimension(self) -> int:
        return self._n

    def _index(self, i: int, j: int) -> int:
        """Map 1-indexed (row, column) to a flat site index."""
        return self._n * (i - 1) + (j - 1)

    def _in_bounds(self, i: int, j: int) -> bool:
        return 1 <= i <= self._n and 1 <= j <= self._n

    def _validate(self, i: int, j: int) -> None:
        if not self._in_bounds(i, j):
            raise IndexError(f"Site ({i}, {j}) is outside the {self._n}x{self._n} grid")

    def open(self, i: int, j: int) -> None:
        """
        Open site (i, j) if it is not open already.

        Top-row sites join the virtual top in both structures, bottom-row sites
        join the virtual bottom in ``connectivity`` only, and the site joins each
        open neighbor (up, right, down, left) in both structures.

        Args:
            i: Row, 1..N
            j: Column, 1..N
        """
        self._validate(i, j)
        site = self._index(i, j)
        if self.open_sites[site]:
            return

        self.open_sites[site] = True
        self._open_count += 1

        if i == 1:
            self.connectivity.union(self.virtual_top, site)
            self.fullness.union(self.virtual_top, site)

        # Never in fullness, that would let water flow back up from the bottom
        if i == self._n:
            self.connectivity.union(self.virtual_bottom, site)

        for ni, nj in ((i - 1, j), (i, j + 1), (i + 1, j), (i, j - 1)):
            if self._in_bounds(ni, nj) and self.open_sites[self._index(ni, nj)]:
                neighbor = self._index(ni, nj)
                self.connectivity.union(neighbor, site)
                self.fullness.union(neighbor, site)

    def is_open(self, i: int, j: int) -> bool:
        """Return True if site (i, j) is open."""
        self._validate(i, j)
        return bool(self.open_sites[self._index(i, j)])

    def is_full(self, i: int, j: int) -> bool:
        """
        Return True if site (i, j) is connected to the top row through open sites.

        Answered from ``fullness``, which has no virtual bottom and therefore
        no backwash.
        """
        self._validate(i, j)
        return self.fullness.connected(self._index(i, j), self.virtual_top)

    def number_of_open_sites(self) -> int:
        return self._open_count

    def open_fraction(self) -> float:
        """Fraction of the N*N sites that are open."""
        return self._open_count / (self._n * self._n)

    def percolates(self) -> bool:
        """Return True if the virtual top is connected to the virtual bottom."""
        return self.connectivity.connected(self.virtual_top, self.virtual_bottom)

    def as_array(self) -> np.ndarray:
        """
        Snapshot of the grid state.

        Returns:
            int8 array of shape (N, N) with BLOCKED (0), OPEN (1) or FULL (2)
            per site; row 0 of the array is grid row 1.
        """
        state = self.open_sites.astype(np.int8)
        for site in np.flatnonzero(self.open_sites):
            if self.fullness.connected(int(site), self.virtual_top):
                state[site] = FULL
        return state.reshape(self._n, self._n)
