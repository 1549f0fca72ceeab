"""Tests for percolation grid."""

import itertools

import pytest
import numpy as np

from grid_percolation.percolation import PercolationGrid
from grid_percolation.percolation.grid import BLOCKED, OPEN, FULL


class TestFreshGrid:
    """Tests for a newly constructed grid."""

    @pytest.mark.parametrize("n", [1, 2, 5])
    def test_starts_blocked(self, n):
        """Test a fresh grid has no open sites and does not percolate."""
        grid = PercolationGrid(n)

        assert grid.number_of_open_sites() == 0
        assert grid.percolates() is False
        assert grid.dimension == n
        assert not grid.is_open(1, 1)
        assert not grid.is_full(n, n)

    @pytest.mark.parametrize("n", [0, -3])
    def test_non_positive_dimension(self, n):
        """Test non-positive dimension is rejected."""
        with pytest.raises(ValueError):
            PercolationGrid(n)

    def test_structure_sizes(self):
        """Test the two disjoint sets cover sites plus virtual nodes."""
        grid = PercolationGrid(4)

        assert len(grid.connectivity) == 16 + 2
        assert len(grid.fullness) == 16 + 1


class TestOpen:
    """Tests for opening sites."""

    def test_open_is_idempotent(self):
        """Test opening the same site twice counts once."""
        grid = PercolationGrid(3)

        grid.open(2, 2)
        grid.open(2, 2)

        assert grid.is_open(2, 2)
        assert grid.number_of_open_sites() == 1

    def test_open_count_is_monotonic(self):
        """Test the open count never decreases."""
        grid = PercolationGrid(3)
        counts = []
        for i, j in [(1, 1), (2, 2), (1, 1), (3, 3), (2, 2), (3, 1)]:
            grid.open(i, j)
            counts.append(grid.number_of_open_sites())

        assert counts == sorted(counts)
        assert counts[-1] == 4

    def test_neighbors_are_joined(self):
        """Test adjacent open sites are connected and diagonals are not."""
        grid = PercolationGrid(3)
        grid.open(2, 2)
        grid.open(2, 3)
        grid.open(3, 1)

        assert grid.connectivity.connected(4, 5)
        assert not grid.connectivity.connected(4, 6)

    def test_full_through_path(self):
        """Test a site is full once linked to the top row."""
        grid = PercolationGrid(3)
        grid.open(2, 2)
        assert not grid.is_full(2, 2)

        grid.open(1, 2)

        assert grid.is_full(1, 2)
        assert grid.is_full(2, 2)
        assert not grid.percolates()

    def test_blocked_site_is_not_full(self):
        """Test a blocked top-row site is not full."""
        grid = PercolationGrid(2)
        grid.open(1, 1)

        assert not grid.is_full(1, 2)


class TestPercolates:
    """Tests for percolation and backwash."""

    def test_single_site_grid(self):
        """Test a 1x1 grid percolates once its only site is open."""
        grid = PercolationGrid(1)
        assert not grid.percolates()

        grid.open(1, 1)

        assert grid.percolates()
        assert grid.is_full(1, 1)

    def test_column_path_percolates(self):
        """Test a straight column percolates only when complete."""
        grid = PercolationGrid(3)
        grid.open(3, 1)
        grid.open(2, 1)
        assert not grid.percolates()

        grid.open(1, 1)

        assert grid.percolates()

    def test_no_backwash(self):
        """Test an isolated bottom site is not full after percolation."""
        grid = PercolationGrid(3)
        for row in (3, 2, 1):
            grid.open(row, 1)
        assert grid.percolates()

        grid.open(3, 3)

        assert grid.percolates()
        assert not grid.is_full(3, 3)
        # connectivity alone would report the site as reachable from the top
        assert grid.connectivity.connected(8, grid.virtual_top)

    def test_percolation_is_permanent(self):
        """Test percolates stays true as more sites open."""
        grid = PercolationGrid(4)
        for row in range(1, 5):
            grid.open(row, 2)
        assert grid.percolates()

        for i, j in itertools.product(range(1, 5), repeat=2):
            grid.open(i, j)
            assert grid.percolates()

    @pytest.mark.parametrize("n", [1, 2, 3, 6])
    def test_full_grid(self, n):
        """Test opening every site in random order percolates."""
        rng = np.random.default_rng(n)
        sites = list(itertools.product(range(1, n + 1), repeat=2))
        order = rng.permutation(len(sites))

        grid = PercolationGrid(n)
        for k in order:
            grid.open(*sites[k])

        assert grid.number_of_open_sites() == n * n
        assert grid.percolates()
        assert grid.open_fraction() == 1.0

    def test_quick_union_grid(self):
        """Test the unweighted variant gives the same answers."""
        grid = PercolationGrid(3, weighted=False, path_compression=False)
        for row in (3, 2, 1):
            grid.open(row, 1)
        grid.open(3, 3)

        assert grid.percolates()
        assert not grid.is_full(3, 3)
        assert grid.is_full(3, 1)


class TestBounds:
    """Tests for out-of-bounds coordinates."""

    @pytest.mark.parametrize("i,j", [(0, 1), (4, 1), (1, 0), (1, 4), (-1, 2)])
    def test_is_full_out_of_bounds(self, i, j):
        """Test is_full rejects coordinates outside the grid."""
        grid = PercolationGrid(3)
        grid.open(1, 1)

        with pytest.raises(IndexError):
            grid.is_full(i, j)
        assert grid.number_of_open_sites() == 1

    @pytest.mark.parametrize("i,j", [(0, 1), (4, 3), (2, 0)])
    def test_open_out_of_bounds(self, i, j):
        """Test open rejects coordinates without changing state."""
        grid = PercolationGrid(3)

        with pytest.raises(IndexError):
            grid.open(i, j)
        assert grid.number_of_open_sites() == 0
        assert not grid.open_sites.any()

    def test_is_open_out_of_bounds(self):
        """Test is_open rejects coordinates outside the grid."""
        grid = PercolationGrid(2)

        with pytest.raises(IndexError):
            grid.is_open(3, 1)


class TestSnapshot:
    """Tests for the array snapshot."""

    def test_as_array(self):
        """Test snapshot marks blocked, open and full sites."""
        grid = PercolationGrid(3)
        for row in (1, 2, 3):
            grid.open(row, 1)
        grid.open(3, 3)

        expected = np.array([
            [FULL, BLOCKED, BLOCKED],
            [FULL, BLOCKED, BLOCKED],
            [FULL, BLOCKED, OPEN],
        ], dtype=np.int8)
        np.testing.assert_array_equal(grid.as_array(), expected)
