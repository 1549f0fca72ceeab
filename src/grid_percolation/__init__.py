"""
Grid Percolation - site percolation on an N x N grid.

This package provides tools for:
- Disjoint-set (union-find) connectivity over a fixed universe
- Site percolation with backwash-free fullness queries
- Drivers and a command-line interface that feed integer streams to the core
"""

__version__ = "1.0.0"
