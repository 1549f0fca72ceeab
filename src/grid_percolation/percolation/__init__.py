"""Site percolation on an N x N grid."""

from .grid import PercolationGrid
from .worker import SiteStep, read_site_stream, simulate_sites

__all__ = ['PercolationGrid', 'SiteStep', 'read_site_stream', 'simulate_sites']
