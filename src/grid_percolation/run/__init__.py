"""Run configuration for the percolation drivers."""

from .config import RunConfig

__all__ = ['RunConfig']
