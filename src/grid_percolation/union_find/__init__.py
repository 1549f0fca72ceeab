"""Disjoint-set (union-find) connectivity engine."""

from .disjoint_set import DisjointSet
from .worker import read_pair_stream, connect_pairs

__all__ = ['DisjointSet', 'read_pair_stream', 'connect_pairs']
