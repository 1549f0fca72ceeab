"""
Union-find driver for streams of element pairs.

The stream holds the universe size n followed by pairs of elements. Each pair
that is not already connected is merged and reported; pairs that are already
connected are skipped.
"""

from typing import Iterable, List, Tuple

from .disjoint_set import DisjointSet
from ..stream_utils import parse_sized_pairs


def read_pair_stream(text: str) -> Tuple[int, List[Tuple[int, int]]]:
    """
    Parse a pair stream.

    Args:
        text: "n p1 q1 p2 q2 ..." separated by whitespace

    Returns:
        Tuple of (n, list of (p, q) pairs)
    """
    return parse_sized_pairs(text)


def connect_pairs(n: int, pairs: Iterable[Tuple[int, int]],
                  config=None) -> Tuple[DisjointSet, List[Tuple[int, int]]]:
    """
    Union each pair on a fresh DisjointSet of size n.

    Args:
        n: Universe size
        pairs: (p, q) element pairs
        config: RunConfig with union-find options (default: weighted with path compression)

    Returns:
        Tuple of (disjoint set, pairs that merged two sets, in input order)
    """
    options = config.union_find_options if config is not None else {}
    uf = DisjointSet(n, **options)

    merged = []
    for p, q in pairs:
        if uf.connected(p, q):
            continue
        uf.union(p, q)
        merged.append((p, q))

    return uf, merged
