"""
Disjoint-set (union-find) structure over a fixed universe of elements.

Elements are named 0 to n-1. Initially every element is its own set; ``union``
merges two sets and ``find`` returns the root that identifies a set. The root
of a set is the element whose parent pointer points at itself.

By default the structure uses a size-weighted union (the smaller tree is
attached under the root of the larger one) together with path halving inside
``find``, which keeps both operations amortized near-constant time. Passing
``weighted=False, path_compression=False`` gives plain quick-union, where the
root of p is always attached under the root of q.
"""

import numpy as np


class DisjointSet:
    """
    Union-find over the integers 0..n-1.

    Example:
        uf = DisjointSet(10)
        uf.union(4, 3)
        uf.connected(3, 4)   # True
        uf.count             # 9
    """

    def __init__(self, n: int, weighted: bool = True, path_compression: bool = True):
        """
        Initialize n singleton sets.

        Args:
            n: Number of elements in the universe (must be positive)
            weighted: Attach the smaller tree under the larger root on union
            path_compression: Halve find paths as they are walked
        """
        if n <= 0:
            raise ValueError(f"Universe size must be > 0, got {n}")

        self._n = int(n)
        self.parent = np.arange(self._n, dtype=np.int64)
        self._size = np.ones(self._n, dtype=np.int64)
        self._count = self._n
        self.weighted = weighted
        self.path_compression = path_compression

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"DisjointSet(n={self._n}, count={self._count})"

    @property
    def count(self) -> int:
        """Number of disjoint sets currently represented."""
        return self._count

    def _validate(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"Element {p} is not between 0 and {self._n - 1}")

    def find(self, p: int) -> int:
        """
        Return the root of the set containing p.

        Args:
            p: Element index in [0, n)

        Returns:
            Root element of p's set
        """
        self._validate(p)
        parent = self.parent
        while parent[p] != p:
            if self.path_compression:
                parent[p] = parent[parent[p]]
            p = parent[p]
        return int(p)

    def connected(self, p: int, q: int) -> bool:
        """Return True if p and q belong to the same set."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        """
        Merge the set containing p with the set containing q.

        Args:
            p: First element
            q: Second element

        Returns:
            True if two sets were merged, False if p and q were already connected
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False

        size = self._size
        if self.weighted and size[root_p] > size[root_q]:
            root_p, root_q = root_q, root_p

        # root_p goes under root_q
        self.parent[root_p] = root_q
        size[root_q] += size[root_p]
        self._count -= 1
        return True

    def component_size(self, p: int) -> int:
        """Number of elements in the set containing p."""
        return int(self._size[self.find(p)])

    def roots(self) -> np.ndarray:
        """
        Root of every element.

        Returns:
            Array of shape (n,) where entry i is find(i)
        """
        return np.array([self.find(i) for i in range(self._n)], dtype=np.int64)
