"""Weighted quick-union with full path compression over ``[0, n)``."""

from __future__ import annotations

import operator
import sys
from typing import TextIO

import numpy as np

from . import kernels
from .errors import IndexOutOfRange, InvalidSize


class DisjointSet:
    """Partition of the integers ``0 .. n-1`` into disjoint components.

    ``parent[i]`` is the ancestor of ``i`` in its component's tree and a root
    satisfies ``parent[i] == i``. ``weight[r]`` is the number of elements in
    the tree rooted at ``r`` and is only meaningful at roots.

    Instances are not safe for concurrent mutation.
    """

    def __init__(self, n: int) -> None:
        n = operator.index(n)
        if n < 0:
            raise InvalidSize(n)
        self.parent = np.arange(n, dtype=np.int64)
        self.weight = np.ones(n, dtype=np.int64)
        self._count = n

    def __len__(self) -> int:
        return int(self.parent.shape[0])

    def __repr__(self) -> str:
        return f"DisjointSet(size={len(self)}, count={self._count})"

    @property
    def size(self) -> int:
        return len(self)

    def _validate(self, p: int) -> int:
        p = operator.index(p)
        n = len(self)
        if p < 0 or p >= n:
            raise IndexOutOfRange(p, n)
        return p

    def _validate_bulk(self, n: int) -> int:
        n = operator.index(n)
        if n < 0:
            raise InvalidSize(n)
        if n > len(self):
            raise IndexOutOfRange(len(self), len(self))
        return n

    def count(self) -> int:
        """Number of components."""
        return self._count

    def find(self, p: int) -> int:
        """Return the root of the component containing ``p``.

        Every node visited on the way up is re-pointed directly at the root.
        """
        return kernels.find_root(self.parent, self._validate(p))

    def connected(self, p: int, q: int) -> bool:
        p = self._validate(p)
        q = self._validate(q)
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """Merge the components containing ``p`` and ``q``.

        The lighter tree is attached under the heavier one; on equal weights
        the root of ``q`` goes under the root of ``p``.
        """
        p = self._validate(p)
        q = self._validate(q)
        if kernels.union_pair(self.parent, self.weight, p, q):
            self._count -= 1

    def component_size(self, p: int) -> int:
        return int(self.weight[self.find(p)])

    def union_all(self, n: int) -> None:
        """Union ``i`` with ``n - 1 - i`` for every ``i < n // 2``."""
        n = self._validate_bulk(n)
        self._count -= kernels.union_all(self.parent, self.weight, n)

    def find_all(self, n: int) -> None:
        """Call :meth:`find` on every element of ``0 .. n-1``."""
        n = self._validate_bulk(n)
        kernels.find_all(self.parent, n)

    def show(self, file: TextIO | None = None) -> None:
        """Print ``index: parent, weight`` for every element."""
        out = sys.stdout if file is None else file
        for i, (parent, weight) in enumerate(zip(self.parent.tolist(), self.weight.tolist())):
            print(f"{i}: {parent}, {weight}", file=out)


__all__ = ["DisjointSet"]
