"""Array kernels behind :class:`disjointset.DisjointSet`.

Each public function dispatches to the compiled extension when it was built
and otherwise runs the equivalent Python loop. Arrays are modified in place.
"""

from __future__ import annotations

import numpy as np

try:  # pragma: no cover - prefer compiled implementations
    from ._cython import (  # type: ignore
        find_all as _cython_find_all,
        find_root as _cython_find_root,
        union_all as _cython_union_all,
        union_pair as _cython_union_pair,
    )
except ImportError:  # pragma: no cover - fallback used when extension unavailable
    _cython_find_root = None
    _cython_union_pair = None
    _cython_union_all = None
    _cython_find_all = None

HAS_CYTHON = _cython_find_root is not None


def _find_root_python(parent: np.ndarray, p: int) -> int:
    root = p
    while parent[root] != root:
        root = int(parent[root])
    while p != root:
        nxt = int(parent[p])
        parent[p] = root
        p = nxt
    return root


def _union_pair_python(parent: np.ndarray, weight: np.ndarray, p: int, q: int) -> bool:
    root_p = _find_root_python(parent, p)
    root_q = _find_root_python(parent, q)
    if root_p == root_q:
        return False
    # smaller tree goes under the larger one, ties under root_p
    if weight[root_p] < weight[root_q]:
        parent[root_p] = root_q
        weight[root_q] += weight[root_p]
    else:
        parent[root_q] = root_p
        weight[root_p] += weight[root_q]
    return True


def _union_all_python(parent: np.ndarray, weight: np.ndarray, n: int) -> int:
    merged = 0
    for i in range(n // 2):
        if _union_pair_python(parent, weight, i, n - 1 - i):
            merged += 1
    return merged


def _find_all_python(parent: np.ndarray, n: int) -> None:
    for i in range(n):
        _find_root_python(parent, i)


def find_root(parent: np.ndarray, p: int) -> int:
    """Return the root of ``p`` and point every node on its path at that root."""
    if _cython_find_root is not None:
        return int(_cython_find_root(parent, p))
    return _find_root_python(parent, p)


def union_pair(parent: np.ndarray, weight: np.ndarray, p: int, q: int) -> bool:
    """Link the trees holding ``p`` and ``q``; return ``True`` if they were distinct."""
    if _cython_union_pair is not None:
        return bool(_cython_union_pair(parent, weight, p, q))
    return _union_pair_python(parent, weight, p, q)


def union_all(parent: np.ndarray, weight: np.ndarray, n: int) -> int:
    """Union ``i`` with ``n - 1 - i`` for ``i < n // 2``; return the number of merges."""
    if _cython_union_all is not None:
        return int(_cython_union_all(parent, weight, n))
    return _union_all_python(parent, weight, n)


def find_all(parent: np.ndarray, n: int) -> None:
    if _cython_find_all is not None:
        _cython_find_all(parent, n)
        return
    _find_all_python(parent, n)


__all__ = ["HAS_CYTHON", "find_root", "union_pair", "union_all", "find_all"]
