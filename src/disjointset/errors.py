"""Exceptions raised by :class:`disjointset.DisjointSet`."""

from __future__ import annotations


class DisjointSetError(Exception):
    """Base class for disjoint-set errors."""


class InvalidSize(DisjointSetError, ValueError):
    def __init__(self, size: int) -> None:
        super().__init__(f"size must be non-negative, got {size}")
        self.size = size


class IndexOutOfRange(DisjointSetError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        if size > 0:
            message = f"index {index} is not between 0 and {size - 1}"
        else:
            message = f"index {index} is out of range for an empty disjoint set"
        super().__init__(message)
        self.index = index
        self.size = size


__all__ = ["DisjointSetError", "InvalidSize", "IndexOutOfRange"]
