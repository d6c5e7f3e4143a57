"""Weighted quick-union disjoint set with path compression."""

from __future__ import annotations

from importlib import import_module
from typing import Any

from .errors import DisjointSetError, IndexOutOfRange, InvalidSize
from .union_find import DisjointSet

__all__ = [
    "DisjointSet",
    "DisjointSetError",
    "InvalidSize",
    "IndexOutOfRange",
    "BenchmarkTimer",
    "run_experiment",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in {"BenchmarkTimer", "run_experiment"}:
        module = import_module("disjointset.benchmark")
        return getattr(module, name)
    raise AttributeError(f"module 'disjointset' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
