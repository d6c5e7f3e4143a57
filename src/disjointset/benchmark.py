"""Timing harness for the bulk operations of :class:`DisjointSet`."""

from __future__ import annotations

import argparse
import os
import time
from typing import Any, Callable, Sequence

from joblib import Parallel, delayed

from .union_find import DisjointSet

N_CPU = max(1, os.cpu_count() or 1)
DEFAULT_RUNS = (500, 800, 1000, 1200, 1600)
DEFAULT_ELEMENTS = 100


class BenchmarkTimer:
    """Time a function over repeated runs.

    ``pre`` turns the benchmark value into the argument of ``run`` and
    ``post`` receives whatever ``run`` returned. Neither is timed.
    """

    def __init__(
        self,
        description: str,
        pre: Callable[[Any], Any] | None = None,
        run: Callable[[Any], Any] | None = None,
        post: Callable[[Any], Any] | None = None,
    ) -> None:
        self.description = description
        self.pre = pre
        self.fn = run
        self.post = post

    def __repr__(self) -> str:
        return f"BenchmarkTimer({self.description!r})"

    def _repeat(self, value: Any, m: int) -> float:
        elapsed = 0.0
        for _ in range(m):
            arg = self.pre(value) if self.pre is not None else value
            start = time.perf_counter()
            result = self.fn(arg) if self.fn is not None else None
            elapsed += time.perf_counter() - start
            if self.post is not None:
                self.post(result)
        return elapsed

    def run(self, value: Any, m: int, warmup: bool = True) -> float:
        """Return the mean time in milliseconds of ``m`` runs on ``value``."""
        if m < 1:
            raise ValueError(f"number of runs must be positive, got {m}")
        if warmup:
            self._repeat(value, max(2, m // 10))
        return self._repeat(value, m) * 1000.0 / m


def union_timer(n_runs: int, n_elements: int) -> float:
    ds = DisjointSet(n_elements)
    bm = BenchmarkTimer("union_all", run=lambda _: ds.union_all(n_elements))
    return bm.run(True, n_runs)


def find_timer(n_runs: int, n_elements: int) -> float:
    ds = DisjointSet(n_elements)
    bm = BenchmarkTimer("find_all", run=lambda _: ds.find_all(n_elements))
    return bm.run(True, n_runs)


def _resolve_n_jobs(n_jobs: int | None) -> int:
    if n_jobs is None:
        env = os.environ.get("DISJOINTSET_N_JOBS")
        if env is None:
            return 1
        try:
            n_jobs = int(env)
        except ValueError as exc:
            raise ValueError(f"DISJOINTSET_N_JOBS must be an integer, got {env!r}") from exc
    if n_jobs == -1:
        return N_CPU
    if n_jobs < 1:
        raise ValueError(f"n_jobs must be positive or -1, got {n_jobs}")
    return min(n_jobs, N_CPU)


def run_experiment(
    runs: Sequence[int] = DEFAULT_RUNS,
    n_elements: int = DEFAULT_ELEMENTS,
    n_jobs: int | None = None,
    verbose: bool = False,
) -> list[tuple[str, int, float]]:
    """Time ``union_all`` then ``find_all`` once per entry of ``runs``.

    Returns ``(operation, n_runs, mean_ms)`` tuples in that order.
    """
    if n_elements < 0:
        raise ValueError(f"n_elements must be non-negative, got {n_elements}")
    if any(r < 1 for r in runs):
        raise ValueError("every entry of runs must be positive")
    jobs = _resolve_n_jobs(n_jobs)
    tasks = [("union", union_timer, r) for r in runs] + [("find", find_timer, r) for r in runs]
    if verbose:
        print(f"{len(tasks)} trials on {n_elements} elements, n_jobs={jobs}")
    if jobs == 1:
        timings = [fn(r, n_elements) for _, fn, r in tasks]
    else:
        timings = Parallel(n_jobs=jobs, prefer="processes")(
            delayed(fn)(r, n_elements) for _, fn, r in tasks
        )
    return [(name, r, float(ms)) for (name, _, r), ms in zip(tasks, timings)]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="disjointset",
        description="Time union_all and find_all on a weighted quick-union with path compression.",
    )
    parser.add_argument("--elements", type=int, default=DEFAULT_ELEMENTS, help="number of elements")
    parser.add_argument(
        "--runs", type=int, nargs="+", default=list(DEFAULT_RUNS), help="repetitions per trial"
    )
    parser.add_argument("--jobs", type=int, default=None, help="parallel workers (-1 for all CPUs)")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    results = run_experiment(args.runs, args.elements, n_jobs=args.jobs, verbose=args.verbose)
    for name, _, ms in results:
        if name == "union":
            print(f" Time to union {args.elements} element is {ms}")
        else:
            print(f" Time to find all elements is {ms}")
        print("\n")


__all__ = ["BenchmarkTimer", "union_timer", "find_timer", "run_experiment", "main"]
