"""Small demonstration of the weighted quick-union disjoint set."""

from __future__ import annotations

from disjointset import DisjointSet
from disjointset.benchmark import find_timer, union_timer


def main() -> None:
    ds = DisjointSet(10)
    for p, q in [(4, 3), (3, 8), (6, 5), (9, 4), (2, 1), (5, 0), (7, 2), (6, 1)]:
        ds.union(p, q)
    print(f"Components: {ds.count()}")
    print(f"connected(8, 9) = {ds.connected(8, 9)}")
    print(f"connected(5, 4) = {ds.connected(5, 4)}")
    ds.show()

    n = 100
    print(f"union_all({n}) x 500: {union_timer(500, n):.4f} ms")
    print(f"find_all({n}) x 500: {find_timer(500, n):.4f} ms")


if __name__ == "__main__":
    main()
