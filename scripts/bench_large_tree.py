#!/usr/bin/env python3
"""Time serialization of large synthetic node trees.

Doubles the tree size a few times and reports seconds per node, so a jump
towards quadratic behaviour shows up as a growing per-node cost.
"""

from __future__ import annotations

import argparse
import sys
import time
import tracemalloc
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from nodexml import XmlElement, build_document  # noqa: E402


def make_tree(rows: int) -> XmlElement:
    """Build a wide tree: each row holds an attribute and one text leaf."""
    return XmlElement(
        name="sheetData",
        children=[
            XmlElement(name="row", attributes={"r": i, "note": "a&b"}, children=[f"cell <{i}>"])
            for i in range(rows)
        ],
    )


def measure(rows: int) -> tuple[int, float, int]:
    tree = make_tree(rows)
    tracemalloc.start()
    started = time.perf_counter()
    document = build_document(tree)
    elapsed = time.perf_counter() - started
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return document.node_count, elapsed, peak


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--rows", type=int, default=150_000, help="Rows in the largest tree.")
    parser.add_argument("--steps", type=int, default=3, help="Number of halvings to measure.")
    args = parser.parse_args()

    sizes = sorted({max(1, args.rows >> shift) for shift in range(args.steps)})
    print(f"{'nodes':>10} {'seconds':>10} {'us/node':>10} {'peak MiB':>10}")
    for rows in sizes:
        nodes, elapsed, peak = measure(rows)
        print(f"{nodes:>10} {elapsed:>10.3f} {elapsed / nodes * 1e6:>10.2f} {peak / 2**20:>10.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
