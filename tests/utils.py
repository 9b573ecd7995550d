# tests/utils.py
"""
Small, reusable helpers used across the gkmeans test suite.

Functions:
- partition(clusters): cluster memberships as a set of frozensets of positions.
- sorted_centroids(clusters): numeric centroids, sorted.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from typing import Any, Dict, FrozenSet, Sequence, Set


def partition(clusters: Sequence[Any]) -> Set[FrozenSet[int]]:
    """Memberships by observation position, ignoring cluster order."""
    return {frozenset(c.indices) for c in clusters}


def sorted_centroids(clusters: Sequence[Any]) -> list:
    """Numeric centroids in ascending order."""
    return sorted(float(c.centroid) for c in clusters)


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] calculate {"n":150,"K":3} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """
    Print timing in a compact, machine-readable single line.
    """
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"))
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
