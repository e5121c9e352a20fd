"""
Divide & conquer skyline.

The dataset is split at its midpoint, the skyline of each half is computed
recursively and the two partial skylines are merged by keeping only the
points no other point of the concatenation dominates. A point on the global
skyline cannot be dominated inside its own half, so the union of the partial
skylines always contains the full answer.

O(n·log²n) when partial skylines stay small; it degrades towards the
brute-force bound when they do not shrink.
"""

from __future__ import annotations

from typing import List, Sequence

from skyline_bench.algorithms.dominance import Point, adjusted_points, point_dominates
from skyline_bench.domain.models import Record


def _merge(candidates: List[int], points: List[Point]) -> List[int]:
    return [
        i
        for i in candidates
        if not any(j != i and point_dominates(points[j], points[i]) for j in candidates)
    ]


def _skyline_indices(points: List[Point], lo: int, hi: int) -> List[int]:
    # Half-open range [lo, hi) of indices into `points`.
    if hi - lo <= 1:
        return list(range(lo, hi))
    mid = (lo + hi) // 2
    left = _skyline_indices(points, lo, mid)
    right = _skyline_indices(points, mid, hi)
    return _merge(left + right, points)


def skyline_divide_and_conquer(
    data: Sequence[Record], attr1: str, asc1: bool, attr2: str, asc2: bool
) -> List[Record]:
    points = adjusted_points(data, attr1, asc1, attr2, asc2)
    if len(data) <= 1:
        return list(data)
    return [data[i] for i in _skyline_indices(points, 0, len(points))]


__all__ = ["skyline_divide_and_conquer"]
