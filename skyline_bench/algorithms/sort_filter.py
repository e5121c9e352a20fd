"""
Sort-Filter Skyline (SFS).

Records are first sorted by descending score (the sum of direction-adjusted
values), so likely skyline members come first. A single scan then admits a
candidate if nothing already admitted dominates it; candidates are never
compared against the rest of the input.

O(n·log n) for the sort plus O(n·k) for the filter, k being the skyline size.
"""

from __future__ import annotations

from typing import List, Sequence

from skyline_bench.algorithms.dominance import Point, adjusted_points, point_dominates, score
from skyline_bench.domain.models import Record


def sorted_by_score(points: List[Point]) -> List[int]:
    """Indices of ``points`` ordered by descending score; ties keep input order."""
    return sorted(range(len(points)), key=lambda i: score(points[i]), reverse=True)


def skyline_sort_filter(
    data: Sequence[Record], attr1: str, asc1: bool, attr2: str, asc2: bool
) -> List[Record]:
    points = adjusted_points(data, attr1, asc1, attr2, asc2)
    if len(data) <= 1:
        return list(data)

    skyline: List[int] = []
    for i in sorted_by_score(points):
        candidate = points[i]
        if not any(point_dominates(points[s], candidate) for s in skyline):
            skyline.append(i)
    return [data[i] for i in skyline]


__all__ = ["skyline_sort_filter", "sorted_by_score"]
