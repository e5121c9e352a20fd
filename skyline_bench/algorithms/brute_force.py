"""
Brute-force skyline: every record is compared with every other record.

A record belongs to the skyline only if no other record of the dataset
dominates it. O(n²) time, no extra space beyond the output. Its output is the
reference the other algorithms are checked against.
"""

from __future__ import annotations

from typing import List, Sequence

from skyline_bench.algorithms.dominance import adjusted_points, point_dominates
from skyline_bench.domain.models import Record


def skyline_brute_force(
    data: Sequence[Record], attr1: str, asc1: bool, attr2: str, asc2: bool
) -> List[Record]:
    points = adjusted_points(data, attr1, asc1, attr2, asc2)
    if len(data) <= 1:
        return list(data)

    indices = range(len(points))
    return [
        data[i]
        for i in indices
        if not any(j != i and point_dominates(points[j], points[i]) for j in indices)
    ]


__all__ = ["skyline_brute_force"]
