"""
Maxima finding: SFS with forward elimination.

After the same score sort as SFS, every newly admitted skyline point settles
all later, still unsettled points it dominates. Settled points are skipped at
the top of the scan without any comparison. The settled set is a bytearray
indexed by position in the sorted order.
"""

from __future__ import annotations

from typing import List, Sequence

from skyline_bench.algorithms.dominance import adjusted_points, point_dominates
from skyline_bench.algorithms.sort_filter import sorted_by_score
from skyline_bench.domain.models import Record


def skyline_maxima(
    data: Sequence[Record], attr1: str, asc1: bool, attr2: str, asc2: bool
) -> List[Record]:
    points = adjusted_points(data, attr1, asc1, attr2, asc2)
    if len(data) <= 1:
        return list(data)

    ranked = sorted_by_score(points)
    order = [points[i] for i in ranked]
    records = [data[i] for i in ranked]
    n = len(order)
    settled = bytearray(n)
    skyline: List[int] = []

    for pos in range(n):
        if settled[pos]:
            continue
        settled[pos] = 1
        candidate = order[pos]
        if any(point_dominates(order[s], candidate) for s in skyline):
            continue

        skyline.append(pos)
        for later in range(pos + 1, n):
            if not settled[later] and point_dominates(candidate, order[later]):
                settled[later] = 1

    return [records[pos] for pos in skyline]


__all__ = ["skyline_maxima"]
