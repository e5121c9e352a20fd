"""
Pareto dominance under a two-attribute selection.

Every algorithm resolves the selected attributes once per call with
`adjusted_points`, which also validates the selection and every record, and
then compares the resulting ``(v1, v2)`` pairs with `point_dominates`. Values
are sign-adjusted by direction (negated when lower is better), so "larger is
better" holds for both coordinates afterwards.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import List, Sequence, Tuple

from skyline_bench.domain.errors import MalformedRecordError
from skyline_bench.domain.models import Record, ensure_distinct

Point = Tuple[float, float]


def attribute_value(record: Record, attr: str) -> float:
    """Return ``record``'s value for ``attr`` or raise `MalformedRecordError`."""
    try:
        value = record.attributes[attr]
    except KeyError:
        raise MalformedRecordError(
            f"Record {record.id!r} has no attribute '{attr}'",
            record_id=record.id,
            attribute=attr,
        ) from None
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise MalformedRecordError(
            f"Record {record.id!r}: attribute '{attr}' is not numeric ({value!r})",
            record_id=record.id,
            attribute=attr,
        )
    return float(value)


def adjusted_value(record: Record, attr: str, asc: bool) -> float:
    value = attribute_value(record, attr)
    return value if asc else -value


def adjusted_points(
    data: Sequence[Record], attr1: str, asc1: bool, attr2: str, asc2: bool
) -> List[Point]:
    """
    Validate the selection and resolve direction-adjusted pairs for all records.

    The returned list is index-aligned with ``data``.
    """
    ensure_distinct(attr1, attr2)
    return [(adjusted_value(r, attr1, asc1), adjusted_value(r, attr2, asc2)) for r in data]


def point_dominates(p: Point, q: Point) -> bool:
    """True if ``p`` is at least as good as ``q`` in both coordinates and better in one."""
    return (p[0] >= q[0] and p[1] > q[1]) or (p[0] > q[0] and p[1] >= q[1])


def score(p: Point) -> float:
    """Sum of adjusted values; orders candidates for SFS and maxima finding."""
    return p[0] + p[1]


def dominates(a: Record, b: Record, attr1: str, asc1: bool, attr2: str, asc2: bool) -> bool:
    """
    Return True if record ``a`` dominates record ``b`` under the selection.

    A record never dominates itself; the check is by identity, so two distinct
    records that happen to share an id are still compared.
    """
    if a is b:
        return False
    ensure_distinct(attr1, attr2)
    return point_dominates(
        (adjusted_value(a, attr1, asc1), adjusted_value(a, attr2, asc2)),
        (adjusted_value(b, attr1, asc1), adjusted_value(b, attr2, asc2)),
    )


__all__ = [
    "Point",
    "attribute_value",
    "adjusted_value",
    "adjusted_points",
    "point_dominates",
    "score",
    "dominates",
]
