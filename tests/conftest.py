"""
Pytest configuration for skyline-bench.

Provides fixtures for:
- Hand-written scenario datasets
- Seeded synthetic datasets
- The four algorithms, for parametrized cross-checks
"""

from __future__ import annotations

import random
from typing import Callable, Dict, List

import pytest

from skyline_bench.algorithms import (
    skyline_brute_force,
    skyline_divide_and_conquer,
    skyline_maxima,
    skyline_sort_filter,
)
from skyline_bench.config import get_settings
from skyline_bench.domain.models import AttributeSelection, Record

ALGORITHMS: Dict[str, Callable[..., List[Record]]] = {
    "brute": skyline_brute_force,
    "dac": skyline_divide_and_conquer,
    "sfs": skyline_sort_filter,
    "maxima": skyline_maxima,
}


def make_records(rows: List[dict]) -> List[Record]:
    """Build records from flat dicts with an ``id`` key."""
    return [Record.from_mapping(row) for row in rows]


def random_records(size: int, seed: int, low: int = 0, high: int = 20) -> List[Record]:
    """Small integer grid so ties and duplicates are frequent."""
    rng = random.Random(seed)
    return [
        Record(id=i, attributes={"x": float(rng.randint(low, high)), "y": float(rng.randint(low, high))})
        for i in range(size)
    ]


def ids(records: List[Record]) -> set:
    return {r.id for r in records}


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are cached per process; keep env overrides from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(params=sorted(ALGORITHMS))
def algorithm(request) -> Callable[..., List[Record]]:
    """Each of the four skyline algorithms."""
    return ALGORITHMS[request.param]


@pytest.fixture
def scenario_a() -> List[Record]:
    return make_records(
        [
            {"id": 1, "x": 10, "y": 5},
            {"id": 2, "x": 8, "y": 3},
            {"id": 3, "x": 6, "y": 8},
        ]
    )


@pytest.fixture
def max_x_min_y() -> AttributeSelection:
    return AttributeSelection(attr1="x", asc1=True, attr2="y", asc2=False)
