"""
Behavioural tests shared by the four skyline algorithms.

Brute force is the oracle: every other algorithm must return the same set of
records for any dataset and attribute selection.
"""

from __future__ import annotations

import itertools

import pytest

from conftest import ALGORITHMS, ids, make_records, random_records
from skyline_bench.algorithms import skyline_brute_force, skyline_maxima, skyline_sort_filter
from skyline_bench.algorithms.dominance import dominates, point_dominates
from skyline_bench.algorithms.registry import available_algorithms
from skyline_bench.dataset import generate_notebooks
from skyline_bench.domain.errors import InvalidSelectionError, MalformedRecordError
from skyline_bench.domain.models import Record

DIRECTIONS = list(itertools.product([True, False], repeat=2))
SEEDS = [1, 2, 3, 11, 42]


def test_empty_input_returns_empty(algorithm):
    assert algorithm([], "x", True, "y", False) == []


def test_single_record_is_returned_unchanged(algorithm):
    only = Record(id=9, attributes={"x": 1.0, "y": 2.0})
    assert algorithm([only], "x", True, "y", False) == [only]


def test_scenario_maximize_x_minimize_y(algorithm, scenario_a, max_x_min_y):
    result = algorithm(scenario_a, **max_x_min_y.as_params())
    assert ids(result) == {1, 2}


def test_identical_records_are_all_returned(algorithm):
    data = make_records([{"id": i, "x": 4, "y": 4} for i in range(1, 8)])
    for asc1, asc2 in DIRECTIONS:
        assert ids(algorithm(data, "x", asc1, "y", asc2)) == set(range(1, 8))


def test_anti_correlated_records_are_all_skyline(algorithm):
    data = [Record(id=i, attributes={"x": float(i), "y": float(-i)}) for i in range(50)]
    assert len(algorithm(data, "x", True, "y", True)) == 50


def test_single_dominating_record(algorithm):
    data = [Record(id=i, attributes={"x": float(i), "y": float(i)}) for i in range(30)]
    assert ids(algorithm(data, "x", True, "y", True)) == {29}
    assert ids(algorithm(data, "x", False, "y", False)) == {0}


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("asc1,asc2", DIRECTIONS)
def test_matches_brute_force(algorithm, seed, asc1, asc2):
    data = random_records(200, seed)
    expected = ids(skyline_brute_force(data, "x", asc1, "y", asc2))
    assert ids(algorithm(data, "x", asc1, "y", asc2)) == expected


@pytest.mark.parametrize("attrs", [("performance", "price"), ("weight", "battery_life"), ("price", "weight")])
def test_matches_brute_force_on_notebooks(algorithm, attrs):
    data = generate_notebooks(500, seed=7)
    attr1, attr2 = attrs
    expected = ids(skyline_brute_force(data, attr1, True, attr2, False))
    assert ids(algorithm(data, attr1, True, attr2, False)) == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_skyline_of_skyline_is_unchanged(algorithm, seed):
    data = random_records(150, seed)
    first = algorithm(data, "x", True, "y", False)
    assert ids(algorithm(first, "x", True, "y", False)) == ids(first)


@pytest.mark.parametrize("seed", SEEDS)
def test_no_result_record_dominates_another(algorithm, seed):
    data = random_records(150, seed)
    result = algorithm(data, "x", False, "y", True)
    for a, b in itertools.permutations(result, 2):
        assert not dominates(a, b, "x", False, "y", True)


@pytest.mark.parametrize("seed", SEEDS)
def test_every_excluded_record_is_dominated_by_a_result_record(algorithm, seed):
    data = random_records(150, seed)
    result = algorithm(data, "x", True, "y", True)
    kept = {id(r) for r in result}
    for record in data:
        if id(record) in kept:
            continue
        assert any(dominates(s, record, "x", True, "y", True) for s in result)


def test_duplicate_ids_do_not_hide_points(algorithm):
    # Two incomparable records that share an id: both belong to the skyline.
    data = [
        Record(id=1, attributes={"x": 5.0, "y": 1.0}),
        Record(id=1, attributes={"x": 1.0, "y": 5.0}),
        Record(id=2, attributes={"x": 0.0, "y": 0.0}),
    ]
    assert len(algorithm(data, "x", True, "y", True)) == 2


def test_input_is_not_mutated(algorithm):
    data = random_records(60, 5)
    snapshot = list(data)
    algorithm(data, "x", True, "y", False)
    assert data == snapshot


def test_same_attribute_twice_is_rejected(algorithm, scenario_a):
    with pytest.raises(InvalidSelectionError):
        algorithm(scenario_a, "x", True, "x", False)


def test_missing_attribute_is_rejected(algorithm, scenario_a):
    data = scenario_a + [Record(id=4, attributes={"x": 100.0})]
    with pytest.raises(MalformedRecordError):
        algorithm(data, "x", True, "y", False)


def test_missing_attribute_on_single_record_is_rejected(algorithm):
    with pytest.raises(MalformedRecordError):
        algorithm([Record(id=1, attributes={"x": 1.0})], "x", True, "y", False)


def test_sort_based_algorithms_return_score_order():
    data = make_records(
        [
            {"id": 1, "x": 1, "y": 9},
            {"id": 2, "x": 9, "y": 1},
            {"id": 3, "x": 6, "y": 6},
        ]
    )
    for fn in (skyline_sort_filter, skyline_maxima):
        assert [r.id for r in fn(data, "x", True, "y", True)] == [3, 1, 2]


def test_brute_force_keeps_input_order():
    data = make_records(
        [
            {"id": 1, "x": 1, "y": 9},
            {"id": 2, "x": 0, "y": 0},
            {"id": 3, "x": 9, "y": 1},
        ]
    )
    assert [r.id for r in skyline_brute_force(data, "x", True, "y", True)] == [1, 3]


def test_registry_covers_fixture_algorithms():
    assert available_algorithms() == sorted(ALGORITHMS)


class _ComparisonLog:
    """Wraps ``point_dominates`` and records every (p, q) pair it is asked about."""

    def __init__(self, compare) -> None:
        self.compare = compare
        self.pairs: list = []

    def __call__(self, p, q) -> bool:
        self.pairs.append((p, q))
        return self.compare(p, q)


@pytest.fixture
def comparison_logs(monkeypatch):
    from skyline_bench.algorithms import maxima, sort_filter

    logs = {}
    for name, module in (("maxima", maxima), ("sfs", sort_filter)):
        log = _ComparisonLog(module.point_dominates)
        monkeypatch.setattr(module, "point_dominates", log)
        logs[name] = log
    return logs


# Scores: a=20, b=16, d=14, q1..q3=10. a dominates the q's, only b dominates d.
A, B, D = (10.0, 10.0), (1.0, 15.0), (0.0, 14.0)
Q1, Q2, Q3 = (5.0, 5.0), (6.0, 4.0), (4.0, 6.0)


def _elimination_data():
    return [
        Record(id=i, attributes={"x": x, "y": y})
        for i, (x, y) in enumerate([Q1, Q2, Q3, D, B, A], start=1)
    ]


def test_sort_filter_checks_candidates_against_admitted_skyline(comparison_logs):
    result = skyline_sort_filter(_elimination_data(), "x", True, "y", True)
    assert ids(result) == {5, 6}
    assert comparison_logs["sfs"].pairs == [
        (A, B),
        (A, D),
        (B, D),
        (A, Q1),
        (A, Q2),
        (A, Q3),
    ]


def test_maxima_skips_settled_records(comparison_logs):
    result = skyline_maxima(_elimination_data(), "x", True, "y", True)
    assert ids(result) == {5, 6}
    # a eliminates every later record it dominates before b is admitted; b
    # then only scans d, and settled records are never compared again.
    assert comparison_logs["maxima"].pairs == [
        (A, B),
        (A, D),
        (A, Q1),
        (A, Q2),
        (A, Q3),
        (A, B),
        (B, D),
    ]


@pytest.mark.parametrize("seed", SEEDS)
def test_sort_filter_comparisons_are_bounded_by_n_times_k(comparison_logs, seed):
    data = random_records(300, seed)
    result = skyline_sort_filter(data, "x", True, "y", False)
    assert len(comparison_logs["sfs"].pairs) <= len(data) * len(result)


@pytest.mark.parametrize("seed", SEEDS)
def test_maxima_never_compares_a_record_after_it_is_dominated(comparison_logs, seed):
    data = random_records(300, seed)
    skyline_maxima(data, "x", True, "y", False)
    # Duplicate points make tuple identity ambiguous; track each dominated
    # point by value and allow as many hits as there are equal copies.
    remaining = {}
    for record in data:
        point = (record.value("x"), -record.value("y"))
        remaining[point] = remaining.get(point, 0) + 1
    for p, q in comparison_logs["maxima"].pairs:
        assert remaining[q] > 0
        if point_dominates(p, q):
            remaining[q] -= 1
