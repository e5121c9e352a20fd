"""
Registry of the available skyline algorithms.
"""

from __future__ import annotations

from typing import Dict, List

from skyline_bench.algorithms.abstract import AlgorithmInfo, SkylineAlgorithm
from skyline_bench.algorithms.brute_force import skyline_brute_force
from skyline_bench.algorithms.divide_and_conquer import skyline_divide_and_conquer
from skyline_bench.algorithms.maxima import skyline_maxima
from skyline_bench.algorithms.sort_filter import skyline_sort_filter

_ALGORITHMS: Dict[str, AlgorithmInfo] = {
    info.name: info
    for info in (
        AlgorithmInfo(
            name="brute",
            label="Brute-force",
            description=(
                "Compares every point with every other point. Simple and fine for small "
                "datasets, but O(n²) time makes it unsuitable for large ones."
            ),
            fn=skyline_brute_force,
        ),
        AlgorithmInfo(
            name="dac",
            label="Divide & Conquer",
            description=(
                "Splits the data in half, solves both halves and merges the partial "
                "skylines. O(n·log²n) beats brute force on larger inputs at the cost of "
                "recursion overhead on small ones."
            ),
            fn=skyline_divide_and_conquer,
        ),
        AlgorithmInfo(
            name="sfs",
            label="Sort Filter Skyline",
            description=(
                "Sorts points by the sum of their attributes first, so a candidate only "
                "needs checking against the skyline found so far. O(n·log n) sort plus "
                "O(n·k) filtering."
            ),
            fn=skyline_sort_filter,
        ),
        AlgorithmInfo(
            name="maxima",
            label="Maxima Finding",
            description=(
                "Sort Filter Skyline with forward elimination: each new skyline point "
                "settles every later point it dominates, so those are skipped. "
                "O(n·log n) with fewer comparisons than SFS in practice."
            ),
            fn=skyline_maxima,
        ),
    )
}


def available_algorithms() -> List[str]:
    """List available algorithm names."""
    return sorted(_ALGORITHMS)


def algorithm_info(name: str) -> AlgorithmInfo:
    if name not in _ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}'. Available: {', '.join(available_algorithms())}")
    return _ALGORITHMS[name]


def resolve_algorithm(name: str) -> SkylineAlgorithm:
    return algorithm_info(name).fn


def resolve_algorithms(names: List[str]) -> Dict[str, SkylineAlgorithm]:
    """Map names to implementations; ``["all"]`` selects every algorithm."""
    if names == ["all"]:
        names = list(_ALGORITHMS)
    return {name: resolve_algorithm(name) for name in names}


__all__ = ["available_algorithms", "algorithm_info", "resolve_algorithm", "resolve_algorithms"]
