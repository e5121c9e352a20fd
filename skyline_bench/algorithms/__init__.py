"""
Skyline algorithms package.

Re-exports the dominance comparator, the four algorithms and the registry so
downstream code can import from `skyline_bench.algorithms` directly.
"""

from skyline_bench.algorithms.abstract import AlgorithmInfo, SkylineAlgorithm
from skyline_bench.algorithms.brute_force import skyline_brute_force
from skyline_bench.algorithms.divide_and_conquer import skyline_divide_and_conquer
from skyline_bench.algorithms.dominance import dominates
from skyline_bench.algorithms.maxima import skyline_maxima
from skyline_bench.algorithms.registry import (
    algorithm_info,
    available_algorithms,
    resolve_algorithm,
    resolve_algorithms,
)
from skyline_bench.algorithms.sort_filter import skyline_sort_filter

__all__ = [
    # Abstracts
    "AlgorithmInfo",
    "SkylineAlgorithm",
    # Comparator
    "dominates",
    # Concrete algorithms
    "skyline_brute_force",
    "skyline_divide_and_conquer",
    "skyline_maxima",
    "skyline_sort_filter",
    # Registry
    "algorithm_info",
    "available_algorithms",
    "resolve_algorithm",
    "resolve_algorithms",
]
