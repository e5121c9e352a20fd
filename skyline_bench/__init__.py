"""
skyline-bench - Pareto-optimal ("skyline") queries over two attributes and a
benchmark of the algorithms that compute them.

The package provides:

- A dominance comparator with per-attribute direction (maximize / minimize)
- Four interchangeable skyline algorithms: brute force, divide & conquer,
  sort-filter skyline and maxima finding
- A benchmarking harness (warm-up, repeated trials, inner loops for small
  inputs, descriptive statistics) and a head-to-head ranking of algorithms
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from skyline_bench.algorithms import (
    AlgorithmInfo,
    SkylineAlgorithm,
    available_algorithms,
    dominates,
    resolve_algorithm,
    skyline_brute_force,
    skyline_divide_and_conquer,
    skyline_maxima,
    skyline_sort_filter,
)
from skyline_bench.config import Settings, get_settings
from skyline_bench.dataset import generate_notebooks, load_records
from skyline_bench.domain import (
    AlgorithmFailedError,
    AttributeSelection,
    InvalidSelectionError,
    MalformedRecordError,
    Record,
    SkylineError,
)
from skyline_bench.harness import BenchmarkResult, MeasurementStats, benchmark_all, measure, rank
from skyline_bench.orchestrator import compute_skyline, run_benchmark
from skyline_bench.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "AttributeSelection",
    "SkylineError",
    "InvalidSelectionError",
    "MalformedRecordError",
    "AlgorithmFailedError",
    # Algorithms
    "AlgorithmInfo",
    "SkylineAlgorithm",
    "available_algorithms",
    "resolve_algorithm",
    "dominates",
    "skyline_brute_force",
    "skyline_divide_and_conquer",
    "skyline_maxima",
    "skyline_sort_filter",
    # Harness
    "BenchmarkResult",
    "MeasurementStats",
    "benchmark_all",
    "measure",
    "rank",
    # Orchestration
    "compute_skyline",
    "run_benchmark",
    # Datasets
    "generate_notebooks",
    "load_records",
    # Logging
    "configure_logging",
    "get_logger",
]
