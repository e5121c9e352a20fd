"""
Performance harness for the skyline algorithms.

`measure` runs one algorithm under the benchmarking protocol:

1. ``warmup_runs`` untimed calls (results discarded),
2. ``iterations`` timed trials; on small inputs each trial repeats the call
   `inner_loop_count` times and divides the elapsed time by that count, so a
   sample stays well above the clock's resolution,
3. the per-call durations (milliseconds) are reduced to min / max / mean /
   median / population standard deviation.

`benchmark_all` applies the same protocol to several algorithms, one after the
other, on the identical dataset, and adds throughput (calls per second) and
relative margin of error so the algorithms can be ranked.

Usage:
    from skyline_bench.harness import benchmark_all, measure

    result, stats = measure(skyline_sort_filter, data, selection)
    results = benchmark_all({"brute": skyline_brute_force, "sfs": skyline_sort_filter}, data, selection)

Any exception raised by an algorithm aborts its remaining trials and surfaces
as `AlgorithmFailedError` carrying the algorithm's name.
"""

from __future__ import annotations

import statistics
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from skyline_bench.algorithms.abstract import SkylineAlgorithm
from skyline_bench.config import get_settings
from skyline_bench.domain.errors import AlgorithmFailedError
from skyline_bench.domain.models import AttributeSelection, Record
from skyline_bench.utils.logging import get_logger
from skyline_bench.utils.profiler import profile_block

log = get_logger(__name__)

Params = Union[AttributeSelection, Mapping[str, Any]]


@dataclass
class MeasurementStats:
    """
    Descriptive statistics of the per-call durations of one algorithm, in ms.
    """

    min_ms: float
    max_ms: float
    mean_ms: float
    median_ms: float
    std_dev_ms: float
    iterations: int
    loops: int = 1
    times_ms: List[float] = field(default_factory=list)

    def to_dict(self, decimals: int = 4) -> Dict[str, Any]:
        """Rounded, JSON-friendly view."""
        payload = asdict(self)
        payload["times_ms"] = [round(t, decimals) for t in self.times_ms]
        return {k: round(v, decimals) if isinstance(v, float) else v for k, v in payload.items()}


@dataclass
class BenchmarkResult(MeasurementStats):
    """
    Measurement statistics plus the figures used to rank algorithms.

    ``hz`` is calls per second (1000 / mean_ms), ``rme`` the relative margin of
    error in percent (std_dev / mean * 100).
    """

    name: str = ""
    hz: float = 0.0
    rme: float = 0.0
    skyline_size: int = 0
    peak_rss_bytes: Optional[int] = None
    cpu_percent: Optional[float] = None


def inner_loop_count(n: int) -> int:
    """Number of calls per timed sample for a dataset of ``n`` records."""
    if n < 100:
        return 100
    if n < 1000:
        return 10
    return 1


def describe(times_ms: Sequence[float], loops: int = 1) -> MeasurementStats:
    """Reduce per-call durations to descriptive statistics."""
    if not times_ms:
        raise ValueError("At least one timing sample is required")
    times = sorted(times_ms)
    mean = statistics.fmean(times)
    return MeasurementStats(
        min_ms=times[0],
        max_ms=times[-1],
        mean_ms=mean,
        median_ms=statistics.median(times),
        std_dev_ms=statistics.pstdev(times, mu=mean),
        iterations=len(times),
        loops=loops,
        times_ms=times,
    )


def _as_kwargs(params: Params) -> Dict[str, Any]:
    # Validates the selection before any algorithm is invoked.
    if isinstance(params, AttributeSelection):
        return params.as_params()
    return AttributeSelection.from_params(params).as_params()


def _algorithm_name(fn: SkylineAlgorithm) -> str:
    return getattr(fn, "__name__", type(fn).__name__)


def _run_protocol(
    name: str,
    fn: SkylineAlgorithm,
    data: Sequence[Record],
    kwargs: Dict[str, Any],
    iterations: int,
    warmup_runs: int,
) -> Tuple[List[Record], List[float], int]:
    """Warm up, then time ``iterations`` trials. Returns (last result, per-call ms, loops)."""
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1 (got {iterations})")
    loops = inner_loop_count(len(data))

    phase = "warmup"
    try:
        for _ in range(warmup_runs):
            fn(data, **kwargs)
        log.debug(f"[WARMUP] Completed {warmup_runs} run(s) for {name}", extra={"algorithm": name})

        result: List[Record] = []
        times_ms: List[float] = []
        for trial in range(1, iterations + 1):
            phase = f"trial {trial}/{iterations}"
            start = time.perf_counter()
            for _ in range(loops):
                result = fn(data, **kwargs)
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            times_ms.append(elapsed_ms / loops)
            log.debug(
                f"[TRIAL {trial}/{iterations}] {name}",
                extra={"algorithm": name, "trial": trial, "loops": loops, "ms": times_ms[-1]},
            )
    except Exception as exc:
        log.error(
            f"[ALGORITHM FAILED] {name} during {phase}",
            extra={"algorithm": name, "phase": phase, "error": str(exc)},
        )
        raise AlgorithmFailedError(name, phase, exc) from exc

    return result, times_ms, loops


def measure(
    fn: SkylineAlgorithm,
    data: Sequence[Record],
    params: Params,
    iterations: Optional[int] = None,
    warmup_runs: Optional[int] = None,
    name: Optional[str] = None,
) -> Tuple[List[Record], MeasurementStats]:
    """
    Measure one algorithm on ``data``.

    Parameters
    ----------
    fn : SkylineAlgorithm
        Algorithm under test.
    data : Sequence[Record]
        Dataset, shared read-only across all calls.
    params : AttributeSelection | Mapping
        Selection binding ``attr1, asc1, attr2, asc2`` by name.
    iterations : int, optional
        Timed trials (defaults to settings.benchmark_iterations, 5).
    warmup_runs : int, optional
        Untimed calls before measuring (defaults to settings.benchmark_warmup_runs).
    name : str, optional
        Name reported in logs and errors; defaults to the function name.

    Returns
    -------
    (result, stats)
        The skyline from the last call and the timing statistics.
    """
    settings = get_settings()
    kwargs = _as_kwargs(params)
    label = name or _algorithm_name(fn)
    result, times_ms, loops = _run_protocol(
        label,
        fn,
        data,
        kwargs,
        iterations if iterations is not None else settings.benchmark_iterations,
        warmup_runs if warmup_runs is not None else settings.benchmark_warmup_runs,
    )
    return result, describe(times_ms, loops)


def benchmark_all(
    fns_by_name: Mapping[str, SkylineAlgorithm],
    data: Sequence[Record],
    params: Params,
    iterations: Optional[int] = None,
    warmup_runs: Optional[int] = None,
) -> Dict[str, BenchmarkResult]:
    """
    Benchmark several algorithms head-to-head on the same dataset.

    Algorithms run strictly one after another, each through its own full
    warm-up + trial cycle. Returns a mapping name -> BenchmarkResult in the
    order the algorithms were given.
    """
    settings = get_settings()
    kwargs = _as_kwargs(params)
    iterations = iterations if iterations is not None else settings.benchmark_iterations
    warmup_runs = warmup_runs if warmup_runs is not None else settings.benchmark_warmup_runs

    results: Dict[str, BenchmarkResult] = {}
    for name, fn in fns_by_name.items():
        log.info(f"[BENCHMARK] {name}", extra={"algorithm": name, "rows": len(data)})
        with profile_block(name) as profile:
            skyline, times_ms, loops = _run_protocol(name, fn, data, kwargs, iterations, warmup_runs)

        stats = describe(times_ms, loops)
        hz = 1000.0 / stats.mean_ms if stats.mean_ms > 0 else 0.0
        rme = stats.std_dev_ms / stats.mean_ms * 100.0 if stats.mean_ms > 0 else 0.0
        results[name] = BenchmarkResult(
            **asdict(stats),
            name=name,
            hz=hz,
            rme=rme,
            skyline_size=len(skyline),
            peak_rss_bytes=profile.peak_rss_bytes,
            cpu_percent=profile.cpu_percent,
        )
        log.info(
            f"[BENCHMARK COMPLETE] {name}",
            extra={
                "algorithm": name,
                "mean_ms": round(stats.mean_ms, 4),
                "median_ms": round(stats.median_ms, 4),
                "std_dev_ms": round(stats.std_dev_ms, 4),
                "hz": round(hz, 2),
                "skyline_size": len(skyline),
            },
        )

    return results


def rank(results: Mapping[str, MeasurementStats]) -> List[str]:
    """Algorithm names ordered from fastest to slowest mean duration."""
    return sorted(results, key=lambda name: results[name].mean_ms)


__all__ = [
    "MeasurementStats",
    "BenchmarkResult",
    "inner_loop_count",
    "describe",
    "measure",
    "benchmark_all",
    "rank",
]
