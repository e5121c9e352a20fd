"""
Orchestrator for skyline computations and benchmark runs.

Usage (example from CLI):
    from skyline_bench.orchestrator import run_benchmark

    payload = run_benchmark(algorithm_names=["brute", "sfs"], rows=5_000)
    print(payload["ranking"])

Benchmark payloads are saved to `results/` by default:
- `results/latest.json` (last run)
- `results/run-<timestamp>.json` (timestamped archive)
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from skyline_bench.algorithms.registry import resolve_algorithm, resolve_algorithms
from skyline_bench.config import get_settings
from skyline_bench.dataset import generate_notebooks
from skyline_bench.domain.models import AttributeSelection, Record
from skyline_bench.harness import benchmark_all, rank
from skyline_bench.utils.logging import get_logger

log = get_logger(__name__)


def default_selection() -> AttributeSelection:
    settings = get_settings()
    return AttributeSelection(
        attr1=settings.skyline_attr1,
        asc1=settings.skyline_asc1,
        attr2=settings.skyline_attr2,
        asc2=settings.skyline_asc2,
    )


def compute_skyline(
    algorithm_name: str,
    data: Sequence[Record],
    selection: Optional[AttributeSelection] = None,
) -> List[Record]:
    """Compute the skyline of ``data`` once with the named algorithm."""
    selection = selection or default_selection()
    fn = resolve_algorithm(algorithm_name)
    skyline = fn(data, **selection.as_params())
    log.info(
        f"[SKYLINE] {algorithm_name}",
        extra={"algorithm": algorithm_name, "rows": len(data), "skyline_size": len(skyline)},
    )
    return skyline


def _persist_results(payload: dict, results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
    archive_path = results_dir / f"run-{timestamp}.json"
    counter = 1
    while archive_path.exists():
        archive_path = results_dir / f"run-{timestamp}-{counter}.json"
        counter += 1

    for path in (latest_path, archive_path):
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})
    return latest_path


def run_benchmark(
    algorithm_names: Optional[Iterable[str]] = None,
    data: Optional[Sequence[Record]] = None,
    rows: Optional[int] = None,
    seed: Optional[int] = None,
    selection: Optional[AttributeSelection] = None,
    iterations: Optional[int] = None,
    warmup_runs: Optional[int] = None,
    results_dir: Path | str | None = None,
    persist: bool = True,
) -> dict:
    """
    Benchmark one or more algorithms and optionally persist the payload.

    Parameters
    ----------
    algorithm_names : iterable[str] | None
        Algorithms to run. If None or ["all"], runs all available.
    data : Sequence[Record] | None
        Dataset to benchmark on. If None, a synthetic catalogue of ``rows``
        records is generated from ``seed``.
    rows, seed : int | None
        Synthetic dataset size and seed (default from settings).
    selection : AttributeSelection | None
        Attribute selection (default from settings).
    iterations, warmup_runs : int | None
        Harness protocol overrides (default from settings).
    results_dir : Path | str | None
        Directory to store JSON artifacts (default from settings).
    persist : bool
        Whether to write results to disk.

    Returns
    -------
    dict
        Payload with the dataset size, selection, ranking (fastest first) and
        rounded per-algorithm statistics.
    """
    settings = get_settings()
    selection = selection or default_selection()
    names = list(algorithm_names) if algorithm_names is not None else ["all"]
    algorithms = resolve_algorithms(names)

    if data is None:
        effective_rows = rows if rows is not None else settings.benchmark_rows
        effective_seed = seed if seed is not None else settings.benchmark_seed
        log.info(
            "Generating synthetic dataset",
            extra={"rows": effective_rows, "seed": effective_seed},
        )
        data = generate_notebooks(effective_rows, seed=effective_seed)

    log.info(f"{'=' * 60}")
    log.info(
        f"[ORCHESTRATOR] Benchmarking {', '.join(algorithms)} on {len(data)} records",
        extra={"algorithms": list(algorithms), "rows": len(data), **selection.as_params()},
    )
    log.info(f"{'=' * 60}")

    results = benchmark_all(
        algorithms, data, selection, iterations=iterations, warmup_runs=warmup_runs
    )
    ranking = rank(results)

    payload = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "rows": len(data),
        "selection": selection.as_params(),
        "algorithms": list(algorithms),
        "ranking": ranking,
        "results": {name: result.to_dict() for name, result in results.items()},
    }

    if persist:
        _persist_results(payload, Path(results_dir or settings.results_dir))

    log.info(
        f"[ORCHESTRATOR COMPLETE] Fastest: {ranking[0]}" if ranking else "[ORCHESTRATOR COMPLETE]",
        extra={"ranking": ranking},
    )
    return payload


__all__ = ["compute_skyline", "default_selection", "run_benchmark"]
