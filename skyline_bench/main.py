from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional

import click
import typer

from skyline_bench.algorithms.registry import algorithm_info, available_algorithms
from skyline_bench.config import get_settings
from skyline_bench.dataset import dump_records, generate_notebooks, load_records
from skyline_bench.domain.errors import SkylineError
from skyline_bench.domain.models import AttributeSelection
from skyline_bench.orchestrator import compute_skyline, run_benchmark
from skyline_bench.reporter import print_benchmark, print_records
from skyline_bench.utils.logging import configure_logging

app = typer.Typer(help="Skyline (Pareto frontier) explorer and algorithm benchmark CLI.")


def _selection(
    attr1: Optional[str], asc1: Optional[bool], attr2: Optional[str], asc2: Optional[bool]
) -> AttributeSelection:
    settings = get_settings()
    return AttributeSelection(
        attr1=attr1 or settings.skyline_attr1,
        asc1=settings.skyline_asc1 if asc1 is None else asc1,
        attr2=attr2 or settings.skyline_attr2,
        asc2=settings.skyline_asc2 if asc2 is None else asc2,
    )


def _setup_logging() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"rows={settings.benchmark_rows} iterations={settings.benchmark_iterations} "
        f"warmup={settings.benchmark_warmup_runs} seed={settings.benchmark_seed} | "
        f"selection={settings.skyline_attr1}({'max' if settings.skyline_asc1 else 'min'}), "
        f"{settings.skyline_attr2}({'max' if settings.skyline_asc2 else 'min'}) | "
        f"results_dir={settings.results_dir}"
    )


@app.command("list")
def list_algorithms() -> None:
    """
    List available algorithms with their descriptions.
    """
    for name in available_algorithms():
        algo = algorithm_info(name)
        typer.echo(f"{name:8} {algo.label}: {algo.description}")


@app.command()
def generate(
    output: Path = typer.Argument(..., help="Target JSON file."),
    rows: int = typer.Option(1_000, "--rows", "-r", help="Number of records to generate."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed (default from settings)."),
) -> None:
    """
    Write a synthetic notebook catalogue as JSON.
    """
    effective_seed = seed if seed is not None else get_settings().benchmark_seed
    written = dump_records(generate_notebooks(rows, seed=effective_seed), output)
    typer.echo(f"Wrote {written} records to {output}.")


@app.command()
def skyline(
    algorithm: str = typer.Option("brute", "--algorithm", "-a", help="Algorithm to use."),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="JSON dataset (default: synthetic)."),
    rows: Optional[int] = typer.Option(None, "--rows", "-r", help="Synthetic dataset size."),
    attr1: Optional[str] = typer.Option(None, "--attr1", help="First attribute."),
    asc1: Optional[bool] = typer.Option(None, "--max1/--min1", help="Maximize or minimize attr1."),
    attr2: Optional[str] = typer.Option(None, "--attr2", help="Second attribute."),
    asc2: Optional[bool] = typer.Option(None, "--max2/--min2", help="Maximize or minimize attr2."),
) -> None:
    """
    Compute and print the skyline of a dataset.
    """
    _setup_logging()
    settings = get_settings()
    selection = _selection(attr1, asc1, attr2, asc2)
    records = (
        load_records(data)
        if data
        else generate_notebooks(rows or settings.benchmark_rows, seed=settings.benchmark_seed)
    )
    result = compute_skyline(algorithm, records, selection)
    print_records(
        result,
        [selection.attr1, selection.attr2],
        title=f"Skyline ({algorithm_info(algorithm).label}) - {selection.attr1} vs {selection.attr2}",
    )


@app.command()
def benchmark(
    algorithms: List[str] = typer.Option(
        ["all"],
        "--algorithm",
        "-a",
        help="Algorithm(s) to benchmark (brute, dac, sfs, maxima or all). Repeatable.",
    ),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="JSON dataset (default: synthetic)."),
    rows: Optional[int] = typer.Option(None, "--rows", "-r", help="Synthetic dataset size."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Synthetic dataset seed."),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-n", help="Timed trials."),
    warmup: Optional[int] = typer.Option(None, "--warmup", help="Untimed warm-up runs."),
    attr1: Optional[str] = typer.Option(None, "--attr1", help="First attribute."),
    asc1: Optional[bool] = typer.Option(None, "--max1/--min1", help="Maximize or minimize attr1."),
    attr2: Optional[str] = typer.Option(None, "--attr2", help="Second attribute."),
    asc2: Optional[bool] = typer.Option(None, "--max2/--min2", help="Maximize or minimize attr2."),
    persist: bool = typer.Option(True, "--persist/--no-persist", help="Write results JSON."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw payload as JSON."),
) -> None:
    """
    Benchmark algorithms head-to-head and persist the results.
    """
    _setup_logging()
    payload = run_benchmark(
        algorithm_names=algorithms,
        data=load_records(data) if data else None,
        rows=rows,
        seed=seed,
        selection=_selection(attr1, asc1, attr2, asc2),
        iterations=iterations,
        warmup_runs=warmup,
        persist=persist,
    )
    if as_json:
        typer.echo(json.dumps(payload, indent=2))
    else:
        print_benchmark(payload)


def main() -> None:
    # Non-standalone mode surfaces Ctrl-C as Abort and leaves usage errors
    # to the caller.
    try:
        rv = app(standalone_mode=False)
    except (typer.Abort, KeyboardInterrupt):
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
    except click.ClickException as exc:
        exc.show()
        sys.exit(exc.exit_code)
    except (SkylineError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        sys.exit(2)
    if isinstance(rv, int):
        sys.exit(rv)


if __name__ == "__main__":
    main()
