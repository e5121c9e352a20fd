from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Sequence

import psutil
from rich import box
from rich.console import Console
from rich.table import Table

from skyline_bench.domain.models import Record


def get_host_resources() -> Dict[str, Optional[str]]:
    """
    CPU count and available memory of the machine running the benchmark.
    """
    memory = psutil.virtual_memory().total
    return {
        "cpus": str(os.cpu_count()) if os.cpu_count() else None,
        "memory": f"{memory / (1024**3):.1f}GB" if memory else None,
    }


def print_records(
    records: Sequence[Record],
    attributes: List[str],
    title: str = "Skyline",
    console: Optional[Console] = None,
) -> None:
    """
    Render records as a rich table, one column per attribute.
    """
    console = console or Console()
    if not records:
        console.print("[yellow]No records to display.[/yellow]")
        return

    table = Table(title=title, box=box.ROUNDED, caption=f"{len(records)} record(s)")
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    for attr in attributes:
        table.add_column(attr, justify="right", style="green")

    for record in records:
        values = [f"{record.attributes[a]:g}" if a in record.attributes else "N/A" for a in attributes]
        table.add_row(str(record.id), record.name, *values)

    console.print(table)


def print_benchmark(payload: Dict[str, Any], console: Optional[Console] = None) -> None:
    """
    Render a benchmark payload (see `run_benchmark`) as a rich table.

    Rows follow the ranking: fastest mean duration first.
    """
    console = console or Console()
    results: Dict[str, Dict[str, Any]] = payload.get("results", {})
    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    resources = get_host_resources()
    resource_parts = []
    if resources["cpus"]:
        resource_parts.append(f"CPU: {resources['cpus']} cores")
    if resources["memory"]:
        resource_parts.append(f"Memory: {resources['memory']}")

    selection = payload.get("selection", {})
    title = f"Skyline Benchmark ({payload.get('rows', 0):,} records)"
    if selection:
        title += (
            f"\n[dim]{selection['attr1']} {'max' if selection['asc1'] else 'min'} vs "
            f"{selection['attr2']} {'max' if selection['asc2'] else 'min'}[/dim]"
        )
    if resource_parts:
        title += f"\n[dim]Host: {' │ '.join(resource_parts)}[/dim]"

    table = Table(title=title, box=box.ROUNDED, caption="Sorted by mean duration (ascending)")
    table.add_column("Algorithm", style="cyan", no_wrap=True)
    table.add_column("Skyline", justify="right", style="magenta")
    table.add_column("Trials × Loops", justify="right", style="blue")
    table.add_column("Mean (ms)\n[dim](± StdDev)[/dim]", justify="right", style="green")
    table.add_column("Median (ms)", justify="right", style="green")
    table.add_column("Min / Max (ms)", justify="right", style="dim")
    table.add_column("ops/s", justify="right", style="bold green")
    table.add_column("±RME %", justify="right", style="red")
    table.add_column("Peak Memory (MB)", justify="right", style="yellow")

    ranking = payload.get("ranking") or sorted(results, key=lambda n: results[n]["mean_ms"])
    for name in ranking:
        res = results[name]
        mem_bytes = res.get("peak_rss_bytes")
        table.add_row(
            name,
            str(res.get("skyline_size", 0)),
            f"{res['iterations']} × {res.get('loops', 1)}",
            f"{res['mean_ms']:.4f} ± {res['std_dev_ms']:.4f}",
            f"{res['median_ms']:.4f}",
            f"{res['min_ms']:.4f} / {res['max_ms']:.4f}",
            f"{res.get('hz', 0.0):,.2f}",
            f"{res.get('rme', 0.0):.2f}",
            f"{mem_bytes / (1024 * 1024):.2f}" if mem_bytes else "N/A",
        )

    console.print(table)


__all__ = ["get_host_resources", "print_records", "print_benchmark"]
