"""
Dataset supply: synthetic notebook catalogues and JSON (de)serialization.

Generation is deterministic for a given seed so benchmark runs are
repeatable. The JSON format is a flat array of objects, the shape the
catalogue endpoint serves:

    [{"id": 1, "name": "Dell Model 1", "performance": 81, "weight": 1.42,
      "price": 45210, "battery_life": 12}, ...]
"""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Iterable, List

from skyline_bench.domain.errors import MalformedRecordError
from skyline_bench.domain.models import Record

BRANDS = [
    "Lenovo",
    "Dell",
    "HP",
    "Apple",
    "Asus",
    "Acer",
    "MSI",
    "Samsung",
    "Microsoft",
    "Huawei",
    "LG",
    "Gigabyte",
    "Razer",
    "Toshiba",
    "Sony",
]


def generate_notebooks(size: int, seed: int = 42) -> List[Record]:
    """
    Generate ``size`` synthetic notebooks with ids ``1..size``.

    performance 60-99, weight 1.00-2.50 kg, price 20000-99999, battery_life 5-19 h.
    """
    if size < 0:
        raise ValueError(f"size must be >= 0 (got {size})")
    rng = random.Random(seed)
    records: List[Record] = []
    for i in range(1, size + 1):
        records.append(
            Record(
                id=i,
                name=f"{rng.choice(BRANDS)} Model {i}",
                attributes={
                    "performance": float(rng.randint(60, 99)),
                    "weight": round(rng.uniform(1.0, 2.5), 2),
                    "price": float(rng.randint(20_000, 99_999)),
                    "battery_life": float(rng.randint(5, 19)),
                },
            )
        )
    return records


def load_records(path: Path | str) -> List[Record]:
    """Read a JSON array of flat record objects."""
    with Path(path).open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise MalformedRecordError(f"{path}: expected a JSON array of records")
    return [Record.from_mapping(item) for item in raw]


def dump_records(records: Iterable[Record], path: Path | str) -> int:
    """Write records as a JSON array; returns the number written."""
    rows = [r.to_mapping() for r in records]
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as f:
        json.dump(rows, f, indent=2)
    return len(rows)


__all__ = ["BRANDS", "generate_notebooks", "load_records", "dump_records"]
