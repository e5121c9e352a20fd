"""
Shared interface of the skyline algorithms.

Every algorithm is a plain function with the same signature, so the harness
and the CLI can use them interchangeably. `AlgorithmInfo` attaches the
human-facing name and description used by the registry and the reports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence, runtime_checkable

from skyline_bench.domain.models import Record


@runtime_checkable
class SkylineAlgorithm(Protocol):
    """
    Callable computing the skyline of ``data`` under one attribute selection.

    ``asc1``/``asc2`` are True when higher values of the attribute are better.
    Returns the records no other record of ``data`` dominates.
    """

    def __call__(
        self, data: Sequence[Record], attr1: str, asc1: bool, attr2: str, asc2: bool
    ) -> List[Record]:
        ...


@dataclass(frozen=True)
class AlgorithmInfo:
    """
    Registry entry for one algorithm.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    label : str
        Display name for tables.
    description : str
        A human-friendly summary of the approach and its complexity.
    fn : SkylineAlgorithm
        The implementation.
    """

    name: str
    label: str
    description: str
    fn: SkylineAlgorithm


__all__ = ["SkylineAlgorithm", "AlgorithmInfo"]
