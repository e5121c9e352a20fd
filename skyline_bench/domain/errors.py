"""
Error taxonomy for skyline computation and benchmarking.

Nothing in the core is retried; every error below propagates to the caller.
"""

from __future__ import annotations

from typing import Any, Optional


class SkylineError(Exception):
    """Base class for all errors raised by skyline-bench."""


class InvalidSelectionError(SkylineError, ValueError):
    """The attribute selection cannot be computed (e.g. both attributes are the same)."""


class MalformedRecordError(SkylineError, ValueError):
    """A record is missing a selected attribute or holds a non-numeric value for it."""

    def __init__(self, message: str, record_id: Any = None, attribute: Optional[str] = None) -> None:
        super().__init__(message)
        self.record_id = record_id
        self.attribute = attribute


class AlgorithmFailedError(SkylineError, RuntimeError):
    """
    An algorithm raised while being measured.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, name: str, phase: str, cause: BaseException) -> None:
        super().__init__(f"Algorithm '{name}' failed during {phase}: {cause}")
        self.name = name
        self.phase = phase


__all__ = [
    "SkylineError",
    "InvalidSelectionError",
    "MalformedRecordError",
    "AlgorithmFailedError",
]
