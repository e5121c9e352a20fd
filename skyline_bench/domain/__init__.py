"""
Domain package for skyline-bench.

Exports the record model, the attribute selection and the error taxonomy.
Keep this package focused on data definitions and validation concerns.
"""

from skyline_bench.domain.errors import (
    AlgorithmFailedError,
    InvalidSelectionError,
    MalformedRecordError,
    SkylineError,
)
from skyline_bench.domain.models import ATTRIBUTES, AttributeSelection, Record, ensure_distinct

__all__ = [
    "ATTRIBUTES",
    "AttributeSelection",
    "Record",
    "ensure_distinct",
    "SkylineError",
    "InvalidSelectionError",
    "MalformedRecordError",
    "AlgorithmFailedError",
]
