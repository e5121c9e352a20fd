"""
Domain models for skyline-bench.

`Record` is the attribute-carrying entity every algorithm operates on;
`AttributeSelection` is the pair of attributes plus direction flags a skyline
query is computed under.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType
from typing import Any, Dict, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from skyline_bench.domain.errors import InvalidSelectionError, MalformedRecordError

# Attributes of the notebook catalogue, with their natural direction
# (True = higher is better).
ATTRIBUTES: Dict[str, bool] = {
    "performance": True,
    "price": False,
    "weight": False,
    "battery_life": True,
}


class Record(BaseModel):
    """
    A single item of the dataset.

    Attribute values must be real numbers or numeric strings. Bools and NaN
    are rejected, and any invalid input raises `MalformedRecordError`. The
    stored attributes are a read-only mapping.
    """

    id: int = Field(..., description="Identifier, unique within a dataset.")
    name: str = Field("", description="Display name.")
    attributes: Mapping[str, float] = Field(
        default_factory=dict, description="Numeric attribute values keyed by name."
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            error = exc.errors()[0]
            loc = error.get("loc", ())
            attribute = loc[1] if len(loc) > 1 and loc[0] == "attributes" else None
            raise MalformedRecordError(
                f"Record {data.get('id')!r} is malformed: {error['msg']}",
                record_id=data.get("id"),
                attribute=attribute,
            ) from exc

    @field_validator("attributes", mode="before")
    @classmethod
    def reject_non_numeric(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            for key, item in value.items():
                if isinstance(item, bool) or not isinstance(item, (Real, str)):
                    raise ValueError(f"attribute '{key}' is not numeric ({item!r})")
        return value

    @field_validator("attributes")
    @classmethod
    def freeze_attributes(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        for key, item in value.items():
            if math.isnan(item):
                raise ValueError(f"attribute '{key}' is NaN")
        return MappingProxyType(dict(value))

    def value(self, attr: str) -> float:
        return self.attributes[attr]

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Record":
        """
        Build a record from a flat object such as the catalogue endpoint serves.

        Every key other than ``id`` and ``name`` is treated as a numeric attribute;
        numeric strings (e.g. ``"1.25"``) are accepted.
        """
        if not isinstance(raw, Mapping):
            raise MalformedRecordError(f"Expected a record object, got {type(raw).__name__}")
        if "id" not in raw:
            raise MalformedRecordError(f"Record without an id: {dict(raw)!r}")
        attributes = {k: v for k, v in raw.items() if k not in ("id", "name")}
        return cls(id=raw["id"], name=raw.get("name", ""), attributes=attributes)

    def to_mapping(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, **self.attributes}


@dataclass(frozen=True)
class AttributeSelection:
    """
    Two distinct attributes and their directions (True = maximize, False = minimize).

    Direction flags must be real bools; a string such as ``"false"`` is rejected
    rather than read as truthy.
    """

    attr1: str
    asc1: bool
    attr2: str
    asc2: bool

    def __post_init__(self) -> None:
        for field_name in ("asc1", "asc2"):
            flag = getattr(self, field_name)
            if not isinstance(flag, bool):
                raise InvalidSelectionError(
                    f"Direction '{field_name}' must be a bool, got {flag!r}"
                )
        ensure_distinct(self.attr1, self.attr2)

    def as_params(self) -> Dict[str, Any]:
        return {"attr1": self.attr1, "asc1": self.asc1, "attr2": self.attr2, "asc2": self.asc2}

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "AttributeSelection":
        try:
            return cls(
                attr1=params["attr1"],
                asc1=params["asc1"],
                attr2=params["attr2"],
                asc2=params["asc2"],
            )
        except KeyError as exc:
            raise InvalidSelectionError(f"Selection is missing '{exc.args[0]}'") from exc


def ensure_distinct(attr1: str, attr2: str) -> None:
    """Reject a selection that compares an attribute against itself."""
    if attr1 == attr2:
        raise InvalidSelectionError(
            f"Select two different attributes (got '{attr1}' twice)."
        )


__all__ = ["ATTRIBUTES", "Record", "AttributeSelection", "ensure_distinct"]
