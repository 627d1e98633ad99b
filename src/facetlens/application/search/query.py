"""Application search – selection and view-model value objects."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

__all__ = [
    "FacetSelection",
    "FacetValue",
    "Range",
    "RangeBounds",
    "RangeSelection",
    "SortOption",
]


@dataclass(frozen=True)
class FacetValue:
    """One bucket of a facet distribution."""
    value: str
    count: int = 0

    @classmethod
    def coerce(cls, item: FacetValue | Mapping[str, Any]) -> FacetValue:
        if isinstance(item, FacetValue):
            return item
        return cls(value=str(item.get("value", "")), count=int(item.get("count", 0) or 0))


@dataclass(frozen=True)
class Range:
    """User-entered numeric bounds for a range facet; either side may be open."""
    min: float | None = None
    max: float | None = None

    @property
    def is_empty(self) -> bool:
        return self.min is None and self.max is None

    @classmethod
    def coerce(cls, value: Range | Mapping[str, Any] | None) -> Range:
        if value is None:
            return cls()
        if isinstance(value, Range):
            return value
        return cls(min=value.get("min"), max=value.get("max"))


@dataclass(frozen=True)
class RangeBounds:
    """Slider limits derived from a facet's numeric values."""
    min: float
    max: float


@dataclass(frozen=True)
class SortOption:
    value: str
    label: str


type FacetSelection = Mapping[str, Iterable[str]]
type RangeSelection = Mapping[str, Range | Mapping[str, Any] | None]
