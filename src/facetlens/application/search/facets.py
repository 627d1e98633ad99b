"""Application search – FacetViewModel.

Orders and filters a backend facet distribution according to a
per-collection :class:`FacetConfig`, and derives labels and slider bounds.
Without a config the distribution passes through untouched.
"""
from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from facetlens.application.search.config import FacetConfig
from facetlens.application.search.query import FacetValue, RangeBounds
from facetlens.application.search.result import to_facet_values

__all__ = [
    "DEFAULT_RANGE_BOUNDS",
    "FacetPreview",
    "FacetViewModel",
    "display_name",
    "is_range_facet",
    "preview_values",
    "range_bounds",
    "visible_facets",
]

DEFAULT_RANGE_BOUNDS = RangeBounds(min=0, max=100)

type Distribution = Mapping[str, Mapping[str, int] | Iterable[FacetValue | Mapping[str, Any]]]


# Leading numeric prefix, the way browsers read "4.5 stars" as 4.5.
_NUMBER_PREFIX_RE = re.compile(r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def _parse_number(raw: Any) -> float | None:
    if not isinstance(raw, str):
        raw = str(raw)
    prefix = _NUMBER_PREFIX_RE.match(raw)
    if prefix is None:
        return None
    literal = prefix.group(1)
    number = float(literal)
    if math.isinf(number) and literal.lstrip("+-") != "Infinity":
        return None
    return number


def range_bounds(values: Iterable[FacetValue | Mapping[str, Any]]) -> RangeBounds:
    """Numeric min/max over facet values; non-numeric values are skipped.

    Falls back to ``0`` / ``100`` when nothing parses.
    """
    numbers = sorted(
        number
        for number in (_parse_number(FacetValue.coerce(item).value) for item in values)
        if number is not None
    )
    if not numbers:
        return DEFAULT_RANGE_BOUNDS
    return RangeBounds(min=numbers[0], max=numbers[-1])


@dataclass(frozen=True)
class FacetPreview:
    """The slice of facet values shown before the user expands the list."""
    values: list[FacetValue]
    has_more: bool
    hidden: int


def preview_values(values: Sequence[FacetValue], expanded: bool, size: int = 5) -> FacetPreview:
    has_more = len(values) > size
    if expanded or not has_more:
        return FacetPreview(values=list(values), has_more=has_more, hidden=0)
    return FacetPreview(values=list(values[:size]), has_more=True, hidden=len(values) - size)


class FacetViewModel:
    """Facet presentation rules for one collection."""

    def __init__(self, config: FacetConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> FacetConfig | None:
        return self._config

    def visible_facets(self, distribution: Distribution) -> dict[str, list[FacetValue]]:
        if self._config is None:
            return {key: to_facet_values(values) for key, values in distribution.items()}

        visible = set(self._config.visible_facets)
        ordered = self._config.facet_order or self._config.visible_facets
        result: dict[str, list[FacetValue]] = {}
        for key in ordered:
            if key in visible and key in distribution and key not in result:
                result[key] = to_facet_values(distribution[key])
        return result

    def display_name(self, facet_key: str) -> str:
        if self._config is None:
            return facet_key
        return self._config.facet_display_names.get(facet_key) or facet_key

    def is_range_facet(self, facet_key: str) -> bool:
        if self._config is None:
            return False
        return bool(self._config.range_filters.get(facet_key, False))

    range_bounds = staticmethod(range_bounds)


def visible_facets(config: FacetConfig | None, distribution: Distribution) -> dict[str, list[FacetValue]]:
    return FacetViewModel(config).visible_facets(distribution)


def display_name(config: FacetConfig | None, facet_key: str) -> str:
    return FacetViewModel(config).display_name(facet_key)


def is_range_facet(config: FacetConfig | None, facet_key: str) -> bool:
    return FacetViewModel(config).is_range_facet(facet_key)
