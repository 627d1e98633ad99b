"""Application search – SearchResponse and facet distribution helpers."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from facetlens.application.search.query import FacetValue
from facetlens.kernel.types import Document

__all__ = ["SearchResponse", "to_facet_values", "transform_distribution"]


def to_facet_values(
    values: Mapping[str, int] | Iterable[FacetValue | Mapping[str, Any]],
) -> list[FacetValue]:
    """Normalise one facet's buckets, keeping the order they arrived in.

    Accepts the backend's ``{value: count}`` mapping or an already
    converted list.
    """
    if isinstance(values, Mapping):
        return [FacetValue(value=str(value), count=count) for value, count in values.items()]
    return [FacetValue.coerce(item) for item in values]


def transform_distribution(
    distribution: Mapping[str, Mapping[str, int]] | None,
) -> dict[str, list[FacetValue]]:
    return {key: to_facet_values(values) for key, values in (distribution or {}).items()}


@dataclass
class SearchResponse:
    """Hits plus facet buckets from one backend query."""
    hits: list[Document] = field(default_factory=list)
    facets: dict[str, list[FacetValue]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> SearchResponse:
        return cls(
            hits=list(payload.get("hits") or []),
            facets=transform_distribution(payload.get("facetDistribution")),
        )

    @staticmethod
    def facet_hits(payload: Mapping[str, Any]) -> list[FacetValue]:
        """Buckets from a facet-value search response (``facetHits``)."""
        return [FacetValue.coerce(hit) for hit in payload.get("facetHits") or []]
