"""Application search – request options for the backend client.

The transport itself lives outside this package; these helpers only shape
the arguments handed to it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from facetlens.application.search.filters import facet_search_filter
from facetlens.application.search.query import FacetSelection
from facetlens.application.search.sorts import SortViewModel
from facetlens.config.settings import SearchSettings

__all__ = ["ImageQuery", "SearchRequest", "build_facet_search_request", "build_search_request"]

_IMAGE_SEMANTIC_RATIO = 1.0


@dataclass(frozen=True)
class ImageQuery:
    """An uploaded image, already encoded by the caller."""
    mime: str
    data: str


@dataclass(frozen=True)
class SearchRequest:
    q: str | None
    options: dict[str, Any] = field(default_factory=dict)


def build_search_request(
    settings: SearchSettings,
    filters: list[str],
    *,
    query: str = "",
    sort: str | None = None,
    image: ImageQuery | None = None,
    offset: int = 0,
) -> SearchRequest:
    """Assemble query text and options for one search call.

    Image queries run fully semantic and send no query text.  Text queries
    use the configured ``semantic_ratio``; an empty query is keyword only.
    """
    options: dict[str, Any] = {
        "facets": ["*"],
        "filter": list(filters),
        "limit": settings.results_limit,
        "offset": offset,
        "showRankingScore": True,
        "rankingScoreThreshold": settings.ranking_score_threshold,
    }
    sort_param = SortViewModel.sort_param(sort)
    if sort_param:
        options["sort"] = sort_param

    if image is not None:
        options["media"] = {"image": {"mime": image.mime, "data": image.data}}
        options["hybrid"] = {"embedder": settings.embedder, "semanticRatio": _IMAGE_SEMANTIC_RATIO}
        return SearchRequest(q=None, options=options)

    if query:
        options["hybrid"] = {"embedder": settings.embedder, "semanticRatio": settings.semantic_ratio}
    return SearchRequest(q=query, options=options)


def build_facet_search_request(
    facet_key: str, facet_query: str, facet_selection: FacetSelection
) -> dict[str, Any] | None:
    """Options for searching one facet's values; ``None`` for a blank query."""
    if not facet_query.strip():
        return None
    request: dict[str, Any] = {"facetName": facet_key, "facetQuery": facet_query, "q": facet_query}
    filter_expression = facet_search_filter(facet_selection, facet_key)
    if filter_expression is not None:
        request["filter"] = filter_expression
    return request
