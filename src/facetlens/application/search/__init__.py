"""Application search – field resolution, filters and facet/sort view models."""
from facetlens.application.search.admin import IndexStats, IndexSummary, index_listing, normalize_attributes
from facetlens.application.search.config import AdditionalField, DisplayConfig, FacetConfig, SortConfig
from facetlens.application.search.display import CardField, DisplayViewModel, ResultCard
from facetlens.application.search.facets import (
    FacetPreview,
    FacetViewModel,
    display_name,
    is_range_facet,
    preview_values,
    range_bounds,
    visible_facets,
)
from facetlens.application.search.filters import FilterBuilder, build_filters, facet_search_filter
from facetlens.application.search.params import (
    ImageQuery,
    SearchRequest,
    build_facet_search_request,
    build_search_request,
)
from facetlens.application.search.query import FacetValue, Range, RangeBounds, SortOption
from facetlens.application.search.registry import CollectionRegistry
from facetlens.application.search.resolver import DEFAULT_VALUE_KEYS, FieldResolver, resolve_field
from facetlens.application.search.result import SearchResponse, to_facet_values, transform_distribution
from facetlens.application.search.selection import (
    active_constraint_count,
    clear_range,
    set_range,
    toggle_facet_value,
)
from facetlens.application.search.sorts import RELEVANCE, SortViewModel, available_sorts

__all__ = [
    "DEFAULT_VALUE_KEYS",
    "RELEVANCE",
    "AdditionalField",
    "CardField",
    "CollectionRegistry",
    "DisplayConfig",
    "DisplayViewModel",
    "FacetConfig",
    "FacetPreview",
    "FacetValue",
    "FacetViewModel",
    "FieldResolver",
    "FilterBuilder",
    "ImageQuery",
    "IndexStats",
    "IndexSummary",
    "Range",
    "RangeBounds",
    "ResultCard",
    "SearchRequest",
    "SearchResponse",
    "SortConfig",
    "SortOption",
    "SortViewModel",
    "active_constraint_count",
    "available_sorts",
    "build_facet_search_request",
    "build_filters",
    "build_search_request",
    "clear_range",
    "display_name",
    "facet_search_filter",
    "index_listing",
    "is_range_facet",
    "normalize_attributes",
    "preview_values",
    "range_bounds",
    "resolve_field",
    "set_range",
    "to_facet_values",
    "toggle_facet_value",
    "transform_distribution",
    "visible_facets",
]
