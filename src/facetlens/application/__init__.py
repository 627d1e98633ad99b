"""Application – search view-model building blocks (framework-agnostic)."""

from facetlens.application.search import (
    CollectionRegistry,
    DisplayViewModel,
    FacetViewModel,
    FieldResolver,
    FilterBuilder,
    SortViewModel,
)

__all__ = [
    "CollectionRegistry",
    "DisplayViewModel",
    "FacetViewModel",
    "FieldResolver",
    "FilterBuilder",
    "SortViewModel",
]
