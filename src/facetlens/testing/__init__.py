"""Testing support – Hypothesis strategies for search documents and selections."""

from facetlens.testing.strategies import (
    document_strategy,
    facet_selection_strategy,
    facet_values_strategy,
    field_key_strategy,
    range_selection_strategy,
)

__all__ = [
    "document_strategy",
    "facet_selection_strategy",
    "facet_values_strategy",
    "field_key_strategy",
    "range_selection_strategy",
]
