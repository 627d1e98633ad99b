"""Application search – FilterBuilder.

Turns facet and range selections into backend filter clauses.  Each clause
is self-contained; the backend ANDs the list together::

    >>> build_filters({"color": ["red", "blue"]}, {"price": Range(10, 50)})
    ['color = "red" OR color = "blue"', 'price >= 10 AND price <= 50']

Values are quoted literally.  Callers must strip embedded double quotes
before they reach this module.
"""
from __future__ import annotations

from collections.abc import Iterable

from facetlens.application.search.query import FacetSelection, Range, RangeSelection
from facetlens.application.search.resolver import plain_string

__all__ = ["FilterBuilder", "build_filters", "facet_search_filter"]


class FilterBuilder:
    """Build filter expressions from selection state."""

    def build(self, facet_selection: FacetSelection, range_selection: RangeSelection) -> list[str]:
        clauses = [
            self.discrete_clause(key, values) for key, values in facet_selection.items()
        ]
        clauses += [
            self.range_clause(key, Range.coerce(bounds)) for key, bounds in range_selection.items()
        ]
        return [clause for clause in clauses if clause]

    @staticmethod
    def discrete_clause(facet_key: str, values: Iterable[str]) -> str:
        return " OR ".join(f'{facet_key} = "{value}"' for value in values)

    @staticmethod
    def range_clause(facet_key: str, bounds: Range) -> str:
        conditions: list[str] = []
        if bounds.min is not None:
            conditions.append(f"{facet_key} >= {plain_string(bounds.min)}")
        if bounds.max is not None:
            conditions.append(f"{facet_key} <= {plain_string(bounds.max)}")
        return " AND ".join(conditions)


_builder = FilterBuilder()


def build_filters(facet_selection: FacetSelection, range_selection: RangeSelection) -> list[str]:
    """Discrete clauses first, then range clauses; empty clauses are dropped."""
    return _builder.build(facet_selection, range_selection)


def facet_search_filter(facet_selection: FacetSelection, facet_key: str) -> str | None:
    """Single filter string for searching within one facet's values.

    The facet being searched is left out so its own selections do not
    narrow the candidate values.
    """
    clauses = [
        _builder.discrete_clause(key, values)
        for key, values in facet_selection.items()
        if key != facet_key
    ]
    return " AND ".join(clause for clause in clauses if clause) or None
