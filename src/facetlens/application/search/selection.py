"""Application search – immutable selection-state updates.

Every helper returns a new mapping; the input selection is never mutated.
"""
from __future__ import annotations

from facetlens.application.search.query import FacetSelection, Range, RangeSelection

__all__ = ["active_constraint_count", "clear_range", "set_range", "toggle_facet_value"]


def toggle_facet_value(
    selection: FacetSelection, facet_key: str, value: str, checked: bool
) -> dict[str, list[str]]:
    updated = {key: list(values) for key, values in selection.items()}
    current = updated.get(facet_key, [])
    if checked:
        updated[facet_key] = current if value in current else [*current, value]
    else:
        updated[facet_key] = [v for v in current if v != value]
    return updated


def set_range(
    selection: RangeSelection, facet_key: str, min: float | None = None, max: float | None = None  # noqa: A002
) -> dict[str, Range]:
    updated = {key: Range.coerce(bounds) for key, bounds in selection.items()}
    updated[facet_key] = Range(min=min, max=max)
    return updated


def clear_range(selection: RangeSelection, facet_key: str) -> dict[str, Range]:
    return set_range(selection, facet_key)


def active_constraint_count(facet_selection: FacetSelection, range_selection: RangeSelection) -> int:
    """Number of facets carrying at least one active constraint."""
    discrete = sum(1 for values in facet_selection.values() if list(values))
    ranged = sum(1 for bounds in range_selection.values() if not Range.coerce(bounds).is_empty)
    return discrete + ranged
