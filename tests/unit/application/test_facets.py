"""Unit tests for FacetViewModel – ordering, labels, range mode and bounds."""
from __future__ import annotations

import pytest

from facetlens.application.search import (
    FacetConfig,
    FacetValue,
    FacetViewModel,
    RangeBounds,
    display_name,
    is_range_facet,
    preview_values,
    range_bounds,
    visible_facets,
)


def _config(**overrides: object) -> FacetConfig:
    base: dict[str, object] = {
        "index_uid": "products",
        "visible_facets": ("gender", "baseColour", "price"),
        "facet_display_names": {"baseColour": "Color", "gender": "Gender"},
        "facet_order": ("price", "gender", "baseColour"),
        "range_filters": {"price": True},
    }
    base.update(overrides)
    return FacetConfig(**base)  # type: ignore[arg-type]


_DISTRIBUTION = {
    "baseColour": {"Black": 10, "White": 4},
    "season": {"Summer": 3},
    "gender": {"Men": 7, "Women": 9},
    "price": {"199": 1, "999": 2},
}


class TestVisibleFacets:
    def test_follows_config_order(self) -> None:
        result = visible_facets(_config(), _DISTRIBUTION)
        assert list(result) == ["price", "gender", "baseColour"]

    def test_hidden_facets_dropped(self) -> None:
        result = visible_facets(_config(), _DISTRIBUTION)
        assert "season" not in result

    def test_values_keep_backend_order(self) -> None:
        result = visible_facets(_config(), _DISTRIBUTION)
        assert result["gender"] == [FacetValue("Men", 7), FacetValue("Women", 9)]

    def test_facet_missing_from_distribution_skipped(self) -> None:
        result = visible_facets(_config(), {"gender": {"Men": 1}})
        assert list(result) == ["gender"]

    def test_ordered_but_not_visible_skipped(self) -> None:
        config = _config(visible_facets=("gender",))
        assert list(visible_facets(config, _DISTRIBUTION)) == ["gender"]

    def test_visibility_list_used_when_no_order(self) -> None:
        config = _config(facet_order=())
        assert list(visible_facets(config, _DISTRIBUTION)) == ["gender", "baseColour", "price"]

    def test_present_but_empty_facet_kept(self) -> None:
        result = visible_facets(_config(), {"gender": {}})
        assert result == {"gender": []}

    def test_duplicate_order_entries_listed_once(self) -> None:
        config = _config(facet_order=("gender", "gender", "price"))
        assert list(visible_facets(config, _DISTRIBUTION)) == ["gender", "price"]

    def test_no_config_passes_everything_through(self) -> None:
        result = visible_facets(None, _DISTRIBUTION)
        assert list(result) == list(_DISTRIBUTION)
        assert result["season"] == [FacetValue("Summer", 3)]

    def test_accepts_converted_lists(self) -> None:
        distribution = {"gender": [FacetValue("Men", 1), {"value": "Women", "count": 2}]}
        result = visible_facets(_config(), distribution)
        assert result["gender"] == [FacetValue("Men", 1), FacetValue("Women", 2)]

    def test_deterministic(self) -> None:
        vm = FacetViewModel(_config())
        assert vm.visible_facets(_DISTRIBUTION) == vm.visible_facets(_DISTRIBUTION)


class TestDisplayName:
    def test_configured_label(self) -> None:
        assert display_name(_config(), "baseColour") == "Color"

    def test_unlabelled_key_returned_unchanged(self) -> None:
        assert display_name(_config(), "price") == "price"

    def test_no_config(self) -> None:
        assert display_name(None, "masterCategory") == "masterCategory"


class TestIsRangeFacet:
    def test_flagged(self) -> None:
        assert is_range_facet(_config(), "price") is True

    def test_default_false(self) -> None:
        assert is_range_facet(_config(), "gender") is False

    def test_explicit_false(self) -> None:
        assert is_range_facet(_config(range_filters={"price": False}), "price") is False

    def test_no_config(self) -> None:
        assert is_range_facet(None, "price") is False


class TestRangeBounds:
    def test_skips_unparseable(self) -> None:
        values = [FacetValue("abc", 1), FacetValue("10", 2), FacetValue("3", 1)]
        assert range_bounds(values) == RangeBounds(min=3, max=10)

    def test_empty_defaults(self) -> None:
        assert range_bounds([]) == RangeBounds(min=0, max=100)

    def test_nothing_parses_defaults(self) -> None:
        assert range_bounds([FacetValue("x"), FacetValue("nan")]) == RangeBounds(min=0, max=100)

    def test_floats_and_negatives(self) -> None:
        values = [FacetValue("2.5"), FacetValue("-4"), FacetValue(" 7 ")]
        assert range_bounds(values) == RangeBounds(min=-4, max=7)

    def test_single_value(self) -> None:
        assert range_bounds([FacetValue("42")]) == RangeBounds(min=42, max=42)

    def test_zero_max_is_kept(self) -> None:
        assert range_bounds([FacetValue("-5"), FacetValue("0")]) == RangeBounds(min=-5, max=0)

    def test_accepts_mappings(self) -> None:
        assert range_bounds([{"value": "5", "count": 1}]) == RangeBounds(min=5, max=5)

    def test_inf_spelling_is_not_numeric(self) -> None:
        values = [FacetValue("5"), FacetValue("inf"), FacetValue("infinity")]
        assert range_bounds(values) == RangeBounds(min=5, max=5)

    def test_overflowing_exponent_skipped(self) -> None:
        assert range_bounds([FacetValue("2"), FacetValue("1e400")]) == RangeBounds(min=2, max=2)

    def test_underscore_stops_the_number(self) -> None:
        assert range_bounds([FacetValue("1_000")]) == RangeBounds(min=1, max=1)

    def test_numeric_prefix_is_read(self) -> None:
        values = [FacetValue("4.5 stars"), FacetValue("10kg"), FacetValue(".5")]
        assert range_bounds(values) == RangeBounds(min=0.5, max=10)

    def test_exponent_and_sign(self) -> None:
        values = [FacetValue("+1e2"), FacetValue("-2.5E1x")]
        assert range_bounds(values) == RangeBounds(min=-25, max=100)

    def test_infinity_literal_kept(self) -> None:
        bounds = range_bounds([FacetValue("3"), FacetValue("Infinity")])
        assert bounds.min == 3
        assert bounds.max == float("inf")

    def test_available_on_view_model(self) -> None:
        assert FacetViewModel.range_bounds([FacetValue("1")]) == RangeBounds(1, 1)


class TestPreviewValues:
    @pytest.fixture
    def values(self) -> list[FacetValue]:
        return [FacetValue(str(i), i) for i in range(8)]

    def test_collapsed_shows_first_five(self, values: list[FacetValue]) -> None:
        preview = preview_values(values, expanded=False)
        assert [v.value for v in preview.values] == ["0", "1", "2", "3", "4"]
        assert preview.has_more is True
        assert preview.hidden == 3

    def test_expanded_shows_all(self, values: list[FacetValue]) -> None:
        preview = preview_values(values, expanded=True)
        assert len(preview.values) == 8
        assert preview.has_more is True
        assert preview.hidden == 0

    def test_short_list(self) -> None:
        preview = preview_values([FacetValue("a")], expanded=False)
        assert preview.has_more is False
        assert preview.hidden == 0

    def test_custom_size(self, values: list[FacetValue]) -> None:
        assert preview_values(values, expanded=False, size=2).hidden == 6
