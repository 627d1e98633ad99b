"""Application search – per-collection display, facet and sort configuration.

Configs are frozen; list fields are stored as tuples and label tables as
read-only mappings.  ``from_dict`` accepts both ``snake_case`` and the
``camelCase`` keys used by front-end config files.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from facetlens.kernel.errors import ValidationError

__all__ = ["AdditionalField", "DisplayConfig", "FacetConfig", "SortConfig"]


def _pick(entry: Mapping[str, Any], snake: str, camel: str, default: Any = None) -> Any:
    if snake in entry:
        return entry[snake]
    return entry.get(camel, default)


def _string_tuple(value: Any, name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not all(isinstance(item, str) for item in value):
        raise ValidationError.for_field(name, "must be a list of strings")
    return tuple(value)


def _frozen_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if value is None:
        return MappingProxyType({})
    if not isinstance(value, Mapping):
        raise ValidationError.for_field(name, "must be a mapping")
    return MappingProxyType(dict(value))


@dataclass(frozen=True)
class AdditionalField:
    """An extra labelled line on a result card."""
    id: str
    field_name: str
    label: str | None = None

    @property
    def display_label(self) -> str:
        return self.label or self.field_name

    @classmethod
    def from_dict(cls, entry: Mapping[str, Any]) -> AdditionalField:
        field_name = _pick(entry, "field_name", "fieldName")
        if not field_name:
            raise ValidationError.for_field("fieldName", "is required on additional fields")
        return cls(id=str(entry.get("id") or field_name), field_name=field_name, label=entry.get("label"))


@dataclass(frozen=True)
class DisplayConfig:
    index_uid: str
    primary_text: str
    secondary_text: str | None = None
    image_url: str | None = None
    additional_fields: tuple[AdditionalField, ...] = ()

    def __post_init__(self) -> None:
        if not self.primary_text:
            raise ValidationError.for_field("primaryText", "is required")
        object.__setattr__(self, "additional_fields", tuple(self.additional_fields))

    @classmethod
    def from_dict(cls, index_uid: str, entry: Mapping[str, Any]) -> DisplayConfig:
        fields = _pick(entry, "additional_fields", "additionalFields") or ()
        return cls(
            index_uid=_pick(entry, "index_uid", "indexUid", index_uid),
            primary_text=_pick(entry, "primary_text", "primaryText", ""),
            secondary_text=_pick(entry, "secondary_text", "secondaryText"),
            image_url=_pick(entry, "image_url", "imageUrl"),
            additional_fields=tuple(
                item if isinstance(item, AdditionalField) else AdditionalField.from_dict(item)
                for item in fields
            ),
        )


@dataclass(frozen=True)
class FacetConfig:
    index_uid: str
    visible_facets: tuple[str, ...] = ()
    facet_display_names: Mapping[str, str] = field(default_factory=dict)
    facet_order: tuple[str, ...] = ()
    range_filters: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "visible_facets", _string_tuple(self.visible_facets, "visibleFacets"))
        object.__setattr__(self, "facet_order", _string_tuple(self.facet_order, "facetOrder"))
        object.__setattr__(
            self, "facet_display_names", _frozen_mapping(self.facet_display_names, "facetDisplayNames")
        )
        object.__setattr__(self, "range_filters", _frozen_mapping(self.range_filters, "rangeFilters"))

    @classmethod
    def from_dict(cls, index_uid: str, entry: Mapping[str, Any]) -> FacetConfig:
        return cls(
            index_uid=_pick(entry, "index_uid", "indexUid", index_uid),
            visible_facets=_pick(entry, "visible_facets", "visibleFacets"),
            facet_display_names=_pick(entry, "facet_display_names", "facetDisplayNames"),
            facet_order=_pick(entry, "facet_order", "facetOrder"),
            range_filters=_pick(entry, "range_filters", "rangeFilters"),
        )


@dataclass(frozen=True)
class SortConfig:
    index_uid: str
    visible_sorts: tuple[str, ...] = ()
    sort_display_names: Mapping[str, str] = field(default_factory=dict)
    sort_order: tuple[str, ...] = ()
    default_sort: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "visible_sorts", _string_tuple(self.visible_sorts, "visibleSorts"))
        object.__setattr__(self, "sort_order", _string_tuple(self.sort_order, "sortOrder"))
        object.__setattr__(
            self, "sort_display_names", _frozen_mapping(self.sort_display_names, "sortDisplayNames")
        )

    @classmethod
    def from_dict(cls, index_uid: str, entry: Mapping[str, Any]) -> SortConfig:
        return cls(
            index_uid=_pick(entry, "index_uid", "indexUid", index_uid),
            visible_sorts=_pick(entry, "visible_sorts", "visibleSorts"),
            sort_display_names=_pick(entry, "sort_display_names", "sortDisplayNames"),
            sort_order=_pick(entry, "sort_order", "sortOrder"),
            default_sort=_pick(entry, "default_sort", "defaultSort"),
        )
