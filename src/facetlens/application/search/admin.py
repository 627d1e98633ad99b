"""Application search – index metadata normalisation.

Shapes the backend's index listing and per-index stats/settings into the
payloads served by the admin endpoints.  Attribute lists may mix plain
names with ``{"attributePatterns": [...]}`` objects; both are flattened
to a list of names.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = ["IndexStats", "IndexSummary", "index_listing", "normalize_attributes"]


def normalize_attributes(raw: Iterable[Any] | None) -> list[str]:
    names: list[str] = []
    for attribute in raw or []:
        if isinstance(attribute, str):
            names.append(attribute)
        elif isinstance(attribute, Mapping) and isinstance(attribute.get("attributePatterns"), list):
            names.extend(attribute["attributePatterns"])
    return names


@dataclass(frozen=True)
class IndexSummary:
    uid: str
    primary_key: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> IndexSummary:
        return cls(
            uid=payload["uid"],
            primary_key=payload.get("primaryKey"),
            created_at=payload.get("createdAt"),
            updated_at=payload.get("updatedAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "uid": self.uid,
            "primaryKey": self.primary_key,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


def index_listing(indexes: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    summaries = [IndexSummary.from_payload(index).to_dict() for index in indexes]
    return {"indexes": summaries, "count": len(summaries)}


@dataclass(frozen=True)
class IndexStats:
    index_uid: str
    number_of_documents: int = 0
    field_distribution: dict[str, int] = field(default_factory=dict)
    filterable_attributes: list[str] = field(default_factory=list)
    sortable_attributes: list[str] = field(default_factory=list)
    is_indexing: bool = False

    @property
    def available_fields(self) -> list[str]:
        return list(self.field_distribution)

    @classmethod
    def from_payloads(
        cls, index_uid: str, stats: Mapping[str, Any], settings: Mapping[str, Any]
    ) -> IndexStats:
        return cls(
            index_uid=index_uid,
            number_of_documents=stats.get("numberOfDocuments", 0),
            field_distribution=dict(stats.get("fieldDistribution") or {}),
            filterable_attributes=normalize_attributes(settings.get("filterableAttributes")),
            sortable_attributes=normalize_attributes(settings.get("sortableAttributes")),
            is_indexing=bool(stats.get("isIndexing", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "indexUid": self.index_uid,
            "numberOfDocuments": self.number_of_documents,
            "fieldDistribution": dict(self.field_distribution),
            "availableFields": self.available_fields,
            "filterableAttributes": list(self.filterable_attributes),
            "sortableAttributes": list(self.sortable_attributes),
            "isIndexing": self.is_indexing,
        }
