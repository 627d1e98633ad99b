"""Application search – CollectionRegistry.

Holds the three static configuration tables (display, facet, sort) keyed
by collection uid.  Build one at start-up and pass it to whatever renders
search pages; lookups for unknown collections return ``None`` and the view
models fall back to pass-through behaviour.
"""
from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, TypeVar

from facetlens.application.search.config import DisplayConfig, FacetConfig, SortConfig
from facetlens.application.search.display import DisplayViewModel
from facetlens.application.search.facets import FacetViewModel
from facetlens.application.search.sorts import SortViewModel
from facetlens.config.settings import SearchSettings
from facetlens.config.validation import ConfigurationError
from facetlens.kernel.errors import ValidationError
from facetlens.observability.logging import get_logger

__all__ = ["CollectionRegistry"]

_log = get_logger(__name__)

C = TypeVar("C")


def _parse_table(
    tables: Mapping[str, Any], name: str, parser: Callable[[str, Mapping[str, Any]], C]
) -> dict[str, C]:
    table = tables.get(name) or {}
    if not isinstance(table, Mapping):
        raise ConfigurationError(f"'{name}' table must be a mapping of collection uid to config")
    parsed: dict[str, C] = {}
    for uid, entry in table.items():
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"{name} config for '{uid}' must be a mapping", collection=uid)
        try:
            parsed[uid] = parser(uid, entry)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid {name} config for '{uid}': {exc.message}",
                collection=uid,
                detail={"errors": exc.errors},
                cause=exc,
            ) from exc
    return parsed


class CollectionRegistry:
    """Read-only lookup of per-collection configuration."""

    def __init__(
        self,
        display: Mapping[str, DisplayConfig] | None = None,
        facets: Mapping[str, FacetConfig] | None = None,
        sorts: Mapping[str, SortConfig] | None = None,
    ) -> None:
        self._display = MappingProxyType(dict(display or {}))
        self._facets = MappingProxyType(dict(facets or {}))
        self._sorts = MappingProxyType(dict(sorts or {}))

    @property
    def collections(self) -> list[str]:
        return sorted({*self._display, *self._facets, *self._sorts})

    def display_config(self, uid: str) -> DisplayConfig | None:
        return self._get(self._display, uid, "display")

    def facet_config(self, uid: str) -> FacetConfig | None:
        return self._get(self._facets, uid, "facets")

    def sort_config(self, uid: str) -> SortConfig | None:
        return self._get(self._sorts, uid, "sorts")

    def display_view(self, uid: str) -> DisplayViewModel:
        return DisplayViewModel(self.display_config(uid))

    def facet_view(self, uid: str) -> FacetViewModel:
        return FacetViewModel(self.facet_config(uid))

    def sort_view(self, uid: str) -> SortViewModel:
        return SortViewModel(self.sort_config(uid))

    @staticmethod
    def _get(table: Mapping[str, C], uid: str, kind: str) -> C | None:
        config = table.get(uid)
        if config is None:
            _log.debug("collection_config_missing", collection=uid, kind=kind)
        return config

    @classmethod
    def from_mapping(cls, tables: Mapping[str, Any]) -> CollectionRegistry:
        """Build from ``{"display": {...}, "facets": {...}, "sorts": {...}}``.

        Raises
        ------
        ConfigurationError
            When a table or entry is malformed.
        """
        registry = cls(
            display=_parse_table(tables, "display", DisplayConfig.from_dict),
            facets=_parse_table(tables, "facets", FacetConfig.from_dict),
            sorts=_parse_table(tables, "sorts", SortConfig.from_dict),
        )
        _log.info("collection_registry_loaded", collections=registry.collections)
        return registry

    @classmethod
    def from_json_file(cls, path: str | Path) -> CollectionRegistry:
        try:
            tables = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Cannot read collection config '{path}': {exc}", cause=exc) from exc
        if not isinstance(tables, Mapping):
            raise ConfigurationError(f"Collection config '{path}' must contain a JSON object")
        return cls.from_mapping(tables)

    @classmethod
    def from_settings(cls, settings: SearchSettings) -> CollectionRegistry:
        """Load from ``settings.config_path``; empty registry when unset."""
        if not settings.config_path:
            return cls()
        return cls.from_json_file(settings.config_path)
