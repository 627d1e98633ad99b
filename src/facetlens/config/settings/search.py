"""Config settings – SearchSettings for the search front end."""
from __future__ import annotations

import dataclasses

from facetlens.config.settings.base import Settings
from facetlens.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class SearchSettings(Settings):
    """Knobs the presentation layer passes through to the search backend.

    Read from ``MEILISEARCH_*`` environment variables by
    :class:`~facetlens.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = "MEILISEARCH"

    url: str = "http://localhost:7700"
    default_index: str = ""
    results_limit: int = 12
    ranking_score_threshold: float = 0.6
    semantic_ratio: float = 0.5
    embedder: str = "voyage"
    facet_preview_size: int = 5
    config_path: str = ""
    admin_api_key: str = dataclasses.field(default="", repr=False)

    def _validate(self) -> None:
        if self.results_limit < 1:
            raise InvalidSettingValueError("results_limit", self.results_limit, "must be >= 1")
        if self.facet_preview_size < 1:
            raise InvalidSettingValueError("facet_preview_size", self.facet_preview_size, "must be >= 1")
        if not 0.0 <= self.ranking_score_threshold <= 1.0:
            raise InvalidSettingValueError(
                "ranking_score_threshold", self.ranking_score_threshold, "must be within [0, 1]"
            )
        if not 0.0 <= self.semantic_ratio <= 1.0:
            raise InvalidSettingValueError("semantic_ratio", self.semantic_ratio, "must be within [0, 1]")


__all__ = ["SearchSettings"]
