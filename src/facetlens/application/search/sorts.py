"""Application search – SortViewModel."""
from __future__ import annotations

from facetlens.application.search.config import SortConfig
from facetlens.application.search.query import SortOption

__all__ = ["RELEVANCE", "SortViewModel", "available_sorts"]

RELEVANCE = SortOption(value="relevance", label="Relevance")


class SortViewModel:
    """Sort dropdown rules for one collection.

    ``relevance`` is always offered first and means "let the backend rank".
    """

    def __init__(self, config: SortConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> SortConfig | None:
        return self._config

    def available_sorts(self) -> list[SortOption]:
        sorts = [RELEVANCE]
        if self._config is None or not self._config.visible_sorts:
            return sorts

        visible = set(self._config.visible_sorts)
        seen = {RELEVANCE.value}
        for key in self._config.sort_order:
            if key in visible and key not in seen:
                seen.add(key)
                sorts.append(
                    SortOption(value=key, label=self._config.sort_display_names.get(key) or key)
                )
        return sorts

    def default_sort(self) -> str:
        if self._config is None or not self._config.default_sort:
            return RELEVANCE.value
        return self._config.default_sort

    @staticmethod
    def sort_param(current: str | None) -> list[str] | None:
        """Backend ``sort`` argument for the selected option, if any."""
        if not current or current == RELEVANCE.value:
            return None
        return [current]


def available_sorts(config: SortConfig | None) -> list[SortOption]:
    return SortViewModel(config).available_sorts()
