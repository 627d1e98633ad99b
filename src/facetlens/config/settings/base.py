"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, Self


@dataclasses.dataclass(frozen=True)
class Settings:
    """Immutable settings read from ``{_prefix}_*`` environment variables.

    Subclasses declare fields with defaults and override :meth:`_validate`;
    it runs on every construction, including :meth:`with_changes`.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` for out-of-range values."""

    def with_changes(self, **changes: Any) -> Self:
        """Copy with *changes* applied and validated again."""
        return dataclasses.replace(self, **changes)


__all__ = ["Settings"]
