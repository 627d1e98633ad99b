"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Callable, TypeVar

from dotenv import load_dotenv

from facetlens.config.settings.base import Settings
from facetlens.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _to_tuple(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


# Keyed by the annotation as written; settings modules use postponed annotations.
_COERCERS: dict[str, Callable[[str], Any]] = {
    "bool": _to_bool,
    "int": int,
    "float": float,
    "str": str,
    "tuple[str,...]": _to_tuple,
    "list[str]": _to_tuple,
}


def env_key(settings_class: type[Settings], field_name: str) -> str:
    """Environment variable name for one settings field, e.g. ``MEILISEARCH_URL``."""
    prefix = getattr(settings_class, "_prefix", "")
    return f"{prefix}_{field_name}".upper().lstrip("_")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Each field maps to :func:`env_key`, e.g. ``MEILISEARCH_RESULTS_LIMIT``
    for ``SearchSettings.results_limit``.  Unset optional fields keep their
    dataclass default.
    """

    def load(self, settings_class: type[T]) -> T:
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = env_key(settings_class, field.name)
            raw = os.environ.get(key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key)
                continue
            kwargs[field.name] = self._coerce(key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _coerce(key: str, raw: str, annotation: Any) -> Any:
        name = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", str(annotation))
        coercer = _COERCERS.get(name.replace(" ", ""), str)
        try:
            return coercer(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(key, raw, str(exc)) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then read it like :class:`EnvSettingsLoader`.

    Variables already present in the environment win unless *override* is set.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "env_key"]
