"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from facetlens.config.settings.base import Settings
from facetlens.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from facetlens.config.validation.errors import ConfigError, MissingRequiredSettingError
from facetlens.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


class SettingsFactory:
    """Build a settings object from an ordered chain of loaders.

    Later loaders win over earlier ones and *overrides* win over all of them.
    A loader that raises :class:`ConfigError` contributes nothing; the rest
    of the chain still runs and the failure is logged at debug level.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            A field without a default is still unset once every source
            has been merged.
        InvalidSettingValueError
            The merged values fail ``settings_cls._validate``.
        ConfigError
            Any other construction failure, e.g. an unknown override key.
        """
        merged = SettingsFactory._merge(settings_cls, loaders or ())
        merged.update(overrides or {})

        missing = [f.name for f in dataclasses.fields(settings_cls) if _is_required(f) and f.name not in merged]
        if missing:
            raise MissingRequiredSettingError(missing[0])

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def from_environment(settings_cls: type[T], env_file: str | None = None) -> T:
        """Read ``settings_cls`` from the process environment.

        With *env_file* the file is loaded first; variables already set in
        the environment keep precedence.
        """
        loader: SettingsLoader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
        return SettingsFactory.create(settings_cls, loaders=[loader])

    @staticmethod
    def _merge(settings_cls: type[T], loaders: Sequence[SettingsLoader]) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for loader in loaders:
            try:
                instance = loader.load(settings_cls)
            except ConfigError as exc:
                _log.debug("settings_loader_skipped", loader=type(loader).__name__, **exc.log_fields())
                continue
            merged.update({f.name: getattr(instance, f.name) for f in dataclasses.fields(instance)})
        return merged


__all__ = ["SettingsFactory"]
