"""Config validation – errors raised while reading settings and collection tables."""
from __future__ import annotations

from typing import Any

from facetlens.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings or collection configuration could not be loaded."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no value in any source.

    ``setting_name`` is the environment variable name when raised by a loader,
    the field name when raised by :class:`SettingsFactory`.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting was supplied but cannot be coerced or fails range checks."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class ConfigurationError(ConfigError):
    """A per-collection configuration table is malformed.

    ``collection`` names the offending entry when known.
    """
    default_code = "invalid_collection_config"

    def __init__(self, message: str, *, collection: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.collection = collection


__all__ = [
    "ConfigError",
    "ConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
