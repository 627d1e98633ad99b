"""Config – 12-factor settings and loaders."""

from facetlens.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SearchSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from facetlens.config.validation import (
    ConfigError,
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "ConfigurationError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SearchSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
