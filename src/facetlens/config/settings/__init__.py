"""Config settings – 12-factor env-based configuration."""
from facetlens.config.settings.base import Settings
from facetlens.config.settings.factory import SettingsFactory
from facetlens.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader, env_key
from facetlens.config.settings.search import SearchSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "SearchSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "env_key",
]
