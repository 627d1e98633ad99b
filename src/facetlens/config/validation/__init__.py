"""Config validation errors."""
from facetlens.config.validation.errors import (
    ConfigError,
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "ConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
