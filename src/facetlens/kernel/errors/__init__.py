"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    └── ApplicationError     (application.py)
        └── ConfigError      (facetlens.config.validation)
            ├── ConfigurationError
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError
"""

from facetlens.kernel.errors.application import ApplicationError
from facetlens.kernel.errors.base import BaseError
from facetlens.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
