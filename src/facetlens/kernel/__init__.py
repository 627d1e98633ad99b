"""Kernel – error hierarchy and document value types."""

from facetlens.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ValidationError,
)
from facetlens.kernel.types import Document, ValueKind, kind_of

__all__ = [
    "ApplicationError",
    "BaseError",
    "Document",
    "DomainError",
    "ValidationError",
    "ValueKind",
    "kind_of",
]
