"""Domain errors – malformed view-model input."""

from __future__ import annotations

from typing import Any

from facetlens.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when view-model input violates a structural rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A configuration entry or view-model input is malformed.

    ``errors`` lists the offending fields as ``{"field": ..., "reason": ...}``
    dicts so callers can report every problem, not just the first.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors or [])

    @classmethod
    def for_field(cls, field: str, reason: str) -> ValidationError:
        return cls(f"'{field}' {reason}", errors=[{"field": field, "reason": reason}])

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors if "field" in e]

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


__all__ = ["DomainError", "ValidationError"]
