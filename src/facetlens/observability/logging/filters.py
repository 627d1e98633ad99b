"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "secret", "token", "api_key", "apikey",
    "admin_api_key", "authorization", "x_meili_api_key",
})


def _normalise(key: str) -> str:
    return key.lower().replace("-", "_")


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``.

    Keys match case-insensitively with ``-`` treated as ``_``, so header
    names such as ``X-Meili-API-Key`` are caught as well.  Usable directly
    as a structlog processor.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(_normalise(f) for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def is_sensitive(self, key: str) -> bool:
        return _normalise(key) in self._fields

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        """Top-level keys only."""
        return {k: self.REDACTED if self.is_sensitive(k) else v for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Redact nested dicts, including dicts inside lists and tuples."""
        return {k: self.REDACTED if self.is_sensitive(k) else self._walk(v) for k, v in data.items()}

    def _walk(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_deep(value)
        if isinstance(value, (list, tuple)):
            return [self._walk(item) for item in value]
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
