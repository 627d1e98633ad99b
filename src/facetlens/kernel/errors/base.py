"""Kernel errors – BaseError, the root every facetlens error derives from."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """An exception that can describe itself as data.

    ``code`` is a stable slug callers can branch on; ``detail`` carries
    structured context such as per-field validation problems.  Passing
    ``cause`` chains the original exception the same way ``raise ... from``
    would.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or type(self).default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat key/value pairs to splat into a structlog event."""
        return {"error_code": self.code, "error": self.message, **self.detail}

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
