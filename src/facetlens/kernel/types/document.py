"""Document value model – a tagged union over semi-structured search hits.

Search hits are schemaless: any field may hold a scalar, a nested object or
an array of either.  Rather than probing values ad hoc, callers classify a
value once with :func:`kind_of` and dispatch on the returned
:class:`ValueKind`.

``str`` and ``bytes`` are scalars even though they are sequences in Python.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

type Scalar = str | int | float | bool | None
type DocumentValue = Scalar | Mapping[str, Any] | Sequence[Any]
type Document = Mapping[str, DocumentValue]


class ValueKind(str, Enum):
    NULL = "null"
    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


def kind_of(value: Any) -> ValueKind:
    """Classify *value* into its :class:`ValueKind` tag."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


__all__ = ["Document", "DocumentValue", "Scalar", "ValueKind", "kind_of"]
