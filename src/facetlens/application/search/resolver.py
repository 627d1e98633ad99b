"""Application search – FieldResolver.

Resolves a dotted field path such as ``imageUrls.default`` or
``variants[0].price`` against one search hit and renders the result as
display text.  Resolution never raises: a missing key, an out-of-range
index or a ``null`` met mid-path all yield ``""``.

Terminal values are rendered by kind:

* sequence – joined with ``", "`` (or the first element for image fields)
* mapping  – the first present key from ``value_keys``, else compact JSON
* scalar   – plain text (``true``/``false``, integral floats without ``.0``)
"""
from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

from facetlens.kernel.types import Document, ValueKind, kind_of

__all__ = [
    "DEFAULT_VALUE_KEYS",
    "FieldResolver",
    "compact_json",
    "plain_string",
    "resolve_field",
]

DEFAULT_VALUE_KEYS: tuple[str, ...] = ("amount", "value", "price", "cost")

_INDEX_RE = re.compile(r"\[(\d+)\]")

# Larger magnitudes are shown in exponent form.
_INTEGRAL_FLOAT_LIMIT = 1e21


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        return dict(obj)
    if kind_of(obj) is ValueKind.SEQUENCE:
        return list(obj)
    return str(obj)


def _json_ready(value: Any) -> Any:
    """Copy *value* with floats normalised: integral ones become ``int``, non-finite ones ``None``."""
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer() and abs(value) < _INTEGRAL_FLOAT_LIMIT:
            return int(value)
        return value
    match kind_of(value):
        case ValueKind.MAPPING:
            return {key: _json_ready(item) for key, item in value.items()}
        case ValueKind.SEQUENCE:
            return [_json_ready(item) for item in value]
    return value


def compact_json(value: Any) -> str:
    """Serialise *value* as single-line JSON without spaces.

    Numbers follow :func:`plain_string`, so ``{"w": 10.0}`` becomes ``{"w":10}``.
    """
    return json.dumps(_json_ready(value), separators=(",", ":"), ensure_ascii=False, default=_json_default)


def plain_string(value: Any) -> str:
    """Render a value the way the presentation layer prints it."""
    match kind_of(value):
        case ValueKind.NULL:
            return "null"
        case ValueKind.MAPPING | ValueKind.SEQUENCE:
            return compact_json(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < _INTEGRAL_FLOAT_LIMIT:
            return str(int(value))
    return str(value)


def _lookup(container: Any, key: str) -> Any:
    if isinstance(container, Mapping):
        return container.get(key)
    return None


class FieldResolver:
    """Resolve field paths against documents.

    ``value_keys`` is the ordered list of subfields probed when a path ends
    on an object, e.g. ``{"amount": 42, "currency": "INR"}`` renders as
    ``"42"``.  Pass a different tuple to support other object shapes.
    """

    def __init__(self, value_keys: Sequence[str] = DEFAULT_VALUE_KEYS) -> None:
        self._value_keys = tuple(value_keys)

    @property
    def value_keys(self) -> tuple[str, ...]:
        return self._value_keys

    def resolve(self, document: Document, path: str, is_image_field: bool = False) -> str:
        if not path:
            return ""

        value: Any = document
        for segment in path.split("."):
            if value is None:
                return ""
            if "[" in segment and "]" in segment:
                name = segment[: segment.index("[")]
                index_match = _INDEX_RE.search(segment)
                index = int(index_match.group(1)) if index_match else 0
                value = _lookup(value, name)
                if kind_of(value) is not ValueKind.SEQUENCE or len(value) <= index:
                    return ""
                value = value[index]
            else:
                value = _lookup(value, segment)

        return self._render(value, is_image_field)

    def _render(self, value: Any, is_image_field: bool) -> str:
        match kind_of(value):
            case ValueKind.NULL:
                return ""
            case ValueKind.SEQUENCE:
                if is_image_field:
                    return plain_string(value[0]) if len(value) > 0 else ""
                return ", ".join(self._render_element(item) for item in value)
            case ValueKind.MAPPING:
                for key in self._value_keys:
                    if key in value:
                        return plain_string(value[key])
                return compact_json(value)
            case _:
                return plain_string(value)

    @staticmethod
    def _render_element(item: Any) -> str:
        if kind_of(item) in (ValueKind.MAPPING, ValueKind.SEQUENCE):
            return compact_json(item)
        return plain_string(item)


_default_resolver = FieldResolver()


def resolve_field(document: Document, path: str, is_image_field: bool = False) -> str:
    """Resolve *path* against *document* with the default value keys."""
    return _default_resolver.resolve(document, path, is_image_field)
