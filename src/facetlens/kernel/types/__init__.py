"""Kernel types – document value model."""

from facetlens.kernel.types.document import Document, DocumentValue, Scalar, ValueKind, kind_of

__all__ = ["Document", "DocumentValue", "Scalar", "ValueKind", "kind_of"]
