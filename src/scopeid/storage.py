"""Conversion between ScopedId and the values a database driver hands over.

Identifiers are stored as canonical text. Drivers that return binary
columns give back the raw 16 bytes instead.
"""

from __future__ import annotations

from scopeid.errors import MalformedStorageValueError
from scopeid.formatting import ID_BYTES, TEXT_LENGTH, is_canonical
from scopeid.ids import parse_bytes, parse_id
from scopeid.models import ScopedId
from scopeid.registry import ScopeRegistry


def to_storage_value(identifier: ScopedId) -> str:
    if identifier.is_empty:
        raise MalformedStorageValueError(identifier, "identifier is empty")
    text = identifier.hex
    if len(text) != TEXT_LENGTH:
        raise MalformedStorageValueError(text, f"expected {TEXT_LENGTH} characters")
    return text


def from_storage_value(
    value: object, registry: ScopeRegistry | None = None
) -> ScopedId:
    if isinstance(value, (bytes, bytearray, memoryview)):
        if len(value) != ID_BYTES:
            raise MalformedStorageValueError(
                value, f"expected {ID_BYTES} bytes, got {len(value)}"
            )
        return parse_bytes(value, registry)
    if isinstance(value, str):
        if not is_canonical(value):
            raise MalformedStorageValueError(value, "not canonical identifier text")
        return parse_id(value, registry)
    raise MalformedStorageValueError(
        value, f"unsupported type {type(value).__name__}"
    )
