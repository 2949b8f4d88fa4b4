from __future__ import annotations

import secrets

from scopeid.errors import BadScopeError, MissingScopeError
from scopeid.formatting import ID_BYTES, from_text
from scopeid.models import ScopedId
from scopeid.registry import ScopeRegistry, default_registry
from scopeid.tags import TAG_MASK


def generate_id(scope: str, registry: ScopeRegistry | None = None) -> ScopedId:
    """Generate a random identifier tagged with ``scope``.

    Byte 0 is ``tag | r`` with ``r`` uniform in [0, 3]; the other 15 bytes
    come straight from ``secrets.token_bytes``.
    """
    if registry is None:
        registry = default_registry
    if not registry.is_configured():
        raise MissingScopeError()
    tag = registry.tag_of(scope)
    if tag is None:
        raise MissingScopeError(scope)

    raw = bytearray(secrets.token_bytes(ID_BYTES))
    raw[0] = (tag & TAG_MASK) | secrets.randbelow(4)
    return ScopedId._from_parts(scope, bytes(raw))


def resolve_scope(data: bytes, registry: ScopeRegistry | None = None) -> str:
    """Return the scope name encoded in the first byte of ``data``."""
    if len(data) != ID_BYTES:
        raise ValueError(f"Expected {ID_BYTES} bytes, got {len(data)}")
    if registry is None:
        registry = default_registry
    if not registry.is_configured():
        raise MissingScopeError()
    name = registry.name_of_tag(data[0])
    if name is None:
        raise BadScopeError(data[0] & TAG_MASK)
    return name


def parse_bytes(data: bytes, registry: ScopeRegistry | None = None) -> ScopedId:
    raw = bytes(data)
    return ScopedId._from_parts(resolve_scope(raw, registry), raw)


def parse_id(text: str, registry: ScopeRegistry | None = None) -> ScopedId:
    """Parse canonical text (lowercase 8-4-4-4-12 hex) into a ScopedId."""
    raw = from_text(text)
    return ScopedId._from_parts(resolve_scope(raw, registry), raw)
