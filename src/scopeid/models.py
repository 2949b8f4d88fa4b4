from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from scopeid.formatting import ID_BYTES, to_text

_ZERO = bytes(ID_BYTES)
_RESOLVED = object()


@dataclass(frozen=True)
class ScopedId:
    """An identifier together with the scope its first byte resolves to.

    ``ScopedId()`` is the empty identifier: every accessor returns a zero
    value for it instead of raising. Non-empty values come from
    ``generate_id``, ``parse_id`` or ``parse_bytes``, which check the scope
    against the registry.
    """

    scope: str = ""
    binary: bytes | None = None
    _origin: object = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self.binary is None:
            if self.scope:
                raise ValueError("An empty identifier cannot carry a scope")
            return
        if self._origin is not _RESOLVED:
            raise TypeError(
                "Use generate_id, parse_id or parse_bytes to build a ScopedId"
            )
        if len(self.binary) != ID_BYTES:
            raise ValueError(
                f"Identifier must be {ID_BYTES} bytes, got {len(self.binary)}"
            )
        object.__setattr__(self, "binary", bytes(self.binary))

    @classmethod
    def _from_parts(cls, scope: str, binary: bytes) -> ScopedId:
        return cls(scope=scope, binary=binary, _origin=_RESOLVED)

    @property
    def is_empty(self) -> bool:
        return self.binary is None

    @property
    def bytes(self) -> bytes:
        if self.binary is None:
            return _ZERO
        return self.binary

    @property
    def hex(self) -> str:
        if self.binary is None:
            return ""
        return to_text(self.binary)

    def scope_matches(self, candidates: Iterable[str]) -> bool:
        """True if the scope is one of ``candidates`` (exact match)."""
        if self.is_empty or not self.scope:
            return False
        return any(self.scope == candidate for candidate in candidates)

    def __str__(self) -> str:
        return self.hex


EMPTY = ScopedId()
