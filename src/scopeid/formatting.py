from __future__ import annotations

import re

from scopeid.errors import BadStringError

ID_BYTES = 16
TEXT_LENGTH = 36

CANONICAL_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
)

_GROUPS = ((0, 4), (4, 6), (6, 8), (8, 10), (10, 16))


def to_text(data: bytes) -> str:
    """Format 16 bytes as lowercase 8-4-4-4-12 hex."""
    if len(data) != ID_BYTES:
        raise ValueError(f"Expected {ID_BYTES} bytes, got {len(data)}")
    raw = bytes(data)
    return "-".join(raw[start:end].hex() for start, end in _GROUPS)


def is_canonical(text: object) -> bool:
    return isinstance(text, str) and CANONICAL_RE.fullmatch(text) is not None


def from_text(text: str) -> bytes:
    """Decode canonical text to 16 bytes without resolving its scope."""
    if not is_canonical(text):
        raise BadStringError(text)
    return bytes.fromhex(text.replace("-", ""))
