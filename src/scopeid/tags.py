from __future__ import annotations

SLOT_COUNT = 64
TAG_MASK = 0xFC
JITTER_MASK = 0x03

# Top six bits of byte 0; the low two bits stay random.
TAGS: tuple[int, ...] = tuple(slot << 2 for slot in range(SLOT_COUNT))


def slot_of(tag: int) -> int:
    """Return the TAGS index for a first byte, ignoring the jitter bits."""
    return (tag & TAG_MASK) >> 2
