from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

import yaml

from scopeid.errors import AlreadyConfiguredError
from scopeid.tags import SLOT_COUNT, TAGS, slot_of

logger = logging.getLogger(__name__)

PLACEHOLDER = ""


@dataclass(frozen=True)
class _Bindings:
    by_name: Mapping[str, int]
    by_slot: tuple[str | None, ...]


def _bind(names: Sequence[str]) -> _Bindings:
    by_name: dict[str, int] = {}
    for index, name in enumerate(names):
        if name == PLACEHOLDER:
            continue
        if name in by_name:
            logger.warning(
                "Scope %r listed more than once; tag 0x%02x is orphaned",
                name, by_name[name],
            )
        # Later entries win for duplicated names.
        by_name[name] = TAGS[index]

    by_slot: list[str | None] = [None] * SLOT_COUNT
    for name, tag in by_name.items():
        by_slot[slot_of(tag)] = name
    return _Bindings(by_name=MappingProxyType(by_name), by_slot=tuple(by_slot))


class ScopeRegistry:
    """Write-once mapping between scope names and the 64 reserved tags.

    Readers take no lock: configuration builds a complete snapshot and
    publishes it with a single assignment.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._bindings: _Bindings | None = None

    @classmethod
    def from_file(cls, path: Path | str) -> ScopeRegistry:
        registry = cls()
        registry.configure(load_scope_names(path))
        return registry

    def configure(self, names: Sequence[str]) -> None:
        """Bind names[i] to TAGS[i]. Raises AlreadyConfiguredError on reuse."""
        if isinstance(names, str) or len(names) != SLOT_COUNT:
            raise ValueError(f"Exactly {SLOT_COUNT} scope names are required")
        for name in names:
            if not isinstance(name, str):
                raise ValueError(f"Scope names must be strings, got {name!r}")

        with self._lock:
            if self._bindings is not None:
                raise AlreadyConfiguredError()
            bindings = _bind(list(names))
            self._bindings = bindings
        logger.debug(
            "Configured %d scope slots with %d distinct names",
            SLOT_COUNT, len(bindings.by_name),
        )

    def is_configured(self) -> bool:
        return self._bindings is not None

    def tag_of(self, name: str) -> int | None:
        bindings = self._bindings
        if bindings is None:
            return None
        return bindings.by_name.get(name)

    def name_of_tag(self, tag: int) -> str | None:
        bindings = self._bindings
        if bindings is None:
            return None
        return bindings.by_slot[slot_of(tag)]

    def names(self) -> list[str]:
        """Registered scope names. Order is not guaranteed."""
        bindings = self._bindings
        if bindings is None:
            return []
        return list(bindings.by_name)

    def items(self) -> list[tuple[str, int]]:
        """(name, tag) pairs sorted by tag."""
        bindings = self._bindings
        if bindings is None:
            return []
        return sorted(bindings.by_name.items(), key=lambda pair: pair[1])


def load_scope_names(path: Path | str) -> list[str]:
    """Read a YAML scope file and pad it to 64 slots.

    The file holds a top-level ``scopes`` list; its position decides the tag.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"{path}: not valid YAML ({e})") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping with a 'scopes' list")
    names = data.get("scopes") or []
    if not isinstance(names, list):
        raise ValueError(f"{path}: 'scopes' must be a list")
    if len(names) > SLOT_COUNT:
        raise ValueError(
            f"{path}: {len(names)} scopes listed, at most {SLOT_COUNT} allowed"
        )
    for name in names:
        if not isinstance(name, str):
            raise ValueError(f"{path}: scope names must be strings, got {name!r}")
    return names + [PLACEHOLDER] * (SLOT_COUNT - len(names))


default_registry = ScopeRegistry()


def configure(names: Sequence[str]) -> None:
    default_registry.configure(names)


def is_configured() -> bool:
    return default_registry.is_configured()


def scopes() -> list[str]:
    return default_registry.names()
