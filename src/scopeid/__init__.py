"""Random 128-bit identifiers that carry their scope in the first byte."""

from scopeid.errors import (
    AlreadyConfiguredError,
    BadScopeError,
    BadStringError,
    MalformedStorageValueError,
    MissingScopeError,
    ScopeIdError,
)
from scopeid.ids import generate_id, parse_bytes, parse_id
from scopeid.models import EMPTY, ScopedId
from scopeid.registry import (
    ScopeRegistry,
    configure,
    default_registry,
    is_configured,
    scopes,
)

__version__ = "0.1.0"

__all__ = [
    "AlreadyConfiguredError",
    "BadScopeError",
    "BadStringError",
    "EMPTY",
    "MalformedStorageValueError",
    "MissingScopeError",
    "ScopeIdError",
    "ScopeRegistry",
    "ScopedId",
    "configure",
    "default_registry",
    "generate_id",
    "is_configured",
    "parse_bytes",
    "parse_id",
    "scopes",
]
