from __future__ import annotations


class ScopeIdError(Exception):
    """Base class for identifier and registry failures."""


class MissingScopeError(ScopeIdError):
    def __init__(self, scope: str | None = None):
        self.scope = scope
        if scope is None:
            message = "No scopes are configured"
        else:
            message = f"Unknown scope: {scope!r}"
        super().__init__(message)


class BadScopeError(ScopeIdError):
    def __init__(self, tag: int):
        self.tag = tag
        super().__init__(f"No scope registered for tag 0x{tag:02x}")


class BadStringError(ScopeIdError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Not a canonical identifier: {value!r}")


class AlreadyConfiguredError(ScopeIdError):
    def __init__(self):
        super().__init__("Scopes can only be configured once")


class MalformedStorageValueError(ScopeIdError):
    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed storage value {value!r}: {reason}")
