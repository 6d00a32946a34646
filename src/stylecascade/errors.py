"""Error hierarchy for the style cascade engine."""
from __future__ import annotations


class StyleEngineError(Exception):
    """Base error for all stylecascade errors.

    Every error carries the dotted path of the offending field (or the
    registry key) so callers can point the editor at the right control.
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Registry errors
# ---------------------------------------------------------------------------


class RegistryError(StyleEngineError):
    """Error raised by the class registry."""


class NameUnavailableError(RegistryError):
    """The requested class name is already taken or sanitizes to nothing."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(
            message or f"Class name {name!r} is not available", path="name"
        )


class DuplicateNameError(NameUnavailableError):
    """A class with the same sanitized name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Class {name!r} already exists")


class ClassNotFoundError(RegistryError):
    """No class is registered under the given name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Class {name!r} not found", path="name")


# ---------------------------------------------------------------------------
# Schema / resolution errors
# ---------------------------------------------------------------------------


class MalformedBundleError(StyleEngineError):
    """A stored bundle does not match the style schema."""


class UnknownClassReferenceError(StyleEngineError):
    """An element references a class the registry does not hold.

    Never raised by the resolver: instances are collected on the
    resolution result so the caller can log them.
    """

    def __init__(self, name: str, index: int) -> None:
        self.name = name
        self.index = index
        super().__init__(f"Unknown class {name!r}", path=f"classes[{index}]")
