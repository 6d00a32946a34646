"""Class registry: named, reusable style bundles referenced by elements."""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from stylecascade.errors import (
    ClassNotFoundError,
    DuplicateNameError,
    MalformedBundleError,
    NameUnavailableError,
)
from stylecascade.schema.codec import (
    bundle_from_dict,
    bundle_to_dict,
    variants_from_dict,
    variants_to_dict,
)
from stylecascade.schema.defaults import SCHEMA_VERSION
from stylecascade.schema.enums import ClassCategory
from stylecascade.schema.model import StyleBundle, StyleVariants

logger = logging.getLogger(__name__)

_INVALID_CHARS_RE = re.compile(r"[^a-z0-9\-_]")
_DASH_RUN_RE = re.compile(r"-{2,}")


def sanitize(raw_name: str) -> str:
    """Turn *raw_name* into a valid CSS class name.

    Lowercases, replaces every character outside ``[a-z0-9-_]`` with ``-``,
    collapses runs of ``-`` and trims ``-`` from both ends.
    """
    name = _INVALID_CHARS_RE.sub("-", raw_name.lower())
    name = _DASH_RUN_RE.sub("-", name)
    return name.strip("-")


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class ClassDefinition:
    name: str
    label: str
    styling: StyleBundle = field(default_factory=StyleBundle)
    description: str = ""
    category: ClassCategory = ClassCategory.CUSTOM
    created_at: str = ""
    updated_at: str = ""
    variants: StyleVariants = field(default_factory=StyleVariants)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name, label or description."""
        needle = query.lower()
        return (
            needle in self.name.lower()
            or needle in self.label.lower()
            or needle in self.description.lower()
        )


_UPDATABLE = frozenset({"name", "label", "styling", "description", "category", "variants"})


class ClassRegistry:
    """In-process store of ClassDefinitions keyed by sanitized name.

    All mutations go through this API and are serialized by a lock;
    concurrent updates to the same class are last-writer-wins.
    """

    def __init__(self, clock: Callable[[], str] | None = None) -> None:
        self._lock = threading.Lock()
        self._classes: dict[str, ClassDefinition] = {}
        self._clock = clock or _utc_now

    # --- naming ---------------------------------------------------------------

    @staticmethod
    def sanitize(raw_name: str) -> str:
        return sanitize(raw_name)

    def is_name_available(self, name: str) -> bool:
        sanitized = sanitize(name)
        with self._lock:
            return bool(sanitized) and sanitized not in self._classes

    # --- create ---------------------------------------------------------------

    def create(self, definition: ClassDefinition) -> ClassDefinition:
        """Register *definition* under its sanitized name.

        Raises DuplicateNameError if the sanitized name is already taken.
        """
        name = sanitize(definition.name)
        if not name:
            raise NameUnavailableError(definition.name, "Class name is empty after sanitization")
        now = self._clock()
        stored = replace(
            definition,
            name=name,
            label=definition.label or definition.name,
            created_at=definition.created_at or now,
            updated_at=definition.updated_at or now,
        )
        with self._lock:
            if name in self._classes:
                raise DuplicateNameError(name)
            self._classes[name] = stored
        logger.debug("Created class %r", name)
        return stored

    def create_from_styling(
        self,
        name: str,
        styling: StyleBundle,
        *,
        label: str | None = None,
        description: str = "",
        category: ClassCategory = ClassCategory.CUSTOM,
        variants: StyleVariants | None = None,
    ) -> ClassDefinition:
        """Snapshot *styling* verbatim into a new class.

        Raises NameUnavailableError if the sanitized name is taken.
        """
        sanitized = sanitize(name)
        if not self.is_name_available(name):
            raise NameUnavailableError(sanitized or name)
        definition = ClassDefinition(
            name=sanitized,
            label=label or name,
            styling=styling,
            description=description,
            category=category,
            variants=variants or StyleVariants(),
        )
        try:
            return self.create(definition)
        except DuplicateNameError:
            raise NameUnavailableError(sanitized) from None

    # --- read -----------------------------------------------------------------

    def get(self, name: str) -> ClassDefinition | None:
        """Return the class named *name* (sanitized), or None if not registered."""
        with self._lock:
            return self._classes.get(sanitize(name))

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return sanitize(name) in self._classes

    def __len__(self) -> int:
        with self._lock:
            return len(self._classes)

    def list_all(self) -> tuple[ClassDefinition, ...]:
        """All classes in creation order."""
        with self._lock:
            return tuple(self._classes.values())

    def list_by_category(self, category: ClassCategory) -> tuple[ClassDefinition, ...]:
        return tuple(c for c in self.list_all() if c.category == category)

    def search(self, query: str) -> tuple[ClassDefinition, ...]:
        """Classes whose name, label or description contains *query*."""
        return tuple(c for c in self.list_all() if c.matches(query))

    # --- update / delete ------------------------------------------------------

    def update(self, name: str, /, **changes: Any) -> ClassDefinition:
        """Apply *changes* to the class *name* and refresh its updated_at.

        Passing ``name=`` renames the class; the new name is sanitized and
        must be free.
        """
        name = sanitize(name)
        unknown = set(changes) - _UPDATABLE
        if unknown:
            raise TypeError(f"Cannot update class field(s): {', '.join(sorted(unknown))}")
        if "name" in changes:
            changes["name"] = sanitize(changes["name"])
            if not changes["name"]:
                raise NameUnavailableError(name, "Class name is empty after sanitization")
        now = self._clock()
        with self._lock:
            current = self._classes.get(name)
            if current is None:
                raise ClassNotFoundError(name)
            updated = replace(current, **changes, updated_at=now)
            if updated.name != name:
                if updated.name in self._classes:
                    raise DuplicateNameError(updated.name)
                # keep creation order stable across renames
                self._classes = {
                    (updated.name if key == name else key): (updated if key == name else value)
                    for key, value in self._classes.items()
                }
            else:
                self._classes[name] = updated
        logger.debug("Updated class %r (%s)", updated.name, ", ".join(sorted(changes)))
        return updated

    def delete(self, name: str) -> bool:
        """Remove the class *name*. Returns False if it was not registered."""
        name = sanitize(name)
        with self._lock:
            removed = self._classes.pop(name, None)
        if removed is not None:
            logger.debug("Deleted class %r", name)
        return removed is not None

    # --- storage boundary -----------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": SCHEMA_VERSION,
            "classes": [class_to_dict(c) for c in self.list_all()],
        }

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], clock: Callable[[], str] | None = None
    ) -> ClassRegistry:
        """Rebuild a registry from :meth:`to_dict` output."""
        if not isinstance(data, Mapping):
            raise MalformedBundleError("expected object", path="<root>")
        version = data.get("version", SCHEMA_VERSION)
        if version != SCHEMA_VERSION:
            raise MalformedBundleError(f"unsupported schema version {version!r}", path="version")
        items = data.get("classes", [])
        if not isinstance(items, list):
            raise MalformedBundleError("expected list", path="classes")
        registry = cls(clock=clock)
        for i, item in enumerate(items):
            registry.create(class_from_dict(item, path=f"classes[{i}]"))
        return registry


# ---------------------------------------------------------------------------
# ClassDefinition codec
# ---------------------------------------------------------------------------

_CLASS_KEYS = {
    "name", "label", "description", "styling", "category",
    "createdAt", "updatedAt", "variants",
}


def class_from_dict(data: Any, path: str = "") -> ClassDefinition:
    """Load a ClassDefinition from its persisted JSON mapping."""

    def at(key: str) -> str:
        return f"{path}.{key}" if path else key

    if not isinstance(data, Mapping):
        raise MalformedBundleError("expected object", path=path or "<root>")
    unknown = set(data) - _CLASS_KEYS
    if unknown:
        key = sorted(unknown)[0]
        raise MalformedBundleError(f"unknown field {key!r}", path=at(key))
    for key in ("name", "label", "description", "createdAt", "updatedAt"):
        if key in data and not isinstance(data[key], str):
            raise MalformedBundleError("expected str", path=at(key))
    if not data.get("name"):
        raise MalformedBundleError("class name is required", path=at("name"))
    try:
        category = ClassCategory(data.get("category", ClassCategory.CUSTOM))
    except ValueError:
        raise MalformedBundleError(
            f"unknown category {data.get('category')!r}", path=at("category")
        ) from None
    return ClassDefinition(
        name=data["name"],
        label=data.get("label", ""),
        styling=bundle_from_dict(data.get("styling") or {}, at("styling")),
        description=data.get("description", ""),
        category=category,
        created_at=data.get("createdAt", ""),
        updated_at=data.get("updatedAt", ""),
        variants=variants_from_dict(data.get("variants"), at("variants")),
    )


def class_to_dict(definition: ClassDefinition) -> dict[str, Any]:
    out: dict[str, Any] = {
        "name": definition.name,
        "label": definition.label,
        "styling": bundle_to_dict(definition.styling),
        "category": definition.category.value,
        "createdAt": definition.created_at,
        "updatedAt": definition.updated_at,
    }
    if definition.description:
        out["description"] = definition.description
    if not definition.variants.is_empty:
        out["variants"] = variants_to_dict(definition.variants)
    return out
