"""Per-category field enumeration and the neutral-value predicate."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from stylecascade.schema.enums import StyleCategory
from stylecascade.schema.fields import (
    UNSET,
    FieldKind,
    FieldSpec,
    join_path,
    leaf_paths,
    specs,
)
from stylecascade.schema.model import StyleBundle

__all__ = [
    "category_spec",
    "field_names",
    "category_leaf_paths",
    "bundle_leaf_paths",
    "spec_at",
    "is_neutral",
]


def category_spec(category: StyleCategory) -> FieldSpec:
    """Return the StyleBundle FieldSpec that holds *category*."""
    for spec in specs(StyleBundle):
        if spec.name == category.attr:
            return spec
    raise KeyError(category)


def field_names(category: StyleCategory) -> tuple[str, ...]:
    """Persisted keys of the top-level fields of *category*.

    Box-shadow is a list category and has no named fields.
    """
    spec = category_spec(category)
    if spec.kind is not FieldKind.OBJECT:
        return ()
    return tuple(s.key for s in specs(spec.model))


def category_leaf_paths(category: StyleCategory) -> tuple[str, ...]:
    """Every leaf path of *category*, prefixed with its bundle key."""
    spec = category_spec(category)
    if spec.kind is not FieldKind.OBJECT:
        return (spec.key,)
    return leaf_paths(spec.model, spec.key)


@lru_cache(maxsize=None)
def bundle_leaf_paths() -> tuple[str, ...]:
    return leaf_paths(StyleBundle)


@lru_cache(maxsize=None)
def _path_index() -> dict[str, FieldSpec]:
    index: dict[str, FieldSpec] = {}

    def walk(cls: type, prefix: str) -> None:
        for spec in specs(cls):
            path = join_path(prefix, spec.key)
            index[path] = spec
            if spec.kind is FieldKind.OBJECT:
                walk(spec.model, path)

    walk(StyleBundle, "")
    return index


def spec_at(path: str) -> FieldSpec | None:
    """FieldSpec for a dotted bundle path such as ``layout.margin.top``."""
    return _path_index().get(path)


def _resolve_field(category: StyleCategory, field: str) -> FieldSpec | None:
    spec = category_spec(category)
    for segment in field.split("."):
        if spec.kind is not FieldKind.OBJECT:
            return None
        spec = next(
            (s for s in specs(spec.model) if segment in (s.key, s.name)), None
        )
        if spec is None:
            return None
    return spec


def is_neutral(category: StyleCategory | str, field: str, value: Any) -> bool:
    """True when emitting *value* for *field* would have no visual effect.

    *field* is a dotted path inside the category using either persisted keys
    or attribute names (``"scaleX"``, ``"flexItem.flexShrink"``).  Fields
    without a known identity value, absent values and UNSET are never neutral.
    """
    if value is None or value is UNSET:
        return False
    spec = _resolve_field(StyleCategory(category), field)
    if spec is None or not spec.has_neutral:
        return False
    if isinstance(value, bool) != isinstance(spec.neutral, bool):
        return False
    return value == spec.neutral
