"""Field metadata and generic walkers over style records.

Every style record is a frozen dataclass whose attributes are declared with
:func:`style_field`.  The metadata attached there (persisted key, kind,
nested model, accepted types, neutral value) is what the codec, the cascade
and the serializer use to walk a bundle without knowing its categories.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from enum import Enum, StrEnum
from functools import lru_cache
from typing import Any, Mapping

__all__ = [
    "UNSET",
    "Unset",
    "FieldKind",
    "FieldSpec",
    "NUMBER",
    "style_field",
    "specs",
    "flatten",
    "unflatten",
    "leaf_paths",
    "join_path",
]


class Unset(Enum):
    """Sentinel type for a field a tier intentionally clears."""

    UNSET = "unset"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset.UNSET

NUMBER: tuple[type, ...] = (int, float)

_NO_NEUTRAL = object()


class FieldKind(StrEnum):
    VALUE = "value"
    OBJECT = "object"
    LIST = "list"


@dataclass(frozen=True)
class FieldSpec:
    """Schema entry for one attribute of a style record."""

    name: str
    key: str
    kind: FieldKind
    model: type | None = None
    types: tuple[type, ...] = ()
    choices: frozenset[Any] | None = None
    length: int | None = None
    neutral: Any = _NO_NEUTRAL

    @property
    def has_neutral(self) -> bool:
        return self.neutral is not _NO_NEUTRAL


def style_field(
    *,
    kind: FieldKind = FieldKind.VALUE,
    model: type | None = None,
    types: tuple[type, ...] = (str,),
    choices: tuple[Any, ...] | None = None,
    length: int | None = None,
    neutral: Any = _NO_NEUTRAL,
    key: str | None = None,
    default: Any = None,
) -> Any:
    """Declare a style attribute. Sparse records default every field to None."""
    return field(
        default=default,
        metadata={
            "kind": kind,
            "model": model,
            "types": types,
            "choices": frozenset(choices) if choices is not None else None,
            "length": length,
            "neutral": neutral,
            "key": key,
        },
    )


_CAMEL_RE = re.compile(r"_([a-z])")


def _camel(name: str) -> str:
    return _CAMEL_RE.sub(lambda m: m.group(1).upper(), name)


def join_path(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


@lru_cache(maxsize=None)
def specs(cls: type) -> tuple[FieldSpec, ...]:
    """Return the FieldSpecs of a style record class in declaration order."""
    result: list[FieldSpec] = []
    for f in fields(cls):
        meta = f.metadata
        result.append(
            FieldSpec(
                name=f.name,
                key=meta.get("key") or _camel(f.name),
                kind=meta.get("kind", FieldKind.VALUE),
                model=meta.get("model"),
                types=meta.get("types", ()),
                choices=meta.get("choices"),
                length=meta.get("length"),
                neutral=meta.get("neutral", _NO_NEUTRAL),
            )
        )
    return tuple(result)


# ---------------------------------------------------------------------------
# Walkers
# ---------------------------------------------------------------------------


def flatten(record: Any, prefix: str = "") -> dict[str, Any]:
    """Map a record to ``{leaf_path: value}``.

    Object fields are expanded key by key; list fields stay whole.  Absent
    (None) fields are skipped; UNSET is kept at whatever depth it was written,
    so an UNSET object shows up as a single entry for the object path.
    """
    flat: dict[str, Any] = {}
    for spec in specs(type(record)):
        value = getattr(record, spec.name)
        if value is None:
            continue
        path = join_path(prefix, spec.key)
        if value is not UNSET and spec.kind is FieldKind.OBJECT:
            flat.update(flatten(value, path))
        else:
            flat[path] = value
    return flat


def unflatten(cls: type, flat: Mapping[str, Any], prefix: str = "") -> Any:
    """Inverse of :func:`flatten` for the record class *cls*."""
    kwargs: dict[str, Any] = {}
    for spec in specs(cls):
        path = join_path(prefix, spec.key)
        if path in flat:
            kwargs[spec.name] = flat[path]
        elif spec.kind is FieldKind.OBJECT:
            child_prefix = path + "."
            if any(p.startswith(child_prefix) for p in flat):
                kwargs[spec.name] = unflatten(spec.model, flat, path)
    return cls(**kwargs)


def leaf_paths(cls: type, prefix: str = "") -> tuple[str, ...]:
    """Every leaf path of *cls*, depth first in declaration order."""
    paths: list[str] = []
    for spec in specs(cls):
        path = join_path(prefix, spec.key)
        if spec.kind is FieldKind.OBJECT:
            paths.extend(leaf_paths(spec.model, path))
        else:
            paths.append(path)
    return tuple(paths)
