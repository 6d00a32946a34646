"""JSON storage boundary for bundles, variants, themes and elements.

Persisted layout: camelCase keys.  An absent key means "no opinion"; JSON
``null`` is the UNSET sentinel.  Loading is strict: unknown keys and values
of the wrong shape raise :class:`MalformedBundleError` with the field path.
"""

from __future__ import annotations

from typing import Any, Mapping

from stylecascade.errors import MalformedBundleError
from stylecascade.schema.enums import Breakpoint, InteractionState
from stylecascade.schema.fields import UNSET, FieldKind, FieldSpec, join_path, specs
from stylecascade.schema.model import GlobalTheme, StyleBundle, StyledElement, StyleVariants

__all__ = [
    "record_from_dict",
    "record_to_dict",
    "bundle_from_dict",
    "bundle_to_dict",
    "variants_from_dict",
    "variants_to_dict",
    "theme_from_dict",
    "theme_to_dict",
    "element_from_dict",
    "element_to_dict",
]


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def _check_scalar(spec: FieldSpec, value: Any, path: str) -> None:
    accepts_bool = bool in spec.types
    if isinstance(value, bool) and not accepts_bool:
        raise MalformedBundleError(
            f"expected {'/'.join(t.__name__ for t in spec.types)}, got bool", path=path
        )
    if not isinstance(value, spec.types):
        raise MalformedBundleError(
            f"expected {'/'.join(t.__name__ for t in spec.types)}, "
            f"got {_type_name(value)}",
            path=path,
        )
    if spec.choices is not None and value not in spec.choices:
        raise MalformedBundleError(f"unsupported value {value!r}", path=path)


def _value_from_json(spec: FieldSpec, raw: Any, path: str, sparse: bool) -> Any:
    if raw is None:
        if not sparse:
            raise MalformedBundleError("null is not allowed inside list items", path=path)
        return UNSET
    if spec.kind is FieldKind.OBJECT:
        return record_from_dict(spec.model, raw, path)
    if spec.kind is FieldKind.LIST:
        if not isinstance(raw, list):
            raise MalformedBundleError(f"expected list, got {_type_name(raw)}", path=path)
        if spec.length is not None and len(raw) != spec.length:
            raise MalformedBundleError(
                f"expected {spec.length} items, got {len(raw)}", path=path
            )
        if spec.model is not None:
            return tuple(
                record_from_dict(spec.model, item, f"{path}[{i}]", sparse=False)
                for i, item in enumerate(raw)
            )
        item_spec = FieldSpec(name=spec.name, key=spec.key, kind=FieldKind.VALUE, types=spec.types)
        for i, item in enumerate(raw):
            _check_scalar(item_spec, item, f"{path}[{i}]")
        return tuple(raw)
    _check_scalar(spec, raw, path)
    return raw


def record_from_dict(
    cls: type, data: Any, path: str = "", *, sparse: bool = True
) -> Any:
    """Build a style record of type *cls* from its persisted mapping."""
    if not isinstance(data, Mapping):
        raise MalformedBundleError(
            f"expected object, got {_type_name(data)}", path=path or "<root>"
        )
    by_key = {s.key: s for s in specs(cls)}
    kwargs: dict[str, Any] = {}
    for key, raw in data.items():
        sub = join_path(path, str(key))
        spec = by_key.get(key)
        if spec is None:
            raise MalformedBundleError(f"unknown field {key!r}", path=sub)
        kwargs[spec.name] = _value_from_json(spec, raw, sub, sparse)
    return cls(**kwargs)


def record_to_dict(record: Any) -> dict[str, Any]:
    """Inverse of :func:`record_from_dict`; absent fields are omitted."""
    out: dict[str, Any] = {}
    for spec in specs(type(record)):
        value = getattr(record, spec.name)
        if value is None:
            continue
        if value is UNSET:
            out[spec.key] = None
        elif spec.kind is FieldKind.OBJECT:
            out[spec.key] = record_to_dict(value)
        elif spec.kind is FieldKind.LIST:
            if spec.model is not None:
                out[spec.key] = [record_to_dict(item) for item in value]
            else:
                out[spec.key] = list(value)
        else:
            out[spec.key] = value
    return out


def bundle_from_dict(data: Any, path: str = "") -> StyleBundle:
    return record_from_dict(StyleBundle, data, path)


def bundle_to_dict(bundle: StyleBundle) -> dict[str, Any]:
    return record_to_dict(bundle)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


def _enum_key(enum_cls: type, key: str, path: str) -> Any:
    try:
        return enum_cls(key)
    except ValueError:
        raise MalformedBundleError(f"unknown {enum_cls.__name__} {key!r}", path=path) from None


def _mapping(data: Any, path: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise MalformedBundleError(f"expected object, got {_type_name(data)}", path=path)
    return data


def _states_from_dict(data: Any, path: str) -> dict[InteractionState, StyleBundle]:
    states: dict[InteractionState, StyleBundle] = {}
    for key, raw in _mapping(data, path).items():
        sub = join_path(path, key)
        state = _enum_key(InteractionState, key, sub)
        if state is InteractionState.DEFAULT:
            raise MalformedBundleError("the default state holds no overlay", path=sub)
        states[state] = bundle_from_dict(raw, sub)
    return states


def variants_from_dict(data: Any, path: str = "") -> StyleVariants:
    """Load overlays stored as ``{"breakpoints": {...}, "states": {...}}``.

    Breakpoint entries may nest their own ``"states"`` mapping, the way the
    editor stores per-breakpoint pseudo-states.
    """
    data = _mapping(data, path or "<root>")
    unknown = set(data) - {"breakpoints", "states"}
    if unknown:
        raise MalformedBundleError(
            f"unknown field {sorted(unknown)[0]!r}", path=join_path(path, sorted(unknown)[0])
        )
    breakpoints: dict[Breakpoint, StyleBundle] = {}
    breakpoint_states: dict[Breakpoint, dict[InteractionState, StyleBundle]] = {}
    bp_path = join_path(path, "breakpoints")
    for key, raw in _mapping(data.get("breakpoints"), bp_path).items():
        sub = join_path(bp_path, key)
        breakpoint = _enum_key(Breakpoint, key, sub)
        if breakpoint.is_base:
            raise MalformedBundleError(
                "desktop is the base breakpoint and takes no override", path=sub
            )
        raw = dict(_mapping(raw, sub))
        nested = raw.pop("states", None)
        if raw:
            breakpoints[breakpoint] = bundle_from_dict(raw, sub)
        if nested:
            breakpoint_states[breakpoint] = _states_from_dict(nested, join_path(sub, "states"))
    states = _states_from_dict(data.get("states"), join_path(path, "states"))
    return StyleVariants(
        breakpoints=breakpoints, states=states, breakpoint_states=breakpoint_states
    )


def variants_to_dict(variants: StyleVariants) -> dict[str, Any]:
    out: dict[str, Any] = {}
    breakpoints: dict[str, Any] = {}
    for breakpoint in Breakpoint:
        bundle = variants.breakpoints.get(breakpoint)
        nested = variants.breakpoint_states.get(breakpoint, {})
        if bundle is None and not nested:
            continue
        entry = bundle_to_dict(bundle) if bundle is not None else {}
        if nested:
            entry["states"] = {
                state.value: bundle_to_dict(nested[state])
                for state in InteractionState
                if state in nested
            }
        breakpoints[breakpoint.value] = entry
    if breakpoints:
        out["breakpoints"] = breakpoints
    if variants.states:
        out["states"] = {
            state.value: bundle_to_dict(variants.states[state])
            for state in InteractionState
            if state in variants.states
        }
    return out


# ---------------------------------------------------------------------------
# Themes and elements
# ---------------------------------------------------------------------------


def _check_keys(data: Mapping[str, Any], allowed: set[str], path: str) -> None:
    unknown = set(data) - allowed
    if unknown:
        key = sorted(unknown)[0]
        raise MalformedBundleError(f"unknown field {key!r}", path=join_path(path, key))


def theme_from_dict(data: Any, path: str = "") -> GlobalTheme:
    data = _mapping(data, path or "<root>")
    _check_keys(data, {"styling", "variants"}, path)
    return GlobalTheme(
        styling=bundle_from_dict(data.get("styling") or {}, join_path(path, "styling")),
        variants=variants_from_dict(data.get("variants"), join_path(path, "variants")),
    )


def theme_to_dict(theme: GlobalTheme) -> dict[str, Any]:
    out: dict[str, Any] = {"styling": bundle_to_dict(theme.styling)}
    if not theme.variants.is_empty:
        out["variants"] = variants_to_dict(theme.variants)
    return out


_ELEMENT_KEYS = {"elementId", "styling", "variants", "appliedClasses", "customCSS"}


def element_from_dict(data: Any, path: str = "") -> StyledElement:
    data = _mapping(data, path or "<root>")
    _check_keys(data, _ELEMENT_KEYS, path)
    element_id = data.get("elementId")
    if not isinstance(element_id, str) or not element_id:
        raise MalformedBundleError(
            "expected a non-empty string", path=join_path(path, "elementId")
        )
    classes = data.get("appliedClasses") or []
    if not isinstance(classes, list) or not all(isinstance(c, str) for c in classes):
        raise MalformedBundleError(
            "expected a list of class names", path=join_path(path, "appliedClasses")
        )
    custom_css = data.get("customCSS") or ""
    if not isinstance(custom_css, str):
        raise MalformedBundleError(
            f"expected str, got {_type_name(custom_css)}", path=join_path(path, "customCSS")
        )
    return StyledElement(
        element_id=element_id,
        styling=bundle_from_dict(data.get("styling") or {}, join_path(path, "styling")),
        variants=variants_from_dict(data.get("variants"), join_path(path, "variants")),
        applied_classes=tuple(classes),
        custom_css=custom_css,
    )


def element_to_dict(element: StyledElement) -> dict[str, Any]:
    out: dict[str, Any] = {
        "elementId": element.element_id,
        "styling": bundle_to_dict(element.styling),
        "appliedClasses": list(element.applied_classes),
    }
    if not element.variants.is_empty:
        out["variants"] = variants_to_dict(element.variants)
    if element.custom_css:
        out["customCSS"] = element.custom_css
    return out
