from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request

from stylecascade.cascade import ResolveContext, provenance_to_dict, resolve
from stylecascade.css import generate_stylesheet, to_css_properties
from stylecascade.errors import (
    ClassNotFoundError,
    MalformedBundleError,
    NameUnavailableError,
    StyleEngineError,
)
from stylecascade.registry import class_from_dict, class_to_dict
from stylecascade.schema.codec import (
    bundle_from_dict,
    element_from_dict,
    theme_from_dict,
    variants_from_dict,
)
from stylecascade.schema.enums import Breakpoint, ClassCategory, InteractionState

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# ---------------------------------------------------------------------------
# Error responses
# ---------------------------------------------------------------------------


def _error_response(exc: StyleEngineError, status: int):
    return jsonify({"error": str(exc), "path": exc.path}), status


@api_bp.errorhandler(MalformedBundleError)
def handle_malformed(exc: MalformedBundleError):
    return _error_response(exc, 400)


@api_bp.errorhandler(NameUnavailableError)
def handle_name_unavailable(exc: NameUnavailableError):
    return _error_response(exc, 409)


@api_bp.errorhandler(ClassNotFoundError)
def handle_not_found(exc: ClassNotFoundError):
    return _error_response(exc, 404)


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------


def _json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise MalformedBundleError("expected a JSON object body", path="<body>")
    return data


def _enum_field(data: dict[str, Any], key: str, enum_cls: type, default: Any) -> Any:
    raw = data.get(key)
    if raw is None:
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        raise MalformedBundleError(f"unknown {enum_cls.__name__} {raw!r}", path=key) from None


def _string_field(data: dict[str, Any], key: str, default: str = "") -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise MalformedBundleError("expected str", path=key)
    return value


def _registry():
    return current_app.extensions["registry"]


def _config():
    return current_app.extensions["cascade_config"]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@api_bp.route("/render", methods=["POST"])
def render():
    """Serialize a bundle to its CSS property map (no cascade)."""
    data = _json_body()
    bundle = bundle_from_dict(data.get("styling") or {}, "styling")
    return jsonify({"css": to_css_properties(bundle, _config())})


@api_bp.route("/resolve", methods=["POST"])
def resolve_element():
    """Run the cascade for one element and return CSS plus provenance."""
    data = _json_body()
    if "element" not in data:
        raise MalformedBundleError("element is required", path="element")
    element = element_from_dict(data["element"], "element")

    theme = current_app.extensions["theme"]
    if data.get("theme") is not None:
        theme = theme_from_dict(data["theme"], "theme")
    override = None
    if data.get("manualOverride") is not None:
        override = bundle_from_dict(data["manualOverride"], "manualOverride")

    context = ResolveContext(
        breakpoint=_enum_field(data, "breakpoint", Breakpoint, Breakpoint.DESKTOP),
        state=_enum_field(data, "state", InteractionState, InteractionState.DEFAULT),
        global_theme=theme,
        manual_override=override,
        registry=_registry(),
    )
    result = resolve(element, context)
    for missing in result.missing_classes:
        logger.warning("Element %r: %s", element.element_id, missing)

    return jsonify({
        "css": to_css_properties(result.bundle, _config()),
        "provenance": provenance_to_dict(result.provenance),
        "warnings": [
            {"error": str(e), "path": e.path, "className": e.name}
            for e in result.missing_classes
        ],
    })


@api_bp.route("/stylesheet", methods=["POST"])
def stylesheet():
    """Generate the stylesheet for the registry classes and posted elements."""
    data = _json_body()
    items = data.get("elements") or []
    if not isinstance(items, list):
        raise MalformedBundleError("expected a list of elements", path="elements")
    elements = [element_from_dict(item, f"elements[{i}]") for i, item in enumerate(items)]
    text = generate_stylesheet(_registry(), elements, _config())
    return Response(text, mimetype="text/css")


# ---------------------------------------------------------------------------
# Class registry
# ---------------------------------------------------------------------------


@api_bp.route("/classes")
def list_classes():
    """List classes, optionally filtered by ?q= and ?category=."""
    registry = _registry()
    query = request.args.get("q", "")
    found = registry.search(query) if query else registry.list_all()
    category = request.args.get("category")
    if category:
        wanted = _enum_field({"category": category}, "category", ClassCategory, None)
        found = tuple(c for c in found if c.category == wanted)
    return jsonify({"classes": [class_to_dict(c) for c in found]})


@api_bp.route("/classes", methods=["POST"])
def create_class():
    """Create a class from its stored JSON form."""
    definition = class_from_dict(_json_body())
    created = _registry().create(definition)
    return jsonify(class_to_dict(created)), 201


@api_bp.route("/classes/from-styling", methods=["POST"])
def create_class_from_styling():
    """Snapshot an element's styling into a new class."""
    data = _json_body()
    name = _string_field(data, "name")
    if not name:
        raise MalformedBundleError("class name is required", path="name")
    created = _registry().create_from_styling(
        name,
        bundle_from_dict(data.get("styling") or {}, "styling"),
        label=_string_field(data, "label") or None,
        description=_string_field(data, "description"),
        category=_enum_field(data, "category", ClassCategory, ClassCategory.CUSTOM),
        variants=variants_from_dict(data.get("variants"), "variants"),
    )
    return jsonify(class_to_dict(created)), 201


@api_bp.route("/classes/<name>")
def get_class(name: str):
    definition = _registry().get(name)
    if definition is None:
        raise ClassNotFoundError(name)
    return jsonify(class_to_dict(definition))


_PATCHABLE = {"name", "label", "description", "category", "styling", "variants"}


@api_bp.route("/classes/<name>", methods=["PATCH"])
def update_class(name: str):
    """Update fields of a class; ``name`` renames it."""
    data = _json_body()
    unknown = set(data) - _PATCHABLE
    if unknown:
        key = sorted(unknown)[0]
        raise MalformedBundleError(f"unknown field {key!r}", path=key)

    changes: dict[str, Any] = {}
    for key in ("name", "label", "description"):
        if key in data:
            changes[key] = _string_field(data, key)
    if "category" in data:
        changes["category"] = _enum_field(data, "category", ClassCategory, ClassCategory.CUSTOM)
    if "styling" in data:
        changes["styling"] = bundle_from_dict(data["styling"] or {}, "styling")
    if "variants" in data:
        changes["variants"] = variants_from_dict(data["variants"], "variants")

    updated = _registry().update(name, **changes)
    return jsonify(class_to_dict(updated))


@api_bp.route("/classes/<name>", methods=["DELETE"])
def delete_class(name: str):
    if not _registry().delete(name):
        raise ClassNotFoundError(name)
    return "", 204
