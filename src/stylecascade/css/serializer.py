"""CSS serializer: effective StyleBundle -> flat CSS property map.

The output is a stable text format.  Property names are kebab-case,
categories are emitted in a fixed order, and numbers carry the unit the
grammar assigns them (``px``, ``deg``, ``%``, ``ms``).  Changing an omission
or ordering rule here is a breaking change for snapshot consumers.
"""

from __future__ import annotations

from typing import Any

from stylecascade.config import CascadeConfig
from stylecascade.schema.catalog import is_neutral
from stylecascade.schema.enums import StyleCategory
from stylecascade.schema.fields import UNSET
from stylecascade.schema.model import (
    BackdropFilterSettings,
    BackgroundSettings,
    BorderSettings,
    BoxShadow,
    FilterSettings,
    GradientSettings,
    LayoutSettings,
    SpacingValue,
    StyleBundle,
    TransformSettings,
    TransitionSettings,
    TypographySettings,
)

__all__ = [
    "to_css_properties",
    "format_number",
    "layout_to_css",
    "background_to_css",
    "gradient_to_css",
    "border_to_css",
    "typography_to_css",
    "transform_to_css",
    "transition_to_css",
    "filter_to_css",
    "backdrop_filter_to_css",
    "box_shadow_to_css",
]

CSSPropertyMap = dict[str, str]

_SIDES = ("top", "right", "bottom", "left")

_FLEX_CONTAINER = (
    ("direction", "flex-direction"),
    ("wrap", "flex-wrap"),
    ("justify_content", "justify-content"),
    ("align_items", "align-items"),
    ("align_content", "align-content"),
    ("gap", "gap"),
    ("row_gap", "row-gap"),
    ("column_gap", "column-gap"),
)

_FLEX_ITEM = (
    ("order", "order"),
    ("flex_grow", "flex-grow"),
    ("flex_shrink", "flex-shrink"),
    ("flex_basis", "flex-basis"),
    ("align_self", "align-self"),
)

_TYPOGRAPHY = (
    ("font_family", "font-family"),
    ("font_size", "font-size"),
    ("font_weight", "font-weight"),
    ("font_style", "font-style"),
    ("line_height", "line-height"),
    ("letter_spacing", "letter-spacing"),
    ("word_spacing", "word-spacing"),
    ("text_align", "text-align"),
    ("text_transform", "text-transform"),
    ("color", "color"),
)

# (attribute, css function, unit) in emission order
_FILTER_CHAIN = (
    ("blur", "blur", "px"),
    ("brightness", "brightness", "%"),
    ("contrast", "contrast", "%"),
    ("grayscale", "grayscale", "%"),
    ("saturate", "saturate", "%"),
    ("hue_rotate", "hue-rotate", "deg"),
    ("invert", "invert", "%"),
    ("sepia", "sepia", "%"),
    ("opacity", "opacity", "%"),
)


def _present(value: Any) -> bool:
    return value is not None and value is not UNSET and value != ""


def format_number(value: Any) -> str:
    """Render a number without a trailing ``.0`` for integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _text(value: Any) -> str:
    return value if isinstance(value, str) else format_number(value)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _spacing(spacing: SpacingValue) -> str:
    return " ".join(
        _text(getattr(spacing, side)) if _present(getattr(spacing, side)) else "0"
        for side in _SIDES
    )


def layout_to_css(layout: LayoutSettings) -> CSSPropertyMap:
    css: CSSPropertyMap = {}

    if _present(layout.display):
        css["display"] = layout.display

    pos = layout.position
    if pos:
        if _present(pos.position):
            css["position"] = pos.position
        for side in _SIDES:
            value = getattr(pos, side)
            if _present(value):
                css[side] = value
        if _present(pos.z_index):
            css["z-index"] = format_number(pos.z_index)

    dim = layout.dimensions
    if dim:
        if _present(dim.width) and dim.width != "auto":
            css["width"] = dim.width
        if _present(dim.height) and dim.height != "auto":
            css["height"] = dim.height
        for attr, prop in (
            ("min_width", "min-width"),
            ("max_width", "max-width"),
            ("min_height", "min-height"),
            ("max_height", "max-height"),
        ):
            value = getattr(dim, attr)
            if _present(value):
                css[prop] = value

    if layout.margin:
        css["margin"] = _spacing(layout.margin)
    if layout.padding:
        css["padding"] = _spacing(layout.padding)

    for attr, prop in (
        ("overflow", "overflow"),
        ("overflow_x", "overflow-x"),
        ("overflow_y", "overflow-y"),
    ):
        value = getattr(layout, attr)
        if _present(value):
            css[prop] = value

    if layout.display in ("flex", "inline-flex") and layout.flex:
        for attr, prop in _FLEX_CONTAINER:
            value = getattr(layout.flex, attr)
            if _present(value):
                css[prop] = value

    item = layout.flex_item
    if item:
        for attr, prop in _FLEX_ITEM:
            value = getattr(item, attr)
            if _present(value) and not is_neutral(
                StyleCategory.LAYOUT, f"flex_item.{attr}", value
            ):
                css[prop] = _text(value)

    return css


# ---------------------------------------------------------------------------
# Background
# ---------------------------------------------------------------------------


def gradient_to_css(gradient: GradientSettings) -> str:
    """Stops are sorted by position; linear defaults to 180deg, radial to circle."""
    stops = sorted(gradient.stops or (), key=lambda stop: stop.position)
    joined = ", ".join(f"{stop.color} {format_number(stop.position)}%" for stop in stops)
    if gradient.type == "radial":
        shape = gradient.shape if _present(gradient.shape) else "circle"
        return f"radial-gradient({shape}, {joined})"
    angle = gradient.angle if _present(gradient.angle) else 180
    return f"linear-gradient({format_number(angle)}deg, {joined})"


def background_to_css(background: BackgroundSettings) -> CSSPropertyMap:
    css: CSSPropertyMap = {}

    if background.type == "color":
        if _present(background.color):
            css["background-color"] = background.color
    elif background.type == "gradient":
        if background.gradient:
            css["background-image"] = gradient_to_css(background.gradient)
    elif background.type == "image":
        img = background.image
        if img:
            if _present(img.url):
                css["background-image"] = f"url({img.url})"
            if img.size == "custom":
                width = img.custom_width if _present(img.custom_width) else "auto"
                height = img.custom_height if _present(img.custom_height) else "auto"
                css["background-size"] = f"{width} {height}"
            elif _present(img.size):
                css["background-size"] = img.size
            if img.position == "custom":
                x = img.custom_x if _present(img.custom_x) else "50%"
                y = img.custom_y if _present(img.custom_y) else "50%"
                css["background-position"] = f"{x} {y}"
            elif _present(img.position):
                css["background-position"] = img.position.replace("-", " ")
            if _present(img.repeat):
                css["background-repeat"] = img.repeat
            if _present(img.attachment):
                css["background-attachment"] = img.attachment

    return css


# ---------------------------------------------------------------------------
# Border
# ---------------------------------------------------------------------------


def border_to_css(border: BorderSettings) -> CSSPropertyMap:
    css: CSSPropertyMap = {}

    for side in _SIDES:
        settings = getattr(border, side)
        if not settings or not _present(settings.style) or settings.style == "none":
            continue
        width = settings.width if _present(settings.width) else 0
        color = settings.color if _present(settings.color) else "#000000"
        css[f"border-{side}"] = f"{format_number(width)}px {settings.style} {color}"

    radius = border.radius
    if radius:
        corners = [
            _text(value) if _present(value) else "0"
            for value in (
                radius.top_left,
                radius.top_right,
                radius.bottom_right,
                radius.bottom_left,
            )
        ]
        css["border-radius"] = corners[0] if radius.linked is True else " ".join(corners)

    return css


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


def typography_to_css(typography: TypographySettings) -> CSSPropertyMap:
    css: CSSPropertyMap = {}

    for attr, prop in _TYPOGRAPHY:
        value = getattr(typography, attr)
        if _present(value):
            css[prop] = _text(value)

    if _present(typography.text_decoration) and typography.text_decoration != "none":
        parts = [typography.text_decoration]
        if _present(typography.text_decoration_style):
            parts.append(typography.text_decoration_style)
        if _present(typography.text_decoration_color):
            parts.append(typography.text_decoration_color)
        css["text-decoration"] = " ".join(parts)

    if typography.text_shadow:
        css["text-shadow"] = ", ".join(
            f"{format_number(s.x)}px {format_number(s.y)}px "
            f"{format_number(s.blur)}px {s.color}"
            for s in typography.text_shadow
        )

    return css


# ---------------------------------------------------------------------------
# Transform / transition
# ---------------------------------------------------------------------------


def _origin(mode: Any, custom: Any) -> str:
    if mode == "custom":
        return custom if _present(custom) else "center"
    return mode if _present(mode) else "center"


def transform_to_css(transform: TransformSettings) -> CSSPropertyMap:
    css: CSSPropertyMap = {}
    functions: list[str] = []

    for attr, fn in (
        ("translate_x", "translateX"),
        ("translate_y", "translateY"),
        ("translate_z", "translateZ"),
    ):
        value = getattr(transform, attr)
        if _present(value) and value != "0":
            functions.append(f"{fn}({value})")

    for group, unit in (
        ((("rotate_x", "rotateX"), ("rotate_y", "rotateY"), ("rotate_z", "rotateZ")), "deg"),
        ((("scale_x", "scaleX"), ("scale_y", "scaleY")), ""),
        ((("skew_x", "skewX"), ("skew_y", "skewY")), "deg"),
    ):
        for attr, fn in group:
            value = getattr(transform, attr)
            if _present(value) and not is_neutral(StyleCategory.TRANSFORM, attr, value):
                functions.append(f"{fn}({format_number(value)}{unit})")

    if functions:
        css["transform"] = " ".join(functions)

    if _present(transform.perspective) and transform.perspective != "none":
        css["perspective"] = transform.perspective

    origin_x = _origin(transform.origin_x, transform.origin_x_custom)
    origin_y = _origin(transform.origin_y, transform.origin_y_custom)
    if origin_x != "center" or origin_y != "center":
        css["transform-origin"] = f"{origin_x} {origin_y}"

    return css


def transition_to_css(transition: TransitionSettings) -> CSSPropertyMap:
    if transition.enabled is not True:
        return {}

    if transition.property == "custom":
        prop = transition.custom_property if _present(transition.custom_property) else "all"
    else:
        prop = transition.property if _present(transition.property) else "all"

    duration = transition.duration if _present(transition.duration) else 300

    timing = transition.timing_function if _present(transition.timing_function) else "ease"
    if timing == "cubic-bezier":
        if transition.cubic_bezier:
            timing = f"cubic-bezier({', '.join(format_number(v) for v in transition.cubic_bezier)})"
        else:
            timing = "ease"

    delay = transition.delay if _present(transition.delay) else 0

    return {
        "transition": f"{prop} {format_number(duration)}ms {timing} {format_number(delay)}ms"
    }


# ---------------------------------------------------------------------------
# Filters / shadows
# ---------------------------------------------------------------------------


def _filter_chain(settings: FilterSettings, category: StyleCategory) -> str:
    parts: list[str] = []
    for attr, fn, unit in _FILTER_CHAIN:
        value = getattr(settings, attr)
        if _present(value) and not is_neutral(category, attr, value):
            parts.append(f"{fn}({format_number(value)}{unit})")
    return " ".join(parts)


def filter_to_css(filter_settings: FilterSettings) -> CSSPropertyMap:
    chain = _filter_chain(filter_settings, StyleCategory.FILTER)
    return {"filter": chain} if chain else {}


def backdrop_filter_to_css(
    backdrop: BackdropFilterSettings, config: CascadeConfig | None = None
) -> CSSPropertyMap:
    if backdrop.enabled is not True:
        return {}
    chain = _filter_chain(backdrop, StyleCategory.BACKDROP_FILTER)
    if not chain:
        return {}
    config = config or CascadeConfig()
    return {"backdrop-filter": chain, config.backdrop_vendor_property: chain}


def box_shadow_to_css(shadows: tuple[BoxShadow, ...]) -> CSSPropertyMap:
    if not shadows:
        return {}
    return {
        "box-shadow": ", ".join(
            f"{'inset ' if s.inset else ''}{format_number(s.x)}px {format_number(s.y)}px "
            f"{format_number(s.blur)}px {format_number(s.spread)}px {s.color}"
            for s in shadows
        )
    }


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------


def to_css_properties(
    bundle: StyleBundle, config: CascadeConfig | None = None
) -> CSSPropertyMap:
    """Serialize *bundle* into a flat CSS property map.

    Pure and deterministic: field-wise equal bundles give identical maps,
    including key order.
    """
    css: CSSPropertyMap = {}
    if bundle.layout:
        css.update(layout_to_css(bundle.layout))
    if bundle.background:
        css.update(background_to_css(bundle.background))
    if bundle.border:
        css.update(border_to_css(bundle.border))
    if bundle.typography:
        css.update(typography_to_css(bundle.typography))
    if bundle.transform:
        css.update(transform_to_css(bundle.transform))
    if bundle.transition:
        css.update(transition_to_css(bundle.transition))
    if bundle.filter:
        css.update(filter_to_css(bundle.filter))
    if bundle.backdrop_filter:
        css.update(backdrop_filter_to_css(bundle.backdrop_filter, config))
    if bundle.box_shadow:
        css.update(box_shadow_to_css(bundle.box_shadow))
    return css
