"""Style records: one frozen dataclass per category and nested object.

Category records are sparse: every attribute defaults to ``None`` (no
opinion) and may hold ``UNSET`` (cleared by this tier).  Shadow and gradient
stop records are list items and carry concrete defaults instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from stylecascade.schema.enums import Breakpoint, InteractionState, StyleCategory
from stylecascade.schema.fields import NUMBER, FieldKind, style_field

_OVERFLOW = ("visible", "hidden", "scroll", "auto")
_BORDER_STYLES = (
    "none", "solid", "dashed", "dotted", "double", "groove", "ridge", "inset", "outset",
)


def _object(model: type) -> Any:
    return style_field(kind=FieldKind.OBJECT, model=model, types=())


def _list(model: type) -> Any:
    return style_field(kind=FieldKind.LIST, model=model, types=())


# ---------------------------------------------------------------------------
# List items
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BoxShadow:
    id: str = style_field(default="")
    inset: bool = style_field(types=(bool,), default=False)
    x: float = style_field(types=NUMBER, default=0)
    y: float = style_field(types=NUMBER, default=0)
    blur: float = style_field(types=NUMBER, default=0)
    spread: float = style_field(types=NUMBER, default=0)
    color: str = style_field(default="rgba(0,0,0,0.1)")


@dataclass(frozen=True)
class TextShadow:
    id: str = style_field(default="")
    x: float = style_field(types=NUMBER, default=0)
    y: float = style_field(types=NUMBER, default=0)
    blur: float = style_field(types=NUMBER, default=0)
    color: str = style_field(default="rgba(0,0,0,0.1)")


@dataclass(frozen=True)
class GradientStop:
    color: str = style_field(default="#000000")
    position: float = style_field(types=NUMBER, default=0)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PositionSettings:
    position: str | None = style_field(
        choices=("static", "relative", "absolute", "fixed", "sticky")
    )
    top: str | None = style_field()
    right: str | None = style_field()
    bottom: str | None = style_field()
    left: str | None = style_field()
    z_index: int | None = style_field(types=(int,))


@dataclass(frozen=True)
class DimensionsSettings:
    width: str | None = style_field(neutral="auto")
    height: str | None = style_field(neutral="auto")
    min_width: str | None = style_field(neutral="")
    max_width: str | None = style_field(neutral="")
    min_height: str | None = style_field(neutral="")
    max_height: str | None = style_field(neutral="")


@dataclass(frozen=True)
class SpacingValue:
    top: str | None = style_field(neutral="0")
    right: str | None = style_field(neutral="0")
    bottom: str | None = style_field(neutral="0")
    left: str | None = style_field(neutral="0")
    linked: bool | None = style_field(types=(bool,))


@dataclass(frozen=True)
class FlexSettings:
    direction: str | None = style_field(
        choices=("row", "row-reverse", "column", "column-reverse")
    )
    wrap: str | None = style_field(choices=("nowrap", "wrap", "wrap-reverse"))
    justify_content: str | None = style_field(
        choices=(
            "flex-start", "flex-end", "center",
            "space-between", "space-around", "space-evenly",
        )
    )
    align_items: str | None = style_field(
        choices=("stretch", "flex-start", "flex-end", "center", "baseline")
    )
    align_content: str | None = style_field(
        choices=(
            "stretch", "flex-start", "flex-end", "center",
            "space-between", "space-around",
        )
    )
    gap: str | None = style_field()
    row_gap: str | None = style_field()
    column_gap: str | None = style_field()


@dataclass(frozen=True)
class FlexItemSettings:
    order: int | None = style_field(types=(int,), neutral=0)
    flex_grow: float | None = style_field(types=NUMBER, neutral=0)
    flex_shrink: float | None = style_field(types=NUMBER, neutral=1)
    flex_basis: str | None = style_field(neutral="auto")
    align_self: str | None = style_field(
        choices=("auto", "flex-start", "flex-end", "center", "baseline", "stretch"),
        neutral="auto",
    )


@dataclass(frozen=True)
class LayoutSettings:
    display: str | None = style_field(
        choices=(
            "block", "flex", "grid", "inline", "inline-block",
            "inline-flex", "inline-grid", "none",
        )
    )
    position: PositionSettings | None = _object(PositionSettings)
    dimensions: DimensionsSettings | None = _object(DimensionsSettings)
    margin: SpacingValue | None = _object(SpacingValue)
    padding: SpacingValue | None = _object(SpacingValue)
    overflow: str | None = style_field(choices=_OVERFLOW)
    overflow_x: str | None = style_field(choices=_OVERFLOW)
    overflow_y: str | None = style_field(choices=_OVERFLOW)
    flex: FlexSettings | None = _object(FlexSettings)
    flex_item: FlexItemSettings | None = _object(FlexItemSettings)


# ---------------------------------------------------------------------------
# Background
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GradientSettings:
    type: str | None = style_field(choices=("linear", "radial"))
    angle: float | None = style_field(types=NUMBER)
    shape: str | None = style_field(choices=("circle", "ellipse"))
    stops: tuple[GradientStop, ...] | None = _list(GradientStop)


@dataclass(frozen=True)
class BackgroundImageSettings:
    url: str | None = style_field()
    size: str | None = style_field(choices=("cover", "contain", "auto", "custom"))
    custom_width: str | None = style_field()
    custom_height: str | None = style_field()
    position: str | None = style_field(
        choices=(
            "center", "top", "bottom", "left", "right",
            "top-left", "top-right", "bottom-left", "bottom-right", "custom",
        )
    )
    custom_x: str | None = style_field()
    custom_y: str | None = style_field()
    repeat: str | None = style_field(
        choices=("no-repeat", "repeat", "repeat-x", "repeat-y")
    )
    attachment: str | None = style_field(choices=("scroll", "fixed", "local"))


@dataclass(frozen=True)
class BackgroundSettings:
    type: str | None = style_field(
        choices=("none", "color", "gradient", "image"), neutral="none"
    )
    color: str | None = style_field()
    gradient: GradientSettings | None = _object(GradientSettings)
    image: BackgroundImageSettings | None = _object(BackgroundImageSettings)


# ---------------------------------------------------------------------------
# Border
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BorderSide:
    width: float | None = style_field(types=NUMBER, neutral=0)
    style: str | None = style_field(choices=_BORDER_STYLES, neutral="none")
    color: str | None = style_field()


@dataclass(frozen=True)
class BorderRadius:
    top_left: str | None = style_field(neutral="0")
    top_right: str | None = style_field(neutral="0")
    bottom_right: str | None = style_field(neutral="0")
    bottom_left: str | None = style_field(neutral="0")
    linked: bool | None = style_field(types=(bool,))


@dataclass(frozen=True)
class BorderSettings:
    top: BorderSide | None = _object(BorderSide)
    right: BorderSide | None = _object(BorderSide)
    bottom: BorderSide | None = _object(BorderSide)
    left: BorderSide | None = _object(BorderSide)
    linked: bool | None = style_field(types=(bool,))
    radius: BorderRadius | None = _object(BorderRadius)


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TypographySettings:
    font_family: str | None = style_field()
    font_size: str | None = style_field()
    font_weight: int | str | None = style_field(types=(int, str))
    font_style: str | None = style_field(choices=("normal", "italic", "oblique"))
    line_height: str | None = style_field()
    letter_spacing: str | None = style_field()
    word_spacing: str | None = style_field()
    text_align: str | None = style_field(choices=("left", "center", "right", "justify"))
    text_transform: str | None = style_field(
        choices=("none", "uppercase", "lowercase", "capitalize")
    )
    text_decoration: str | None = style_field(
        choices=("none", "underline", "overline", "line-through"), neutral="none"
    )
    text_decoration_style: str | None = style_field(
        choices=("solid", "double", "dotted", "dashed", "wavy")
    )
    text_decoration_color: str | None = style_field()
    text_shadow: tuple[TextShadow, ...] | None = _list(TextShadow)
    color: str | None = style_field()


# ---------------------------------------------------------------------------
# Transform / transition
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TransformSettings:
    translate_x: str | None = style_field(neutral="0")
    translate_y: str | None = style_field(neutral="0")
    translate_z: str | None = style_field(neutral="0")
    rotate_x: float | None = style_field(types=NUMBER, neutral=0)
    rotate_y: float | None = style_field(types=NUMBER, neutral=0)
    rotate_z: float | None = style_field(types=NUMBER, neutral=0)
    scale_x: float | None = style_field(types=NUMBER, neutral=1)
    scale_y: float | None = style_field(types=NUMBER, neutral=1)
    skew_x: float | None = style_field(types=NUMBER, neutral=0)
    skew_y: float | None = style_field(types=NUMBER, neutral=0)
    perspective: str | None = style_field(neutral="none")
    origin_x: str | None = style_field(
        choices=("left", "center", "right", "custom"), neutral="center"
    )
    origin_y: str | None = style_field(
        choices=("top", "center", "bottom", "custom"), neutral="center"
    )
    origin_x_custom: str | None = style_field()
    origin_y_custom: str | None = style_field()


@dataclass(frozen=True)
class TransitionSettings:
    enabled: bool | None = style_field(types=(bool,), neutral=False)
    property: str | None = style_field(
        choices=(
            "all", "transform", "opacity", "background",
            "color", "border", "box-shadow", "custom",
        )
    )
    custom_property: str | None = style_field()
    duration: float | None = style_field(types=NUMBER)
    timing_function: str | None = style_field(
        choices=("ease", "ease-in", "ease-out", "ease-in-out", "linear", "cubic-bezier")
    )
    cubic_bezier: tuple[float, float, float, float] | None = style_field(
        kind=FieldKind.LIST, types=NUMBER, length=4
    )
    delay: float | None = style_field(types=NUMBER, neutral=0)


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FilterSettings:
    blur: float | None = style_field(types=NUMBER, neutral=0)
    brightness: float | None = style_field(types=NUMBER, neutral=100)
    contrast: float | None = style_field(types=NUMBER, neutral=100)
    grayscale: float | None = style_field(types=NUMBER, neutral=0)
    saturate: float | None = style_field(types=NUMBER, neutral=100)
    hue_rotate: float | None = style_field(types=NUMBER, neutral=0)
    invert: float | None = style_field(types=NUMBER, neutral=0)
    sepia: float | None = style_field(types=NUMBER, neutral=0)
    opacity: float | None = style_field(types=NUMBER, neutral=100)


@dataclass(frozen=True)
class BackdropFilterSettings(FilterSettings):
    enabled: bool | None = style_field(types=(bool,), neutral=False)


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StyleBundle:
    """Sparse multi-category style record for one element, class or tier."""

    layout: LayoutSettings | None = _object(LayoutSettings)
    background: BackgroundSettings | None = _object(BackgroundSettings)
    border: BorderSettings | None = _object(BorderSettings)
    typography: TypographySettings | None = _object(TypographySettings)
    transform: TransformSettings | None = _object(TransformSettings)
    transition: TransitionSettings | None = _object(TransitionSettings)
    filter: FilterSettings | None = _object(FilterSettings)
    backdrop_filter: BackdropFilterSettings | None = _object(BackdropFilterSettings)
    box_shadow: tuple[BoxShadow, ...] | None = _list(BoxShadow)

    def category(self, category: StyleCategory) -> Any:
        """Return the settings held for *category* (None when absent)."""
        return getattr(self, category.attr)

    @property
    def is_empty(self) -> bool:
        return all(self.category(c) is None for c in StyleCategory)


@dataclass(frozen=True)
class StyleVariants:
    """Breakpoint and interaction-state overlays for one style source."""

    breakpoints: Mapping[Breakpoint, StyleBundle] = field(default_factory=dict)
    states: Mapping[InteractionState, StyleBundle] = field(default_factory=dict)
    breakpoint_states: Mapping[Breakpoint, Mapping[InteractionState, StyleBundle]] = field(
        default_factory=dict
    )

    def for_breakpoint(self, breakpoint: Breakpoint) -> StyleBundle | None:
        if breakpoint.is_base:
            return None
        return self.breakpoints.get(breakpoint)

    def for_state(
        self, state: InteractionState, breakpoint: Breakpoint
    ) -> list[tuple[StyleBundle, bool]]:
        """State overlays for *state*, base first, as (bundle, breakpoint_specific)."""
        if state is InteractionState.DEFAULT:
            return []
        overlays: list[tuple[StyleBundle, bool]] = []
        base = self.states.get(state)
        if base is not None:
            overlays.append((base, False))
        if not breakpoint.is_base:
            scoped = self.breakpoint_states.get(breakpoint, {}).get(state)
            if scoped is not None:
                overlays.append((scoped, True))
        return overlays

    @property
    def is_empty(self) -> bool:
        return not (self.breakpoints or self.states or self.breakpoint_states)


@dataclass(frozen=True)
class GlobalTheme:
    """Site-wide theme styling applied below every class."""

    styling: StyleBundle = field(default_factory=StyleBundle)
    variants: StyleVariants = field(default_factory=StyleVariants)


@dataclass(frozen=True)
class StyledElement:
    """One element of the page tree as seen by the cascade."""

    element_id: str
    styling: StyleBundle = field(default_factory=StyleBundle)
    variants: StyleVariants = field(default_factory=StyleVariants)
    applied_classes: tuple[str, ...] = ()
    custom_css: str = ""

    def __post_init__(self) -> None:
        if not self.element_id:
            raise ValueError("StyledElement element_id must be a non-empty string")
