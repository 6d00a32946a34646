"""Default-tier styling: the bottom of every cascade."""

from __future__ import annotations

from stylecascade.schema.model import (
    BackdropFilterSettings,
    BackgroundSettings,
    BorderRadius,
    BorderSettings,
    BorderSide,
    DimensionsSettings,
    FilterSettings,
    LayoutSettings,
    PositionSettings,
    SpacingValue,
    StyleBundle,
    TransformSettings,
    TransitionSettings,
)

SCHEMA_VERSION = 1


def _side() -> BorderSide:
    return BorderSide(width=0, style="none", color="#000000")


def _spacing() -> SpacingValue:
    return SpacingValue(top="0", right="0", bottom="0", left="0", linked=True)


DEFAULT_STYLING = StyleBundle(
    layout=LayoutSettings(
        display="block",
        position=PositionSettings(position="static"),
        dimensions=DimensionsSettings(
            width="auto",
            height="auto",
            min_width="",
            max_width="",
            min_height="",
            max_height="",
        ),
        margin=_spacing(),
        padding=_spacing(),
        overflow="visible",
    ),
    background=BackgroundSettings(type="none"),
    border=BorderSettings(
        top=_side(),
        right=_side(),
        bottom=_side(),
        left=_side(),
        linked=True,
        radius=BorderRadius(
            top_left="0", top_right="0", bottom_right="0", bottom_left="0", linked=True
        ),
    ),
    transform=TransformSettings(
        translate_x="0",
        translate_y="0",
        translate_z="0",
        rotate_x=0,
        rotate_y=0,
        rotate_z=0,
        scale_x=1,
        scale_y=1,
        skew_x=0,
        skew_y=0,
        perspective="none",
        origin_x="center",
        origin_y="center",
    ),
    transition=TransitionSettings(
        enabled=False,
        property="all",
        duration=300,
        timing_function="ease",
        delay=0,
    ),
    filter=FilterSettings(
        blur=0,
        brightness=100,
        contrast=100,
        grayscale=0,
        saturate=100,
        hue_rotate=0,
        invert=0,
        sepia=0,
        opacity=100,
    ),
    backdrop_filter=BackdropFilterSettings(
        enabled=False,
        blur=0,
        brightness=100,
        contrast=100,
        grayscale=0,
        saturate=100,
        hue_rotate=0,
        invert=0,
        sepia=0,
        opacity=100,
    ),
    box_shadow=(),
)
