"""Style schema -- typed vocabulary of style categories and their fields."""

from stylecascade.schema.catalog import (
    bundle_leaf_paths,
    category_leaf_paths,
    field_names,
    is_neutral,
    spec_at,
)
from stylecascade.schema.defaults import DEFAULT_STYLING, SCHEMA_VERSION
from stylecascade.schema.enums import Breakpoint, ClassCategory, InteractionState, StyleCategory
from stylecascade.schema.fields import UNSET, FieldKind, FieldSpec, Unset, flatten, unflatten
from stylecascade.schema.model import (
    BackdropFilterSettings,
    BackgroundImageSettings,
    BackgroundSettings,
    BorderRadius,
    BorderSettings,
    BorderSide,
    BoxShadow,
    DimensionsSettings,
    FilterSettings,
    FlexItemSettings,
    FlexSettings,
    GlobalTheme,
    GradientSettings,
    GradientStop,
    LayoutSettings,
    PositionSettings,
    SpacingValue,
    StyleBundle,
    StyledElement,
    StyleVariants,
    TextShadow,
    TransformSettings,
    TransitionSettings,
    TypographySettings,
)

__all__ = [
    # enums
    "StyleCategory",
    "Breakpoint",
    "InteractionState",
    "ClassCategory",
    # sentinel / walkers
    "UNSET",
    "Unset",
    "FieldKind",
    "FieldSpec",
    "flatten",
    "unflatten",
    # catalog
    "field_names",
    "category_leaf_paths",
    "bundle_leaf_paths",
    "spec_at",
    "is_neutral",
    # defaults
    "DEFAULT_STYLING",
    "SCHEMA_VERSION",
    # records
    "StyleBundle",
    "StyleVariants",
    "GlobalTheme",
    "StyledElement",
    "LayoutSettings",
    "PositionSettings",
    "DimensionsSettings",
    "SpacingValue",
    "FlexSettings",
    "FlexItemSettings",
    "BackgroundSettings",
    "GradientSettings",
    "GradientStop",
    "BackgroundImageSettings",
    "BorderSettings",
    "BorderSide",
    "BorderRadius",
    "TypographySettings",
    "TextShadow",
    "TransformSettings",
    "TransitionSettings",
    "FilterSettings",
    "BackdropFilterSettings",
    "BoxShadow",
]
