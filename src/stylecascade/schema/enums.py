from __future__ import annotations

from enum import StrEnum


class StyleCategory(StrEnum):
    LAYOUT = "layout"
    TYPOGRAPHY = "typography"
    BACKGROUND = "background"
    BORDER = "border"
    TRANSFORM = "transform"
    TRANSITION = "transition"
    FILTER = "filter"
    BACKDROP_FILTER = "backdrop-filter"
    BOX_SHADOW = "box-shadow"

    @property
    def attr(self) -> str:
        """Attribute name of this category on a StyleBundle."""
        return self.value.replace("-", "_")


class Breakpoint(StrEnum):
    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"

    @property
    def is_base(self) -> bool:
        return self is Breakpoint.DESKTOP


class InteractionState(StrEnum):
    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    FOCUS = "focus"
    FOCUS_WITHIN = "focus-within"
    FOCUS_VISIBLE = "focus-visible"
    VISITED = "visited"
    DISABLED = "disabled"
    FIRST_CHILD = "first-child"
    LAST_CHILD = "last-child"
    BEFORE = "before"
    AFTER = "after"


class ClassCategory(StrEnum):
    LAYOUT = "layout"
    TYPOGRAPHY = "typography"
    BACKGROUND = "background"
    BORDER = "border"
    EFFECTS = "effects"
    CUSTOM = "custom"
