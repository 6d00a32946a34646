from __future__ import annotations

import pytest

from stylecascade.registry import ClassDefinition, ClassRegistry
from stylecascade.schema import (
    LayoutSettings,
    SpacingValue,
    StyleBundle,
    StyleVariants,
    TypographySettings,
)


@pytest.fixture
def registry() -> ClassRegistry:
    """A fresh, empty class registry for each test."""
    return ClassRegistry(clock=lambda: "2025-01-15T10:00:00Z")


# ---------------------------------------------------------------------------
# Shared factory helpers
# ---------------------------------------------------------------------------


def margin(**sides: str) -> StyleBundle:
    return StyleBundle(layout=LayoutSettings(margin=SpacingValue(**sides)))


def color(value) -> StyleBundle:
    return StyleBundle(typography=TypographySettings(color=value))


def seed_class(
    registry: ClassRegistry,
    name: str,
    styling: StyleBundle | None = None,
    variants: StyleVariants | None = None,
) -> ClassDefinition:
    """Register a class and return the stored definition."""
    return registry.create(
        ClassDefinition(
            name=name,
            label=name,
            styling=styling or StyleBundle(),
            variants=variants or StyleVariants(),
        )
    )
