from __future__ import annotations

import pytest

from stylecascade.registry import ClassDefinition, ClassRegistry
from stylecascade.schema import (
    ClassCategory,
    LayoutSettings,
    SpacingValue,
    StyleBundle,
    StyleVariants,
)
from stylecascade.web.app import create_app


@pytest.fixture
def registry():
    """Create a fresh class registry for each test."""
    return ClassRegistry(clock=lambda: "2025-01-15T10:00:00Z")


@pytest.fixture
def app(registry):
    """Create a Flask app for testing."""
    application = create_app(registry=registry)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


# ---------------------------------------------------------------------------
# Shared factory helpers
# ---------------------------------------------------------------------------


def make_class(
    name: str = "spaced",
    label: str = "Spaced",
    styling: StyleBundle | None = None,
    description: str = "",
    category: ClassCategory = ClassCategory.LAYOUT,
    variants: StyleVariants | None = None,
) -> ClassDefinition:
    return ClassDefinition(
        name=name,
        label=label,
        styling=styling or StyleBundle(layout=LayoutSettings(margin=SpacingValue(top="16px"))),
        description=description,
        category=category,
        variants=variants or StyleVariants(),
    )


def seed_class(app, **kwargs) -> ClassDefinition:
    """Create a class in the app's registry and return it."""
    return app.extensions["registry"].create(make_class(**kwargs))
