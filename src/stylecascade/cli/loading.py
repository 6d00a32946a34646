"""Helpers shared by the CLI commands: reading JSON documents from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from stylecascade.errors import MalformedBundleError, UnknownClassReferenceError
from stylecascade.registry import ClassRegistry
from stylecascade.schema.codec import element_from_dict, theme_from_dict
from stylecascade.schema.model import GlobalTheme, StyledElement

logger = logging.getLogger(__name__)


def read_json(path: str | Path) -> Any:
    """Parse the JSON document at *path*.

    Raises json.JSONDecodeError on invalid JSON.
    """
    return json.loads(Path(path).read_text(encoding="utf-8"))


def load_registry(path: str | None) -> ClassRegistry:
    """Load a class registry file; a bare list is taken as the class list."""
    if path is None:
        return ClassRegistry()
    data = read_json(path)
    if isinstance(data, list):
        data = {"classes": data}
    return ClassRegistry.from_dict(data)


def load_theme(path: str | None) -> GlobalTheme | None:
    if path is None:
        return None
    return theme_from_dict(read_json(path))


def load_elements(path: str) -> list[StyledElement]:
    """Load a list of elements, either bare or under an ``elements`` key."""
    data = read_json(path)
    if isinstance(data, dict) and "elements" in data:
        data = data["elements"]
    if not isinstance(data, list):
        raise MalformedBundleError("expected a list of elements", path="elements")
    return [element_from_dict(item, f"elements[{i}]") for i, item in enumerate(data)]


def log_missing_classes(
    element_id: str, missing: Iterable[UnknownClassReferenceError]
) -> None:
    for error in missing:
        logger.warning("Element %r: %s", element_id, error)
