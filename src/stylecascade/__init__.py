"""stylecascade: style cascade and CSS serialization for a visual site builder."""
from __future__ import annotations

__version__ = "0.1.0"

from stylecascade.cascade import Resolution, ResolveContext, resolve  # noqa: E402
from stylecascade.config import CascadeConfig  # noqa: E402
from stylecascade.css import generate_stylesheet, to_css_properties  # noqa: E402
from stylecascade.registry import ClassDefinition, ClassRegistry  # noqa: E402

__all__ = [
    "__version__",
    "CascadeConfig",
    "ClassDefinition",
    "ClassRegistry",
    "Resolution",
    "ResolveContext",
    "resolve",
    "to_css_properties",
    "generate_stylesheet",
]
