"""CSS output: property maps and stylesheet text."""

from stylecascade.css.serializer import format_number, gradient_to_css, to_css_properties
from stylecascade.css.stylesheet import (
    PSEUDO_SELECTORS,
    declarations_block,
    escape_identifier,
    generate_class_css,
    generate_element_css,
    generate_rules,
    generate_stylesheet,
    media_query,
)

__all__ = [
    "to_css_properties",
    "format_number",
    "gradient_to_css",
    "PSEUDO_SELECTORS",
    "escape_identifier",
    "declarations_block",
    "media_query",
    "generate_rules",
    "generate_element_css",
    "generate_class_css",
    "generate_stylesheet",
]
