"""Stylesheet generation: CSS rule text for elements and classes.

Rules for one selector come out in a fixed order: the base rule, one rule
per interaction state, then for each non-base breakpoint a media block for
the breakpoint overrides followed by one per breakpoint state overlay.
Declaration blocks that serialize to nothing are skipped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Mapping

from stylecascade.config import CascadeConfig
from stylecascade.css.serializer import to_css_properties
from stylecascade.schema.enums import Breakpoint, InteractionState
from stylecascade.schema.model import StyleBundle, StyledElement, StyleVariants

if TYPE_CHECKING:
    from stylecascade.registry import ClassDefinition, ClassRegistry

__all__ = [
    "PSEUDO_SELECTORS",
    "escape_identifier",
    "declarations_block",
    "media_query",
    "generate_rules",
    "generate_element_css",
    "generate_class_css",
    "generate_stylesheet",
]

PSEUDO_SELECTORS: dict[InteractionState, str] = {
    InteractionState.DEFAULT: "",
    InteractionState.HOVER: ":hover",
    InteractionState.ACTIVE: ":active",
    InteractionState.FOCUS: ":focus",
    InteractionState.FOCUS_WITHIN: ":focus-within",
    InteractionState.FOCUS_VISIBLE: ":focus-visible",
    InteractionState.VISITED: ":visited",
    InteractionState.DISABLED: ":disabled",
    InteractionState.FIRST_CHILD: ":first-child",
    InteractionState.LAST_CHILD: ":last-child",
    InteractionState.BEFORE: "::before",
    InteractionState.AFTER: "::after",
}

ROOT_PLACEHOLDER = "%root%"


def _hex_escape(ch: str) -> str:
    return f"\\{ord(ch):x} "


def escape_identifier(value: str) -> str:
    """Escape *value* for use after ``#`` or ``.`` in a selector.

    Follows the CSSOM ``CSS.escape()`` rules, so ids with spaces or a
    leading digit still produce a valid selector.
    """
    if value == "-":
        return "\\-"
    out: list[str] = []
    for index, ch in enumerate(value):
        code = ord(ch)
        if code == 0:
            out.append("\ufffd")
        elif 0x01 <= code <= 0x1F or code == 0x7F:
            out.append(_hex_escape(ch))
        elif ch.isdigit() and ch.isascii() and (
            index == 0 or (index == 1 and value[0] == "-")
        ):
            out.append(_hex_escape(ch))
        elif code >= 0x80 or ch in "-_" or (ch.isascii() and ch.isalnum()):
            out.append(ch)
        else:
            out.append("\\" + ch)
    return "".join(out)


def declarations_block(props: Mapping[str, str], indent: str = "  ") -> str:
    """Render *props* as ``<indent>prop: value;`` lines."""
    return "\n".join(f"{indent}{prop}: {value};" for prop, value in props.items())


def media_query(breakpoint: Breakpoint, config: CascadeConfig | None = None) -> str | None:
    """The ``@media`` prelude for *breakpoint*, or None for the base breakpoint."""
    config = config or CascadeConfig()
    if breakpoint is Breakpoint.TABLET:
        return f"@media (max-width: {config.tablet_max_width}px)"
    if breakpoint is Breakpoint.MOBILE:
        return f"@media (max-width: {config.mobile_max_width}px)"
    return None


def _rule(
    selector: str,
    bundle: StyleBundle,
    config: CascadeConfig,
    media: str | None = None,
) -> str | None:
    props = to_css_properties(bundle, config)
    if not props:
        return None
    if media is None:
        body = declarations_block(props, config.indent)
        return f"{selector} {{\n{body}\n}}"
    body = declarations_block(props, config.indent * 2)
    return f"{media} {{\n{config.indent}{selector} {{\n{body}\n{config.indent}}}\n}}"


def _state_rules(
    selector: str,
    states: Mapping[InteractionState, StyleBundle],
    config: CascadeConfig,
    media: str | None = None,
) -> list[str]:
    rules = []
    for state in InteractionState:
        bundle = states.get(state)
        if state is InteractionState.DEFAULT or bundle is None:
            continue
        rule = _rule(selector + PSEUDO_SELECTORS[state], bundle, config, media)
        if rule:
            rules.append(rule)
    return rules


def generate_rules(
    selector: str,
    styling: StyleBundle,
    variants: StyleVariants | None = None,
    config: CascadeConfig | None = None,
) -> list[str]:
    """All CSS rules for one selector, in cascade order."""
    config = config or CascadeConfig()
    variants = variants or StyleVariants()

    rules: list[str] = []
    base = _rule(selector, styling, config)
    if base:
        rules.append(base)
    rules.extend(_state_rules(selector, variants.states, config))

    for breakpoint in Breakpoint:
        media = media_query(breakpoint, config)
        if media is None:
            continue
        overrides = variants.breakpoints.get(breakpoint)
        if overrides is not None:
            rule = _rule(selector, overrides, config, media)
            if rule:
                rules.append(rule)
        rules.extend(
            _state_rules(
                selector, variants.breakpoint_states.get(breakpoint, {}), config, media
            )
        )
    return rules


def generate_element_css(element: StyledElement, config: CascadeConfig | None = None) -> str:
    """CSS text for one element, addressed by ``#<element_id>``.

    The element's custom CSS is appended with every ``%root%`` replaced by
    the element selector.
    """
    selector = f"#{escape_identifier(element.element_id)}"
    rules = generate_rules(selector, element.styling, element.variants, config)
    if element.custom_css.strip():
        rules.append(element.custom_css.replace(ROOT_PLACEHOLDER, selector))
    return "\n\n".join(rules)


def generate_class_css(definition: ClassDefinition, config: CascadeConfig | None = None) -> str:
    """CSS text for one class definition, addressed by ``.<name>``."""
    selector = f".{escape_identifier(definition.name)}"
    rules = generate_rules(selector, definition.styling, definition.variants, config)
    return "\n\n".join(rules)


def generate_stylesheet(
    registry: ClassRegistry | None,
    elements: Iterable[StyledElement] = (),
    config: CascadeConfig | None = None,
) -> str:
    """Full stylesheet: every class in registry order, then every element."""
    blocks: list[str] = []
    if registry is not None:
        blocks.extend(generate_class_css(d, config) for d in registry.list_all())
    blocks.extend(generate_element_css(e, config) for e in elements)
    text = "\n\n".join(block for block in blocks if block)
    return text + "\n" if text else ""
