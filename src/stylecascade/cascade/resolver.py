"""Cascade resolver: merges the tier stack into one effective bundle.

Layer order, lowest first:

    default base
    global base
    class bases (applied order)
    breakpoint:  global@bp, class@bp ...
    state:       global@state, global@bp@state, class@state, class@bp@state ...
    manual:      element base, element@bp, element@state, element@bp@state,
                 context manual override

Within each leaf path the highest layer holding a value wins.  The
element's own layers all report ``user`` provenance and sit above every
non-user layer, so a class hover overlay never beats a value the user set
directly on the element.
"""

from __future__ import annotations

from typing import Any, Iterable

from stylecascade.cascade.context import Layer, Resolution, ResolveContext
from stylecascade.cascade.provenance import ProvenanceEntry, ProvenanceMap, ProvenanceSource, Tier
from stylecascade.errors import UnknownClassReferenceError
from stylecascade.schema.catalog import bundle_leaf_paths, spec_at
from stylecascade.schema.defaults import DEFAULT_STYLING
from stylecascade.schema.fields import UNSET, FieldKind, flatten, unflatten
from stylecascade.schema.model import StyleBundle, StyledElement, StyleVariants

__all__ = ["build_layers", "merge_layers", "resolve"]


def _variant_layers(
    variants: StyleVariants,
    context: ResolveContext,
    source: ProvenanceSource,
    class_name: str | None = None,
) -> tuple[list[Layer], list[Layer]]:
    """Breakpoint and state layers contributed by one source."""
    breakpoint_layers: list[Layer] = []
    bp_bundle = variants.for_breakpoint(context.breakpoint)
    if bp_bundle is not None:
        breakpoint_layers.append(
            Layer(Tier.BREAKPOINT, source, bp_bundle, True, class_name)
        )
    state_layers = [
        Layer(Tier.STATE, source, bundle, scoped, class_name)
        for bundle, scoped in variants.for_state(context.state, context.breakpoint)
    ]
    return breakpoint_layers, state_layers


def build_layers(
    element: StyledElement, context: ResolveContext
) -> tuple[list[Layer], list[UnknownClassReferenceError]]:
    """Assemble the ordered tier stack for *element* in *context*.

    Unknown class names are skipped and returned alongside the layers.
    """
    missing: list[UnknownClassReferenceError] = []
    base: list[Layer] = [Layer(Tier.DEFAULT, ProvenanceSource.DEFAULT, DEFAULT_STYLING)]
    breakpoint_layers: list[Layer] = []
    state_layers: list[Layer] = []

    theme = context.global_theme
    if theme is not None:
        base.append(Layer(Tier.GLOBAL, ProvenanceSource.GLOBAL, theme.styling))
        bp, st = _variant_layers(theme.variants, context, ProvenanceSource.GLOBAL)
        breakpoint_layers.extend(bp)
        state_layers.extend(st)

    names = context.applied_class_names
    if names is None:
        names = element.applied_classes
    for index, name in enumerate(names):
        definition = context.registry.get(name) if context.registry is not None else None
        if definition is None:
            missing.append(UnknownClassReferenceError(name, index))
            continue
        base.append(
            Layer(
                Tier.CLASS,
                ProvenanceSource.CLASS,
                definition.styling,
                class_name=definition.name,
            )
        )
        bp, st = _variant_layers(
            definition.variants, context, ProvenanceSource.CLASS, class_name=definition.name
        )
        breakpoint_layers.extend(bp)
        state_layers.extend(st)

    manual: list[Layer] = [Layer(Tier.MANUAL, ProvenanceSource.USER, element.styling)]
    bp, st = _variant_layers(element.variants, context, ProvenanceSource.USER)
    manual.extend(bp)
    manual.extend(st)
    if context.manual_override is not None:
        manual.append(Layer(Tier.MANUAL, ProvenanceSource.USER, context.manual_override))

    return base + breakpoint_layers + state_layers + manual, missing


def _leaves(path: str) -> Iterable[str]:
    """Leaf paths covered by *path* (itself, or every leaf below an object)."""
    spec = spec_at(path)
    if spec is None or spec.kind is not FieldKind.OBJECT:
        return (path,)
    prefix = path + "."
    return tuple(p for p in bundle_leaf_paths() if p.startswith(prefix))


def merge_layers(
    layers: Iterable[Layer], *, responsive: bool = False
) -> tuple[StyleBundle, ProvenanceMap]:
    """Merge *layers* (lowest first) leaf by leaf.

    Object fields merge key by key, list fields are replaced whole by the
    highest layer defining them, and UNSET drops a layer's contribution for
    the paths it covers.  *responsive* enables the ``is_responsive`` flag,
    which only applies at non-base breakpoints.
    """
    winners: dict[str, tuple[Any, Layer]] = {}
    cleared: set[str] = set()
    responsive_paths: set[str] = set()

    for layer in layers:
        for path, value in flatten(layer.bundle).items():
            if value is UNSET:
                cleared.update(_leaves(path))
                continue
            winners[path] = (value, layer)
            cleared.discard(path)
            if responsive and layer.breakpoint_specific:
                responsive_paths.add(path)

    bundle = unflatten(StyleBundle, {path: value for path, (value, _) in winners.items()})
    provenance: ProvenanceMap = {
        path: ProvenanceEntry(
            source=layer.source,
            is_responsive=path in responsive_paths,
            tier=layer.tier,
            class_name=layer.class_name,
            cleared=path in cleared,
        )
        for path, (_, layer) in winners.items()
    }
    return bundle, provenance


def resolve(element: StyledElement, context: ResolveContext | None = None) -> Resolution:
    """Resolve *element* in *context* to its effective bundle and provenance.

    Never raises for unknown class references; they are returned on
    ``Resolution.missing_classes`` for the caller to report.
    """
    context = context or ResolveContext()
    layers, missing = build_layers(element, context)
    bundle, provenance = merge_layers(
        layers, responsive=not context.breakpoint.is_base
    )
    return Resolution(
        bundle=bundle,
        provenance=provenance,
        missing_classes=tuple(missing),
        layers=tuple(layers),
    )
