"""Resolution inputs and outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from stylecascade.cascade.provenance import ProvenanceMap, ProvenanceSource, Tier
from stylecascade.errors import UnknownClassReferenceError
from stylecascade.schema.enums import Breakpoint, InteractionState
from stylecascade.schema.model import GlobalTheme, StyleBundle

if TYPE_CHECKING:
    from stylecascade.registry import ClassRegistry


@dataclass(frozen=True)
class ResolveContext:
    """The active editing context for one resolution.

    ``applied_class_names`` of None means "use the element's own list".
    """

    breakpoint: Breakpoint = Breakpoint.DESKTOP
    state: InteractionState = InteractionState.DEFAULT
    applied_class_names: tuple[str, ...] | None = None
    global_theme: GlobalTheme | None = None
    manual_override: StyleBundle | None = None
    registry: ClassRegistry | None = None


@dataclass(frozen=True)
class Layer:
    """One partial bundle in the tier stack."""

    tier: Tier
    source: ProvenanceSource
    bundle: StyleBundle
    breakpoint_specific: bool = False
    class_name: str | None = None


@dataclass(frozen=True)
class Resolution:
    """Effective bundle plus provenance; unpacks as ``(bundle, provenance)``."""

    bundle: StyleBundle
    provenance: ProvenanceMap
    missing_classes: tuple[UnknownClassReferenceError, ...] = ()
    layers: tuple[Layer, ...] = field(default=(), repr=False)

    def __iter__(self) -> Iterator[object]:
        yield self.bundle
        yield self.provenance
