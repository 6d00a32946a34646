"""Provenance model: which tier supplied each resolved leaf."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ProvenanceSource(StrEnum):
    """Tier category reported to the editor."""

    DEFAULT = "default"
    GLOBAL = "global"
    CLASS = "class"
    USER = "user"


class Tier(StrEnum):
    """The cascade tier a layer belongs to."""

    DEFAULT = "default"
    GLOBAL = "global"
    CLASS = "class"
    BREAKPOINT = "breakpoint"
    STATE = "state"
    MANUAL = "manual"


@dataclass(frozen=True)
class ProvenanceEntry:
    """Where a resolved leaf value came from.

    Attributes:
        source: Winning tier category (breakpoint and state layers report the
            category they belong to).
        is_responsive: A breakpoint-specific layer defined this exact path at
            a non-base breakpoint, whichever layer ultimately won.
        tier: The exact tier of the winning layer.
        class_name: Name of the winning class, for class layers.
        cleared: A layer above the winner wrote UNSET for this path.
    """

    source: ProvenanceSource
    is_responsive: bool = False
    tier: Tier = Tier.DEFAULT
    class_name: str | None = None
    cleared: bool = False

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "source": self.source.value,
            "isResponsive": self.is_responsive,
            "tier": self.tier.value,
        }
        if self.class_name is not None:
            out["className"] = self.class_name
        if self.cleared:
            out["cleared"] = True
        return out


ProvenanceMap = dict[str, ProvenanceEntry]


def provenance_to_dict(provenance: ProvenanceMap) -> dict[str, dict[str, Any]]:
    """Render a provenance map as ``{path: {"source", "isResponsive", ...}}``."""
    return {path: entry.to_dict() for path, entry in sorted(provenance.items())}
