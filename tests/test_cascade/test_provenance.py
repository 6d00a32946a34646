from __future__ import annotations

import json

from stylecascade.cascade import (
    Layer,
    ProvenanceEntry,
    ProvenanceSource,
    ResolveContext,
    Tier,
    build_layers,
    merge_layers,
    provenance_to_dict,
    resolve,
)
from stylecascade.schema import (
    Breakpoint,
    GlobalTheme,
    InteractionState,
    StyledElement,
    StyleVariants,
)
from stylecascade.schema.codec import element_from_dict

from tests.test_cascade.conftest import color, margin, seed_class


class TestProvenanceEntry:
    def test_to_dict_minimal(self) -> None:
        entry = ProvenanceEntry(source=ProvenanceSource.DEFAULT)
        assert entry.to_dict() == {"source": "default", "isResponsive": False, "tier": "default"}

    def test_to_dict_class(self) -> None:
        entry = ProvenanceEntry(
            source=ProvenanceSource.CLASS,
            is_responsive=True,
            tier=Tier.BREAKPOINT,
            class_name="card",
            cleared=True,
        )
        assert entry.to_dict() == {
            "source": "class",
            "isResponsive": True,
            "tier": "breakpoint",
            "className": "card",
            "cleared": True,
        }

    def test_provenance_to_dict_sorted_and_json_safe(self) -> None:
        _, provenance = resolve(StyledElement(element_id="x", styling=color("red")))
        rendered = provenance_to_dict(provenance)
        assert list(rendered) == sorted(rendered)
        assert rendered["typography.color"]["source"] == "user"
        json.dumps(rendered)


# ---------------------------------------------------------------------------
# Layer assembly
# ---------------------------------------------------------------------------


class TestBuildLayers:
    def test_layer_order(self, registry) -> None:
        seed_class(
            registry,
            "a",
            margin(top="1px"),
            StyleVariants(
                breakpoints={Breakpoint.TABLET: margin(top="2px")},
                states={InteractionState.HOVER: margin(top="3px")},
                breakpoint_states={Breakpoint.TABLET: {InteractionState.HOVER: margin(top="4px")}},
            ),
        )
        theme = GlobalTheme(
            styling=color("black"),
            variants=StyleVariants(breakpoints={Breakpoint.TABLET: color("gray")}),
        )
        element = StyledElement(
            element_id="x",
            styling=color("red"),
            applied_classes=("a",),
            variants=StyleVariants(states={InteractionState.HOVER: color("pink")}),
        )
        context = ResolveContext(
            breakpoint=Breakpoint.TABLET,
            state=InteractionState.HOVER,
            global_theme=theme,
            registry=registry,
            manual_override=color("white"),
        )
        layers, missing = build_layers(element, context)
        assert missing == []
        assert [(layer.tier, layer.source, layer.breakpoint_specific) for layer in layers] == [
            (Tier.DEFAULT, ProvenanceSource.DEFAULT, False),
            (Tier.GLOBAL, ProvenanceSource.GLOBAL, False),
            (Tier.CLASS, ProvenanceSource.CLASS, False),
            (Tier.BREAKPOINT, ProvenanceSource.GLOBAL, True),
            (Tier.BREAKPOINT, ProvenanceSource.CLASS, True),
            (Tier.STATE, ProvenanceSource.CLASS, False),
            (Tier.STATE, ProvenanceSource.CLASS, True),
            (Tier.MANUAL, ProvenanceSource.USER, False),
            (Tier.STATE, ProvenanceSource.USER, False),
            (Tier.MANUAL, ProvenanceSource.USER, False),
        ]

    def test_states_only_breakpoint_adds_no_layer(self) -> None:
        element = element_from_dict({
            "elementId": "x",
            "variants": {"breakpoints": {"mobile": {"states": {"hover": {}}}}},
        })
        layers, _ = build_layers(element, ResolveContext(breakpoint=Breakpoint.MOBILE))
        assert [layer.tier for layer in layers] == [Tier.DEFAULT, Tier.MANUAL]

    def test_resolution_keeps_layers(self) -> None:
        result = resolve(StyledElement(element_id="x"))
        assert [layer.tier for layer in result.layers] == [Tier.DEFAULT, Tier.MANUAL]


class TestMergeLayers:
    def test_responsive_flag_needs_opt_in(self) -> None:
        layers = [Layer(Tier.BREAKPOINT, ProvenanceSource.USER, color("red"), True)]
        _, provenance = merge_layers(layers)
        assert provenance["typography.color"].is_responsive is False
        _, provenance = merge_layers(layers, responsive=True)
        assert provenance["typography.color"].is_responsive is True

    def test_empty_stack(self) -> None:
        bundle, provenance = merge_layers([])
        assert bundle.is_empty
        assert provenance == {}
