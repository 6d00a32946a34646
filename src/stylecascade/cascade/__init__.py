from stylecascade.cascade.context import Layer, Resolution, ResolveContext
from stylecascade.cascade.provenance import (
    ProvenanceEntry,
    ProvenanceMap,
    ProvenanceSource,
    Tier,
    provenance_to_dict,
)
from stylecascade.cascade.resolver import build_layers, merge_layers, resolve

__all__ = [
    "resolve",
    "build_layers",
    "merge_layers",
    "ResolveContext",
    "Resolution",
    "Layer",
    "ProvenanceEntry",
    "ProvenanceMap",
    "ProvenanceSource",
    "Tier",
    "provenance_to_dict",
]
