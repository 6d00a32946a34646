from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CascadeConfig:
    tablet_max_width: int = 992
    mobile_max_width: int = 768
    backdrop_vendor_property: str = "-webkit-backdrop-filter"
    indent: str = "  "
    host: str = "127.0.0.1"
    port: int = 5000
