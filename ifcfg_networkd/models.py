# FILE: ./ifcfg_networkd/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Mode(str, Enum):
    DHCP = "dhcp"
    STATIC = "static"


@dataclass
class DhcpOptions:
    want_v4: bool = True
    want_v6: bool = True
    rfc2132: bool = False  # ClientIdentifier=mac


@dataclass
class StaticOptions:
    addresses: List[str] = field(default_factory=list)
    gateways: List[str] = field(default_factory=list)
    nameservers: List[str] = field(default_factory=list)
    search_domains: Optional[str] = None


@dataclass
class InterfaceSpec:
    interface: str
    mode: Mode
    dhcp: Optional[DhcpOptions] = None
    static: Optional[StaticOptions] = None

    def __post_init__(self) -> None:
        if self.mode is Mode.DHCP and (self.dhcp is None or self.static is not None):
            raise ValueError(f"DHCP spec for {self.interface!r} must carry only DHCP options")
        if self.mode is Mode.STATIC and (self.static is None or self.dhcp is not None):
            raise ValueError(f"static spec for {self.interface!r} must carry only static options")

    @property
    def is_mac(self) -> bool:
        # Heuristic kept as-is: any ':' means a hardware address.
        return ":" in self.interface
