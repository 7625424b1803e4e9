# FILE: ./ifcfg_networkd/parser.py
from __future__ import annotations

from typing import List, Optional

from .errors import MalformedDirective
from .models import DhcpOptions, InterfaceSpec, Mode, StaticOptions

# Fields past this many are dropped without notice.
MAX_FIELDS = 10

RFC2132 = "rfc2132"


def split_fields(body: str) -> List[str]:
    if not body.strip():
        return []
    return [f.strip() for f in body.split(",")[:MAX_FIELDS]]


def _tokens(field: str) -> List[str]:
    # space separated only, same as the consumer's list syntax
    return [t for t in field.split(" ") if t]


def _parse_dhcp(interface: str, fields: List[str]) -> InterfaceSpec:
    mode_str = fields[0]
    opts = DhcpOptions()

    if mode_str == "dhcp4":
        opts.want_v6 = False
    elif mode_str == "dhcp6":
        opts.want_v4 = False
    # "dhcp" and unknown dhcp* suffixes keep both families

    opts.rfc2132 = RFC2132 in fields[1:]

    return InterfaceSpec(interface=interface, mode=Mode.DHCP, dhcp=opts)


def _parse_static(interface: str, fields: List[str]) -> InterfaceSpec:
    # IP_LIST,GATEWAY_LIST,NAMESERVER_LIST,DOMAINSEARCH_LIST
    ips, gws, dns, domains = (fields + [""] * 4)[:4]

    opts = StaticOptions(
        addresses=_tokens(ips),
        gateways=_tokens(gws),
        nameservers=_tokens(dns),
        search_domains=domains or None,
    )
    return InterfaceSpec(interface=interface, mode=Mode.STATIC, static=opts)


def parse_directive(value: str) -> Optional[InterfaceSpec]:
    interface, sep, body = value.partition("=")
    if not sep:
        raise MalformedDirective(
            f"Malformed directive {value!r}. Expected 'ifcfg=<iface>=...'"
        )
    # an empty name would give "60-ifcfg-.network" with an empty Name= match
    if not interface:
        raise MalformedDirective(f"Missing interface name in directive {value!r}")

    fields = split_fields(body)
    if not fields:
        return None

    if fields[0].startswith("dhcp"):
        return _parse_dhcp(interface, fields)
    return _parse_static(interface, fields)
