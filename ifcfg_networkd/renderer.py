# FILE: ./ifcfg_networkd/renderer.py
from __future__ import annotations

import errno
import os
import re
import tempfile
from pathlib import Path
from typing import List

from .errors import DirectoryCreationError, WriteError
from .models import InterfaceSpec, Mode

FILE_PREFIX = "60-ifcfg-"
FILE_SUFFIX = ".network"
FILE_MODE = 0o644

_UNSAFE = re.compile(r"[^A-Za-z0-9.-]")

_DHCP_COMMON = [
    "UseHostname=false",
    "UseDNS=true",
    "UseNTP=true",
]


def sanitize_name(interface: str) -> str:
    # one underscore per unsafe char, so length is preserved
    return _UNSAFE.sub("_", interface)


def network_file_path(interface: str, output_dir: str | Path, prefix: str = FILE_PREFIX) -> Path:
    return Path(output_dir) / f"{prefix}{sanitize_name(interface)}{FILE_SUFFIX}"


def _match_section(spec: InterfaceSpec) -> List[str]:
    lines = ["[Match]"]
    if spec.is_mac:
        lines += ["Name=*", f"MACAddress={spec.interface}"]
    else:
        lines.append(f"Name={spec.interface}")
    return lines


def _network_section(spec: InterfaceSpec) -> List[str]:
    lines = ["[Network]"]

    if spec.mode is Mode.DHCP:
        dhcp = spec.dhcp
        if dhcp.want_v4 and dhcp.want_v6:
            lines.append("DHCP=yes")
        elif dhcp.want_v4:
            lines.append("DHCP=ipv4")
        elif dhcp.want_v6:
            lines.append("DHCP=ipv6")
        return lines

    st = spec.static
    lines += [f"Address={a}" for a in st.addresses]
    lines += [f"Gateway={g}" for g in st.gateways]
    lines += [f"DNS={d}" for d in st.nameservers]
    if st.search_domains:
        lines.append(f"Domains={st.search_domains}")
    return lines


def _dhcp_sections(spec: InterfaceSpec) -> List[List[str]]:
    if spec.mode is not Mode.DHCP:
        return []

    sections: List[List[str]] = []
    if spec.dhcp.want_v4:
        v4 = ["[DHCPv4]"] + _DHCP_COMMON
        if spec.dhcp.rfc2132:
            v4.append("ClientIdentifier=mac")
        sections.append(v4)
    if spec.dhcp.want_v6:
        sections.append(["[DHCPv6]"] + _DHCP_COMMON)
    return sections


def render_network(spec: InterfaceSpec) -> str:
    sections = [_match_section(spec), _network_section(spec)] + _dhcp_sections(spec)
    return "\n\n".join("\n".join(s) for s in sections) + "\n"


def prepare_output_dir(path: str | Path, mode: int = 0o755) -> Path:
    out = Path(path)
    try:
        out.mkdir(mode=mode, parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(
            f"Could not create output directory {out}: {e.strerror or e}", errno=e.errno
        ) from e
    return out


def write_network_file(spec: InterfaceSpec, output_dir: str | Path, prefix: str = FILE_PREFIX) -> Path:
    filepath = network_file_path(spec.interface, output_dir, prefix)
    where = f"network file '{filepath}' for interface '{spec.interface}'"

    try:
        data = render_network(spec).encode("utf-8")
    except UnicodeError as e:
        raise WriteError(f"Failed to encode {where}: {e}", errno=errno.EILSEQ) from e

    # the target is only ever replaced by a complete file
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{filepath.name}.", suffix=".tmp", dir=filepath.parent
        )
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_name, FILE_MODE)
        os.replace(tmp_name, filepath)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(f"Failed to write {where}: {e.strerror or e}", errno=e.errno) from e

    print(f"Creating config: {filepath} for interface '{spec.interface}'")
    return filepath
