# FILE: ./ifcfg_networkd/main.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .cmdline import extract_directives, read_cmdline
from .errors import IfcfgError, MalformedDirective, WriteError, fail, warn
from .parser import parse_directive
from .renderer import prepare_output_dir, write_network_file
from .settings import load_settings


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ifcfg-networkd",
        description="Generate systemd-networkd .network files from ifcfg= boot parameters.",
    )
    p.add_argument(
        "cmdline",
        nargs="?",
        default=None,
        help="Boot parameter line to use instead of reading the cmdline file",
    )
    p.add_argument("--output-dir", default=None, help="Directory for generated .network files")
    p.add_argument("--cmdline-file", default=None, help="File whose first line holds the boot parameters")
    p.add_argument("--prefix", default=None, help="File name prefix for generated files")
    p.add_argument("--config", default=None, help="YAML settings file")
    return p


def process_directives(line: str, output_dir: Path, prefix: str) -> List[Path]:
    written: List[Path] = []

    for value in extract_directives(line):
        try:
            spec = parse_directive(value)
            if spec is None:
                continue
            written.append(write_network_file(spec, output_dir, prefix))
        except (MalformedDirective, WriteError) as e:
            warn(str(e))

    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except IfcfgError as e:
        fail(str(e), e.errno)

    if args.output_dir is not None:
        settings.output_dir = args.output_dir
    if args.cmdline_file is not None:
        settings.cmdline_path = args.cmdline_file
    if args.prefix is not None:
        settings.file_prefix = args.prefix

    try:
        output_dir = prepare_output_dir(settings.output_dir, settings.dir_mode)
        line = args.cmdline if args.cmdline is not None else read_cmdline(settings.cmdline_path)
    except IfcfgError as e:
        fail(str(e), e.errno)

    process_directives(line, output_dir, settings.file_prefix)
    return 0
