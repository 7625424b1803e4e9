# FILE: ./ifcfg_networkd/cmdline.py
from __future__ import annotations

from pathlib import Path
from typing import List

from .errors import InputReadError

PREFIX = "ifcfg="


def tokenize(line: str) -> List[str]:
    """
    Split a boot-parameter line on unquoted spaces.

    A double quote toggles quoted mode; spaces inside quotes stay in the
    token. An unterminated quote runs to end of line. Quotes themselves are
    kept, unquoting is the caller's business.
    """
    tokens: List[str] = []
    in_quote = False
    start = 0

    for i, ch in enumerate(line):
        if ch == '"':
            in_quote = not in_quote
        elif ch == " " and not in_quote:
            if i > start:
                tokens.append(line[start:i])
            start = i + 1

    if start < len(line):
        tokens.append(line[start:])

    return tokens


def unquote(value: str) -> str:
    if value.startswith('"'):
        value = value[1:]
        if value.endswith('"'):
            value = value[:-1]
    return value


def extract_directives(line: str) -> List[str]:
    return [unquote(tok[len(PREFIX):]) for tok in tokenize(line) if tok.startswith(PREFIX)]


def read_cmdline(path: str | Path) -> str:
    cmdline_path = Path(path)
    try:
        with cmdline_path.open(encoding="utf-8", errors="replace") as f:
            line = f.readline()
    except OSError as e:
        raise InputReadError(
            f"Failed to read {cmdline_path}: {e.strerror or e}", errno=e.errno
        ) from e
    return line.rstrip("\n")
