# FILE: ./ifcfg_networkd/errors.py
from __future__ import annotations

import errno as _errno
import sys
from typing import NoReturn, Optional

TAG = "[ifcfg-networkd]"


class IfcfgError(RuntimeError):
    def __init__(self, msg: str, *, errno: Optional[int] = None) -> None:
        super().__init__(msg)
        self.errno = errno


class MalformedDirective(IfcfgError):
    def __init__(self, msg: str) -> None:
        super().__init__(msg, errno=_errno.EINVAL)


class WriteError(IfcfgError):
    pass


class DirectoryCreationError(IfcfgError):
    pass


class InputReadError(IfcfgError):
    pass


class SettingsError(IfcfgError):
    pass


def warn(msg: str) -> None:
    print(f"{TAG} WARNING: {msg}", file=sys.stderr)


def fail(msg: str, code: Optional[int] = None) -> NoReturn:
    print(f"{TAG} ERROR: {msg}", file=sys.stderr)
    sys.exit(code or 1)
