# FILE: ./ifcfg_networkd/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml  # type: ignore

from .errors import SettingsError
from .renderer import FILE_PREFIX

CMDLINE_PATH = "/proc/cmdline"
OUTPUT_DIR = "/run/systemd/network"
DIR_MODE = 0o755

CONFIG_ENV = "IFCFG_NETWORKD_CONFIG"


@dataclass
class Settings:
    cmdline_path: str = CMDLINE_PATH
    output_dir: str = OUTPUT_DIR
    file_prefix: str = FILE_PREFIX
    dir_mode: int = DIR_MODE


def _dir_mode(value: Any, path: Path) -> int:
    # YAML 1.1 reads 0755 as an int already; "0o755"/"755" arrive as strings
    if isinstance(value, bool):
        raise SettingsError(f"Invalid dir_mode in {path}: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value, 8)
        except ValueError:
            pass
    raise SettingsError(f"Invalid dir_mode in {path}: {value!r}")


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise SettingsError(f"Settings file not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(f"Invalid settings file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")
    return data


def load_settings(path: Optional[str | Path] = None) -> Settings:
    """
    Built-in defaults, overlaid with a YAML file when one is named either by
    `path` or by $IFCFG_NETWORKD_CONFIG. Unknown keys are ignored.
    """
    settings = Settings()

    if path is None:
        path = os.environ.get(CONFIG_ENV) or None
    if path is None:
        return settings

    cfg_path = Path(path)
    data = _load_yaml(cfg_path)

    for key in ("cmdline_path", "output_dir", "file_prefix"):
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, str) or (key != "file_prefix" and not value):
            raise SettingsError(f"Invalid {key} in {cfg_path}: {value!r}")
        setattr(settings, key, value)

    if "dir_mode" in data:
        settings.dir_mode = _dir_mode(data["dir_mode"], cfg_path)

    return settings
