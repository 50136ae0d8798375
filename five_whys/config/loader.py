"""Locate and read the TOML files that configure the service.

`config/default.toml` holds the base values. A second file named after
FIVE_WHYS_ENV (`development` unless set) is layered on top of it.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_VAR = "FIVE_WHYS_CONFIG_DIR"
ENVIRONMENT_VAR = "FIVE_WHYS_ENV"
DEFAULT_ENVIRONMENT = "development"


def find_config_dir() -> Path:
    """Return the directory holding the TOML files.

    FIVE_WHYS_CONFIG_DIR wins when set and must name an existing directory.
    Otherwise the working directory and its parents are searched for a
    `config/` directory.
    """
    override = os.environ.get(CONFIG_DIR_VAR)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"{CONFIG_DIR_VAR} is not a directory: {path}")
        return path

    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        candidate = directory / "config"
        if candidate.is_dir():
            return candidate
    raise FileNotFoundError(f"No config/ directory above {cwd}")


def read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Return `base` updated by `overlay`, recursing into tables.

    Neither argument is modified.
    """
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config() -> dict[str, Any]:
    """Read default.toml and layer the current environment's file over it.

    Raises:
        FileNotFoundError: No config directory or no default.toml in it
    """
    config_dir = find_config_dir()
    values = read_toml(config_dir / "default.toml")

    environment = os.environ.get(ENVIRONMENT_VAR, DEFAULT_ENVIRONMENT)
    overlay = config_dir / f"{environment}.toml"
    if overlay.is_file():
        values = merge(values, read_toml(overlay))
    return values
