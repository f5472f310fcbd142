# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Per-process settings: built-in defaults overlaid by an optional YAML file."""

from dataclasses import dataclass, fields, replace
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import config_file_path


@dataclass(frozen=True)
class Settings:
    """Defaults shared by every command; never mutated after loading."""

    branch: str = "master"
    remote: str = "origin"
    base_branch: str = "master"
    pager: str = "bat --paging=always"
    recent_limit: int = 5
    stop_on_error: bool = False


DEFAULT_SETTINGS = Settings()

_FIELD_TYPES: dict[str, type] = {
    "branch": str,
    "remote": str,
    "base_branch": str,
    "pager": str,
    "recent_limit": int,
    "stop_on_error": bool,
}


def load_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping stored in *path*, or ``{}`` when the file is absent.

    Raises SystemExit when the file cannot be read or is not a YAML mapping.
    """
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise SystemExit(f"Cannot read config file {path}: {e}")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SystemExit(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def settings_from_mapping(data: dict[str, Any], source: Path | None = None) -> Settings:
    """Overlay the known keys of *data* on the defaults.

    Unknown keys are ignored.  A known key with a value of the wrong type
    raises SystemExit naming *source*.
    """
    where = f" in {source}" if source else ""
    overrides: dict[str, Any] = {}
    for field in fields(Settings):
        if field.name not in data:
            continue
        value = data[field.name]
        expected = _FIELD_TYPES[field.name]
        # bool is an int subclass; keep `recent_limit: true` out
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise SystemExit(
                f"Invalid value for '{field.name}'{where}: "
                f"expected {expected.__name__}, got {value!r}"
            )
        if expected is str and not value.strip():
            raise SystemExit(f"Invalid value for '{field.name}'{where}: must not be empty")
        if field.name == "recent_limit" and value < 1:
            raise SystemExit(f"Invalid value for 'recent_limit'{where}: must be at least 1")
        overrides[field.name] = value
    return replace(DEFAULT_SETTINGS, **overrides)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process."""
    path = config_file_path()
    return settings_from_mapping(load_config_file(path), source=path)
