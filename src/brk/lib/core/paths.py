# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for config and state directories."""

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "brk"


def config_root() -> Path:
    """
    Base directory for configuration (config.yml).

    Priority:
      1. BRK_CONFIG_DIR
      2. platformdirs user config dir (~/.config/brk on Linux)
    """
    env = os.getenv("BRK_CONFIG_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_config_dir(APP_NAME))


def state_root() -> Path:
    """
    Writable state (the debug log).

    Priority:
      1. BRK_STATE_DIR
      2. platformdirs user data dir (~/.local/share/brk on Linux)
    """
    env = os.getenv("BRK_STATE_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_data_dir(APP_NAME))


def config_file_path() -> Path:
    """Config file path.

    ``BRK_CONFIG_FILE`` is returned as-is (even if missing, to make intent
    visible to the user); otherwise ``config_root()/config.yml``.
    """
    env_file = os.environ.get("BRK_CONFIG_FILE")
    if env_file:
        return Path(env_file).expanduser()
    return config_root() / "config.yml"
