# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Make test_utils importable and keep every test away from the user's config and log."""

import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent))

from brk.lib.core.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("BRK_STATE_DIR", str(tmp_path / "state"))
    monkeypatch.setenv("BRK_CONFIG_FILE", str(tmp_path / "config.yml"))
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
