# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Terminal ANSI formatting helpers.

Core color functions (``supports_color``, ``color``, ``blue``, ``gray``,
``red``, ``print_error``) are defined in ``brk.lib._util.ansi`` so that
service-layer modules can use them without a cross-layer dependency.
This module re-exports them and adds higher-level helpers.
"""

from brk.lib._util.ansi import (  # noqa: F401  -- re-exports
    blue,
    color,
    gray,
    print_error,
    red,
    supports_color,
)


def bold(text: str, enabled: bool) -> str:
    """Return *text* in bold (ANSI 1) when *enabled*."""
    return color(text, "1", enabled)
