# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Shared argcomplete completers and helpers for CLI commands."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from typing import Any

from ...lib.git.repo import local_branch_names


def complete_branch_names(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:
    """Return local branch names matching *prefix* for argcomplete."""
    return [name for name in local_branch_names() if name.startswith(prefix)]


def set_completer(action: argparse.Action, fn: Callable[..., Any]) -> None:
    """Attach an argcomplete completer to *action*."""
    action.completer = fn  # type: ignore[attr-defined]
