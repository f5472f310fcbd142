# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""History inspection: cherry-log."""

import argparse

from ...ui_utils.terminal import print_error
from ...lib.core.config import Settings, get_settings
from ...lib.git.cherry import cherry_log
from ._base import Command
from ._completers import complete_branch_names, set_completer


def _configure_cherry_log(parser: argparse.ArgumentParser, settings: Settings) -> None:
    _a = parser.add_argument(
        "branch",
        nargs="?",
        default="",
        help=f"Branch whose commits are compared against {settings.base_branch}",
    )
    set_completer(_a, complete_branch_names)


def cmd_cherry_log(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if not args.branch:
        print_error("Usage: brk cherry-log <branch>")
        return
    cherry_log(args.branch, get_settings().base_branch)


COMMANDS = (
    Command(
        "cherry-log",
        "List status of the branch commits against the base branch",
        _configure_cherry_log,
        cmd_cherry_log,
    ),
)
