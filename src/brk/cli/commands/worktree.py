# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Working tree commands: hide, pack, shove, status."""

import argparse

from ...lib.core.config import get_settings
from ...lib.git.runner import execute, run_sequence
from ...ui_utils.prompts import ask_yes_no
from ._base import Command, no_options


def cmd_hide(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    execute("git stash")


def cmd_pack(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Stage hunks interactively, then commit unless the user answers no."""
    staged = execute("git add -p")
    if not staged.ok and get_settings().stop_on_error:
        return
    if not ask_yes_no("Proceed with commit? [Y/n]: ", default=True, strict=False):
        return
    execute("git commit --verbose")


def cmd_shove(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    run_sequence(
        ["git add -p", "git commit --amend --no-edit"],
        stop_on_error=get_settings().stop_on_error,
    )


def cmd_status(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Show the short status, then offer the diff through the pager."""
    settings = get_settings()
    status = execute("git status --short --branch")
    if not status.ok and settings.stop_on_error:
        return
    if ask_yes_no("\nProceed with diff? [Y/n]: ", default=True):
        execute(f"git diff | {settings.pager}")


COMMANDS = (
    Command("hide", "Stash current changes", no_options, cmd_hide),
    Command("pack", "Propose changes to commit", no_options, cmd_pack),
    Command("shove", "Amend changes to the previous commit", no_options, cmd_shove),
    Command(
        "status",
        "List changes in color and propose a git diff in a pager",
        no_options,
        cmd_status,
    ),
)
