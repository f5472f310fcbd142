# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Keeping branches up to date: update, refresh, rehydrate."""

import argparse
from shlex import quote

from ...lib.core.config import Settings, get_settings
from ...lib.git.runner import execute, run_sequence
from ._base import Command
from ._completers import complete_branch_names, set_completer


def _add_branch_option(parser: argparse.ArgumentParser, default: str, help_text: str) -> None:
    _a = parser.add_argument(
        "-b", "--branch", default=default, help=f"{help_text} (default: %(default)s)"
    )
    set_completer(_a, complete_branch_names)


def _configure_update(parser: argparse.ArgumentParser, settings: Settings) -> None:
    _add_branch_option(parser, settings.branch, "Branch to update")
    parser.add_argument(
        "-r",
        "--remote",
        default=settings.remote,
        help="Remote to fetch from (default: %(default)s)",
    )


def cmd_update(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Jump to the branch, fetch the remote and rebase onto its copy of the branch."""
    branch, remote = quote(args.branch), quote(args.remote)
    run_sequence(
        [
            f"git checkout {branch}",
            f"git fetch {remote}",
            f"git rebase {remote}/{branch}",
        ],
        stop_on_error=get_settings().stop_on_error,
    )


def _configure_refresh(parser: argparse.ArgumentParser, settings: Settings) -> None:
    _add_branch_option(parser, settings.branch, "Branch to merge from")


def cmd_refresh(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    execute(f"git merge {quote(args.branch)}")


def _configure_rehydrate(parser: argparse.ArgumentParser, settings: Settings) -> None:
    _add_branch_option(parser, settings.branch, "Branch to rebase onto")


def cmd_rehydrate(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    execute(f"git rebase {quote(args.branch)}")


COMMANDS = (
    Command("update", "Jump to branch, fetch origin, and rebase", _configure_update, cmd_update),
    Command("refresh", "Merge branch into the current branch", _configure_refresh, cmd_refresh),
    Command("rehydrate", "Rebase on a specific branch", _configure_rehydrate, cmd_rehydrate),
)
