# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Branch management commands: split, push, mv, cleanup, recent."""

import argparse
from shlex import quote

from ...lib.core.config import Settings, get_settings
from ...lib.git.repo import (
    branch_ages,
    current_branch,
    parse_branch_ages,
    parse_branch_names,
    recent_branches,
)
from ...lib.git.runner import execute
from ...ui_utils.prompts import ask_yes_no, choose_from, print_numbered
from ...ui_utils.terminal import bold, print_error, supports_color
from ._base import Command, no_options, usage_error
from ._completers import complete_branch_names, set_completer


def _configure_split(parser: argparse.ArgumentParser, settings: Settings) -> None:
    parser.add_argument("-n", "--name", default="", help="Name of the new branch")


def cmd_split(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if not args.name:
        usage_error(parser, "Error: Branch name is required.")
        return
    execute(f"git checkout -b {quote(args.name)}")


def _configure_push(parser: argparse.ArgumentParser, settings: Settings) -> None:
    _a = parser.add_argument(
        "-b", "--branch", default=None, help="Branch to push (default: the current branch)"
    )
    set_completer(_a, complete_branch_names)
    parser.add_argument(
        "-r", "--remote", default=settings.remote, help="Remote to push to (default: %(default)s)"
    )


def cmd_push(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    branch = args.branch or current_branch()
    if not branch:
        usage_error(parser, "Error: Could not determine the current branch; pass --branch.")
        return
    execute(f"git push {quote(args.remote)} {quote(branch)}")


def _configure_mv(parser: argparse.ArgumentParser, settings: Settings) -> None:
    _a = parser.add_argument(
        "-n", "--name", default=None, help="Current branch name (defaults to the current branch)"
    )
    set_completer(_a, complete_branch_names)
    parser.add_argument("-N", "--new-name", dest="new_name", default=None, help="New branch name")
    _a = parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help="NEW_NAME, or OLD_NAME NEW_NAME, when the options are not used",
    )
    set_completer(_a, complete_branch_names)


def resolve_rename(
    name: str | None, new_name: str | None, positional: list[str]
) -> tuple[str | None, str | None]:
    """Work out ``(old, new)`` for ``mv`` from options and positionals.

    A sole positional is the new name.  Two positionals are old and new name
    when neither option was given.  A missing old name falls back to the
    current branch.  Raises ValueError naming any positional left unused.
    """
    allowed = 0 if new_name else 1 if name else 2
    if len(positional) > allowed:
        raise ValueError(" ".join(positional[allowed:]))
    if not new_name:
        if len(positional) == 1:
            new_name = positional[0]
        elif len(positional) == 2:
            name, new_name = positional
    if not name:
        name = current_branch()
    return name, new_name


def cmd_mv(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    try:
        old_name, new_name = resolve_rename(args.name, args.new_name, args.names)
    except ValueError as e:
        usage_error(parser, f"Error: Unexpected branch name(s): {e}")
        return
    if not new_name and old_name:
        usage_error(parser, "Error: New branch name is required.")
        return
    if not old_name or not new_name:
        usage_error(parser, "Error: Both old and new branch names are required.")
        return
    execute(f"git branch -m {quote(old_name)} {quote(new_name)}")


def cmd_cleanup(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Offer to delete every branch whose last commit is months or years old."""
    result = branch_ages()
    if not result.ok:
        print_error(f"Error getting branch list: {result.error}")
        return

    stale = [b for b in parse_branch_ages(result.output) if b.is_stale]
    if not stale:
        print("No branches older than a month.")
        return

    for branch in stale:
        if ask_yes_no(f"Branch: {branch.name}, Age: {branch.age}. Delete? [y/N] ", default=False):
            # -d refuses unmerged branches
            execute(f"git branch -d {quote(branch.name)}")


def cmd_recent(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Pick one of the most recently committed-to branches and check it out."""
    result = recent_branches()
    if not result.ok:
        print_error(f"Error fetching recent branches: {result.error}")
        return

    branches = parse_branch_names(result.output, limit=get_settings().recent_limit)
    if not branches:
        print("No recent branches found.")
        return

    print(bold("Recent branches:", supports_color()))
    print_numbered(branches)
    try:
        idx = choose_from(
            "Enter the number of the branch to switch to (or press Enter to exit): ",
            len(branches),
        )
    except ValueError:
        print("Invalid selection. Exiting.")
        return
    if idx is None:
        print("No branch selected. Exiting.")
        return

    execute(f"git checkout {quote(branches[idx])}")


COMMANDS = (
    Command("split", "Create a new branch", _configure_split, cmd_split),
    Command("push", "Push to remote", _configure_push, cmd_push),
    Command("mv", "Rename branch", _configure_mv, cmd_mv),
    Command("cleanup", "Cleanup branches older than 1 month", no_options, cmd_cleanup),
    Command("recent", "Show the most recent branches and switch to one", no_options, cmd_recent),
)
