#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import sys
from collections.abc import Mapping, Sequence
from types import MappingProxyType

import argcomplete

from ..lib.core.config import Settings, get_settings
from ..lib.core.version import format_version_string, get_version_info
from ..lib.git.repo import require_work_tree
from .commands import branch, history, sync, worktree
from .commands._base import Command

COMMANDS: Mapping[str, Command] = MappingProxyType(
    {
        cmd.name: cmd
        for cmd in (*sync.COMMANDS, *branch.COMMANDS, *history.COMMANDS, *worktree.COMMANDS)
    }
)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the top-level parser with one sub-parser per command."""
    version, revision = get_version_info()

    parser = argparse.ArgumentParser(
        prog="brk",
        description="brk – shortcuts for everyday git branch workflows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='Use "brk <command> --help" for more information on a specific command.',
    )
    parser.add_argument(
        "--version", action="version", version=f"brk {format_version_string(version, revision)}"
    )
    sub = parser.add_subparsers(dest="cmd", title="commands", metavar="<command>")

    for cmd in COMMANDS.values():
        p = sub.add_parser(cmd.name, help=cmd.help, description=cmd.help)
        cmd.configure(p, settings)
        p.set_defaults(command=cmd, parser=p)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    name = argv[0] if argv else ""
    # The work-tree check precedes loading the config file
    if name and not name.startswith("-"):
        require_work_tree()

    parser = build_parser(get_settings())
    argcomplete.autocomplete(parser)

    if not name:
        parser.print_help()
        return 0

    if name.startswith("-"):
        # --help / --version exit from here; anything else is an argparse error
        parser.parse_args(argv)
        parser.print_help()
        return 0

    if name not in COMMANDS:
        print(f"Unknown command: {name}")
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    try:
        args.command.handler(args, args.parser)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
