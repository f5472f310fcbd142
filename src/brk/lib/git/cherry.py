# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Classify a branch's commits against a base branch with ``git cherry``.

``git cherry <base> <branch>`` prints one line per commit on *branch*::

    + 1a2b3c4...    commit whose patch is not in <base>
    - 5d6e7f8...    commit with an equivalent patch already in <base>

Each commit is then rendered with its one-line log summary.
"""

from dataclasses import dataclass
from enum import Enum

from .._util.ansi import gray, print_error, supports_color
from . import repo


class CherrySign(Enum):
    ONLY_IN_BRANCH = "+"
    ALREADY_IN_BASE = "-"


@dataclass(frozen=True)
class CherryEntry:
    sign: CherrySign
    commit: str


def parse_cherry_output(output: str) -> list[CherryEntry]:
    """Parse ``git cherry`` output, keeping the tool's order.

    Lines with fewer than two fields or an unknown sign are skipped.
    """
    entries: list[CherryEntry] = []
    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 2:
            continue
        try:
            sign = CherrySign(parts[0])
        except ValueError:
            continue
        entries.append(CherryEntry(sign, parts[1]))
    return entries


def render_entry(entry: CherryEntry, summary: str, base: str, color_enabled: bool) -> str:
    """Format one entry: ``[!base] summary`` or a dimmed ``[base] summary``."""
    if entry.sign is CherrySign.ONLY_IN_BRANCH:
        return f"[!{base}] {summary}"
    return gray(f"[{base}] {summary}", color_enabled)


def cherry_log(branch: str, base: str) -> None:
    """Print every commit of *branch*, marking those already applied to *base*.

    A commit whose summary cannot be fetched is reported and skipped.
    """
    result = repo.cherry(base, branch)
    if not result.ok:
        print_error(f"Error running git cherry: {result.error}")
        return

    entries = parse_cherry_output(result.output)
    if not entries:
        print(f"No unique commits found in branch '{branch}'.")
        return

    color_enabled = supports_color()
    print(f"Commits unique to '{branch}' compared to '{base}':")
    for entry in entries:
        log = repo.one_line_log(entry.commit)
        if not log.ok:
            print_error(f"Error fetching log for commit {entry.commit}: {log.error}")
            continue
        print(render_entry(entry, log.output.strip(), base, color_enabled))
