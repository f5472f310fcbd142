# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Read-only git queries and parsers for their output."""

from dataclasses import dataclass

from .._util.ansi import print_error
from .runner import ShellResult, capture

NOT_A_REPOSITORY = (
    "Error: Not a git repository. Please run this command inside a git repository."
)

# Ref namespace of local branches
LOCAL_BRANCHES = "refs/heads/"

# Relative ages (as printed by %(committerdate:relative)) that mark a stale branch
STALE_AGE_UNITS = ("month", "year")


@dataclass(frozen=True)
class BranchAge:
    name: str
    age: str

    @property
    def is_stale(self) -> bool:
        return any(unit in self.age for unit in STALE_AGE_UNITS)


def is_inside_work_tree() -> bool:
    """Return True if the current directory is inside a git working tree."""
    result = capture(["git", "rev-parse", "--is-inside-work-tree"])
    return result.ok and result.output.strip() == "true"


def require_work_tree() -> None:
    """Raise SystemExit (status 1) unless we are inside a git working tree."""
    if not is_inside_work_tree():
        raise SystemExit(NOT_A_REPOSITORY)


def current_branch() -> str | None:
    """Return the checked-out branch name.

    Returns ``None`` on a detached HEAD or when git fails; the latter is
    reported on stderr.
    """
    result = capture(["git", "branch", "--show-current"])
    if not result.ok:
        print_error(f"Error getting current branch: {result.error}")
        return None
    return result.output.strip() or None


def local_branch_names() -> list[str]:
    """Return local branch names, or ``[]`` if git fails (used for completion)."""
    result = capture(["git", "for-each-ref", "--format=%(refname:short)", LOCAL_BRANCHES])
    if not result.ok:
        return []
    return parse_branch_names(result.output)


def recent_branches() -> ShellResult:
    """List local branches, most recently committed-to first."""
    return capture(
        [
            "git",
            "for-each-ref",
            "--sort=-committerdate",
            "--format=%(refname:short)",
            LOCAL_BRANCHES,
        ]
    )


def branch_ages() -> ShellResult:
    """List local branches with the relative date of their last commit."""
    return capture(
        [
            "git",
            "for-each-ref",
            "--format=%(refname:short) %(committerdate:relative)",
            LOCAL_BRANCHES,
        ]
    )


def cherry(base: str, branch: str) -> ShellResult:
    """Compare *branch* against *base* by patch equivalence (``git cherry``)."""
    return capture(["git", "cherry", base, branch])


def one_line_log(commit: str) -> ShellResult:
    """Return the ``git log --oneline`` summary of a single commit."""
    return capture(["git", "log", "--oneline", "-n", "1", commit])


def _is_detached_head(line: str) -> bool:
    # `git branch` lists e.g. "(HEAD detached at 776142b)" next to real branches
    return line.lstrip().startswith("(")


def parse_branch_names(output: str, limit: int | None = None) -> list[str]:
    """Split one-branch-per-line *output*, dropping blank lines and detached-HEAD entries.

    When *limit* is given only the first *limit* names are returned.
    """
    names = [
        line.strip()
        for line in output.splitlines()
        if line.strip() and not _is_detached_head(line)
    ]
    if limit is not None:
        names = names[:limit]
    return names


def parse_branch_ages(output: str) -> list[BranchAge]:
    """Parse ``<branch> <relative date>`` lines.

    Lines without a date and detached-HEAD entries are skipped.
    """
    ages: list[BranchAge] = []
    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 2 or _is_detached_head(line):
            continue
        ages.append(BranchAge(parts[0], " ".join(parts[1:])))
    return ages
