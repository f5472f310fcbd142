# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Line-based interactive prompts."""

from collections.abc import Sequence

_YES = ("y", "yes")
_NO = ("n", "no")


def _read_answer(question: str) -> str:
    """Print *question* and return the stripped answer; end of input reads as ``""``."""
    try:
        return input(question).strip()
    except EOFError:
        return ""


def ask_yes_no(question: str, default: bool, strict: bool = True) -> bool:
    """Ask a yes/no *question* and return the answer.

    An empty answer selects *default*; ``y``/``yes`` and ``n``/``no`` are
    matched case-insensitively.  Any other answer means "no" when *strict*,
    otherwise it selects *default* (so only an explicit no rejects a
    default-yes question).
    """
    answer = _read_answer(question).lower()
    if not answer:
        return default
    if answer in _YES:
        return True
    if answer in _NO:
        return False
    return False if strict else default


def choose_from(question: str, count: int) -> int | None:
    """Read a 1-based choice among *count* items and return it 0-based.

    Returns ``None`` on an empty answer.  Raises ValueError for non-numeric
    or out-of-range input.
    """
    choice = _read_answer(question)
    if not choice:
        return None
    if not choice.isdigit():
        raise ValueError(f"not a number: {choice!r}")
    idx = int(choice) - 1
    if not 0 <= idx < count:
        raise ValueError(f"choice out of range: {choice}")
    return idx


def print_numbered(items: Sequence[str]) -> None:
    """Print ``[1] item`` lines."""
    for i, item in enumerate(items, 1):
        print(f"[{i}] {item}")
