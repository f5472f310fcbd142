# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Running shell commands on behalf of the CLI.

Two flavours exist:

- ``execute`` runs a user-visible command through ``sh -c``.  The command line
  is echoed first and the child writes straight to our stdout/stderr, so
  interactive git commands (``add -p``, ``commit --verbose``, pagers) work.
- ``capture`` runs an argv list and collects its output for parsing.

Both return a ``ShellResult`` and never raise for a failing command; callers
decide whether to carry on.
"""

import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .._util.ansi import blue, print_error, supports_color
from .._util.logging_utils import _log_debug


@dataclass(frozen=True)
class ShellResult:
    """Outcome of one command.

    ``output`` is only filled by ``capture``; streamed commands leave it empty.
    ``error`` is ``None`` on success and a human-readable message otherwise.
    """

    command: str
    returncode: int
    output: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _exit_message(returncode: int) -> str:
    if returncode < 0:
        return f"terminated by signal {-returncode}"
    return f"exit status {returncode}"


def execute(command: str) -> ShellResult:
    """Echo *command*, run it through the shell and report a failure.

    The child inherits stdin/stdout/stderr.  On a non-zero exit or a spawn
    failure an ``Error executing command: ...`` line is printed to stderr.
    """
    print(f"{blue('Executing:', supports_color())} {command}", flush=True)
    _log_debug(f"execute: {command}")
    try:
        proc = subprocess.run(command, shell=True)  # noqa: S602
    except OSError as e:
        result = ShellResult(command, -1, error=str(e))
    else:
        error = None if proc.returncode == 0 else _exit_message(proc.returncode)
        result = ShellResult(command, proc.returncode, error=error)

    if result.error is not None:
        print_error(f"Error executing command: {result.error}")
        _log_debug(f"failed: {command} ({result.error})")
    return result


def run_sequence(commands: Iterable[str], stop_on_error: bool = False) -> list[ShellResult]:
    """Execute *commands* in order.

    Every command runs regardless of earlier failures unless *stop_on_error*
    is set, in which case the sequence ends after the first failed step.
    Returns the results of the commands that were run.
    """
    results: list[ShellResult] = []
    for command in commands:
        result = execute(command)
        results.append(result)
        if stop_on_error and not result.ok:
            _log_debug(f"sequence stopped after: {command}")
            break
    return results


def capture(args: Sequence[str]) -> ShellResult:
    """Run *args* without a shell and return its stdout.

    On failure the message is git's stderr when there is one, otherwise the
    exit status.
    """
    command = " ".join(args)
    try:
        proc = subprocess.run(list(args), capture_output=True, text=True)
    except OSError as e:
        _log_debug(f"capture failed: {command} ({e})")
        return ShellResult(command, -1, error=str(e))

    if proc.returncode != 0:
        message = (proc.stderr or "").strip() or _exit_message(proc.returncode)
        _log_debug(f"capture failed: {command} ({message})")
        return ShellResult(command, proc.returncode, output=proc.stdout or "", error=message)
    return ShellResult(command, 0, output=proc.stdout or "")
