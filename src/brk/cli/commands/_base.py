# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""The ``Command`` record shared by all command modules."""

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass

from ...ui_utils.terminal import print_error
from ...lib.core.config import Settings

Configure = Callable[[argparse.ArgumentParser, Settings], None]
Handler = Callable[[argparse.Namespace, argparse.ArgumentParser], None]


@dataclass(frozen=True)
class Command:
    name: str
    help: str
    configure: Configure
    handler: Handler


def no_options(parser: argparse.ArgumentParser, settings: Settings) -> None:
    """``configure`` for commands that take no options."""


def usage_error(parser: argparse.ArgumentParser, message: str) -> None:
    """Report a missing or invalid argument followed by the command's usage."""
    print_error(message)
    parser.print_usage(sys.stderr)
