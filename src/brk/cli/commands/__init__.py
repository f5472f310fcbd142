# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""CLI command modules.

Each module exposes ``COMMANDS``, a tuple of ``Command`` records.  A record
carries the command name, its help line, a ``configure(parser, settings)``
function declaring the command's own options, and a ``handler(args, parser)``
that runs it.  ``brk.cli.main`` builds the command table from these tuples.
"""
