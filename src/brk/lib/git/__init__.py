# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""git execution (``runner``), read-only queries (``repo``) and ``cherry`` parsing."""
