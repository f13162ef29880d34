# topmark:header:start
#
#   project      : KvgKit
#   file         : __main__.py
#   file_relpath : src/kvgkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Module entry point for running KvgKit via ``python -m kvgkit``.

Equivalent to the ``kvgkit`` console script; delegates to `kvgkit.cli.main.cli`.
"""

from __future__ import annotations

from kvgkit.cli.main import cli

if __name__ == "__main__":
    cli()
