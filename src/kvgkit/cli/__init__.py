# topmark:header:start
#
#   project      : KvgKit
#   file         : __init__.py
#   file_relpath : src/kvgkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Click-based command-line interface for KvgKit.

The entry point is `kvgkit.cli.main.cli`, installed as the ``kvgkit`` console
script and reachable with ``python -m kvgkit``.
"""
