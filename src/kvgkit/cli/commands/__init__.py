# topmark:header:start
#
#   project      : KvgKit
#   file         : __init__.py
#   file_relpath : src/kvgkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Subcommands of the KvgKit CLI, one module per command."""
