# topmark:header:start
#
#   project      : KvgKit
#   file         : __init__.py
#   file_relpath : src/kvgkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""Configuration and logging for KvgKit.

Import the submodules directly (`kvgkit.config.logging`, `kvgkit.config.model`,
`kvgkit.config.io`). This package intentionally re-exports nothing so that the
logging module can be imported from anywhere without pulling in the config
model and its dependencies.
"""
