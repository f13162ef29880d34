# topmark:header:start
#
#   project      : KvgKit
#   file         : constants.py
#   file_relpath : src/kvgkit/constants.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""KvgKit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    KVGKIT_VERSION: str = get_version("kvgkit")
except PackageNotFoundError:  # running from a source checkout
    KVGKIT_VERSION = "0.0.0"

# Name of the per-project config file and of the pyproject.toml table.
CONFIG_FILE_NAME: Final[str] = "kvgkit.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

# Packaged default configuration.
DEFAULT_TOML_CONFIG_PACKAGE: Final[str] = "kvgkit.config"
DEFAULT_TOML_CONFIG_NAME: Final[str] = "kvgkit-default.toml"

LOG_LEVEL_ENV_VAR: Final[str] = "KVGKIT_LOG_LEVEL"

# Namespace prefix shared by every KanjiVG identifier and custom attribute.
KVG_PREFIX: Final[str] = "kvg:"

STROKE_PATHS_PREFIX: Final[str] = "kvg:StrokePaths_"
STROKE_NUMBERS_PREFIX: Final[str] = "kvg:StrokeNumbers_"

GROUP_ID_MARKER: Final[str] = "-g"
PATH_ID_MARKER: Final[str] = "-s"

STROKE_PATHS_STYLE: Final[str] = (
    "fill:none;stroke:#000000;stroke-width:3;stroke-linecap:round;stroke-linejoin:round;"
)
STROKE_NUMBERS_STYLE: Final[str] = "font-size:8;fill:#808080"

SVG_NAMESPACE: Final[str] = "http://www.w3.org/2000/svg"
KVG_NAMESPACE: Final[str] = "http://kanjivg.tagaini.net"

# Literal value that turns a flag attribute on.
FLAG_TRUE: Final[str] = "true"
