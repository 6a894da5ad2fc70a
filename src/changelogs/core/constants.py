"""Changelogs constants: filesystem layout, limits, and screen texts."""

from __future__ import annotations

from enum import IntEnum

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2


# ---------------------------------------------------------------------------
# Filesystem layout
# ---------------------------------------------------------------------------

PROJECTS_FILENAME = "projects.txt"
REGISTRY_TEMP_FILENAME = "temp.txt"
VERSIONS_TEMP_FILENAME = "tempversions.txt"
PROJECT_FILE_SUFFIX = ".txt"
CONFIG_FILENAME = "changelogs.toml"

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

MAX_PROJECTS = 100  # registry lines beyond MAX_PROJECTS - 1 are never offered

# ---------------------------------------------------------------------------
# Wire format and screen layout
# ---------------------------------------------------------------------------

NOTE_PREFIX = "- "
APP_TITLE = "Changelogs"
RULE = "-" * 40
