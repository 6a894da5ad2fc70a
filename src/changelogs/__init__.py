"""
Changelogs — a terminal program to document notable changes for a list of projects.

Each project keeps an ordered list of versions, and each version carries
free-text notes. Everything is stored as plain text in the data directory.

Package layout (src/changelogs/):
  core/       — config, logging, models, session state, flat-file store
  cli/        — Click entry point, terminal I/O, interactive menu
"""

__version__ = "1.1.0"
__all__ = ["__version__"]
