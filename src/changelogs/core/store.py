"""
Flat-file project store.

Layout (inside the data directory)::

    projects.txt      project display names, one per line, in insertion order
    <slug>.txt        version records of one project (see core.models)
    temp.txt          transient rewrite target for projects.txt
    tempversions.txt  transient rewrite target for a project file

Appends go straight to the target file. Deletions rewrite the whole file
into a temp file which is closed and only then swapped over the original,
so an interrupted rewrite leaves the old file in place.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from changelogs.core.constants import (
    MAX_PROJECTS,
    PROJECT_FILE_SUFFIX,
    PROJECTS_FILENAME,
    REGISTRY_TEMP_FILENAME,
    VERSIONS_TEMP_FILENAME,
)
from changelogs.core.exceptions import ProjectFileError, RegistryError, StoreError
from changelogs.core.models import Changelog, Version, drop_version_lines, parse_changelog

logger = logging.getLogger(__name__)


def slugify(name: str) -> str:
    """
    Derive a project's filename from its display name.

    Everything after the first newline is dropped, spaces become hyphens,
    other characters are lower-cased, and ``.txt`` is appended. Names that
    differ only in case map to the same file.
    """
    head = name.split("\n", 1)[0]
    return head.replace(" ", "-").lower() + PROJECT_FILE_SUFFIX


class ProjectStore:
    """Registry and version files of all projects in one directory."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def registry_path(self) -> Path:
        return self._data_dir / PROJECTS_FILENAME

    def project_path(self, name: str) -> Path:
        return self._data_dir / slugify(name)

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def list_projects(self) -> list[str]:
        """
        Return the registry's display names in file order.

        An absent registry is created empty. At most ``MAX_PROJECTS - 1``
        names are returned; position ``i`` is selection index ``i + 1``.
        """
        path = self.registry_path
        if not path.exists():
            _touch(path, RegistryError)
            return []

        names: list[str] = []
        for line in _read_lines(path, RegistryError):
            if len(names) >= MAX_PROJECTS - 1:
                break
            names.append(line.rstrip("\r\n"))
        return names

    def add_project(self, name: str) -> None:
        """Append ``name`` as the last registry line."""
        line = name if name.endswith("\n") else name + "\n"
        _append(self.registry_path, [line], RegistryError)
        logger.info("Added project %r", name.rstrip("\n"))

    def delete_project(self, index: int) -> str | None:
        """
        Remove the project at 1-based ``index`` and its version file.

        Returns the removed display name, or ``None`` when ``index`` does not
        name a listed project (the registry is then left untouched).
        """
        projects = self.list_projects()
        if not 1 <= index <= len(projects):
            return None

        path = self.registry_path
        lines = _read_lines(path, RegistryError)
        removed = lines.pop(index - 1).rstrip("\r\n")

        self._rewrite(path, "".join(lines), REGISTRY_TEMP_FILENAME, RegistryError)
        self.project_path(removed).unlink(missing_ok=True)
        logger.info("Deleted project %r (%s)", removed, slugify(removed))
        return removed

    # ------------------------------------------------------------------
    # Versions
    # ------------------------------------------------------------------

    def load_changelog(self, name: str) -> Changelog:
        """Parse a project's version file, creating it empty if absent."""
        path = self.project_path(name)
        if not path.exists():
            _touch(path, ProjectFileError)
            return Changelog()
        return parse_changelog(_read_lines(path, ProjectFileError))

    def add_version(self, name: str, version: Version) -> None:
        """Append a version record to the end of a project's file."""
        _append(self.project_path(name), version.lines(), ProjectFileError)
        logger.info(
            "Added version %r to %r with %d note(s)", version.number, name, len(version.notes)
        )

    def delete_version(self, name: str, number: str) -> int:
        """
        Remove every version whose number line equals ``number``, notes included.

        Returns how many versions were removed. A missing project file is
        treated as empty.
        """
        path = self.project_path(name)
        if not path.exists():
            return 0

        kept, removed = drop_version_lines(_read_lines(path, ProjectFileError), number)
        self._rewrite(path, "".join(kept), VERSIONS_TEMP_FILENAME, ProjectFileError)
        logger.info("Deleted %d version(s) %r from %r", removed, number, name)
        return removed

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _rewrite(
        self, target: Path, content: str, temp_name: str, error: type[StoreError]
    ) -> None:
        tmp_path = self._data_dir / temp_name
        try:
            with open(tmp_path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.replace(tmp_path, target)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            logger.error("Rewrite of %s failed: %s", target, exc)
            raise error(f"Could not create {temp_name} to rewrite {target.name}: {exc}") from exc


def _read_lines(path: Path, error: type[StoreError]) -> list[str]:
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.readlines()
    except OSError as exc:
        logger.error("Read of %s failed: %s", path, exc)
        raise error(f"Could not open {path.name} for reading: {exc}") from exc


def _append(path: Path, lines: list[str], error: type[StoreError]) -> None:
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.writelines(lines)
    except OSError as exc:
        logger.error("Append to %s failed: %s", path, exc)
        raise error(f"Could not open {path.name} to append: {exc}") from exc


def _touch(path: Path, error: type[StoreError]) -> None:
    try:
        path.touch()
    except OSError as exc:
        raise error(f"Could not create {path.name}: {exc}") from exc
