"""
Version records and their line-oriented wire format.

A project file is a sequence of version records::

    1.1 (2020-05-02)
    - Fixed crash on empty input
    1.0
    - Initial release

A line beginning with ``-`` is a note of the version above it; any other
non-blank line starts a new version. Blank lines carry no meaning.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from changelogs.core.constants import NOTE_PREFIX


@dataclass
class Version:
    number: str
    notes: list[str] = field(default_factory=list)

    def lines(self) -> list[str]:
        """Render this version as newline-terminated file lines."""
        return [f"{self.number}\n"] + [f"{NOTE_PREFIX}{note}\n" for note in self.notes]


@dataclass
class Changelog:
    versions: list[Version] = field(default_factory=list)
    # Notes that appear before the first version line
    preamble: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.versions)


def _note_text(line: str) -> str:
    if line.startswith(NOTE_PREFIX):
        return line[len(NOTE_PREFIX) :]
    return line[1:]


def parse_changelog(lines: Iterable[str]) -> Changelog:
    changelog = Changelog()
    current: Version | None = None

    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            continue
        if line.startswith("-"):
            if current is None:
                changelog.preamble.append(_note_text(line))
            else:
                current.notes.append(_note_text(line))
        else:
            current = Version(number=line)
            changelog.versions.append(current)

    return changelog


def drop_version_lines(lines: Iterable[str], number: str) -> tuple[list[str], int]:
    """
    Filter raw file lines, dropping every version line equal to ``number``.

    The ``"- "`` note lines directly below a dropped version go with it.
    Every other line is kept exactly as read, line ending included.
    Returns the kept lines and how many versions were dropped.
    """
    kept: list[str] = []
    removed = 0
    skipping = False

    for line in lines:
        if line.rstrip("\r\n") == number:
            removed += 1
            skipping = True
            continue
        if skipping and line.startswith(NOTE_PREFIX):
            continue
        skipping = False
        kept.append(line)

    return kept, removed
