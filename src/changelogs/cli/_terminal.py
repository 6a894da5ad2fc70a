"""Terminal I/O for the interactive menu: screen layout and validated prompts."""

from __future__ import annotations

import re
from typing import TextIO

from rich.console import Console

from changelogs.core.constants import APP_TITLE, RULE

SELECTION_PROMPT = "Enter your selection: "

_INDEX_RE = re.compile(r"\s*([+-]?\d+)")


def option_line(key: str, label: str) -> str:
    """Format a menu entry: key left, label right, 40 columns wide."""
    return f"{key:<5} {label:>34}"


def numbered_line(key: str, label: str) -> str:
    """Format a numbered entry such as '(3) My App' or '(0) Cancel'."""
    return f"{key} {label:>36}"


class Terminal:
    """
    Line-oriented terminal on top of a rich Console.

    ``stream`` replaces standard input when given (tests feed a StringIO).
    """

    def __init__(
        self,
        console: Console,
        stream: TextIO | None = None,
        clear_screen: bool = True,
    ) -> None:
        self._console = console
        self._stream = stream
        self._clear_screen = clear_screen

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def clear(self) -> None:
        if self._clear_screen and self._console.is_terminal:
            self._console.clear()

    def say(self, text: str = "", end: str = "\n") -> None:
        # User-entered names and notes may contain [brackets]; never parse markup.
        self._console.print(
            text, markup=False, emoji=False, highlight=False, soft_wrap=True, end=end
        )

    def rule(self) -> None:
        self.say(RULE)

    def banner(self) -> None:
        self.say(APP_TITLE)
        self.rule()

    def title(self, text: str) -> None:
        self.say(text)
        self.rule()
        self.say()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def read_line(self, prompt: str) -> str | None:
        """
        Print ``prompt`` and read one line without its newline.

        Returns ``None`` at end of input.
        """
        if self._stream is not None:
            raw = self._console.input(prompt, markup=False, emoji=False, stream=self._stream)
            if not raw:
                return None
            return raw.rstrip("\r\n")
        try:
            return self._console.input(prompt, markup=False, emoji=False)
        except EOFError:
            return None

    def choose(self, options: str) -> str:
        """
        Re-prompt until a line starts with one of ``options`` (case-insensitive).

        Only the first character counts; the rest of the line is discarded.

        Raises:
            EOFError: if input ends before a valid choice is read.
        """
        while True:
            line = self.read_line(SELECTION_PROMPT)
            if line is None:
                raise EOFError("input closed at selection prompt")
            if line and line[0].lower() in options.lower():
                return line[0].lower()

    def choose_index(self) -> int:
        """
        Re-prompt until a line starts with a non-negative integer.

        Raises:
            EOFError: if input ends before a valid number is read.
        """
        while True:
            line = self.read_line(SELECTION_PROMPT)
            if line is None:
                raise EOFError("input closed at selection prompt")
            match = _INDEX_RE.match(line)
            if match and int(match.group(1)) >= 0:
                return int(match.group(1))
