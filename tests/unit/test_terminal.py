"""Unit tests for changelogs.cli._terminal — prompt validation loops."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from changelogs.cli._terminal import (
    SELECTION_PROMPT,
    Terminal,
    numbered_line,
    option_line,
)


def _terminal(text: str) -> tuple[Terminal, io.StringIO]:
    out = io.StringIO()
    console = Console(file=out, width=80, highlight=False)
    return Terminal(console, stream=io.StringIO(text)), out


class TestReadLine:
    def test_strips_newline(self) -> None:
        t, out = _terminal("hello\n")
        assert t.read_line("Name: ") == "hello"
        assert "Name: " in out.getvalue()

    def test_blank_line_is_empty_string(self) -> None:
        t, _ = _terminal("\n")
        assert t.read_line("> ") == ""

    def test_end_of_input_is_none(self) -> None:
        t, _ = _terminal("")
        assert t.read_line("> ") is None

    def test_last_line_without_newline(self) -> None:
        t, _ = _terminal("tail")
        assert t.read_line("> ") == "tail"


class TestChoose:
    def test_first_valid_character_case_insensitive(self) -> None:
        t, _ = _terminal("O\n")
        assert t.choose("oadbx") == "o"

    def test_rejects_until_valid(self) -> None:
        t, out = _terminal("q\n\n  a\nxyz\n")
        assert t.choose("oadbx") == "x"
        assert out.getvalue().count(SELECTION_PROMPT) == 4

    def test_rest_of_line_discarded(self) -> None:
        t, _ = _terminal("abc\nd\n")
        assert t.choose("ad") == "a"
        assert t.choose("ad") == "d"

    def test_end_of_input_raises(self) -> None:
        t, _ = _terminal("z\n")
        with pytest.raises(EOFError):
            t.choose("m")


class TestChooseIndex:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [("2\n", 2), ("0\n", 0), ("  7\n", 7), ("3abc\n", 3), ("+4\n", 4)],
    )
    def test_parses_leading_integer(self, line: str, expected: int) -> None:
        t, _ = _terminal(line)
        assert t.choose_index() == expected

    def test_rejects_negative_and_garbage(self) -> None:
        t, out = _terminal("-1\nabc\n\n5\n")
        assert t.choose_index() == 5
        assert out.getvalue().count(SELECTION_PROMPT) == 4

    def test_end_of_input_raises(self) -> None:
        t, _ = _terminal("nope\n")
        with pytest.raises(EOFError):
            t.choose_index()


class TestLayout:
    def test_option_line_is_forty_columns(self) -> None:
        line = option_line("(o)", "Open project")
        assert len(line) == 40
        assert line.startswith("(o)")
        assert line.endswith("Open project")

    def test_numbered_line(self) -> None:
        assert numbered_line("(0)", "Cancel") == "(0) " + "Cancel".rjust(36)

    def test_say_does_not_interpret_markup(self) -> None:
        t, out = _terminal("")
        t.say("[bold]Project[/bold]")
        assert "[bold]Project[/bold]" in out.getvalue()

    def test_clear_is_noop_off_terminal(self) -> None:
        t, out = _terminal("")
        t.clear()
        assert out.getvalue() == ""
