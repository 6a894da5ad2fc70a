"""
Interactive changelog menu.

ChangelogApp drives one Session through the screens of the program. Each
iteration clears the screen, prints the banner and any pending message,
then runs the handler for the current state. A handler renders its screen,
reads input, talks to the ProjectStore, and returns the next state.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Callable

from changelogs import __version__
from changelogs.cli._terminal import Terminal, numbered_line, option_line
from changelogs.core.constants import NOTE_PREFIX, ExitCode
from changelogs.core.models import Version
from changelogs.core.session import Message, Session, State
from changelogs.core.store import ProjectStore

logger = logging.getLogger(__name__)

Handler = Callable[[Session], State]

_MENU_OPTIONS = [
    ("o", "Open project", State.OPEN_PROJECT),
    ("a", "Add project", State.ADD_PROJECT),
    ("d", "Delete project", State.DELETE_PROJECT),
    ("b", "About", State.ABOUT),
    ("x", "Exit", State.CLOSE),
]

_PROJECT_OPTIONS = [
    ("a", "Add version", State.ADD_VERSION),
    ("d", "Delete version", State.DELETE_VERSION),
    ("o", "Open other project", State.OPEN_PROJECT),
    ("m", "Main menu", State.MENU),
]


def is_noop_version_input(line: str) -> bool:
    """True for input the version screens ignore: blank, or not a digit or 'x'."""
    if not line or line[0].isspace():
        return True
    return line[0] not in string.digits and line[0].lower() != "x"


def is_cancel_input(line: str) -> bool:
    return line[:1].lower() == "x"


class ChangelogApp:
    """The changelog menu loop over one ProjectStore."""

    def __init__(
        self, store: ProjectStore, terminal: Terminal, session: Session | None = None
    ) -> None:
        self._store = store
        self._terminal = terminal
        self.session = session or Session()
        self._handlers: dict[State, Handler] = {
            State.MENU: self._menu,
            State.ABOUT: self._about,
            State.CLOSE: self._close,
            State.OPEN_PROJECT: self._open_project,
            State.ADD_PROJECT: self._add_project,
            State.DELETE_PROJECT: self._delete_project,
            State.ADD_VERSION: self._add_version,
            State.DELETE_VERSION: self._delete_version,
        }

    def run(self) -> ExitCode:
        """
        Run screens until the user quits.

        End of input quits like the Exit option. StoreError propagates to
        the caller.
        """
        session = self.session
        while True:
            self._terminal.clear()
            self._terminal.banner()
            if session.state is not State.OPEN_PROJECT:
                self._show_message(session)

            handler = self._handlers[session.state]
            try:
                next_state = handler(session)
            except EOFError:
                logger.debug("Input closed on %s screen", session.state.value)
                session.state = State.CLOSE
                self._close(session)
                return ExitCode.SUCCESS

            if session.is_terminal:
                return ExitCode.SUCCESS
            session.transition(next_state)

    # ------------------------------------------------------------------
    # Screen helpers
    # ------------------------------------------------------------------

    def _show_message(self, session: Session) -> None:
        message = session.take_message()
        if message.text:
            self._terminal.say()
            self._terminal.say(message.text)
            self._terminal.say()

    def _options(self, options: list[tuple[str, str, State]]) -> None:
        t = self._terminal
        for key, label, _ in options:
            t.say(option_line(f"({key})", label))
        t.say()
        t.rule()

    def _read_required(self, prompt: str) -> str:
        line = self._terminal.read_line(prompt)
        if line is None:
            raise EOFError(f"input closed at {prompt.strip()!r}")
        return line

    def _no_projects(self) -> None:
        t = self._terminal
        t.say()
        t.say("You have not created any projects yet.")
        t.say()
        t.say()
        t.say(option_line("(m)", "Main menu"))
        t.say()
        t.rule()
        t.choose("m")

    def _list_projects(self, title: str, projects: list[str]) -> int:
        """Show ``projects`` numbered from 1 and return the chosen index (0 = cancel)."""
        t = self._terminal
        t.title(title)
        for index, name in enumerate(projects, start=1):
            t.say(numbered_line(f"({index})", name))
        t.say()
        t.say(numbered_line("(0)", "Cancel"))
        t.say()
        t.rule()
        option = t.choose_index()
        if option > len(projects):
            return 0
        return option

    def _select_project(self) -> str | None:
        projects = self._store.list_projects()
        if not projects:
            self._no_projects()
            return None
        option = self._list_projects("Open project", projects)
        if option == 0:
            return None
        return projects[option - 1]

    def _list_versions(self, project: str) -> None:
        t = self._terminal
        changelog = self._store.load_changelog(project)

        for note in changelog.preamble:
            t.say(f"  {NOTE_PREFIX}{note}")
        for version in changelog.versions:
            t.say()
            t.say(version.number)
            for note in version.notes:
                t.say(f"  {NOTE_PREFIX}{note}")

        if not changelog.versions:
            t.say()
            t.say("There are no versions yet.")
        t.say()

    def _project_heading(self, project: str, title: str) -> None:
        self._terminal.say(f"Project: {project}")
        self._terminal.title(title)

    # ------------------------------------------------------------------
    # State handlers
    # ------------------------------------------------------------------

    def _menu(self, session: Session) -> State:
        session.project = None

        self._terminal.title("Main menu")
        self._options(_MENU_OPTIONS)

        choice = self._terminal.choose("oadbx")
        return next(state for key, _, state in _MENU_OPTIONS if key == choice)

    def _open_project(self, session: Session) -> State:
        t = self._terminal

        if session.project is None:
            session.project = self._select_project()
            if session.project is None:
                return State.MENU

        t.clear()
        t.banner()
        self._show_message(session)

        t.say(f"Project: {session.project}")
        t.rule()
        self._list_versions(session.project)
        t.rule()
        t.say()
        self._options(_PROJECT_OPTIONS)

        choice = t.choose("adom")
        if choice == "o":
            session.project = None
        return next(state for key, _, state in _PROJECT_OPTIONS if key == choice)

    def _add_project(self, session: Session) -> State:
        t = self._terminal
        t.title("New project")
        t.say(numbered_line("(0)", "Cancel"))
        t.say()
        t.rule()

        name = self._read_required("Enter project name: ")
        if not name or name[0].isspace():
            return State.ADD_PROJECT
        if name[0] == "0":
            return State.MENU

        self._store.add_project(name)
        session.notify(Message.PROJECT_ADDED)
        return State.MENU

    def _delete_project(self, session: Session) -> State:
        projects = self._store.list_projects()
        if not projects:
            self._no_projects()
            return State.MENU

        option = self._list_projects("Delete project", projects)
        if option == 0:
            return State.MENU

        self._store.delete_project(option)
        session.notify(Message.PROJECT_DELETED)
        return State.MENU

    def _add_version(self, session: Session) -> State:
        assert session.project is not None
        t = self._terminal
        self._project_heading(session.project, "Add version")
        t.say(numbered_line("(x)", "Cancel/End"))
        t.say()
        t.rule()

        number = self._read_required("Enter version number: ")
        if is_noop_version_input(number):
            return State.ADD_VERSION
        if is_cancel_input(number):
            return State.OPEN_PROJECT

        notes: list[str] = []
        while True:
            note = t.read_line("Enter note for this version: ")
            if note is None or is_cancel_input(note):
                break
            if note:
                notes.append(note)

        self._store.add_version(session.project, Version(number=number, notes=notes))
        session.notify(Message.VERSION_ADDED)
        return State.OPEN_PROJECT

    def _delete_version(self, session: Session) -> State:
        assert session.project is not None
        t = self._terminal
        self._project_heading(session.project, "Delete version")
        t.say(numbered_line("(x)", "Cancel"))
        t.say()
        t.rule()

        number = self._read_required("Enter version number: ")
        if is_noop_version_input(number):
            return State.DELETE_VERSION
        if is_cancel_input(number):
            return State.OPEN_PROJECT

        self._store.delete_version(session.project, number)
        session.notify(Message.VERSION_DELETED)
        return State.OPEN_PROJECT

    def _about(self, session: Session) -> State:
        t = self._terminal
        t.title("About")
        t.say("A simple command line program to document")
        t.say("all notable changes for a list of projects.")
        t.say(f"Version {__version__}.")
        t.say()
        t.rule()
        t.say()
        self._options([("m", "Main menu", State.MENU)])

        t.choose("m")
        return State.MENU

    def _close(self, session: Session) -> State:
        session.project = None
        self._terminal.say("Resources freed up.")
        self._terminal.say("Program terminated.")
        return State.CLOSE
