"""
Menu session state machine.

State diagram::

    MENU ─o─▶ OPEN_PROJECT ─a─▶ ADD_VERSION ────┐
      │         │  ▲  │                          │
      │         │  │  └─d─▶ DELETE_VERSION ──────┤
      │         │  └─────────────────────────────┘
      │         └─m─▶ MENU
      ├─a─▶ ADD_PROJECT ──▶ MENU
      ├─d─▶ DELETE_PROJECT ──▶ MENU
      ├─b─▶ ABOUT ──▶ MENU
      └─x─▶ CLOSE (terminal)

Every non-terminal state may also re-enter itself: that is how a screen
re-prompts after a no-op input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum

from changelogs.core.exceptions import InvalidTransitionError


class State(StrEnum):
    MENU = "menu"
    ABOUT = "about"
    CLOSE = "close"
    OPEN_PROJECT = "open_project"
    ADD_PROJECT = "add_project"
    DELETE_PROJECT = "delete_project"
    ADD_VERSION = "add_version"
    DELETE_VERSION = "delete_version"


class Message(Enum):
    """One-shot status messages, shown once on the next screen."""

    NONE = ""
    PROJECT_ADDED = "Project added."
    PROJECT_DELETED = "Project deleted."
    VERSION_ADDED = "Version added."
    VERSION_DELETED = "Version deleted."

    @property
    def text(self) -> str:
        return self.value


TERMINAL_STATES: frozenset[State] = frozenset({State.CLOSE})

VALID_TRANSITIONS: dict[State, frozenset[State]] = {
    State.MENU: frozenset(
        {
            State.MENU,
            State.OPEN_PROJECT,
            State.ADD_PROJECT,
            State.DELETE_PROJECT,
            State.ABOUT,
            State.CLOSE,
        }
    ),
    State.ABOUT: frozenset({State.ABOUT, State.MENU}),
    State.OPEN_PROJECT: frozenset(
        {State.OPEN_PROJECT, State.MENU, State.ADD_VERSION, State.DELETE_VERSION}
    ),
    State.ADD_PROJECT: frozenset({State.ADD_PROJECT, State.MENU}),
    State.DELETE_PROJECT: frozenset({State.DELETE_PROJECT, State.MENU}),
    State.ADD_VERSION: frozenset({State.ADD_VERSION, State.OPEN_PROJECT}),
    State.DELETE_VERSION: frozenset({State.DELETE_VERSION, State.OPEN_PROJECT}),
    State.CLOSE: frozenset(),
}


@dataclass
class Session:
    """Everything the menu screens share between iterations."""

    state: State = State.MENU
    project: str | None = None
    message: Message = Message.NONE

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    def transition(self, new_state: State) -> None:
        """
        Move to ``new_state``.

        Raises:
            InvalidTransitionError: if the edge is not in VALID_TRANSITIONS.
        """
        if new_state not in VALID_TRANSITIONS[self.state]:
            raise InvalidTransitionError(
                f"Invalid transition {self.state.value} → {new_state.value}"
            )
        self.state = new_state

    def notify(self, message: Message) -> None:
        self.message = message

    def take_message(self) -> Message:
        """Return the pending message and clear it."""
        message, self.message = self.message, Message.NONE
        return message
