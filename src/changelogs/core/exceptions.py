"""Changelogs exception hierarchy."""

from __future__ import annotations


class ChangelogsError(Exception):
    """Base exception for all Changelogs errors."""


class ConfigError(ChangelogsError):
    """Raised when the configuration is invalid or cannot be read."""


class StoreError(ChangelogsError):
    """Raised when a data file cannot be opened, written, or replaced."""


class RegistryError(StoreError):
    """Raised when the project registry (projects.txt) cannot be updated."""


class ProjectFileError(StoreError):
    """Raised when a project's version file cannot be updated."""


class SessionError(ChangelogsError):
    """Raised when the menu session is driven incorrectly."""


class InvalidTransitionError(SessionError):
    """Raised when a state change is not in the transition table."""
