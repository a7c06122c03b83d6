"""Locating the executable that a command name refers to."""

from __future__ import annotations

import os

from minishell.splitting import split_on


class CommandError(Exception):
    """A command could not be prepared; carries the shell exit status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


def _not_found(name: str) -> CommandError:
    return CommandError(127, f"minishell: {name}: command not found")


def check_explicit_path(name: str) -> str:
    """Validate a name given as a path; return it if it can be executed."""
    if os.path.isdir(name):
        raise CommandError(126, f"minishell: {name}: is a directory")
    if os.access(name, os.X_OK):
        return name
    raise CommandError(127, f"minishell: {name}: No such file or directory")


def find_in_path(name: str, search_path: str) -> str | None:
    """First executable named name in the colon-separated search_path."""
    for directory in split_on(search_path, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(name: str, search_path: str | None = None) -> str:
    """Path of the program to run for name.

    Names that look like paths are checked directly.  Other names are
    looked up in search_path; with no search path the name is used as is.
    Raises CommandError when nothing suitable is found.
    """
    if not name:
        raise _not_found(name)
    if name.startswith(("../", "./", "/")) or name.endswith("/"):
        return check_explicit_path(name)
    if name.startswith("."):
        raise _not_found(name)
    if search_path is None:
        return name
    found = find_in_path(name, search_path)
    if found is None:
        raise _not_found(name)
    return found