"""Tokenising, environment lookup and command resolution for the shell."""

from __future__ import annotations

import os
from collections.abc import Mapping


def line_to_arr(line: str) -> list[str]:
    """Split a line into words separated by spaces, dropping empty words."""
    return [word for word in line.split(" ") if word]


def get_env(name: str | None, environ: Mapping[str, str] | None = None) -> str | None:
    """Return the value of the first ``NAME=value`` entry that starts with *name*.

    Entries are matched by prefix, in the environment's own order.
    """
    if name is None:
        return None
    if environ is None:
        environ = os.environ
    for key, value in environ.items():
        entry = f"{key}={value}"
        if entry.startswith(name):
            return entry[len(name) + 1:]
    return None


def get_path(command: str | None, environ: Mapping[str, str] | None = None) -> str | None:
    """Resolve *command* to an executable path, or return None.

    A command holding a slash is checked as given; otherwise each directory
    of PATH is searched in order.
    """
    if not command:
        return None

    if "/" in command:
        return command if os.access(command, os.X_OK) else None

    search_path = get_env("PATH", environ)
    if not search_path:
        return None

    for directory in filter(None, search_path.split(":")):
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def remove_space(line: str | None) -> str | None:
    """Remove leading and trailing space characters."""
    if line is None:
        return None
    return line.strip(" ")


def remove_leading_spaces(line: str | None) -> str | None:
    """Remove leading space characters only."""
    if line is None:
        return None
    return line.lstrip(" ")