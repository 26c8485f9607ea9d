"""Domain models for ws.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and (de)serialisation helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


# ---------------------------------------------------------------------------
# Workspace record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Workspace:
    """A named alias for a filesystem directory."""

    name: str
    """Unique key within the store.  Compared exactly (case-sensitive)."""

    path: str
    """Absolute path of the directory the workspace points to."""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "path": self.path}

    @classmethod
    def from_dict(cls, raw: Any) -> Workspace:
        """Build a record from one decoded JSON entry.

        Raises
        ------
        ValueError
            If *raw* is not an object with non-empty string ``name`` and
            string ``path`` fields.
        """
        if not isinstance(raw, dict):
            raise ValueError("workspace entry is not an object")
        name = raw.get("name")
        path = raw.get("path")
        if not isinstance(name, str) or not name:
            raise ValueError("workspace entry has no valid 'name'")
        if not isinstance(path, str):
            raise ValueError(f"workspace {name!r} has no valid 'path'")
        return cls(name=name, path=path)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Create:
    """Store the current directory under *name*."""

    name: str


@dataclass(frozen=True, slots=True)
class Delete:
    """Remove the workspace called *name*."""

    name: str


@dataclass(frozen=True, slots=True)
class Goto:
    """Resolve *name* to its stored path."""

    name: str


@dataclass(frozen=True, slots=True)
class List:
    """Show every stored workspace."""


@dataclass(frozen=True, slots=True)
class Help:
    """Show usage."""


@dataclass(frozen=True, slots=True)
class Version:
    """Show the version string."""


Command = Union[Create, Delete, Goto, List, Help, Version]
"""Closed set of actions produced once per invocation."""
