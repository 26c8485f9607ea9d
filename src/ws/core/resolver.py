"""Command resolver — turn invocation tokens into one :data:`Command`.

This is a pure function of its input: no environment lookups, no I/O,
no process termination.  Failures are raised as typed
:class:`~ws.exceptions.WsError` subclasses for the CLI boundary to
render.

Dispatch rules
--------------
* Zero tokens resolve to :class:`Help`.
* Three or more tokens fail with :class:`TooManyArgsError`.
* Otherwise the first token is matched, case-sensitively, against
  :data:`ALIASES`.  Anything that is not a keyword is taken as a bare
  workspace name and resolves to :class:`Goto`.
"""

from __future__ import annotations

from collections.abc import Sequence

from ws.core.models import Command, Create, Delete, Goto, Help, List, Version
from ws.exceptions import CommandNotFoundError, TooManyArgsError, WorkspaceRequiredError

MAX_TOKENS: int = 2

ALIASES: dict[str, str] = {
    "list": "list",
    "ls": "list",
    "l": "list",
    "help": "help",
    "h": "help",
    "version": "version",
    "v": "version",
    "create": "create",
    "c": "create",
    "new": "create",
    "n": "create",
    "insert": "create",
    "i": "create",
    "delete": "delete",
    "d": "delete",
    "remove": "delete",
    "rm": "delete",
}
"""Keyword → canonical command name."""


def resolve_command(args: Sequence[str]) -> Command:
    """Resolve *args* (the tokens after the program name) to a command.

    Raises
    ------
    TooManyArgsError
        More than two tokens, or a bare workspace name followed by
        another token.
    WorkspaceRequiredError
        ``create``/``delete`` without a name.
    CommandNotFoundError
        The first token is empty.
    """
    if len(args) == 0:
        return Help()
    if len(args) > MAX_TOKENS:
        raise TooManyArgsError()

    head = args[0]
    operand = args[1] if len(args) > 1 else None

    canonical = ALIASES.get(head)
    if canonical == "list":
        return List()
    if canonical == "help":
        return Help()
    if canonical == "version":
        return Version()
    if canonical == "create":
        return Create(_require_name(operand))
    if canonical == "delete":
        return Delete(_require_name(operand))

    if not head:
        raise CommandNotFoundError()
    if operand is not None:
        raise TooManyArgsError()
    return Goto(head)


def _require_name(operand: str | None) -> str:
    if not operand:
        raise WorkspaceRequiredError()
    return operand
