"""Custom exception hierarchy for ws.

Every classified error crosses layer boundaries as a subclass of
:class:`WsError`.  Nothing is printed and nothing exits where an error
is raised; the CLI error boundary is the single place that maps these
to a one-line message and a process exit code.

Hierarchy
---------
WsError
├── CommandNotFoundError
├── WorkspaceRequiredError
├── TooManyArgsError
├── WorkspaceNotFoundError
├── WorkspaceAlreadyExistsError
├── DataReadError
├── HomeDirectoryError
└── WorkingDirectoryError
"""

from __future__ import annotations


class WsError(Exception):
    """Base exception for all ws errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command resolution ----------------------------------------------------

class CommandNotFoundError(WsError):
    """Raised when the leading token is empty or otherwise unusable."""

    def __init__(self) -> None:
        super().__init__("command not found", hint='Run "ws help" for usage.')


class WorkspaceRequiredError(WsError):
    """Raised when create/delete is invoked without a workspace name."""

    def __init__(self) -> None:
        super().__init__("please provide a workspace")


class TooManyArgsError(WsError):
    """Raised when more tokens are supplied than any command accepts."""

    def __init__(self) -> None:
        super().__init__('too many arguments, check "ws help"')


# --- Store lookups ---------------------------------------------------------

class WorkspaceNotFoundError(WsError):
    """Raised when delete/goto references a name that is not stored."""

    def __init__(self, name: str) -> None:
        super().__init__(f"workspace {name} not found")
        self.name: str = name


class WorkspaceAlreadyExistsError(WsError):
    """Raised when create references a name that is already stored."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"workspace {name} already exists",
            hint=f'Delete it first with "ws delete {name}".',
        )
        self.name: str = name


# --- Backing file / environment --------------------------------------------

class DataReadError(WsError):
    """Raised for any I/O or parse failure on the backing file."""


class HomeDirectoryError(WsError):
    """Raised when the user's home directory cannot be resolved."""


class WorkingDirectoryError(WsError):
    """Raised when the current directory cannot be read (e.g. it was deleted)."""
