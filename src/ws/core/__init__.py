"""Core / service layer — pure domain logic.

Rules
-----
* No ``print()`` calls.
* No direct filesystem access; persistence goes through
  :class:`~ws.core.protocols.WorkspaceRepository`.
* No imports from ``cli`` or ``infra``.
"""

from ws.core.models import Command, Create, Delete, Goto, Help, List, Version, Workspace
from ws.core.protocols import WorkspaceRepository
from ws.core.resolver import resolve_command
from ws.core.workspace_service import WorkspaceService

__all__: list[str] = [
    "Command",
    "Create",
    "Delete",
    "Goto",
    "Help",
    "List",
    "Version",
    "Workspace",
    "WorkspaceRepository",
    "WorkspaceService",
    "resolve_command",
]
