"""Core workspace service — applies one query or mutation to the store.

The service depends on a :class:`~ws.core.protocols.WorkspaceRepository`
and on a provider of the invoking process's working directory, both
injected at construction time.  The provider is only called by
:meth:`WorkspaceService.create`, so the other operations keep working
when the current directory no longer exists.

Guarantees
----------
* Every mutation is a full read-modify-write under the repository lock.
* A failed check raises before anything is persisted.
* Only :class:`~ws.exceptions.WsError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ws.core.models import Workspace
from ws.core.protocols import WorkspaceRepository
from ws.exceptions import WorkspaceAlreadyExistsError, WorkspaceNotFoundError

logger = logging.getLogger(__name__)


class WorkspaceService:
    """Stateless service over a workspace repository.

    Parameters
    ----------
    repository:
        Any object satisfying the :class:`WorkspaceRepository` protocol.
    cwd:
        Zero-argument callable returning the directory recorded by
        :meth:`create`.
    """

    def __init__(
        self,
        repository: WorkspaceRepository,
        cwd: Callable[[], Path],
    ) -> None:
        self._repository: WorkspaceRepository = repository
        self._cwd: Callable[[], Path] = cwd

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_all(self) -> list[Workspace]:
        """Return all workspaces in stored order.  May be empty."""
        return self._repository.load()

    def create(self, name: str) -> Workspace:
        """Store the working directory under *name*.

        Raises
        ------
        WorkspaceAlreadyExistsError
            If a workspace called *name* is already stored.
        WorkingDirectoryError
            If the working directory cannot be read.
        """
        with self._repository.lock():
            workspaces = self._repository.load()
            if _find(workspaces, name) is not None:
                raise WorkspaceAlreadyExistsError(name)
            created = Workspace(name=name, path=str(self._cwd()))
            workspaces.append(created)
            self._repository.save(workspaces)
        logger.debug("created workspace %s -> %s", created.name, created.path)
        return created

    def delete(self, name: str) -> Workspace:
        """Remove the workspace called *name*, keeping the others in order.

        Raises
        ------
        WorkspaceNotFoundError
            If no workspace called *name* is stored.
        """
        with self._repository.lock():
            workspaces = self._repository.load()
            index = _find(workspaces, name)
            if index is None:
                raise WorkspaceNotFoundError(name)
            removed = workspaces.pop(index)
            self._repository.save(workspaces)
        logger.debug("deleted workspace %s", removed.name)
        return removed

    def goto(self, name: str) -> str:
        """Return the stored path for *name*.  Never persists.

        Raises
        ------
        WorkspaceNotFoundError
            If no workspace called *name* is stored.
        """
        workspaces = self._repository.load()
        index = _find(workspaces, name)
        if index is None:
            raise WorkspaceNotFoundError(name)
        return workspaces[index].path


def _find(workspaces: list[Workspace], name: str) -> int | None:
    """Index of the first record called *name*, or ``None``."""
    for index, workspace in enumerate(workspaces):
        if workspace.name == name:
            return index
    return None
