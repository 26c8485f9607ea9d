"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these contracts; the JSON-file adapter in
``ws.infra`` satisfies them structurally.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from ws.core.models import Workspace


class WorkspaceRepository(Protocol):
    """Contract for workspace persistence backends.

    Implementations must map every backend failure to
    :class:`~ws.exceptions.DataReadError`.
    """

    def load(self) -> list[Workspace]:
        """Return the stored records, in stored order.

        Raises
        ------
        DataReadError
            When the backing store cannot be read or parsed.
        """
        ...  # pragma: no cover

    def save(self, workspaces: list[Workspace]) -> None:
        """Replace the stored records with *workspaces* in full.

        Raises
        ------
        DataReadError
            When the backing store cannot be written.
        """
        ...  # pragma: no cover

    def lock(self) -> AbstractContextManager[None]:
        """Hold exclusive access for one read-modify-write cycle."""
        ...  # pragma: no cover
