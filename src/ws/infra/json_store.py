"""JSON-file implementation of :class:`~ws.core.protocols.WorkspaceRepository`.

The store is a single UTF-8 file holding a pretty-printed JSON list of
``{"name": ..., "path": ...}`` objects.  Every OS or parse failure is
caught here and re-raised as :class:`~ws.exceptions.DataReadError` —
nothing raw escapes the infrastructure boundary.

Writes go to a temporary sibling file that atomically replaces the
store, and mutations hold an exclusive advisory lock on a sidecar
``.lock`` file so that concurrent invocations cannot lose updates.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from ws.core.models import Workspace
from ws.exceptions import DataReadError

logger = logging.getLogger(__name__)

JSON_INDENT: int = 2


class JsonWorkspaceRepository:
    """Concrete :class:`WorkspaceRepository` backed by one JSON file.

    Usage::

        repository = JsonWorkspaceRepository(Path("~/.config/ws/ws.json"))
        with repository.lock():
            workspaces = repository.load()
            repository.save(workspaces)
    """

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    @property
    def path(self) -> Path:
        return self._path

    @property
    def lock_path(self) -> Path:
        return self._path.with_name(self._path.name + ".lock")

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def load(self) -> list[Workspace]:
        """Read every stored record, creating an empty store if absent.

        Raises
        ------
        DataReadError
            When the file cannot be created or read, is not valid JSON,
            or is not a list of workspace objects.
        """
        try:
            exists = self._path.exists()
        except OSError as exc:
            raise DataReadError(
                "could not read workspace data",
                hint=f"Check permissions on {self._path}.",
            ) from exc
        if not exists:
            self._create_empty()
            return []

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DataReadError(
                "could not read workspace data",
                hint=f"Check permissions on {self._path}.",
            ) from exc

        if not text.strip():
            return []

        try:
            raw: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DataReadError(
                "workspace data is not valid JSON",
                hint=f"Fix or remove {self._path}.",
            ) from exc

        workspaces = self._parse(raw)
        logger.debug("loaded %d workspace(s) from %s", len(workspaces), self._path)
        return workspaces

    def save(self, workspaces: list[Workspace]) -> None:
        """Atomically replace the store with *workspaces*.

        Raises
        ------
        DataReadError
            When the file cannot be written.
        """
        payload = [workspace.to_dict() for workspace in workspaces]
        text = json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False) + "\n"

        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=str(self._path.parent),
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise DataReadError(
                "could not write workspace data",
                hint=f"Check permissions on {self._path.parent}.",
            ) from exc
        logger.debug("saved %d workspace(s) to %s", len(workspaces), self._path)

    @contextmanager
    def lock(self) -> Iterator[None]:
        """Hold an exclusive advisory lock for one read-modify-write cycle.

        Uses ``fcntl.flock`` on a sidecar file.  Platforms without
        ``fcntl`` run unlocked.
        """
        if sys.platform == "win32":
            yield
            return

        import fcntl

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            handle = open(self.lock_path, "a", encoding="utf-8")
        except OSError as exc:
            raise DataReadError(
                "could not lock workspace data",
                hint=f"Check permissions on {self._path.parent}.",
            ) from exc

        # Closing the handle releases the lock.
        with handle:
            try:
                fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
            except OSError as exc:
                raise DataReadError(
                    "could not lock workspace data",
                    hint=f"The filesystem holding {self.lock_path} may not support locks.",
                ) from exc
            yield

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _create_empty(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch(exist_ok=True)
        except OSError as exc:
            raise DataReadError(
                "could not create workspace data file",
                hint=f"Check permissions on {self._path.parent}.",
            ) from exc
        logger.debug("created empty store at %s", self._path)

    @staticmethod
    def _parse(raw: Any) -> list[Workspace]:
        """Convert decoded JSON into records, rejecting anything malformed.

        Repeated names are kept as stored; lookups act on the first match.
        """
        if not isinstance(raw, list):
            raise DataReadError(
                "workspace data is not a list",
                hint="The file must contain a JSON list of workspaces.",
            )

        workspaces: list[Workspace] = []
        for entry in raw:
            try:
                workspace = Workspace.from_dict(entry)
            except ValueError as exc:
                raise DataReadError(
                    "workspace data is malformed",
                    hint=str(exc),
                ) from exc
            workspaces.append(workspace)
        return workspaces
