"""CLI application entry point and command routing for ws.

This module is the **sole error boundary** for the entire application.
It catches :class:`~ws.exceptions.WsError`, ``KeyboardInterrupt``, and
any unexpected ``Exception``, rendering a one-line message on stderr and
returning a well-defined exit code.

Architecture notes
------------------
* No business logic lives here — resolution and store semantics are
  delegated to the core layer, persistence to the infrastructure layer.
* Ambient state (arguments, home directory, working directory,
  environment) is read here and nowhere else, then passed down.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ws.cli import exit_codes, render
from ws.config import Settings, load_settings, log_level_from_env
from ws.core.models import Command, Create, Delete, Goto, Help, List, Version
from ws.core.resolver import resolve_command
from ws.core.workspace_service import WorkspaceService
from ws.exceptions import WsError
from ws.infra.json_store import JsonWorkspaceRepository
from ws.infra.paths import current_directory

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_service(settings: Settings, cwd: Path | None) -> WorkspaceService:
    repository = JsonWorkspaceRepository(settings.data_file)
    if cwd is None:
        return WorkspaceService(repository, current_directory)
    fixed: Path = cwd
    return WorkspaceService(repository, lambda: fixed)


def _dispatch(command: Command, service: WorkspaceService) -> int:
    """Run *command* against *service* and render its result."""
    if isinstance(command, Create):
        render.render_created(service.create(command.name))
    elif isinstance(command, Delete):
        render.render_deleted(service.delete(command.name))
    elif isinstance(command, Goto):
        render.render_path(service.goto(command.name))
    elif isinstance(command, List):
        render.render_list(service.list_all())
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    cwd: Path | None = None,
) -> int:
    """Run the ws CLI.

    Parameters
    ----------
    argv:
        Explicit argument list (without the program name).  When
        ``None`` (default), ``sys.argv[1:]`` is used.
    settings:
        Pre-built settings.  When ``None``, :func:`load_settings` reads
        the real home directory and environment.
    cwd:
        Directory recorded by ``create``.  Defaults to the process
        working directory, read only when ``create`` runs.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    WsError
        Any classified failure; :func:`cli` turns it into exit code 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    command = resolve_command(args)
    logger.debug("resolved %r to %r", args, command)

    # Help and version need neither the home directory nor the store.
    if isinstance(command, Help):
        render.render_help()
        return exit_codes.SUCCESS
    if isinstance(command, Version):
        render.render_version()
        return exit_codes.SUCCESS

    resolved_settings = settings if settings is not None else load_settings()
    return _dispatch(command, _build_service(resolved_settings, cwd))


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _configure_logging() -> None:
    """Send diagnostics to stderr at the level chosen by ``WS_LOG_LEVEL``."""
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level_from_env(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    _configure_logging()
    try:
        code = main()
        sys.exit(code)
    except WsError as exc:
        render.render_error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        render.render_error("aborted by user")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("unexpected error", exc_info=True)
        render.render_error(
            f"unexpected error: {type(exc).__name__}: {exc}",
            "Please report this issue.",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
