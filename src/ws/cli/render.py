"""Presentation of command results.

Pure rendering: each function receives an already-computed result and
writes it out.  Results go to stdout, confirmations to stderr.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from ws.cli.console import RichUnavailableError, console, emit, out_console
from ws.core.models import Workspace
from ws.version import __version__

EMPTY_LIST_MESSAGE: str = "no workspaces"

HELP_TEXT: str = """\
ws {version}

ws is a workspace list manager.

Usage:
    ws <command> [workspace] | <workspace>

Commands:
    list | ls | l
        List all workspaces.
    help | h
        Display this help message. Shortcut 'ws'.
    version | v
        Display ws version.
    create | c | new | n | insert | i <name>
        Create a new workspace with <name> for the current directory.
    delete | d | remove | rm <name>
        Delete the workspace for <name>.
    <name>
        Print the directory stored for <name>.

Shell integration:
    wcd() {{ cd "$(ws "$1")"; }}
"""


def _escape(text: str) -> str:
    """Escape *text* for Rich markup, or return it unchanged without Rich."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


def _import_rich_table() -> type[Any]:
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise RichUnavailableError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def render_help() -> None:
    emit(HELP_TEXT.format(version=__version__).rstrip("\n"))


def render_version() -> None:
    emit(f"ws {__version__}")


def render_path(path: str) -> None:
    """Print the bare path for ``cd "$(ws <name>)"``."""
    emit(path)


def render_list(workspaces: Sequence[Workspace]) -> None:
    """Print every workspace, name then path, in stored order.

    A Rich table is used on an interactive terminal; piped output and
    environments without Rich get one ``name<TAB>path`` line each.
    """
    if not workspaces:
        emit(EMPTY_LIST_MESSAGE)
        return

    table_class: type[Any] | None = None
    if sys.stdout.isatty():
        try:
            table_class = _import_rich_table()
        except RichUnavailableError:
            table_class = None

    if table_class is None:
        for workspace in workspaces:
            emit(f"{workspace.name}\t{workspace.path}")
        return

    table = table_class(show_header=True, header_style="bold cyan", border_style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Path")
    for workspace in workspaces:
        table.add_row(_escape(workspace.name), _escape(workspace.path))
    out_console.print(table)


def render_created(workspace: Workspace) -> None:
    name = _escape(workspace.name)
    path = _escape(workspace.path)
    console.print(
        f"[green]Created[/green] workspace [bold]{name}[/bold] -> {path}",
        plain=f"Created workspace {workspace.name} -> {workspace.path}",
    )


def render_deleted(workspace: Workspace) -> None:
    console.print(
        f"[green]Deleted[/green] workspace [bold]{_escape(workspace.name)}[/bold]",
        plain=f"Deleted workspace {workspace.name}",
    )


def render_error(message: str, hint: str | None = None) -> None:
    """Exactly one error line on stderr; a hint is appended in parentheses."""
    plain = f"Error: {message}"
    markup = f"[bold red]Error:[/bold red] {_escape(message)}"
    if hint:
        flat_hint = " ".join(hint.split())
        plain = f"{plain} ({flat_hint})"
        markup = f"{markup} [yellow]({_escape(flat_hint)})[/yellow]"
    console.print(markup, plain=plain)
