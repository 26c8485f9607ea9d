"""Infrastructure: locate the backing file for the workspace store.

Rules
-----
* The home directory is resolved once, at startup, via
  :meth:`pathlib.Path.home`; callers may inject it instead.
* Nothing is created here — the store creates the file on first load.
"""

from __future__ import annotations

from pathlib import Path

from ws.exceptions import HomeDirectoryError, WorkingDirectoryError

CONFIG_DIR_PARTS: tuple[str, ...] = (".config", "ws")
DATA_FILE_NAME: str = "ws.json"


def resolve_home() -> Path:
    """Return the user's home directory or raise :class:`HomeDirectoryError`."""
    try:
        home = Path.home()
    except (KeyError, RuntimeError, OSError) as exc:
        raise HomeDirectoryError(
            "could not resolve the home directory",
            hint="Set the HOME environment variable.",
        ) from exc
    if not str(home).strip():
        raise HomeDirectoryError(
            "could not resolve the home directory",
            hint="Set the HOME environment variable.",
        )
    return home


def resolve_data_file(home: Path | None = None) -> Path:
    """Return ``<home>/.config/ws/ws.json``."""
    base = home if home is not None else resolve_home()
    return base.joinpath(*CONFIG_DIR_PARTS, DATA_FILE_NAME)


def current_directory() -> Path:
    """Return the process working directory as reported by ``getcwd``.

    Symlinks are not resolved, so ``/tmp/x`` is stored as ``/tmp/x``.
    """
    try:
        return Path.cwd()
    except OSError as exc:
        raise WorkingDirectoryError(
            "could not read the current directory (was it deleted?)",
        ) from exc
