"""Runtime settings for ws.

Everything ws reads from its environment is gathered here, at startup.
Nothing below the CLI layer looks at environment variables or the home
directory directly.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ws.infra.paths import resolve_data_file

LOG_LEVEL_ENV: str = "WS_LOG_LEVEL"
DEFAULT_LOG_LEVEL: int = logging.WARNING


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration for one invocation."""

    data_file: Path
    """Backing JSON file of the workspace store."""


def load_settings(home: Path | None = None) -> Settings:
    """Build :class:`Settings`, resolving the home directory unless given.

    Raises
    ------
    HomeDirectoryError
        When *home* is ``None`` and no home directory can be resolved.
    """
    return Settings(data_file=resolve_data_file(home))


def log_level_from_env(environ: Mapping[str, str] | None = None) -> int:
    """Return the level named by ``WS_LOG_LEVEL``, or ``WARNING``."""
    env = os.environ if environ is None else environ
    raw = env.get(LOG_LEVEL_ENV)
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL
