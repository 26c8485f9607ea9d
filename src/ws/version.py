"""Single source of the ws version string."""

from __future__ import annotations

__version__: str = "0.2.0"
