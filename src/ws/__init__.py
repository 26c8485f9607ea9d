"""ws — a workspace list manager.

Keeps a small persistent list of named directory aliases and resolves
them for shell navigation (``cd "$(ws <name>)"``).
"""

from ws.version import __version__

__all__: list[str] = ["__version__"]
