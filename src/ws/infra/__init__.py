"""Infrastructure layer — filesystem integration.

Every raw OS or parse exception is caught here and re-raised as a
:class:`~ws.exceptions.WsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from ws.infra.json_store import JsonWorkspaceRepository
from ws.infra.paths import current_directory, resolve_data_file, resolve_home

__all__: list[str] = [
    "JsonWorkspaceRepository",
    "current_directory",
    "resolve_data_file",
    "resolve_home",
]
