"""Allow ``python -m ws`` invocation.

Delegates to the CLI error-boundary entry point so that ``python -m ws``
behaves identically to the ``ws`` console script.
"""

from __future__ import annotations

from ws.cli.app import cli

if __name__ == "__main__":
    cli()
