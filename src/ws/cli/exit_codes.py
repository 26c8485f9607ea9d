"""Process exit codes returned by ``ws``.

Shell wrappers such as ``cd "$(ws <name>)"`` rely on a non-zero code to
skip the ``cd`` when a workspace cannot be resolved.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The path, listing, help or confirmation was written."""

GENERAL_ERROR: int = 1
"""Bad arguments, unknown or duplicate workspace, or unusable data file."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""A failure ws does not classify; reported as a bug."""
