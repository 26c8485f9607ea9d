"""CLI layer — argument intake, rendering, and the error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra`` and ``config``; no other layer imports from
``cli``.
"""
