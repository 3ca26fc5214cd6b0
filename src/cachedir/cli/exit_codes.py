"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — help or version was displayed."""

TAGGED: int = 0
"""The directory is tagged."""

NOT_TAGGED: int = 1
"""The directory was checked and is not tagged."""

USAGE_ERROR: int = 1
"""No command, an unknown command, or bad arguments; usage was displayed."""

CHECK_FAILED: int = 2
"""A known CachedirError was caught.  User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
