"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete
implementations — so the checker can be exercised without touching
the filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class TagFileReader(Protocol):
    """Contract for backends that fetch the leading bytes of a tag file."""

    def read_header(self, directory: Path, size: int) -> bytes | None:
        """Return at most *size* bytes from the start of *directory*'s tag file.

        Returns ``None`` when *directory* exists but contains no tag
        file.  Fewer than *size* bytes are returned when the file is
        shorter than that.

        Raises
        ------
        TagNotFoundError
            When *directory* itself does not exist.
        TagPermissionError
            When the directory or tag file cannot be accessed.
        TagIOError
            For any other I/O failure.
        """
        ...  # pragma: no cover
