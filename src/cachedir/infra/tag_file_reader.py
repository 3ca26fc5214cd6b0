"""Filesystem-backed implementation of :class:`~cachedir.core.protocols.TagFileReader`.

This module is the **only** place in the codebase that opens a
``CACHEDIR.TAG`` file.  Every :class:`OSError` is caught here and
re-raised as a :class:`~cachedir.exceptions.TagCheckError` subclass.

Rules
-----
* A single bounded read from the start of the file; the handle is
  released before returning on every path.
* No ``print()``, no logging — callers handle user-facing output.
"""

from __future__ import annotations

import errno
import stat
from pathlib import Path

from cachedir.exceptions import classify_os_error
from cachedir.utils.constants import TAG_FILENAME


class FilesystemTagReader:
    """Concrete :class:`TagFileReader` reading from the local filesystem.

    This class satisfies the :class:`~cachedir.core.protocols.TagFileReader`
    protocol structurally — no explicit inheritance required.
    """

    def read_header(self, directory: Path, size: int) -> bytes | None:
        """Read up to *size* leading bytes of the tag file in *directory*.

        Returns ``None`` when the tag file is missing from a directory
        that does exist.

        Raises
        ------
        TagNotFoundError
            When *directory* does not exist.
        TagPermissionError
            When access to the directory or tag file is denied.
        TagIOError
            For anything else, e.g. *directory* is a regular file or
            ``CACHEDIR.TAG`` is not a regular file (a directory, a FIFO).
        """
        tag_path = directory / TAG_FILENAME
        try:
            # Only regular files are opened; a FIFO would block the read.
            if not stat.S_ISREG(tag_path.stat().st_mode):
                raise OSError(errno.EINVAL, "Not a regular file", str(tag_path))
            with tag_path.open("rb") as tag_file:
                return tag_file.read(size)
        except FileNotFoundError as exc:
            # Missing file in an existing directory is a plain "absent".
            if directory.is_dir():
                return None
            raise classify_os_error(directory, tag_path, exc) from exc
        except OSError as exc:
            raise classify_os_error(directory, tag_path, exc) from exc
