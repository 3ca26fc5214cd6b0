"""cachedir — detect directories tagged per the Cache Directory Tagging Specification.

A directory is tagged when it directly contains a ``CACHEDIR.TAG`` file
starting with the well-known signature.  The functions below are bound
to the local filesystem; build a :class:`TagChecker` around another
:class:`~cachedir.core.protocols.TagFileReader` for anything else.
"""

from __future__ import annotations

import os

from cachedir.core.models import CheckFailed, CheckResult, NotTagged, Tagged, TagState
from cachedir.core.tag_checker import TagChecker
from cachedir.exceptions import (
    CachedirError,
    TagCheckError,
    TagIOError,
    TagNotFoundError,
    TagPermissionError,
)
from cachedir.infra.tag_file_reader import FilesystemTagReader
from cachedir.utils.constants import SIGNATURE, TAG_FILENAME
from cachedir.version import __version__

_checker = TagChecker(FilesystemTagReader())


def is_tagged(directory: str | os.PathLike[str]) -> bool:
    """Return ``True`` if *directory* is tagged, ``False`` otherwise.

    Raises :class:`TagCheckError` when the directory or its tag file
    cannot be accessed (missing directory, permission error, etc.).
    """
    return _checker.is_tagged(directory)


def get_tag_state(directory: str | os.PathLike[str]) -> TagState:
    """Return the :class:`TagState` of *directory*'s tag file."""
    return _checker.get_tag_state(directory)


def check(directory: str | os.PathLike[str]) -> CheckResult:
    """Check *directory*, returning failures as :class:`CheckFailed`."""
    return _checker.check(directory)


__all__: list[str] = [
    "SIGNATURE",
    "TAG_FILENAME",
    "CachedirError",
    "CheckFailed",
    "CheckResult",
    "NotTagged",
    "TagCheckError",
    "TagChecker",
    "TagIOError",
    "TagNotFoundError",
    "TagPermissionError",
    "TagState",
    "Tagged",
    "__version__",
    "check",
    "get_tag_state",
    "is_tagged",
]
