"""Core tag-checking service.

The checker delegates all filesystem access to a
:class:`~cachedir.core.protocols.TagFileReader` injected at
construction time.  It is responsible for:

* Asking the reader for exactly as many bytes as the signature holds.
* Turning those bytes into a :class:`~cachedir.core.models.TagState`.
* Folding typed errors into a :data:`~cachedir.core.models.CheckResult`
  for callers that prefer values over exceptions.

Guarantees
----------
* No I/O of its own, no ``print()``, no logging.
* No state kept between calls — one instance may serve any number of
  callers.
"""

from __future__ import annotations

import os
from pathlib import Path

from cachedir.core.header import match_header
from cachedir.core.models import CheckFailed, CheckResult, NotTagged, Tagged, TagState
from cachedir.core.protocols import TagFileReader
from cachedir.exceptions import TagCheckError
from cachedir.utils.constants import SIGNATURE


class TagChecker:
    """Stateless service answering "is this directory tagged?".

    Parameters
    ----------
    reader:
        Any object satisfying the :class:`TagFileReader` protocol.
    """

    def __init__(self, reader: TagFileReader) -> None:
        self._reader: TagFileReader = reader

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_tag_state(self, directory: str | os.PathLike[str]) -> TagState:
        """Return the state of the tag file in *directory*.

        Raises
        ------
        TagCheckError
            When the directory or its tag file cannot be accessed.
            A missing tag file inside an existing directory is not an
            error; it yields :attr:`TagState.ABSENT`.
        """
        data = self._reader.read_header(Path(directory), len(SIGNATURE))
        if data is None:
            return TagState.ABSENT
        return match_header(data)

    def is_tagged(self, directory: str | os.PathLike[str]) -> bool:
        """Return ``True`` if *directory* carries a valid tag file.

        Raises
        ------
        TagCheckError
            See :meth:`get_tag_state`.
        """
        return self.get_tag_state(directory).is_tagged

    def check(self, directory: str | os.PathLike[str]) -> CheckResult:
        """Check *directory* and return the outcome as a value.

        Unlike :meth:`is_tagged`, this never raises for filesystem
        failures; they come back as :class:`CheckFailed`.
        """
        path = Path(directory)
        try:
            state = self.get_tag_state(path)
        except TagCheckError as exc:
            return CheckFailed(directory=path, error=exc)
        if state.is_tagged:
            return Tagged(directory=path)
        return NotTagged(directory=path, state=state)
