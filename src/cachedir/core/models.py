"""Domain models for cachedir.

All result models are **frozen** dataclasses — immutable value objects
with no behaviour beyond data access.  Together they form the
:data:`CheckResult` sum type, so callers can ``match`` every outcome of
a check exhaustively.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from cachedir.exceptions import TagCheckError


# ---------------------------------------------------------------------------
# Tag file state
# ---------------------------------------------------------------------------

class TagState(enum.Enum):
    """State of the ``CACHEDIR.TAG`` file in a directory."""

    ABSENT = "absent"
    """The directory exists but holds no tag file."""

    WRONG_HEADER = "wrong-header"
    """The tag file exists but does not start with the signature."""

    PRESENT = "present"
    """The tag file exists and starts with the signature."""

    @property
    def is_tagged(self) -> bool:
        return self is TagState.PRESENT


# ---------------------------------------------------------------------------
# Check outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Tagged:
    """The directory carries a valid tag file."""

    directory: Path


@dataclass(frozen=True, slots=True)
class NotTagged:
    """The directory was checked and is not tagged."""

    directory: Path

    state: TagState
    """Either :attr:`TagState.ABSENT` or :attr:`TagState.WRONG_HEADER`."""


@dataclass(frozen=True, slots=True)
class CheckFailed:
    """The directory could not be checked."""

    directory: Path
    error: TagCheckError


CheckResult: TypeAlias = Tagged | NotTagged | CheckFailed
