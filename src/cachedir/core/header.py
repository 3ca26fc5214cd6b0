"""Pure tag-header matching.

No I/O, no side effects.  Only the leading bytes are compared so that
the human-readable comment lines a real ``CACHEDIR.TAG`` usually
carries never affect the outcome.
"""

from __future__ import annotations

from cachedir.core.models import TagState
from cachedir.utils.constants import SIGNATURE


def match_header(data: bytes) -> TagState:
    """Classify the leading bytes of a tag file.

    Returns :attr:`TagState.PRESENT` when *data* starts with the full
    signature, and :attr:`TagState.WRONG_HEADER` otherwise — including
    when *data* is shorter than the signature or empty.
    """
    if len(data) >= len(SIGNATURE) and data[: len(SIGNATURE)] == SIGNATURE:
        return TagState.PRESENT
    return TagState.WRONG_HEADER
