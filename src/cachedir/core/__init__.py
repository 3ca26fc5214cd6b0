"""Core / service layer — pure tag matching and result models.

Rules
-----
* No ``print()`` calls, no logging.
* No filesystem I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from cachedir.core.header import match_header
from cachedir.core.models import CheckFailed, CheckResult, NotTagged, Tagged, TagState
from cachedir.core.protocols import TagFileReader
from cachedir.core.tag_checker import TagChecker

__all__: list[str] = [
    "CheckFailed",
    "CheckResult",
    "NotTagged",
    "TagChecker",
    "TagFileReader",
    "TagState",
    "Tagged",
    "match_header",
]
