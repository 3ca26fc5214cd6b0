"""Custom exception hierarchy for cachedir.

All exceptions that cross layer boundaries must inherit from
:class:`CachedirError`.  Raw :class:`OSError` instances must NEVER
propagate beyond the infrastructure layer — they must be caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
CachedirError
└── TagCheckError
    ├── TagNotFoundError
    ├── TagPermissionError
    └── TagIOError

A tag file that exists but is too short or carries the wrong header is
**not** an error.  It is a definitive "not tagged" answer.
"""

from __future__ import annotations

from pathlib import Path


class CachedirError(Exception):
    """Base exception for all cachedir errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Tag checks ------------------------------------------------------------

class TagCheckError(CachedirError):
    """Raised when a directory could not be checked for a tag at all.

    Distinct from a negative answer: the caller learns that the check
    itself failed, not that the directory is untagged.
    """

    default_hint: str | None = None

    def __init__(
        self,
        directory: Path,
        tag_path: Path,
        cause: OSError,
        *,
        hint: str | None = None,
    ) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(
            f"cannot check {directory}: {reason}",
            hint=hint if hint is not None else self.default_hint,
        )
        self.directory: Path = directory
        self.tag_path: Path = tag_path
        self.cause: OSError = cause

    def __reduce__(self) -> tuple[object, ...]:
        # ``args`` only holds the rendered message; rebuild from the fields.
        return (
            type(self),
            (self.directory, self.tag_path, self.cause),
            {"hint": self.hint},
        )


class TagNotFoundError(TagCheckError):
    """Raised when the directory to check does not exist."""

    default_hint = "Check that the directory exists and the path is spelled correctly."


class TagPermissionError(TagCheckError):
    """Raised when the directory or its tag file cannot be accessed."""

    default_hint = "Check the permissions on the directory and its CACHEDIR.TAG file."


class TagIOError(TagCheckError):
    """Raised for any other I/O failure while opening or reading the tag file."""


def classify_os_error(
    directory: Path,
    tag_path: Path,
    exc: OSError,
) -> TagCheckError:
    """Map a raw :class:`OSError` to the matching :class:`TagCheckError`.

    The original exception is kept as ``cause``; callers are expected to
    ``raise ... from exc``.
    """
    if isinstance(exc, FileNotFoundError):
        return TagNotFoundError(directory, tag_path, exc)
    if isinstance(exc, PermissionError):
        return TagPermissionError(directory, tag_path, exc)
    return TagIOError(directory, tag_path, exc)
