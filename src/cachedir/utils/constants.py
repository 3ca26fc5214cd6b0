"""Constants defined by the Cache Directory Tagging Specification.

See https://bford.info/cachedir/ for the full text.
"""

from __future__ import annotations

TAG_FILENAME: str = "CACHEDIR.TAG"
"""Name of the marker file looked up directly inside a directory."""

SIGNATURE: bytes = b"Signature: 8a477f597d28d172789f06886806bc55"
"""Bytes a tag file must start with.  Anything after them is ignored."""
