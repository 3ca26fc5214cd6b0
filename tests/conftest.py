"""Shared pytest fixtures and configuration for the cachedir test suite.

Guidelines
----------
* Filesystem tests work inside ``tmp_path`` only.
* Core tests must be pure — use a fake reader, not the disk.
* Tests must not depend on OS state outside the temporary directory.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from cachedir.utils.constants import SIGNATURE, TAG_FILENAME

TAG_COMMENT = (
    b"\n# This file is a cache directory tag created by cachedir.\n"
    b"# For information about cache directory tags, see:\n"
    b"#\thttps://bford.info/cachedir/\n"
)


@pytest.fixture
def write_tag(tmp_path: Path) -> Callable[[bytes], Path]:
    """Return a helper writing *content* as ``CACHEDIR.TAG`` in ``tmp_path``."""

    def _write(content: bytes) -> Path:
        (tmp_path / TAG_FILENAME).write_bytes(content)
        return tmp_path

    return _write


@pytest.fixture
def tagged_dir(write_tag: Callable[[bytes], Path]) -> Path:
    """A directory holding a real-world tag file: signature plus comments."""
    return write_tag(SIGNATURE + TAG_COMMENT)
