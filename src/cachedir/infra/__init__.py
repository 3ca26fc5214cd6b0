"""Infrastructure layer — operating-system integration.

This layer wraps all interaction with the filesystem.  Every raw
:class:`OSError` must be caught here and re-raised as a
:class:`~cachedir.exceptions.TagCheckError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering, no logging).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from cachedir.infra.tag_file_reader import FilesystemTagReader

__all__: list[str] = [
    "FilesystemTagReader",
]
