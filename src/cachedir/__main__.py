"""Entry point for ``python -m cachedir``.

Runs the same error-boundary wrapper as the ``cachedir`` console script.
"""

from __future__ import annotations

from cachedir.cli.app import cli

if __name__ == "__main__":
    cli()
