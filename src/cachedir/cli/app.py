"""CLI application entry point and command routing for cachedir.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cachedir.exceptions.CachedirError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — the check itself is delegated to
  :func:`cachedir.check`.
* ``print()`` is forbidden outside the CLI layer; the console proxy is
  used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code, and the only place that configures
  logging.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import IO, Any, NoReturn

from cachedir import check
from cachedir.cli import exit_codes
from cachedir.cli.console import console
from cachedir.core.models import CheckFailed, NotTagged, Tagged
from cachedir.exceptions import CachedirError
from cachedir.utils.constants import TAG_FILENAME
from cachedir.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _CliParser(argparse.ArgumentParser):
    """Argument parser writing everything to stderr.

    Usage errors exit with :data:`exit_codes.USAGE_ERROR` so they never
    collide with :data:`exit_codes.CHECK_FAILED`.
    """

    def print_help(self, file: IO[str] | None = None) -> None:
        super().print_help(file if file is not None else sys.stderr)

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(exit_codes.USAGE_ERROR, f"{self.prog}: error: {message}\n")


class _VersionAction(argparse.Action):
    """``--version`` that prints to stderr instead of stdout."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str = argparse.SUPPRESS,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            option_strings,
            dest=dest,
            nargs=0,
            default=argparse.SUPPRESS,
            **kwargs,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: object,
        option_string: str | None = None,
    ) -> None:
        parser.exit(exit_codes.SUCCESS, f"{parser.prog} {__version__}\n")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``cachedir is-tagged DIRECTORY`` — check a single directory
    * ``cachedir --version``
    """
    parser = _CliParser(
        prog="cachedir",
        description="Check directories for a CACHEDIR.TAG cache marker.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action=_VersionAction,
        help="Show the version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    is_tagged = subparsers.add_parser(
        "is-tagged",
        help="Check if the directory is tagged or not.",
    )
    is_tagged.add_argument("directory", help="Directory to check.")
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")
    logging.getLogger("cachedir").setLevel(level)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _render_error(exc: CachedirError) -> None:
    """Show *exc* and its hint, if any."""
    console.print(f"Error: {exc}", style="bold red")
    if exc.hint:
        console.print(f"Hint: {exc.hint}", style="yellow")


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_is_tagged(directory: str) -> int:
    """Check *directory* and report the outcome.

    Returns
    -------
    int
        :data:`exit_codes.TAGGED`, :data:`exit_codes.NOT_TAGGED` or
        :data:`exit_codes.CHECK_FAILED`.
    """
    logger.debug("checking %s for %s", directory, TAG_FILENAME)
    result = check(directory)

    match result:
        case Tagged():
            console.print(f"{directory} is tagged with {TAG_FILENAME}", style="green")
            return exit_codes.TAGGED
        case NotTagged(state=state):
            logger.debug("%s is not tagged (%s)", directory, state.value)
            console.print(f"{directory} is not tagged with {TAG_FILENAME}")
            return exit_codes.NOT_TAGGED
        case CheckFailed(error=error):
            logger.debug("check of %s failed", directory, exc_info=error)
            _render_error(error)
            return exit_codes.CHECK_FAILED


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cachedir CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.USAGE_ERROR

    return _handle_is_tagged(args.directory)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CachedirError as exc:
        _render_error(exc)
        sys.exit(exit_codes.CHECK_FAILED)
    except KeyboardInterrupt:
        console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
