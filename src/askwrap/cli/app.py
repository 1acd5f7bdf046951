"""CLI application entry point and command routing for askwrap.

This module is the **outer error boundary** for the entire application.
It catches :class:`~askwrap.exceptions.AskwrapError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering plain messages on stderr and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — commands live in
  :mod:`askwrap.cli.commands` and report through
  :func:`~askwrap.cli.output.print_and_exit`.
* An unknown subcommand prints help instead of reaching argparse.
"""

from __future__ import annotations

import argparse
import sys

from askwrap.cli import commands, exit_codes
from askwrap.cli.console import console
from askwrap.cli.host import ArgparseHost
from askwrap.config import AskwrapSettings, configure_logging
from askwrap.core.validator import validate
from askwrap.exceptions import AskwrapError
from askwrap.version import __version__


# ---------------------------------------------------------------------------
# Host construction
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="askwrap",
        description="Collect answers interactively and print command results.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def build_host() -> ArgparseHost:
    """Create the host with every built-in subcommand registered."""
    host = ArgparseHost(_build_parser())
    host.command(
        "doctor",
        commands.doctor,
        help="Show Python and dependency versions.",
        header="askwrap doctor",
    )
    host.command(
        "ask",
        commands.ask,
        help="Prompt for the fields in a JSON file and print the answers.",
        arg="fields_file",
        arg_help="JSON list of fields, or an object with fields/answers/mode.",
    )
    return host


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the askwrap CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.  Commands normally exit the process
        themselves through ``print_and_exit``.
    """
    argv_list = list(argv) if argv is not None else sys.argv[1:]

    settings = AskwrapSettings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    host = build_host()
    host.bind(argv_list)

    is_option = bool(argv_list) and argv_list[0].startswith("-")
    if not is_option and not validate(host):
        return exit_codes.SUCCESS

    args = host.parse()
    if args.command is None:
        host.help()
        return exit_codes.SUCCESS

    host.dispatch(args)
    return exit_codes.SUCCESS


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
    except AskwrapError as exc:
        console.print(f"Error: {exc}")
        if exc.hint:
            console.print(f"Hint: {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\nAborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
