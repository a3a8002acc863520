"""CLI application entry point and command routing for clin.

This module is the **sole error boundary** for the entire application.
It catches :class:`~clin.exceptions.ClinError`, ``KeyboardInterrupt``,
a closed output pipe, and any unexpected ``Exception``, rendering
messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No resolution logic lives here; both commands delegate to
  :mod:`clin.resolve`.
* stdout carries resolved input only, written as bytes.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from typing import IO, Any

from clin.cli import exit_codes
from clin.cli.console import console, escape_markup
from clin.cli.delimiters import parse_delimiter
from clin.exceptions import ClinError
from clin.resolve import default, resolve_args, resolve_stream
from clin.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``clin args [ARG ...]``: print arguments, or stdin tokens
    * ``clin cat [ARG ...]``: copy the resolved byte stream to stdout
    * ``clin --version``
    """
    parser = argparse.ArgumentParser(
        prog="clin",
        description="Resolve command-line input from arguments or standard input.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log resolution decisions to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    args_parser = subparsers.add_parser(
        "args",
        help="Print each argument, or each stdin token when none are given.",
    )
    args_parser.add_argument(
        "-d",
        "--delim",
        default=r"\n",
        help=r"Token delimiter for stdin (default: \n; empty splits per character).",
    )
    args_parser.add_argument(
        "-z",
        "--null",
        action="store_true",
        help="Terminate printed tokens with NUL instead of newline.",
    )
    args_parser.add_argument(
        "--table",
        action="store_true",
        help="Render tokens in a table (requires rich).",
    )
    args_parser.add_argument("values", nargs="*", metavar="ARG")

    cat_parser = subparsers.add_parser(
        "cat",
        help="Copy stdin, a file, or the argument text to stdout.",
    )
    cat_parser.add_argument(
        "-l",
        "--literal",
        action="store_true",
        help="Never treat a single argument as a file path.",
    )
    cat_parser.add_argument(
        "-j",
        "--join",
        default=" ",
        help="Separator placed between multiple arguments (default: space).",
    )
    cat_parser.add_argument("values", nargs="*", metavar="ARG")
    return parser


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _stdout() -> IO[Any]:
    return getattr(sys.stdout, "buffer", sys.stdout)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_args(ns: argparse.Namespace) -> int:
    """Resolve the argument list and print one token per record."""
    config = default()
    config.args_delim = parse_delimiter(ns.delim)

    tokens = resolve_args(ns.values, config)

    if ns.table:
        from clin.cli.token_table import render_token_table

        render_token_table(tokens)
        return exit_codes.SUCCESS

    terminator = b"\0" if ns.null else b"\n"
    out = _stdout()
    for token in tokens:
        out.write(token.encode("utf-8", "surrogateescape") + terminator)
    out.flush()
    return exit_codes.SUCCESS


def _handle_cat(ns: argparse.Namespace) -> int:
    """Resolve a byte stream and copy it to stdout."""
    config = default()
    config.literal = ns.literal
    config.read_delim = parse_delimiter(ns.join)

    stream = resolve_stream(ns.values, config)
    out = _stdout()
    try:
        shutil.copyfileobj(stream, out)
        out.flush()
    finally:
        # The fallback stream belongs to the process; anything else was
        # opened for this command.
        if ns.values:
            stream.close()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the clin CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)
    if ns.verbose:
        _configure_logging()

    if ns.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    logger.debug("Running %r with %d argument(s)", ns.command, len(ns.values))
    if ns.command == "args":
        return _handle_args(ns)
    return _handle_cat(ns)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _silence_stdout() -> None:
    """Point stdout at devnull so interpreter shutdown does not re-raise EPIPE."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ClinError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(exit_codes.SUCCESS)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
