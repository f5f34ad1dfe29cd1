"""
Console output helpers.

Listings are written as raw bytes so voice names reach stdout exactly as
stored in the bank. Diagnostics go through Rich.
"""

import os

import typer
from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)


def listing_filename(filename: str) -> str:
    """
    Map a command line path to listing text, one character per byte.

    The path is encoded the way the OS passed it to us (including
    undecodable bytes), so it can go through echo_listing() unchanged.
    """
    return os.fsencode(filename).decode("latin-1")


def echo_listing(text: str) -> None:
    """Write listing text to stdout, one byte per character (latin-1)."""
    typer.echo(text.encode("latin-1"))


def print_error(message: str) -> None:
    """Print an error message to stdout."""
    # Undecodable bytes from a path show as U+FFFD
    message = message.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)
