"""
Dump command - list the voices of a DX7 32-voice bank.
"""

import logging
from typing import Optional

import typer

from cli.display.output import console, echo_listing, listing_filename, print_error
from dx7dump import __version__
from dx7dump.analysis.duplicates import find_duplicates, format_duplicates
from dx7dump.formats.dx7.reader import DX7BankReader
from dx7dump.models.bank import Bank
from dx7dump.rendering.listing import DumpOptions, iter_bank
from dx7dump.utils.validation import SizeMismatchError, ValidationError

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Show version information."""
    if not value:
        return

    console.print(f"[bold]dx7dump[/bold] {__version__}")
    console.print("Yamaha DX7 Sysex Dump")
    console.print("Copyright 2012, Ted Felix (GPLv3+)")
    console.print("Updated in 2019 by Francois W. Nel")
    raise typer.Exit()


def debug_callback(value: bool) -> None:
    """Send debug logging to stderr."""
    if value:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def load_bank(filename: str) -> Bank:
    """
    Load and validate a bank, reporting failures.

    Raises:
        typer.Exit: With code 1 if the file cannot be used
    """
    try:
        return DX7BankReader().parse_file(filename)
    except SizeMismatchError as e:
        logger.debug("%s", e)
        print_error(f"Error: {filename} does not match the expected size of a sysex file.")
    except ValidationError as e:
        print_error(str(e))
        print_error(f"Error: {filename} is not a valid sysex file.")
    except OSError as e:
        print_error(f"Error: Can't open {filename}: {e.strerror or e}")
    raise typer.Exit(1)


def show_bank(bank: Bank, options: DumpOptions) -> None:
    """Print the listing and, if requested, the duplicate report."""
    for block in iter_bank(bank, options):
        echo_listing(block)

    if options.find_duplicates:
        for line in format_duplicates(find_duplicates(bank.voice_records)):
            echo_listing(line)


def dump(
    filename: Optional[str] = typer.Argument(
        None, help="DX7 32-voice sysex file", show_default=False
    ),
    long: bool = typer.Option(False, "--long", "-l", help="List all parameters for all 32 patches."),
    find_dups: bool = typer.Option(
        False, "--find-duplicates", "-f", help="Report patches with identical parameters."
    ),
    patch: Optional[int] = typer.Option(
        None, "--patch", "-p", metavar="N", help="List all parameters for the specified patch."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Display version information.",
    ),
    debug: bool = typer.Option(
        False, "--debug", callback=debug_callback, is_eager=True, help="Enable debug logging."
    ),
) -> None:
    """
    Format a Yamaha DX7 sysex bank as human readable text.

    The output is stable, so two banks can be compared with diff.

    Examples:

        dx7dump rom1a.syx

        dx7dump -l rom1a.syx > rom1a.txt

        dx7dump -p 12 rom1a.syx

        dx7dump -f rom1a.syx
    """
    if filename is None:
        print_error("Error: Please specify a sysex file.")
        raise typer.Exit(1)

    bank = load_bank(filename)

    options = DumpOptions(
        long_form=long,
        patch=patch,
        find_duplicates=find_dups,
        filename=listing_filename(filename),
    )
    logger.debug("Dump options: %s", options)

    show_bank(bank, options)
