"""
dx7dump - Human readable dumps of Yamaha DX7 sysex banks.

A CLI tool for listing, comparing and checking DX7 32-voice bank files.
"""

import logging
import sys
from typing import List, Optional

import typer

from cli.commands.dump import dump
from cli.display.output import print_error

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# Exit code the option parser uses for bad usage
USAGE_ERROR = 2

# Main app
app = typer.Typer(
    name="dx7dump",
    help="Format Yamaha DX7 sysex banks as human readable text.",
    add_completion=False,
    context_settings=CONTEXT_SETTINGS,
)

# Single command: options and filename directly on dx7dump
app.command(name="dump", context_settings=CONTEXT_SETTINGS)(dump)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI and return the exit code.

    Usage errors (unknown options, bad option values) exit with 1. The app
    runs in standalone mode, so every outcome arrives as SystemExit.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:]
    """
    try:
        app(args=argv, prog_name="dx7dump")
    except SystemExit as e:
        code = e.code
    else:
        code = 0

    if code == USAGE_ERROR:
        logger.debug("Usage error for arguments %s", argv)
        print_error("Unexpected option. Try -h for help.")
        return 1

    if code is None:
        return 0
    return code if isinstance(code, int) else 1


def run() -> None:
    """Entry point for the CLI."""
    sys.exit(main())


if __name__ == "__main__":
    run()
