"""
CLI display modules.
"""

from cli.display.output import console, echo_listing, listing_filename, print_error

__all__ = [
    "console",
    "echo_listing",
    "listing_filename",
    "print_error",
]
