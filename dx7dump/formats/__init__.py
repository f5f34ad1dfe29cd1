"""Format handlers for DX7 SysEx data."""

from dx7dump.formats.dx7 import DX7BankReader

__all__ = ["DX7BankReader"]
