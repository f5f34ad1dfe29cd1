"""
dx7dump - Human readable dumps of Yamaha DX7 32-voice SysEx banks.

This library provides tools to:
- Validate DX7 32-voice bulk dump files (.syx)
- Decode the packed voice and operator parameters
- Render banks as diff-friendly text listings
- Find voices with identical parameters

Example usage:
    from dx7dump import DX7BankReader, render_bank, DumpOptions

    bank = DX7BankReader.read("rom1a.syx")
    print(render_bank(bank, DumpOptions(long_form=True)))
"""

__version__ = "1.1.0"
__author__ = "dx7dump Contributors"

from dx7dump.analysis.duplicates import find_duplicates
from dx7dump.formats.dx7.decoder import decode_operator, decode_voice
from dx7dump.formats.dx7.reader import DX7BankReader
from dx7dump.models.bank import Bank
from dx7dump.models.voice import Operator, Voice
from dx7dump.rendering.listing import DumpOptions, render_bank, render_voice

__all__ = [
    "DX7BankReader",
    "decode_operator",
    "decode_voice",
    "Bank",
    "Operator",
    "Voice",
    "DumpOptions",
    "render_bank",
    "render_voice",
    "find_duplicates",
]
