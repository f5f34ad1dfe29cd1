"""DX7 32-voice bulk dump format handlers."""

from dx7dump.formats.dx7 import layout
from dx7dump.formats.dx7.decoder import decode_operator, decode_voice, extract_bits
from dx7dump.formats.dx7.reader import DX7BankReader

__all__ = ["layout", "decode_operator", "decode_voice", "extract_bits", "DX7BankReader"]
