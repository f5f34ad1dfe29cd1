"""
DX7 parameter lookup tables.

Maps the small integer codes stored in a voice record to display names.
Based on the DX7 32-voice bulk dump (VMEM) documentation.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

OUT_OF_RANGE = "*out of range*"

ON_OFF = ("Off", "On")

# Keyboard level scaling curves (left and right share the table)
CURVES = ("-LIN", "-EXP", "+EXP", "+LIN")

LFO_WAVES = (
    "Triangle",
    "Sawtooth Down",
    "Sawtooth Up",
    "Square",
    "Sine",
    "Sample and Hold",
)

OSCILLATOR_MODES = ("Ratio", "Fixed")

NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")


@dataclass(frozen=True)
class LookupResult:
    """
    Outcome of looking up a raw code.

    Attributes:
        code: The raw value that was looked up
        name: Display name, or None when the code has no entry
    """

    code: int
    name: Optional[str] = None

    @property
    def in_range(self) -> bool:
        return self.name is not None

    def __str__(self) -> str:
        return self.name if self.name is not None else OUT_OF_RANGE


def lookup(table: Sequence[str], code: int) -> LookupResult:
    """
    Look up a code in a table without ever failing.

    Args:
        table: Names indexed by code
        code: Raw code from the voice record

    Returns:
        LookupResult, out of range when the code has no entry
    """
    if 0 <= code < len(table):
        return LookupResult(code, table[code])
    return LookupResult(code)


def on_off(code: int) -> LookupResult:
    return lookup(ON_OFF, code)


def curve_name(code: int) -> LookupResult:
    return lookup(CURVES, code)


def lfo_wave_name(code: int) -> LookupResult:
    return lookup(LFO_WAVES, code)


def oscillator_mode_name(code: int) -> LookupResult:
    return lookup(OSCILLATOR_MODES, code)


def note_name(value: int) -> str:
    """Get the note name for a semitone count (octave ignored)."""
    return NOTE_NAMES[value % 12]
