"""
Value formatting for DX7 voice parameters.

Turns raw parameter codes into the text shown in listings: note names
for transpose and level scaling break points, and fixed oscillator
frequencies in Hz.
"""

from dx7dump.utils.dx7_tables import LookupResult, note_name

# Largest valid codes
TRANSPOSE_MAX = 48
BREAK_POINT_MAX = 99


def two_digits(value: int) -> str:
    """Format a raw value as zero-padded decimal, e.g. 7 -> "07"."""
    return f"{value:02d}"


def transpose_name(value: int) -> LookupResult:
    """
    Get the key a transpose value shifts middle C to.

    0 is C1, 24 is C3 (no transpose), 48 is C5.

    Args:
        value: Transpose code (0-48)

    Returns:
        LookupResult with a name like "C3"
    """
    if not 0 <= value <= TRANSPOSE_MAX:
        return LookupResult(value)

    return LookupResult(value, f"{note_name(value)}{value // 12 + 1}")


def break_point_name(value: int) -> LookupResult:
    """
    Get the key of a level scaling break point.

    0 is A-1, 39 is C3, 99 is C8.

    Args:
        value: Break point code (0-99)

    Returns:
        LookupResult with a name like "A-1"
    """
    if not 0 <= value <= BREAK_POINT_MAX:
        return LookupResult(value)

    # Shift up an octave before dividing so the first notes (A-1 to B-1)
    # land in octave -1 instead of 0.
    octave = (value - 3 + 12) // 12 - 1

    return LookupResult(value, f"{note_name(value + 9)}{octave}")


def fixed_frequency(coarse: int, fine: int) -> float:
    """
    Get the frequency of an operator in fixed mode.

    Coarse selects the decade (1, 10, 100 or 1000 Hz), fine moves
    logarithmically within it.

    Args:
        coarse: Frequency coarse code (only coarse mod 4 is significant)
        fine: Frequency fine code (0-99)

    Returns:
        Frequency in Hz
    """
    return 10 ** (coarse % 4 + fine / 100)


def format_frequency(hz: float) -> str:
    """Format a frequency with six significant digits, e.g. "31.6228"."""
    return f"{hz:g}"
