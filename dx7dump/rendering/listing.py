"""
Text listings of DX7 banks.

Short listings show one line per voice; long listings show every
parameter. Output is deterministic so two dumps can be compared with
diff.

Long listing layout (one voice):

    Filename: rom1a.syx
    Voice: 01
    Name: BRASS   1

    Algorithm: 22
    Pitch Envelope Generator:
      Rate 1: 84
      ...
    Operator 01:
      Envelope Generator:
      ...
    -------------------------------------------------
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from dx7dump.models.bank import Bank
from dx7dump.models.voice import Operator, Voice
from dx7dump.rendering.values import (
    break_point_name,
    fixed_frequency,
    format_frequency,
    transpose_name,
    two_digits,
)
from dx7dump.utils.dx7_tables import curve_name, lfo_wave_name, on_off, oscillator_mode_name

SEPARATOR = "-" * 49


@dataclass(frozen=True)
class DumpOptions:
    """
    What to show for a bank.

    Attributes:
        long_form: Show every parameter instead of one line per voice
        patch: Only show this voice (1-based); None shows all
        find_duplicates: Report voices with identical parameters
        filename: Shown in the long listing header
    """

    long_form: bool = False
    patch: Optional[int] = None
    find_duplicates: bool = False
    filename: str = ""


def _named(label: str, value: int, name: object) -> str:
    return f"{label}: {two_digits(value)} ({name})"


def render_short(voice: Voice, index: int) -> str:
    """Render the one-line listing for a voice, e.g. "01: BRASS   1"."""
    return f"{two_digits(index)}: {voice.name}"


def _envelope_lines(rates, levels, indent: str) -> List[str]:
    lines = [f"{indent}Rate {n}: {two_digits(rate)}" for n, rate in enumerate(rates, 1)]
    lines += [f"{indent}Level {n}: {two_digits(level)}" for n, level in enumerate(levels, 1)]
    return lines


def _operator_lines(op: Operator, number: int) -> List[str]:
    # "Operator NN: " and "Frequency Course" match listings from the 2012 dx7dump
    lines = ["", f"Operator {two_digits(number)}: ", "  Envelope Generator:"]
    lines += _envelope_lines(op.eg_rates, op.eg_levels, "    ")
    bp = op.level_scale_break_point
    left, right = op.level_scale_left_curve, op.level_scale_right_curve
    lines += [
        "  Level Scale:",
        _named("    Break Point", bp, break_point_name(bp)),
        f"    Left Depth: {two_digits(op.level_scale_left_depth)}",
        f"    Right Depth: {two_digits(op.level_scale_right_depth)}",
        _named("    Left Curve", left, curve_name(left)),
        _named("    Right Curve", right, curve_name(right)),
        f"  Oscillator Rate Scale: {two_digits(op.oscillator_rate_scale)}",
        f"  Amp Mod Sense: {two_digits(op.amplitude_modulation_sensitivity)}",
        f"  Key Velocity Sense: {two_digits(op.key_velocity_sensitivity)}",
        f"  Output Level: {two_digits(op.output_level)}",
        _named("  Oscillator Mode", op.oscillator_mode, oscillator_mode_name(op.oscillator_mode)),
    ]

    if op.is_fixed:
        hz = fixed_frequency(op.frequency_coarse, op.frequency_fine)
        lines.append(f"  Frequency Course: {format_frequency(hz)} Hz")
    else:
        lines.append(f"  Frequency Course: {two_digits(op.frequency_coarse)}")

    lines += [
        f"  Frequency Fine: {two_digits(op.frequency_fine)}",
        f"  Detune: {two_digits(op.detune)}",
    ]
    return lines


def render_long(voice: Voice, index: int, filename: str = "") -> str:
    """
    Render the full parameter listing for a voice.

    Args:
        voice: Decoded voice
        index: 1-based voice number
        filename: Source file shown in the header

    Returns:
        Multi-line text, starting with a blank line and ending with a
        separator and a blank line
    """
    lines = [
        "",
        f"Filename: {filename}",
        f"Voice: {two_digits(index)}",
        f"Name: {voice.name}",
        "",
        f"Algorithm: {two_digits(voice.algorithm + 1)}",
        "Pitch Envelope Generator:",
    ]
    lines += _envelope_lines(voice.pitch_eg_rates, voice.pitch_eg_levels, "  ")
    lines += [
        f"Feedback: {two_digits(voice.feedback)}",
        _named("Oscillator Key Sync", voice.oscillator_key_sync, on_off(voice.oscillator_key_sync)),
        "LFO:",
        f"  Rate: {two_digits(voice.lfo_rate)}",
        f"  Delay: {two_digits(voice.lfo_delay)}",
        f"  Amp Mod Depth: {two_digits(voice.lfo_amplitude_modulation_depth)}",
        f"  Pitch Mod Depth: {two_digits(voice.lfo_pitch_modulation_depth)}",
        _named("  Key Sync", voice.lfo_key_sync, on_off(voice.lfo_key_sync)),
        _named("  Wave", voice.lfo_wave, lfo_wave_name(voice.lfo_wave)),
        f"Pitch Mod Sense: {two_digits(voice.lfo_pitch_modulation_sensitivity)}",
        _named("Transpose", voice.transpose, transpose_name(voice.transpose)),
    ]

    for number, op in enumerate(voice.operators, 1):
        lines += _operator_lines(op, number)

    lines += ["", SEPARATOR, ""]
    return "\n".join(lines)


def render_voice(voice: Voice, index: int, long_form: bool = False, filename: str = "") -> str:
    """Render a voice in short or long form."""
    if long_form:
        return render_long(voice, index, filename)
    return render_short(voice, index)


def iter_bank(bank: Bank, options: DumpOptions) -> Iterator[str]:
    """
    Yield the rendered blocks for a bank, one per shown voice.

    A patch number outside 1-32 matches no voice and yields nothing.
    """
    long_form = options.long_form or options.patch is not None

    for index, voice in enumerate(bank.voices, 1):
        if options.patch is not None and options.patch != index:
            continue
        yield render_voice(voice, index, long_form, options.filename)


def render_bank(bank: Bank, options: Optional[DumpOptions] = None) -> str:
    """Render a bank listing as one string (without trailing newline)."""
    return "\n".join(iter_bank(bank, options or DumpOptions()))
