"""
Voice and operator data models for DX7 banks.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Operator:
    """
    One of the six FM operators of a voice.

    Values are the raw decoded codes; range checks happen at display time.
    """

    eg_rate_1: int = 0
    eg_rate_2: int = 0
    eg_rate_3: int = 0
    eg_rate_4: int = 0
    eg_level_1: int = 0
    eg_level_2: int = 0
    eg_level_3: int = 0
    eg_level_4: int = 0
    level_scale_break_point: int = 0
    level_scale_left_depth: int = 0
    level_scale_right_depth: int = 0
    level_scale_left_curve: int = 0
    level_scale_right_curve: int = 0
    oscillator_rate_scale: int = 0
    detune: int = 0  # 7 = no detune
    amplitude_modulation_sensitivity: int = 0
    key_velocity_sensitivity: int = 0
    output_level: int = 0
    oscillator_mode: int = 0  # 0 = ratio, 1 = fixed
    frequency_coarse: int = 0
    frequency_fine: int = 0

    @property
    def eg_rates(self) -> Tuple[int, int, int, int]:
        return (self.eg_rate_1, self.eg_rate_2, self.eg_rate_3, self.eg_rate_4)

    @property
    def eg_levels(self) -> Tuple[int, int, int, int]:
        return (self.eg_level_1, self.eg_level_2, self.eg_level_3, self.eg_level_4)

    @property
    def is_fixed(self) -> bool:
        return self.oscillator_mode == 1


@dataclass(frozen=True)
class Voice:
    """
    A single DX7 voice (patch).

    Attributes:
        operators: Operators in logical order, operators[0] is OP1
        name_bytes: The 10 raw name bytes
        raw: The 128-byte record this voice was decoded from
    """

    operators: Tuple[Operator, ...] = ()
    pitch_eg_rate_1: int = 0
    pitch_eg_rate_2: int = 0
    pitch_eg_rate_3: int = 0
    pitch_eg_rate_4: int = 0
    pitch_eg_level_1: int = 0
    pitch_eg_level_2: int = 0
    pitch_eg_level_3: int = 0
    pitch_eg_level_4: int = 0
    algorithm: int = 0  # 0-31, shown as 1-32
    feedback: int = 0
    oscillator_key_sync: int = 0
    lfo_rate: int = 0
    lfo_delay: int = 0
    lfo_pitch_modulation_depth: int = 0
    lfo_amplitude_modulation_depth: int = 0
    lfo_key_sync: int = 0
    lfo_wave: int = 0
    lfo_pitch_modulation_sensitivity: int = 0
    transpose: int = 0  # 24 = C3
    name_bytes: bytes = b""
    raw: bytes = field(default=b"", repr=False)

    def operator(self, number: int) -> Operator:
        """
        Get an operator by its 1-based number as shown on the synth.

        Args:
            number: Operator number (1-6)

        Returns:
            The operator
        """
        if not 1 <= number <= len(self.operators):
            raise IndexError(f"Invalid operator number: {number}")
        return self.operators[number - 1]

    @property
    def pitch_eg_rates(self) -> Tuple[int, int, int, int]:
        return (
            self.pitch_eg_rate_1,
            self.pitch_eg_rate_2,
            self.pitch_eg_rate_3,
            self.pitch_eg_rate_4,
        )

    @property
    def pitch_eg_levels(self) -> Tuple[int, int, int, int]:
        return (
            self.pitch_eg_level_1,
            self.pitch_eg_level_2,
            self.pitch_eg_level_3,
            self.pitch_eg_level_4,
        )

    @property
    def name(self) -> str:
        """
        Voice name for display.

        The name ends at the first NUL byte. Bytes are mapped one-to-one
        (latin-1) so non-ASCII characters survive unchanged.
        """
        return self.name_bytes.split(b"\x00", 1)[0].decode("latin-1")
