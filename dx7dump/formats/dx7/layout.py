"""
DX7 32-voice bulk dump layout.

File Structure (4104 bytes):
    0x000: F0 SysEx start
    0x001: 43 Yamaha
    0x002: 00 Sub-status 0, channel 1
    0x003: 09 Format 9 (32 voices)
    0x004: 20 Byte count MSB  \\ 7-bit split, (0x20 << 7) | 0x00 = 4096
    0x005: 00 Byte count LSB  /
    0x006-0x1005: 32 voice records, 128 bytes each
    0x1006: Checksum
    0x1007: F7 SysEx end

Voice record (128 bytes):
    0-101:   6 operator records, 17 bytes each, OP6 stored first
    102-109: Pitch EG rates and levels
    110-117: Algorithm, feedback/sync, LFO, transpose
    118-127: Name (10 bytes)

Several bytes pack more than one parameter, so every field is described by
an explicit (byte offset, bit offset, bit width) entry below.
"""

from typing import NamedTuple, Tuple

from dx7dump.utils.sysex import HEADER_SIZE


class FieldSpec(NamedTuple):
    """Location of one packed parameter inside a record."""

    name: str
    offset: int
    bit: int = 0
    width: int = 8


VOICE_COUNT = 32
VOICE_SIZE = 128
OPERATOR_COUNT = 6
OPERATOR_SIZE = 17
NAME_OFFSET = 118
NAME_SIZE = 10

# Bytes compared when looking for duplicate voices: everything but the name
VOICE_COMPARE_SIZE = VOICE_SIZE - NAME_SIZE

OPERATOR_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("eg_rate_1", 0),
    FieldSpec("eg_rate_2", 1),
    FieldSpec("eg_rate_3", 2),
    FieldSpec("eg_rate_4", 3),
    FieldSpec("eg_level_1", 4),
    FieldSpec("eg_level_2", 5),
    FieldSpec("eg_level_3", 6),
    FieldSpec("eg_level_4", 7),
    FieldSpec("level_scale_break_point", 8),
    FieldSpec("level_scale_left_depth", 9),
    FieldSpec("level_scale_right_depth", 10),
    # Byte 11: | - - - - | RC RC | LC LC |
    FieldSpec("level_scale_left_curve", 11, 0, 2),
    FieldSpec("level_scale_right_curve", 11, 2, 2),
    # Byte 12: | - | DET DET DET DET | RS RS RS |
    FieldSpec("oscillator_rate_scale", 12, 0, 3),
    FieldSpec("detune", 12, 3, 4),
    # Byte 13: | - - - | KVS KVS KVS | AMS AMS |
    FieldSpec("amplitude_modulation_sensitivity", 13, 0, 2),
    FieldSpec("key_velocity_sensitivity", 13, 2, 3),
    FieldSpec("output_level", 14),
    # Byte 15: | - - | FC FC FC FC FC | M |
    FieldSpec("oscillator_mode", 15, 0, 1),
    FieldSpec("frequency_coarse", 15, 1, 5),
    FieldSpec("frequency_fine", 16),
)

_GLOBAL = OPERATOR_COUNT * OPERATOR_SIZE  # 102

VOICE_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("pitch_eg_rate_1", _GLOBAL + 0),
    FieldSpec("pitch_eg_rate_2", _GLOBAL + 1),
    FieldSpec("pitch_eg_rate_3", _GLOBAL + 2),
    FieldSpec("pitch_eg_rate_4", _GLOBAL + 3),
    FieldSpec("pitch_eg_level_1", _GLOBAL + 4),
    FieldSpec("pitch_eg_level_2", _GLOBAL + 5),
    FieldSpec("pitch_eg_level_3", _GLOBAL + 6),
    FieldSpec("pitch_eg_level_4", _GLOBAL + 7),
    FieldSpec("algorithm", _GLOBAL + 8, 0, 5),
    # Byte 111: | - - - - | OKS | FB FB FB |
    FieldSpec("feedback", _GLOBAL + 9, 0, 3),
    FieldSpec("oscillator_key_sync", _GLOBAL + 9, 3, 1),
    FieldSpec("lfo_rate", _GLOBAL + 10),
    FieldSpec("lfo_delay", _GLOBAL + 11),
    FieldSpec("lfo_pitch_modulation_depth", _GLOBAL + 12),
    FieldSpec("lfo_amplitude_modulation_depth", _GLOBAL + 13),
    # Byte 116: | PMS PMS PMS PMS | WAVE WAVE WAVE | SYNC |
    FieldSpec("lfo_key_sync", _GLOBAL + 14, 0, 1),
    FieldSpec("lfo_wave", _GLOBAL + 14, 1, 3),
    FieldSpec("lfo_pitch_modulation_sensitivity", _GLOBAL + 14, 4, 4),
    FieldSpec("transpose", _GLOBAL + 15),
)


def operator_slot(logical_index: int) -> int:
    """
    Get the disk slot of a logical operator.

    Operators are stored backwards: OP6 first, OP1 last.

    Args:
        logical_index: 0-based logical index (0 = OP1)

    Returns:
        0-based slot index inside the voice's operator block
    """
    return OPERATOR_COUNT - 1 - logical_index


def voice_offset(voice_index: int) -> int:
    """Get the byte offset of a voice record (0-based) in the bank message."""
    return HEADER_SIZE + voice_index * VOICE_SIZE
