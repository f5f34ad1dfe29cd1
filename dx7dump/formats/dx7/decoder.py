"""
DX7 voice record decoder.

Extracts every packed parameter from a 128-byte voice record using the
field tables in layout.py. Decoding is total: any bit pattern yields a
value masked to the field width. Whether a value is sensible is decided
when it is displayed.
"""

from typing import Dict, Iterable

from dx7dump.formats.dx7.layout import (
    NAME_OFFSET,
    NAME_SIZE,
    OPERATOR_COUNT,
    OPERATOR_FIELDS,
    OPERATOR_SIZE,
    VOICE_FIELDS,
    VOICE_SIZE,
    FieldSpec,
    operator_slot,
)
from dx7dump.models.voice import Operator, Voice


def extract_bits(data: bytes, offset: int, bit: int, width: int) -> int:
    """
    Extract a bit field from one byte.

    Args:
        data: Record bytes
        offset: Byte offset within data
        bit: Position of the field's least significant bit (0 = LSB)
        width: Field width in bits (1-8)

    Returns:
        The field value

    Example:
        >>> extract_bits(bytes([0b0101_1010]), 0, 3, 4)
        11
    """
    return (data[offset] >> bit) & ((1 << width) - 1)


def decode_fields(data: bytes, fields: Iterable[FieldSpec]) -> Dict[str, int]:
    """Decode every field of a table into a name -> value dict."""
    return {f.name: extract_bits(data, f.offset, f.bit, f.width) for f in fields}


def decode_operator(record: bytes) -> Operator:
    """
    Decode a 17-byte operator record.

    Args:
        record: Packed operator bytes

    Returns:
        Decoded Operator
    """
    if len(record) != OPERATOR_SIZE:
        raise ValueError(f"Invalid operator record size: {len(record)} (expected {OPERATOR_SIZE})")

    return Operator(**decode_fields(record, OPERATOR_FIELDS))


def decode_voice(record: bytes) -> Voice:
    """
    Decode a 128-byte voice record.

    The returned voice lists operators in logical order (OP1 first),
    undoing the reversed on-disk order.

    Args:
        record: Packed voice bytes

    Returns:
        Decoded Voice
    """
    if len(record) != VOICE_SIZE:
        raise ValueError(f"Invalid voice record size: {len(record)} (expected {VOICE_SIZE})")

    record = bytes(record)

    operators = []
    for i in range(OPERATOR_COUNT):
        start = operator_slot(i) * OPERATOR_SIZE
        operators.append(decode_operator(record[start : start + OPERATOR_SIZE]))

    return Voice(
        operators=tuple(operators),
        name_bytes=record[NAME_OFFSET : NAME_OFFSET + NAME_SIZE],
        raw=record,
        **decode_fields(record, VOICE_FIELDS),
    )
