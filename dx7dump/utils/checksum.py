"""
DX7 bulk dump checksum utilities.

The 32-voice bulk dump carries one checksum byte after the 4096 data bytes:
1. Sum all data bytes, each masked to its low 7 bits
2. Take the two's complement of the sum
3. Keep the lower 7 bits

The checksum ensures data integrity during MIDI transmission.
"""

from typing import List, Union


def calculate_bank_checksum(data: Union[bytes, List[int]]) -> int:
    """
    Calculate the checksum for bulk dump voice data.

    Args:
        data: The voice data bytes (not including header, checksum or F7)

    Returns:
        Checksum value (0-127)

    Example:
        >>> calculate_bank_checksum(bytes(4096))
        0
        >>> calculate_bank_checksum(bytes([0x01, 0x02]))
        125
    """
    if isinstance(data, list):
        data = bytes(data)

    total = sum(byte & 0x7F for byte in data)

    return -total & 0x7F


def verify_checksum(data: Union[bytes, List[int]], expected_checksum: int) -> bool:
    """
    Verify a bulk dump checksum.

    Args:
        data: Bytes the checksum was calculated over
        expected_checksum: The checksum byte from the message

    Returns:
        True if checksum is valid, False otherwise
    """
    return calculate_bank_checksum(data) == expected_checksum
