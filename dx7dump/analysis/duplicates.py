"""
Duplicate voice detection.

Two voices are duplicates when every parameter byte matches. The trailing
name bytes are ignored, so renamed copies of the same sound are found.
"""

from typing import List, Sequence, Tuple

from dx7dump.formats.dx7.layout import VOICE_COMPARE_SIZE


def find_duplicates(voice_records: Sequence[bytes]) -> List[Tuple[int, int]]:
    """
    Find all pairs of voices with identical parameters.

    Args:
        voice_records: Raw voice records in bank order

    Returns:
        1-based (i, j) pairs with i < j, sorted by i then j
    """
    keys = [bytes(record[:VOICE_COMPARE_SIZE]) for record in voice_records]
    pairs = []

    for i in range(len(keys)):
        for j in range(i + 1, len(keys)):
            if keys[i] == keys[j]:
                pairs.append((i + 1, j + 1))

    return pairs


def format_duplicates(pairs: Sequence[Tuple[int, int]]) -> List[str]:
    """Format duplicate pairs as report lines."""
    return [f"Found duplicates: Voice {i} and voice {j}." for i, j in pairs]
