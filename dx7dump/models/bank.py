"""
Bank data model: one 32-voice bulk dump.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from dx7dump.formats.dx7.layout import VOICE_COUNT, VOICE_SIZE, voice_offset
from dx7dump.models.voice import Voice
from dx7dump.utils.sysex import CHECKSUM_OFFSET, HEADER_SIZE, PAYLOAD_SIZE


@dataclass(frozen=True)
class Bank:
    """
    A validated 32-voice bank.

    Attributes:
        raw: The complete 4104-byte message
        voices: Decoded voices, voices[0] is voice 1
        source: Where the bank was read from (file path), if known
    """

    raw: bytes = field(repr=False)
    voices: Tuple[Voice, ...] = ()
    source: Optional[str] = None

    @property
    def payload(self) -> bytes:
        return self.raw[HEADER_SIZE : HEADER_SIZE + PAYLOAD_SIZE]

    @property
    def checksum(self) -> int:
        return self.raw[CHECKSUM_OFFSET]

    @property
    def voice_records(self) -> List[bytes]:
        """The 32 raw 128-byte voice records, in bank order."""
        return [
            self.raw[voice_offset(i) : voice_offset(i) + VOICE_SIZE] for i in range(VOICE_COUNT)
        ]

    def voice(self, number: int) -> Voice:
        """
        Get a voice by its 1-based number.

        Args:
            number: Voice number (1-32)
        """
        if not 1 <= number <= len(self.voices):
            raise IndexError(f"Invalid voice number: {number}")
        return self.voices[number - 1]
