"""
DX7 bank file reader.

Reads .syx files containing a DX7 32-voice bulk dump, validates them and
decodes all voices into a Bank.
"""

import logging
from pathlib import Path
from typing import Union

from dx7dump.formats.dx7.decoder import decode_voice
from dx7dump.formats.dx7.layout import VOICE_COUNT, VOICE_SIZE, voice_offset
from dx7dump.models.bank import Bank
from dx7dump.utils.sysex import HEADER_SIZE
from dx7dump.utils.validation import BankValidator, validate_dx7_bank_header

logger = logging.getLogger(__name__)


class DX7BankReader:
    """
    Reader for DX7 32-voice SysEx bank files.

    Nothing is decoded until the whole message has passed validation.

    Example:
        bank = DX7BankReader.read("rom1a.syx")
        for number, voice in enumerate(bank.voices, 1):
            print(f"{number:02d}: {voice.name}")
    """

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Bank:
        """
        Read a DX7 bank file and return a Bank.

        Args:
            filepath: Path to .syx file

        Returns:
            Parsed Bank object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Bank:
        """
        Parse a bank file.

        Args:
            filepath: Path to .syx file

        Returns:
            Parsed Bank object

        Raises:
            OSError: If the file cannot be opened
            BankError: If the data is not a valid bank
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        logger.debug("Read %d bytes from %s", len(data), filepath)

        return self.parse_bytes(data, source=str(filepath))

    def parse_bytes(self, data: bytes, source: str = None) -> Bank:
        """
        Parse a bank from bytes.

        Args:
            data: Raw SysEx message
            source: Optional name of where the data came from

        Returns:
            Parsed Bank object
        """
        data = bytes(data)

        BankValidator(data).check()

        voices = tuple(
            decode_voice(data[voice_offset(i) : voice_offset(i) + VOICE_SIZE])
            for i in range(VOICE_COUNT)
        )

        logger.debug("Decoded %d voices", len(voices))

        return Bank(raw=data, voices=voices, source=source)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like a DX7 32-voice bank.

        Args:
            filepath: Path to check

        Returns:
            True if the file starts with a 32-voice bulk dump header
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(HEADER_SIZE)
        except OSError:
            return False

        return validate_dx7_bank_header(header)
