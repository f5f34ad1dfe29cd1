"""
Bulk dump validation for DX7 32-voice banks.

A bank is accepted only when every framing byte matches and the checksum
agrees. Checks run in a fixed order and stop at the first failure, so a
message that is broken in several ways always reports the same problem.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dx7dump.utils.checksum import calculate_bank_checksum
from dx7dump.utils.sysex import (
    BANK_SIZE,
    CHECKSUM_OFFSET,
    END_OFFSET,
    FORMAT_32_VOICES,
    HEADER,
    HEADER_SIZE,
    PAYLOAD_SIZE,
    SIZE_LSB,
    SIZE_MSB,
    SUB_STATUS_CHANNEL,
    SYSEX_END,
    SYSEX_START,
    YAMAHA_ID,
)

logger = logging.getLogger(__name__)


class ErrorReason(Enum):
    """Why a bank was rejected."""

    SIZE_MISMATCH = "size_mismatch"
    START_MARKER = "start_marker"
    VENDOR_MARKER = "vendor_marker"
    SUB_STATUS = "sub_status"
    FORMAT = "format"
    SIZE_FIELD = "size_field"
    END_MARKER = "end_marker"
    CHECKSUM = "checksum"


STRUCTURAL_MESSAGES = {
    ErrorReason.START_MARKER: "Did not find sysex start 0xF0.",
    ErrorReason.VENDOR_MARKER: "Did not find Yamaha 0x43.",
    ErrorReason.SUB_STATUS: "Did not find substatus 0 and channel 1.",
    ErrorReason.FORMAT: "Did not find format 9 (32 voices).",
    ErrorReason.SIZE_FIELD: "Did not find size 4096.",
    ErrorReason.END_MARKER: "Did not find sysex end 0xF7.",
}


class BankError(Exception):
    """Base class for rejected bank data."""

    reason: ErrorReason


class SizeMismatchError(BankError):
    """Raised when the message is not exactly 4104 bytes."""

    reason = ErrorReason.SIZE_MISMATCH

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Invalid bank size: {size} (expected {BANK_SIZE})")


class ValidationError(BankError):
    """Raised when bank framing or checksum validation fails."""

    pass


class StructuralError(ValidationError):
    """Raised when a header or trailer marker byte is wrong."""

    def __init__(self, reason: ErrorReason):
        self.reason = reason
        super().__init__(STRUCTURAL_MESSAGES[reason])


class ChecksumError(ValidationError):
    """
    Raised when the stored checksum does not match the data.

    The message gives the expected value as two hex digits, e.g.
    "Should have been 0x7B". The 2012 C++ dx7dump printed the decimal
    value after "0x" ("0x123"), so this line differs from its output.
    """

    reason = ErrorReason.CHECKSUM

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Checksum failed: Should have been 0x{expected:02X}")


@dataclass
class ValidationResult:
    """Result of validating a bank."""

    error: Optional[BankError] = None

    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def reason(self) -> Optional[ErrorReason]:
        return self.error.reason if self.error else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error else ""


class BankValidator:
    """
    Validate a 32-voice bulk dump.

    Example:
        result = BankValidator(data).validate()
        if not result.valid:
            print(result.message)
    """

    def __init__(self, data: bytes):
        self.data = bytes(data)

    def validate(self) -> ValidationResult:
        """Run all checks and return the first failure, if any."""
        try:
            self.check()
        except BankError as e:
            logger.debug("Bank rejected: %s", e)
            return ValidationResult(error=e)
        return ValidationResult()

    def check(self) -> None:
        """
        Run all checks in order.

        Raises:
            SizeMismatchError: If the message is not 4104 bytes
            StructuralError: If a marker byte is wrong
            ChecksumError: If the checksum does not match
        """
        data = self.data

        if len(data) != BANK_SIZE:
            raise SizeMismatchError(len(data))

        if data[0] != SYSEX_START:
            raise StructuralError(ErrorReason.START_MARKER)

        if data[1] != YAMAHA_ID:
            raise StructuralError(ErrorReason.VENDOR_MARKER)

        if data[2] != SUB_STATUS_CHANNEL:
            raise StructuralError(ErrorReason.SUB_STATUS)

        if data[3] != FORMAT_32_VOICES:
            raise StructuralError(ErrorReason.FORMAT)

        if data[4] != SIZE_MSB or data[5] != SIZE_LSB:
            raise StructuralError(ErrorReason.SIZE_FIELD)

        if data[END_OFFSET] != SYSEX_END:
            raise StructuralError(ErrorReason.END_MARKER)

        expected = calculate_bank_checksum(data[HEADER_SIZE : HEADER_SIZE + PAYLOAD_SIZE])
        actual = data[CHECKSUM_OFFSET]
        if expected != actual:
            raise ChecksumError(expected, actual)

        logger.debug("Bank valid (checksum 0x%02X)", actual)


def validate_bank(data: bytes) -> ValidationResult:
    """Validate bank data, returning a result instead of raising."""
    return BankValidator(data).validate()


def verify_bank(data: bytes) -> None:
    """Validate bank data, raising the first failure."""
    BankValidator(data).check()


def validate_dx7_bank_header(data: bytes) -> bool:
    """
    Quick check for a DX7 32-voice bulk dump header.

    Args:
        data: At least the first 6 bytes of a message

    Returns:
        True if the header looks like F0 43 00 09 20 00
    """
    if len(data) < HEADER_SIZE:
        return False

    return bytes(data[:HEADER_SIZE]) == HEADER
