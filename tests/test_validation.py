"""Tests for bank checksum and structure validation."""

import ast
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dx7dump.formats.dx7.layout import VOICE_COUNT, VOICE_SIZE
from dx7dump.utils.checksum import calculate_bank_checksum, verify_checksum
from dx7dump.utils.sysex import BANK_SIZE, HEADER, HEADER_SIZE, PAYLOAD_SIZE
from dx7dump.utils.validation import (
    BankValidator,
    ChecksumError,
    ErrorReason,
    SizeMismatchError,
    StructuralError,
    validate_bank,
    validate_dx7_bank_header,
    verify_bank,
)

from conftest import build_bank


def corrupt(data: bytes, offset: int, value: int) -> bytes:
    """Return a copy of data with one byte replaced."""
    out = bytearray(data)
    out[offset] = value
    return bytes(out)


class TestChecksum:
    """Test cases for the bulk dump checksum."""

    def test_zero_payload(self):
        """Test that an all-zero payload has checksum 0."""
        assert calculate_bank_checksum(bytes(4096)) == 0

    def test_small_sum(self):
        """Test two's complement of a small sum."""
        assert calculate_bank_checksum(bytes([0x01, 0x02])) == 125

    def test_high_bits_ignored(self):
        """Test that each byte is masked to 7 bits before summing."""
        assert calculate_bank_checksum(bytes([0x81])) == calculate_bank_checksum(bytes([0x01]))

    def test_sum_wraps(self):
        """Test sums larger than 7 bits."""
        data = bytes([0x7F] * 3)  # 381
        assert calculate_bank_checksum(data) == (-381) & 0x7F

    def test_list_input(self):
        """Test that a list of ints is accepted."""
        assert calculate_bank_checksum([1, 2]) == 125

    def test_verify_agrees_with_stored_checksum(self, sample_bank):
        """Test that recomputing the checksum of a valid bank matches the stored byte."""
        payload = sample_bank[6:4102]
        assert verify_checksum(payload, sample_bank[4102])
        assert not verify_checksum(payload, (sample_bank[4102] + 1) & 0x7F)


class TestBankValidator:
    """Test cases for bank framing validation."""

    def test_valid_bank(self, sample_bank):
        """Test that a well-formed bank passes."""
        result = BankValidator(sample_bank).validate()

        assert result.valid
        assert result.reason is None
        assert result.message == ""

    def test_size_mismatch(self, zero_bank):
        """Test that a wrong-length buffer is rejected before anything else."""
        result = validate_bank(zero_bank[:-1])

        assert not result.valid
        assert result.reason == ErrorReason.SIZE_MISMATCH
        assert isinstance(result.error, SizeMismatchError)

        with pytest.raises(SizeMismatchError):
            verify_bank(zero_bank + b"\x00")

    @pytest.mark.parametrize(
        "offset, value, reason, message",
        [
            (0, 0x00, ErrorReason.START_MARKER, "Did not find sysex start 0xF0."),
            (1, 0x41, ErrorReason.VENDOR_MARKER, "Did not find Yamaha 0x43."),
            (2, 0x01, ErrorReason.SUB_STATUS, "Did not find substatus 0 and channel 1."),
            (3, 0x00, ErrorReason.FORMAT, "Did not find format 9 (32 voices)."),
            (4, 0x01, ErrorReason.SIZE_FIELD, "Did not find size 4096."),
            (5, 0x01, ErrorReason.SIZE_FIELD, "Did not find size 4096."),
            (4103, 0x00, ErrorReason.END_MARKER, "Did not find sysex end 0xF7."),
        ],
    )
    def test_structural_errors(self, zero_bank, offset, value, reason, message):
        """Test that each marker byte has its own error."""
        result = validate_bank(corrupt(zero_bank, offset, value))

        assert not result.valid
        assert result.reason == reason
        assert result.message == message
        assert isinstance(result.error, StructuralError)

    def test_checksum_error(self, zero_bank):
        """Test that a bad checksum reports the expected value."""
        data = corrupt(zero_bank, 6, 0x05)

        with pytest.raises(ChecksumError) as excinfo:
            verify_bank(data)

        assert excinfo.value.expected == 0x7B
        assert excinfo.value.actual == 0x00
        assert str(excinfo.value) == "Checksum failed: Should have been 0x7B"

    def test_payload_change_detected(self, sample_bank):
        """Test that changing one payload byte invalidates the bank."""
        data = corrupt(sample_bank, 100, sample_bank[100] ^ 0x01)

        assert validate_bank(data).reason == ErrorReason.CHECKSUM

    def test_first_failure_wins(self, zero_bank):
        """Test that a vendor error is reported even when the checksum is also wrong."""
        data = corrupt(corrupt(zero_bank, 1, 0x41), 10, 0x22)

        assert validate_bank(data).reason == ErrorReason.VENDOR_MARKER

    def test_start_before_end_marker(self, zero_bank):
        """Test check order between the start and end markers."""
        data = corrupt(corrupt(zero_bank, 0, 0x00), 4103, 0x00)

        assert validate_bank(data).reason == ErrorReason.START_MARKER

    def test_explicit_checksum(self):
        """Test that a bank built with a wrong checksum is rejected."""
        data = build_bank(checksum=0x11)

        assert validate_bank(data).reason == ErrorReason.CHECKSUM


class TestHeaderProbe:
    """Test the quick header check."""

    def test_valid_header(self, zero_bank):
        assert validate_dx7_bank_header(zero_bank)

    def test_short_data(self):
        assert not validate_dx7_bank_header(b"\xf0\x43")

    def test_single_voice_header(self):
        """Test that a single voice dump header (format 0) is not accepted."""
        assert not validate_dx7_bank_header(bytes([0xF0, 0x43, 0x00, 0x00, 0x01, 0x1B]))


class TestFraming:
    """Test cases for the shared message framing constants."""

    def test_header_bytes(self, zero_bank):
        assert HEADER == zero_bank[:HEADER_SIZE]
        assert HEADER == bytes([0xF0, 0x43, 0x00, 0x09, 0x20, 0x00])

    def test_payload_holds_all_voices(self):
        """Test that the size field in the header covers exactly 32 voice records."""
        assert PAYLOAD_SIZE == VOICE_COUNT * VOICE_SIZE == 4096
        assert BANK_SIZE == 4104

    def test_utils_do_not_import_formats(self):
        """Test that the validator side can be imported without the format package."""
        utils_dir = Path(__file__).parent.parent / "dx7dump" / "utils"

        for source in utils_dir.glob("*.py"):
            tree = ast.parse(source.read_text())
            for node in ast.walk(tree):
                if isinstance(node, ast.ImportFrom) and node.module:
                    assert not node.module.startswith("dx7dump.formats"), source.name
