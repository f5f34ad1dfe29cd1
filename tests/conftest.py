"""Test configuration and fixtures."""

from typing import List, Optional

import pytest

HEADER = bytes([0xF0, 0x43, 0x00, 0x09, 0x20, 0x00])


def build_bank(voices: Optional[List[bytes]] = None, checksum: Optional[int] = None) -> bytes:
    """
    Build a 4104-byte bank message.

    Missing voices are zero-filled. The checksum is computed unless given.
    """
    voices = list(voices or [])
    voices += [bytes(128)] * (32 - len(voices))
    payload = b"".join(voices)
    assert len(payload) == 4096

    if checksum is None:
        checksum = -sum(b & 0x7F for b in payload) & 0x7F

    return HEADER + payload + bytes([checksum, 0xF7])


def build_voice() -> bytes:
    """
    Build a voice record with known, distinct values.

    Operator n has EG rate 1 = 10 * n. OP1 is a ratio operator, OP2 a
    fixed frequency operator at 10 Hz.
    """
    record = bytearray(128)

    for slot in range(6):
        number = 6 - slot  # OP6 is stored first
        base = slot * 17
        record[base] = 10 * number
        record[base + 4] = 99  # EG level 1
        record[base + 14] = 90 + number  # output level

    # OP1 (slot 5)
    op1 = 5 * 17
    record[op1 + 8] = 39  # break point C3
    record[op1 + 9] = 12  # left depth
    record[op1 + 10] = 34  # right depth
    record[op1 + 11] = 0b0000_1101  # right curve 3 (+LIN), left curve 1 (-EXP)
    record[op1 + 12] = (7 << 3) | 2  # detune 7, rate scale 2
    record[op1 + 13] = (5 << 2) | 3  # key velocity 5, amp mod 3
    record[op1 + 15] = (1 << 1) | 0  # coarse 1, ratio
    record[op1 + 16] = 50  # fine

    # OP2 (slot 4): fixed 10 Hz
    op2 = 4 * 17
    record[op2 + 15] = (1 << 1) | 1  # coarse 1, fixed

    record[102:110] = bytes([99, 98, 97, 96, 50, 51, 52, 53])  # pitch EG
    record[110] = 21  # algorithm 22
    record[111] = (1 << 3) | 7  # osc key sync on, feedback 7
    record[112] = 35  # LFO rate
    record[113] = 1  # LFO delay
    record[114] = 5  # LFO pitch mod depth
    record[115] = 6  # LFO amp mod depth
    record[116] = (3 << 4) | (4 << 1) | 1  # PMS 3, wave 4 (Sine), key sync on
    record[117] = 24  # transpose C3
    record[118:128] = b"BRASS   1 "

    return bytes(record)


@pytest.fixture
def zero_bank():
    """Return a valid bank with an all-zero payload."""
    return build_bank()


@pytest.fixture
def voice_record():
    """Return a 128-byte voice record with known values."""
    return build_voice()


@pytest.fixture
def sample_bank(voice_record):
    """Return a valid bank whose first voice is the known voice record."""
    return build_bank([voice_record])


@pytest.fixture
def bank_file(tmp_path, sample_bank):
    """Return path to a valid bank file on disk."""
    path = tmp_path / "bank.syx"
    path.write_bytes(sample_bank)
    return path
