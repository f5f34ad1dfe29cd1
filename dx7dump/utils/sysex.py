"""
SysEx framing of a DX7 32-voice bulk dump.

Message (4104 bytes):
    F0 43 00 09 20 00 <4096 data bytes> <checksum> F7
"""

SYSEX_START = 0xF0
YAMAHA_ID = 0x43
SUB_STATUS_CHANNEL = 0x00  # sub-status 0, channel 1
FORMAT_32_VOICES = 0x09
SIZE_MSB = 0x20
SIZE_LSB = 0x00
SYSEX_END = 0xF7

HEADER_SIZE = 6
PAYLOAD_SIZE = (SIZE_MSB << 7) | SIZE_LSB  # 4096
CHECKSUM_OFFSET = HEADER_SIZE + PAYLOAD_SIZE  # 4102
END_OFFSET = CHECKSUM_OFFSET + 1  # 4103
BANK_SIZE = END_OFFSET + 1  # 4104

HEADER = bytes([SYSEX_START, YAMAHA_ID, SUB_STATUS_CHANNEL, FORMAT_32_VOICES, SIZE_MSB, SIZE_LSB])
