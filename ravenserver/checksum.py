"""PRUDP packet checksum."""

from __future__ import annotations

import struct

# Seeds for protocols that need one; all others use zero.
_PROTOCOL_SEEDS = {3: 0xE3}


def protocol_setting(protocol: int) -> int:
    """Checksum seed for a protocol number (a byte value)."""
    if not 0 <= protocol <= 0xFF:
        raise ValueError(f"protocol must be a byte value, got {protocol}")
    return _PROTOCOL_SEEDS.get(protocol, 0x00)


def make_checksum(data: bytes, setting: int = 0xFF) -> int:
    """Checksum of a packet; a setting of 0xFF derives the seed from the first byte."""
    if not data:
        return 0
    if setting == 0xFF:
        setting = protocol_setting(data[0] >> 4)

    full = len(data) - len(data) % 4
    sum32 = sum(word for (word,) in struct.iter_unpack("<I", data[:full])) & 0xFFFFFFFF
    remainder_sum = (setting + sum(data[full:])) & 0xFF
    return (sum(sum32.to_bytes(4, "little")) + remainder_sum) & 0xFF