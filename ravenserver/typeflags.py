"""Packet type and flag bits packed in one PRUDP byte."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class PacketFlags(IntFlag):
    ACK = 1 << 0
    RELIABLE = 1 << 1
    NEED_ACK = 1 << 2
    HAS_SIZE = 1 << 3


class PacketType(IntEnum):
    SYN = 0
    CONNECT = 1
    DATA = 2
    DISCONNECT = 3
    PING = 4
    USER = 5
    ROUTE = 6
    RAW = 7


def read_packet_type(type_flags: int) -> PacketType:
    """The packet type held in the low three bits."""
    return PacketType(type_flags & 0x07)


def check_flag(type_flags: int, flag: int) -> bool:
    """Whether the flag is set in the upper five bits."""
    return (type_flags & ((int(flag) << 3) & 0xFF)) != 0


def make_type_flags(packet_type: int, flags: int = 0) -> int:
    """Pack a type and flags into one byte."""
    return ((int(flags) << 3) | (int(packet_type) & 0x07)) & 0xFF