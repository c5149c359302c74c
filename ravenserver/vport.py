"""Virtual port: stream type and port number packed in one byte."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class StreamType(IntEnum):
    DO = 1
    RV = 2
    OLD_RV_SEC = 3
    SBMGMT = 4
    NAT = 5
    SESSION_DISCOVERY = 6
    NAT_ECHO = 7
    ROUTING = 8
    GAME = 9
    RV_SECURE = 10
    RELAY = 11


@dataclass(frozen=True)
class VPort:
    type: int
    port: int

    @classmethod
    def from_byte(cls, raw: int) -> VPort:
        return cls((raw >> 4) & 0x0F, raw & 0x0F)

    def to_byte(self) -> int:
        return ((self.type << 4) | (self.port & 0x0F)) & 0xFF