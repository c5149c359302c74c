"""PRUDP packet: parsing from and serialising to wire bytes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .checksum import make_checksum
from .stream import ByteStream
from .typeflags import PacketFlags, PacketType, check_flag, read_packet_type
from .vport import VPort

SECURE_SERVICE = "grfs_secure"


@dataclass
class QPacket:
    """One PRUDP packet; optional fields are None when absent."""

    source: VPort = field(default_factory=lambda: VPort(0, 0))
    destination: VPort = field(default_factory=lambda: VPort(0, 0))
    packet_type_flags: int = 0
    session_id: int = 0
    signature: int = 0
    sequence_id: int = 0
    conn_signature: int | None = None
    fragment_id: int | None = None
    payload_size: int | None = None
    payload: bytes | None = None
    checksum: int = 0

    @property
    def packet_type(self) -> PacketType:
        return read_packet_type(self.packet_type_flags)

    @property
    def has_size(self) -> bool:
        return check_flag(self.packet_type_flags, PacketFlags.HAS_SIZE)

    @classmethod
    def parse(cls, data: bytes, service_name: str) -> QPacket:
        """Parse a packet; raises IndexError if the data is too short."""
        reader = ByteStream(data)
        packet = cls(
            source=VPort.from_byte(reader.read_u8()),
            destination=VPort.from_byte(reader.read_u8()),
        )
        packet.packet_type_flags = reader.read_u8()
        packet.session_id = reader.read_u8()
        packet.signature = reader.read_u32()
        packet.sequence_id = reader.read_u16()

        packet_type = packet.packet_type
        if packet_type in (PacketType.SYN, PacketType.CONNECT):
            packet.conn_signature = reader.read_u32()
            if service_name == SECURE_SERVICE and packet_type is PacketType.CONNECT:
                packet.payload = reader.read_bytes(reader.remaining() - 1)

        if packet_type is PacketType.DATA:
            packet.fragment_id = reader.read_u8()
            if packet.has_size:
                packet.payload_size = reader.read_u16()
                packet.payload = reader.read_bytes(packet.payload_size)
            else:
                packet.payload = reader.read_bytes(reader.remaining() - 1)

        packet.checksum = reader.read_u8()
        return packet

    def serialize(self, auto_checksum: bool = True) -> bytes:
        """Wire bytes; with auto_checksum the checksum is computed and stored."""
        writer = ByteStream()
        writer.write_u8(self.source.to_byte())
        writer.write_u8(self.destination.to_byte())
        writer.write_u8(self.packet_type_flags)
        writer.write_u8(self.session_id)
        writer.write_u32(self.signature)
        writer.write_u16(self.sequence_id)

        packet_type = self.packet_type
        has_size = self.has_size
        if packet_type in (PacketType.SYN, PacketType.CONNECT):
            if self.conn_signature is not None:
                writer.write_u32(self.conn_signature)
            if has_size and self.payload_size is not None:
                writer.write_u16(self.payload_size)
            if self.payload is not None:
                writer.write_bytes(self.payload)

        if packet_type is PacketType.DATA:
            if self.fragment_id is not None:
                writer.write_u8(self.fragment_id)
            if has_size and self.payload_size is not None:
                writer.write_u16(self.payload_size)
            if self.payload is not None:
                if has_size:
                    writer.write_u16(len(self.payload))
                writer.write_bytes(self.payload)

        if auto_checksum:
            self.checksum = make_checksum(writer.data, 0xFF)
        writer.write_u8(self.checksum)
        return writer.data