import pytest

from ravenserver.checksum import make_checksum
from ravenserver.packet import QPacket
from ravenserver.typeflags import PacketFlags, PacketType, make_type_flags
from ravenserver.vport import VPort


def _packet(packet_type, flags=0, **fields):
    return QPacket(
        source=VPort(10, 1),
        destination=VPort(10, 15),
        packet_type_flags=make_type_flags(packet_type, flags),
        session_id=3,
        signature=0x12345678,
        sequence_id=7,
        **fields,
    )


def test_header_layout():
    data = _packet(PacketType.PING, PacketFlags.ACK).serialize()
    assert data[:2] == bytes([0xA1, 0xAF])
    assert data[2] == make_type_flags(PacketType.PING, PacketFlags.ACK)
    assert data[3] == 3
    assert data[4:8] == (0x12345678).to_bytes(4, "little")
    assert data[8:10] == (7).to_bytes(2, "little")
    assert len(data) == 11


def test_checksum_is_appended_and_stored():
    packet = _packet(PacketType.DATA, PacketFlags.RELIABLE, fragment_id=0, payload=b"xyz")
    data = packet.serialize()
    assert data[-1] == make_checksum(data[:-1])
    assert packet.checksum == data[-1]


def test_manual_checksum_is_written_as_is():
    packet = _packet(PacketType.PING)
    automatic = packet.serialize()
    packet.checksum = 0x42
    manual = packet.serialize(auto_checksum=False)
    assert manual[-1] == 0x42
    assert manual[:-1] == automatic[:-1]


def test_data_with_size_roundtrip():
    packet = _packet(
        PacketType.DATA, PacketFlags.RELIABLE | PacketFlags.HAS_SIZE, fragment_id=0, payload=b"abc"
    )
    parsed = QPacket.parse(packet.serialize(), "grfs_auth")
    assert parsed.packet_type is PacketType.DATA
    assert parsed.fragment_id == 0
    assert parsed.payload_size == 3
    assert parsed.payload == b"abc"
    assert parsed.signature == 0x12345678
    assert parsed.source == VPort(10, 1)


def test_data_without_size_roundtrip():
    packet = _packet(PacketType.DATA, PacketFlags.RELIABLE, fragment_id=2, payload=b"hello")
    parsed = QPacket.parse(packet.serialize(), "grfs_auth")
    assert parsed.payload == b"hello"
    assert parsed.payload_size is None
    assert parsed.fragment_id == 2


def test_syn_roundtrip():
    packet = _packet(PacketType.SYN, PacketFlags.NEED_ACK, conn_signature=0xDEADBEEF)
    data = packet.serialize()
    parsed = QPacket.parse(data, "grfs_auth")
    assert parsed.conn_signature == 0xDEADBEEF
    assert parsed.payload is None
    assert parsed.checksum == data[-1]


def test_connect_on_secure_service_carries_payload():
    packet = _packet(PacketType.CONNECT, conn_signature=0x01020304, payload=b"\x01\x02\x03")
    parsed = QPacket.parse(packet.serialize(), "grfs_secure")
    assert parsed.payload == b"\x01\x02\x03"
    assert parsed.conn_signature == 0x01020304


def test_connect_on_other_service_has_no_payload():
    packet = _packet(PacketType.CONNECT, conn_signature=99)
    parsed = QPacket.parse(packet.serialize(), "grfs_auth")
    assert parsed.payload is None
    assert parsed.conn_signature == 99


def test_truncated_packet_raises():
    data = _packet(PacketType.PING).serialize()
    with pytest.raises(IndexError):
        QPacket.parse(data[:5], "grfs_auth")


def test_data_without_room_for_checksum_raises():
    data = _packet(PacketType.DATA, fragment_id=0).serialize()
    with pytest.raises(IndexError):
        QPacket.parse(data[:-1], "grfs_auth")