import pytest

from ravenserver.checksum import make_checksum, protocol_setting


def test_protocol_setting():
    assert protocol_setting(3) == 0xE3
    assert protocol_setting(1) == 0
    assert protocol_setting(5) == 0
    assert protocol_setting(9) == 0


def test_empty_is_zero():
    assert make_checksum(b"", 0x10) == 0


def test_chunks_and_remainder():
    assert make_checksum(b"\x01\x02\x03\x04\x05", 0) == 15


def test_word_sum_wraps():
    assert make_checksum(b"\xff\xff\xff\xff\x01\x00\x00\x00", 0) == 0


@pytest.mark.parametrize("setting", [0, 1, 0x7F, 0xE3, 0xFE])
def test_setting_adds_to_result(setting):
    data = b"\x3f\x10\x22\x91\x00\x07\x08"
    assert make_checksum(data, setting) == (make_checksum(data, 0) + setting) % 256


def test_auto_setting_uses_protocol_nibble():
    secure = b"\x31\x3f\x00\x01\x02"
    other = b"\x11\x3f\x00\x01\x02"
    assert make_checksum(secure) == make_checksum(secure, 0xE3)
    assert make_checksum(other) == make_checksum(other, 0)


def test_result_is_byte():
    assert 0 <= make_checksum(bytes(range(256)) * 3, 0x55) <= 0xFF