"""Little-endian byte reader and writer over a growable buffer."""

from __future__ import annotations


class ByteStream:
    """Reads from a position in the buffer; writes always append."""

    def __init__(self, data: bytes = b"") -> None:
        self._buffer = bytearray(data)
        self._pos = 0

    @property
    def data(self) -> bytes:
        return bytes(self._buffer)

    @property
    def position(self) -> int:
        return self._pos

    @position.setter
    def position(self, value: int) -> None:
        if not 0 <= value <= len(self._buffer):
            raise IndexError("position out of range")
        self._pos = value

    def __len__(self) -> int:
        return len(self._buffer)

    def _take(self, size: int, message: str) -> bytes:
        if size < 0 or self._pos + size > len(self._buffer):
            raise IndexError(message)
        chunk = bytes(self._buffer[self._pos : self._pos + size])
        self._pos += size
        return chunk

    def _read_uint(self, size: int) -> int:
        return int.from_bytes(self._take(size, "not enough data"), "little")

    def read_u8(self) -> int:
        return self._read_uint(1)

    def read_u16(self) -> int:
        return self._read_uint(2)

    def read_u32(self) -> int:
        return self._read_uint(4)

    def read_bytes(self, size: int) -> bytes:
        return self._take(size, "not enough data to read bytes")

    def skip(self, count: int) -> None:
        if count < 0 or self._pos + count > len(self._buffer):
            raise IndexError("cannot skip beyond buffer")
        self._pos += count

    def remaining(self) -> int:
        return len(self._buffer) - self._pos

    def write_u8(self, value: int) -> None:
        self._buffer += value.to_bytes(1, "little")

    def write_u16(self, value: int) -> None:
        self._buffer += value.to_bytes(2, "little")

    def write_u32(self, value: int) -> None:
        self._buffer += value.to_bytes(4, "little")

    def write_bytes(self, data: bytes) -> None:
        self._buffer += data

    def clear(self) -> None:
        self._buffer.clear()
        self._pos = 0