"""zlib compression of payloads."""

from __future__ import annotations

import zlib

BEST_COMPRESSION = 9


class CompressionError(RuntimeError):
    """Raised when data cannot be compressed or decompressed."""


def compress(data: bytes, level: int = BEST_COMPRESSION) -> bytes:
    """zlib-compress data; empty input gives empty output."""
    if not data:
        return b""
    try:
        return zlib.compress(bytes(data), level)
    except zlib.error as exc:
        raise CompressionError("Compression failed") from exc


def decompress(data: bytes, original_size: int) -> bytes:
    """Inflate into a buffer of original_size bytes, zero-padded if the output is shorter."""
    if not data:
        return b""
    inflater = zlib.decompressobj()
    try:
        out = inflater.decompress(bytes(data), original_size + 1)
    except zlib.error as exc:
        raise CompressionError("Decompression failed") from exc
    if len(out) > original_size or not inflater.eof:
        raise CompressionError("Decompression failed")
    return out + bytes(original_size - len(out))