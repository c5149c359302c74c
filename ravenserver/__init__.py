"""Quazal PRUDP packets, checksum, RC4, zlib helpers and INI configuration reading."""

__version__ = "0.1.0"