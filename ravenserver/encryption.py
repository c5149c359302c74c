"""RC4 stream cipher with the fixed PRUDP key."""

from __future__ import annotations

RC4_KEY = b"CD&ML"


def _key_schedule(key: bytes) -> list[int]:
    state = list(range(256))
    j = 0
    for i in range(256):
        j = (j + state[i] + key[i % len(key)]) & 0xFF
        state[i], state[j] = state[j], state[i]
    return state


def encrypt(data: bytes) -> bytes:
    """Encrypt with a freshly initialised RC4 state."""
    state = _key_schedule(RC4_KEY)
    out = bytearray()
    i = j = 0
    for byte in data:
        i = (i + 1) & 0xFF
        j = (j + state[i]) & 0xFF
        state[i], state[j] = state[j], state[i]
        out.append(byte ^ state[(state[i] + state[j]) & 0xFF])
    return bytes(out)


def decrypt(data: bytes) -> bytes:
    """RC4 is symmetric, so this is the same as encrypt."""
    return encrypt(data)