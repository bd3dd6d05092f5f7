"""The content hash used to name blobs and commits."""

from __future__ import annotations

_SEED = 5381
_MASK = (1 << 64) - 1


def simple_hash(content: str | bytes) -> str:
    """Return the djb2 hash of *content* as lower-case hex.

    Text is hashed as its UTF-8 bytes. Each byte counts as a signed
    8-bit value, and the running hash wraps at 64 bits.
    """
    data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    value = _SEED
    for byte in data:
        signed = byte - 256 if byte >= 128 else byte
        value = (value * 33 + signed) & _MASK
    return format(value, "x")