"""Deterministic hashing for content-addressed class names.

MurmurHash3 (x86, 32-bit) plus a compact base-62 encoder. The output is
bit-exact across runs and platforms, which is what makes hash-named classes
usable in snapshot tests.

Example:
    >>> from tagtree.utils.hashing import class_id, encode_base62, murmur3_32
    >>> murmur3_32("")
    0
    >>> encode_base62(0)
    ''
    >>> encode_base62(62)
    '01'
"""

from __future__ import annotations

BASE62_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

_MASK = 0xFFFFFFFF
_C1 = 0xCC9E2D51
_C2 = 0x1B873593
_R1 = 15
_R2 = 13
_M = 5
_N = 0xE6546B64


def _rotl(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & _MASK


def murmur3_32(data: str | bytes, seed: int = 0) -> int:
    """Hash data with MurmurHash3 x86 32-bit.

    Args:
        data: Input; strings are UTF-8 encoded first
        seed: Initial hash state (class naming always uses 0)

    Returns:
        Unsigned 32-bit hash value

    Examples:
        >>> murmur3_32("")
        0
        >>> hex(murmur3_32("", seed=1))
        '0x514e28b7'
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    length = len(data)
    h = seed & _MASK
    body_end = length - (length & 3)

    for offset in range(0, body_end, 4):
        k = int.from_bytes(data[offset : offset + 4], "little")
        k = (k * _C1) & _MASK
        k = _rotl(k, _R1)
        k = (k * _C2) & _MASK

        h ^= k
        h = _rotl(h, _R2)
        h = (h * _M + _N) & _MASK

    # Tail: up to three trailing bytes, mixed the same way as a short chunk
    tail = length & 3
    if tail:
        k1 = 0
        if tail == 3:
            k1 ^= data[body_end + 2] << 16
        if tail >= 2:
            k1 ^= data[body_end + 1] << 8
        k1 ^= data[body_end]
        k1 = (k1 * _C1) & _MASK
        k1 = _rotl(k1, _R1)
        k1 = (k1 * _C2) & _MASK
        h ^= k1

    h ^= length & _MASK
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK
    h ^= h >> 16
    return h


def encode_base62(value: int) -> str:
    """Encode a non-negative integer with the 62-symbol alphabet.

    Digits are emitted least-significant first, so the most significant digit
    ends up last. Zero encodes to the empty string.

    Args:
        value: Non-negative integer

    Returns:
        Encoded string

    Raises:
        ValueError: If value is negative

    Examples:
        >>> encode_base62(61)
        'Z'
        >>> encode_base62(63)
        '11'
    """
    if value < 0:
        raise ValueError(f"cannot encode negative value {value}")

    base = len(BASE62_ALPHABET)
    digits: list[str] = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(BASE62_ALPHABET[remainder])
    return "".join(digits)


def class_id(value: str) -> str:
    """Content-addressed identifier for a style's hash input.

    Args:
        value: Concatenated style content

    Returns:
        Base-62 encoded MurmurHash3 of value (empty for a zero hash)
    """
    return encode_base62(murmur3_32(value))
