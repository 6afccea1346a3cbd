"""Byte-buffer operations on ``bytearray`` and other byte sequences."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *sizes: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for size in sizes:
        if n > size:
            raise ValueError(f"byte count {n} exceeds buffer length {size}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(dest: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``.

    Returns ``dest``; when both are None, returns None.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both dest and src must be buffers")
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    if dest == src or n == 0:
        return buffer
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in ``data[:n]``."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_count(n, len(first), len(second))
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises MemoryError when the total would overflow the platform size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count >= SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)