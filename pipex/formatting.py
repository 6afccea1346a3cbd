"""A small printf: conversions ``%c %s %d %i %u %x %X %p %%``.

A specifier that is not recognised is dropped, and the character
after the ``%`` is printed as it is. Integers are wrapped to the
width of the C types they stand for: ``int`` and ``unsigned int``
are 32 bits wide, and pointers are 64 bits wide.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from pipex.output import put_str

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(num: int) -> int:
    num &= _UINT_MASK
    return num - (1 << 32) if num >= 1 << 31 else num


def _require_int(num: Any) -> int:
    if not isinstance(num, int) or isinstance(num, bool):
        raise TypeError(f"expected int, got {type(num).__name__}")
    return num


def to_hex(num: int, upper: bool = False) -> str:
    """Return a non-negative integer in hexadecimal, without a prefix."""
    _require_int(num)
    if num < 0:
        raise ValueError(f"expected a non-negative integer, got {num}")
    return format(num, "X" if upper else "x")


def format_unsigned(num: int) -> str:
    """Return ``num`` as a 32-bit unsigned decimal number."""
    return str(_require_int(num) & _UINT_MASK)


def format_pointer(num: Optional[int]) -> str:
    """Return an address as ``0x``-prefixed hex, or ``(nil)`` for zero."""
    if num is None:
        return "(nil)"
    value = _require_int(num) & _ULONG_MASK
    if value == 0:
        return "(nil)"
    return "0x" + to_hex(value)


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(_require_int(arg) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> Optional[str]:
    """Render one conversion, or return None if ``spec`` is not known."""
    if spec == "%":
        return "%"
    if spec not in "sdiucxXp":
        return None
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in "di":
        return str(_to_int32(_require_int(arg)))
    if spec == "u":
        return format_unsigned(arg)
    if spec == "c":
        return _format_char(arg)
    if spec in "xX":
        return to_hex(_require_int(arg) & _UINT_MASK, upper=spec == "X")
    return format_pointer(arg)


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Return the text ``printf`` would write for ``fmt`` and ``args``."""
    if fmt is None:
        return ""
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        converted = _convert(spec, remaining)
        pieces.append(spec if converted is None else converted)
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    put_str(text, sys.stdout if file is None else file)
    return len(text)