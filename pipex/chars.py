"""ASCII character classification and case conversion.

Every function accepts either a character code (``int``) or a
one-character string. Only the ASCII ranges are considered.
Case conversion returns a value of the same kind it was given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave others alone."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return _convert(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave others alone."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return _convert(c, code)