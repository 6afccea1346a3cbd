"""String utilities working on Python ``str`` values.

Positions are returned as indices (or None when nothing is found),
and every function returns a new value rather than filling a buffer.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, TypeVar, Union

T = TypeVar("T")

CharLike = Union[int, str]

_WHITESPACE = " \t\n\v\f\r"


def _char(c: CharLike) -> str:
    """Normalise a character argument to a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _check_unsigned(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the classic ``atoi`` does.

    Leading whitespace is skipped. A single ``+`` or ``-`` sign is
    accepted; more than one sign character yields 0. Parsing stops at
    the first non-digit, and text with no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    signs = len(rest) - len(rest.lstrip("+-"))
    sign_part, rest = rest[:signs], rest[signs:]
    if signs > 1:
        return 0
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return -value if sign_part == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``.

    Searching for the NUL character returns ``len(s)``, the position of
    the terminator. Returns None when ``c`` does not occur.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``.

    Searching for the NUL character returns ``len(s)``. Returns None when
    ``c`` does not occur.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _codes(s: str, n: int) -> list:
    """Character codes of ``s`` up to ``n`` positions, NUL-padded at the end."""
    codes = [ord(ch) for ch in s[:n]]
    if len(codes) < n:
        codes.append(0)
    return codes


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, with
    the end of a string counting as code 0, or 0 when they match.
    """
    _check_unsigned("n", n)
    for a, b in zip(_codes(s1, n), _codes(s2, n)):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Find ``little`` within the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when there is
    no match lying wholly inside the first ``n`` characters.
    """
    _check_unsigned("n", n)
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots (one kept for NUL).

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``, which shows whether truncation happened.
    """
    _check_unsigned("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` in a destination of ``size`` slots.

    Returns the resulting text and the length the full result would
    have had. When ``dest`` already fills ``size`` slots nothing is
    appended and the length returned is ``len(src) + size``.
    """
    _check_unsigned("size", size)
    dest_len = min(len(dest), size)
    if size <= dest_len:
        return dest, len(src) + size
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` starting at ``start``.

    A start at or beyond the end gives an empty string.
    """
    _check_unsigned("start", start)
    _check_unsigned("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list:
    """Split ``s`` on the separator character, dropping empty pieces."""
    ch = _char(sep)
    if ch == "\0":
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> None:
    """Call ``f(index, item)`` for every item of a mutable sequence.

    When ``f`` returns a value other than None it replaces the item in place.
    """
    for index, item in enumerate(s):
        result = f(index, item)
        if result is not None:
            s[index] = result