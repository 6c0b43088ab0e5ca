"""String conversion and transformation helpers.

Strings behave as if they ended at their first NUL character, so text
after an embedded ``"\\0"`` is ignored.
"""

from __future__ import annotations

import re
from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[int, str]

_NUL = "\0"
_SPACE = "\t\n\v\f\r "
_DIGITS = re.compile(r"[0-9]*")


def _cstr(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return s.split(_NUL, 1)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    return chr(c & 0xFF)


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit. A second sign, or no digits at
    all, gives 0.
    """
    s = _cstr(text).lstrip(_SPACE)
    sign = 1
    if s[:1] in ("-", "+"):
        if s[0] == "-":
            sign = -1
        s = s[1:]
    if s[:1] in ("-", "+"):
        return 0
    digits = _DIGITS.match(s).group()
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)


def split(s: str, c: CharLike) -> List[str]:
    """Split ``s`` on the separator ``c``, dropping empty words."""
    sep = _char(c)
    text = _cstr(s)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``.

    Returns None when either argument is None.
    """
    if s is None or charset is None:
        return None
    return _cstr(s).strip(_cstr(charset))


def strmapi(
    s: Optional[str], f: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from ``f(index, char)`` for each character of ``s``.

    Returns None when either argument is None.
    """
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(_cstr(s)))


def striteri(
    buffer: MutableSequence, f: Callable[[int, str], Optional[str]]
) -> None:
    """Apply ``f(index, char)`` to each element of ``buffer`` in place.

    ``buffer`` is a mutable sequence of single characters, such as a list.
    Processing stops at the first NUL element. When ``f`` returns a value
    other than None, that value replaces the element.
    """
    for index, ch in enumerate(buffer):
        if ch == _NUL or ch == 0:
            break
        replacement = f(index, ch)
        if replacement is not None:
            buffer[index] = replacement