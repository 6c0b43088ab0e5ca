"""Bounded string searching, comparison and copying.

Strings behave as if they ended at their first NUL character. Searches
return an index into the string, or None when nothing is found. The
size-bounded copies return the resulting string together with the
length the full operation would have produced, so callers can detect
truncation.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    return s.split(_NUL, 1)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(size: int, name: str = "size") -> None:
    if size < 0:
        raise ValueError(f"{name} must not be negative, got {size}")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the code points of the first differing
    pair, where the end of a string counts as code point zero, or 0 when
    the compared parts are equal.
    """
    _check_size(n, "n")
    pairs = zip_longest(_cstr(s1)[:n], _cstr(s2)[:n], fillvalue=_NUL)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, size: int) -> Optional[int]:
    """Return where ``needle`` first occurs within the first ``size``
    characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    _check_size(size)
    target = _cstr(needle)
    if not target:
        return 0
    index = _cstr(haystack)[:size].find(target)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied string (at most ``size - 1`` characters) and the
    full length of ``src``.
    """
    _check_size(size)
    text = _cstr(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the untruncated result
    would have. When ``size`` does not exceed the length of ``dest``,
    ``dest`` is returned unchanged along with ``size + len(src)``.
    """
    _check_size(size)
    head = _cstr(dest)
    tail = _cstr(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string; None gives None.
    """
    if s is None:
        return None
    _check_size(start, "start")
    _check_size(length, "length")
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start : start + length]