"""Write characters, strings and integers to a file descriptor."""

from __future__ import annotations

import os
from typing import Optional


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode("utf-8"))


def put_str_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; nothing is written when ``s`` is None."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline; nothing at all when ``s`` is None."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8") + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    _write_all(fd, str(n).encode("ascii"))