"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%.

Integer arguments are reinterpreted the way a C ``int``, ``unsigned int``
or pointer-sized value would be: ``%d`` and ``%i`` wrap to a signed
32-bit value, ``%u``, ``%x`` and ``%X`` to an unsigned 32-bit value, and
``%p`` to an unsigned 64-bit address. The format string and string
arguments end at their first NUL character.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_NUL = "\0"
_MISSING = object()


class FormatError(ValueError):
    """Raised for an unknown conversion or a missing argument."""


def _integer(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise FormatError(f"%{spec} expects an integer, got {type(value).__name__}")
    return int(value)


def _signed_int(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def num_len_base(num: int, base: int) -> int:
    """Return the number of digits of the non-negative ``num`` in ``base``."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if num < 0:
        raise ValueError(f"number must not be negative, got {num}")
    if num == 0:
        return 1
    length = 0
    while num > 0:
        num //= base
        length += 1
    return length


def utoa(n: int) -> str:
    """Return the decimal text of ``n`` taken as an unsigned 32-bit value."""
    return str(n & _UINT_MASK)


def utoa_base(n: int, uppercase: bool) -> str:
    """Return the hexadecimal text of ``n`` taken as an unsigned 64-bit value."""
    digits = "0123456789ABCDEF" if uppercase else "0123456789abcdef"
    n &= _ULONG_MASK
    if n == 0:
        return "0"
    out = []
    while n > 0:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """Return ``address`` as ``0x`` followed by lower-case hex digits.

    A null address (None or 0) gives ``0x0``.
    """
    if not address:
        return "0x0"
    return "0x" + utoa_base(address, False)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_integer(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise FormatError(f"%s expects a string, got {type(value).__name__}")
    return value.split(_NUL, 1)[0]


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _char(value)
    if spec in ("d", "i"):
        return str(_signed_int(_integer(value, spec)))
    if spec == "u":
        return utoa(_integer(value, spec))
    if spec == "s":
        return _string(value)
    if spec == "p":
        return format_pointer(None if value is None else _integer(value, spec))
    if spec in ("x", "X"):
        return utoa_base(_integer(value, spec) & _UINT_MASK, spec == "X")
    raise FormatError(f"unknown conversion {spec!r}")


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    """Yield the output of ``fmt`` piece by piece, raising on the first error."""
    values = iter(args)
    chars = iter(fmt.split(_NUL, 1)[0])
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%"
            continue
        if spec not in ("c", "d", "i", "u", "s", "p", "x", "X"):
            raise FormatError(f"unknown conversion {'%' + spec!r}")
        value = next(values, _MISSING)
        if value is _MISSING:
            raise FormatError(f"missing argument for %{spec}")
        yield _convert(spec, value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the characters written.

    Output produced before an error has already been written when
    :class:`FormatError` is raised.
    """
    total = 0
    out = sys.stdout
    try:
        for piece in _pieces(fmt, args):
            out.write(piece)
            total += len(piece)
    finally:
        out.flush()
    return total