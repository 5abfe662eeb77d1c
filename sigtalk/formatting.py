"""A small printf: %c %s %d %i %u %x %X %p and %% conversions.

Integers follow C's 32-bit ``int``/``unsigned int`` rules: signed conversions
wrap to the signed range and unsigned ones are taken modulo 2**32.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from sigtalk.convert import INT_MIN
from sigtalk.cstring import strlen

_UINT_MODULUS = 2**32
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


class FormatError(ValueError):
    """The format string holds a bad conversion or lacks an argument."""


def _as_int32(value: int) -> int:
    return ((int(value) - INT_MIN) % _UINT_MODULUS) + INT_MIN


def _as_uint32(value: int) -> int:
    return int(value) % _UINT_MODULUS


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    text = str(value)
    return text[:strlen(text)]


def _address(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = value if isinstance(value, int) else id(value)
    if address == 0:
        return _NULL_POINTER
    return f"0x{address:x}"


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec in ("d", "i"):
        return str(_as_int32(value))
    if spec == "u":
        return str(_as_uint32(value))
    if spec == "x":
        return f"{_as_uint32(value):x}"
    if spec == "X":
        return f"{_as_uint32(value):X}"
    return _address(value)


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    """Yield the output piece by piece, raising at the first bad conversion."""
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%"
            continue
        if spec not in "csdiuxXp" or not spec:
            shown = repr(spec) if spec else "end of format"
            raise FormatError(f"unsupported conversion: {shown}")
        try:
            value = next(remaining)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        yield _convert(spec, value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return the formatted text; raise FormatError on a bad format."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` and return its length.

    Output is written as it is produced, so text before a bad conversion
    has already gone out when FormatError is raised.
    """
    target = sys.stdout if stream is None else stream
    count = 0
    for piece in _pieces(fmt, args):
        target.write(piece)
        count += len(piece)
    return count