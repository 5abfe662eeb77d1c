"""Integer/text conversion and per-character mapping over strings."""

from __future__ import annotations

import re
from typing import Callable, MutableSequence, Optional

from sigtalk.cstring import strlen

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _wrap_int32(value: int) -> int:
    return ((value - INT_MIN) % 2**32) + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is honoured and parsing
    stops at the first non-digit. Text without digits yields 0. The result
    wraps to a signed 32-bit integer.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def itoa(n: int) -> str:
    """Decimal text of a signed 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n!r} does not fit in a 32-bit signed integer")
    return str(n)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for every character."""
    if text is None or func is None:
        raise TypeError("strmapi needs a string and a function")
    text = text[:strlen(text)]
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str],
    func: Callable[[int, str], Optional[str]],
) -> None:
    """Call ``func(index, char)`` on each character, in place.

    Iteration stops at a NUL character. When ``func`` returns a value it
    replaces the character at that index; ``None`` leaves it unchanged.
    """
    if chars is None or func is None:
        raise TypeError("striteri needs a character sequence and a function")
    for index, char in enumerate(chars):
        if char == "\0":
            break
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement