"""Writing characters, text and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from sigtalk.convert import itoa
from sigtalk.cstring import strlen


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        char = c
    else:
        char = chr(int(c) & 0xFF)
    _target(stream).write(char)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` up to its terminating NUL."""
    if text is None:
        raise TypeError("put_str needs a string")
    _target(stream).write(text[:strlen(text)])


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a signed 32-bit integer in decimal."""
    _target(stream).write(itoa(n))