"""Text helpers with the semantics of the classic NUL-terminated string calls.

Positions come back as indexes into the string, or ``None`` where nothing is
found. Size-bounded copies return the resulting text together with the length
the caller would have needed. All of them stop at an embedded NUL, as a
terminated string would.
"""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import List, Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _terminated(text: str) -> str:
    """The part of ``text`` before its first NUL, if any."""
    return text.split(_NUL, 1)[0]


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _check_size(size: int, name: str = "size") -> None:
    if size < 0:
        raise ValueError(f"{name} cannot be negative: {size!r}")


def strlen(text: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_terminated(text))


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c``.

    Looking for NUL finds the terminator, at index ``strlen(text)``.
    """
    text = _terminated(text)
    char = _as_char(c)
    if char == _NUL:
        return len(text)
    position = text.find(char)
    return None if position < 0 else position


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c``; NUL finds the terminator."""
    text = _terminated(text)
    char = _as_char(c)
    if char == _NUL:
        return len(text)
    position = text.rfind(char)
    return None if position < 0 else position


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the code points at the first mismatch or
    terminator, and 0 when the compared prefixes are equal.
    """
    _check_size(n, "n")
    left = chain(_terminated(first), repeat(_NUL))
    right = chain(_terminated(second), repeat(_NUL))
    for a, b in islice(zip(left, right), n):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` wholly inside the first ``length`` characters.

    An empty needle matches at index 0 whatever the length.
    """
    _check_size(length, "length")
    haystack = _terminated(haystack)
    needle = _terminated(needle)
    if not needle:
        return 0
    if length == 0:
        return None
    position = haystack[:length].find(needle)
    return None if position < 0 else position


def strdup(text: str) -> str:
    """A copy of the terminated text."""
    return "".join(_terminated(text))


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters from ``start``; empty past the end."""
    _check_size(start, "start")
    _check_size(length, "length")
    text = _terminated(text)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """The two texts one after the other."""
    if first is None or second is None:
        raise TypeError("strjoin needs two strings")
    return _terminated(first) + _terminated(second)


def strtrim(text: str, charset: str) -> str:
    """``text`` without the characters of ``charset`` at either end."""
    if text is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    charset = _terminated(charset)
    text = _terminated(text)
    return text.strip(charset) if charset else text


def split(text: str, separator: CharLike) -> List[str]:
    """The non-empty runs of ``text`` between occurrences of ``separator``."""
    if text is None:
        raise TypeError("split needs a string")
    text = _terminated(text)
    char = _as_char(separator)
    if char == _NUL:
        return [text] if text else []
    return [word for word in text.split(char) if word]


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy into a destination of ``size`` characters, terminator included.

    Returns the text that fits and the full length of ``src``; a result length
    not below ``size`` means the copy was truncated. With a size of 0 nothing
    is copied.
    """
    _check_size(size)
    src = _terminated(src)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a destination of ``size`` characters.

    Returns the resulting text and the length the whole concatenation would
    take. When ``dest`` already fills ``size`` it is left as it is and the
    length reported is ``size + strlen(src)``.
    """
    _check_size(size)
    dest = _terminated(dest)
    src = _terminated(src)
    dest_len = min(len(dest), size)
    if dest_len == size:
        return dest, size + len(src)
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)