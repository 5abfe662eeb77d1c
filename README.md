# sigtalk

A small library of helpers that follow the semantics of the classic C
string, memory and output calls, written for ordinary Python values.

## Installation

```
pip install .
```

## Modules

### `sigtalk.chars`

ASCII classification and case conversion. Each function takes a code point
(`int`) or a one-character string.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return `bool`.
- `to_upper`, `to_lower` change only ASCII letters and return the same kind
  of value they were given.

```python
from sigtalk.chars import to_upper
to_upper("a")   # "A"
to_upper(97)    # 65
```

### `sigtalk.memory`

Operations on `bytearray` buffers: `memset`, `bzero`, `memcpy`, `memmove`
(offsets within one buffer, overlap allowed), `memchr` (offset or `None`),
`memcmp` (difference at the first mismatch, else 0) and `calloc` (a zeroed
`bytearray`). A span that runs past the end of a buffer raises `IndexError`;
a negative count raises `ValueError`.

### `sigtalk.cstring`

Text helpers that stop at an embedded NUL, as a terminated string would.
Positions come back as indexes or `None`.

- `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`
- `strdup`, `substr`, `strjoin`, `strtrim`, `split`
- `strlcpy(src, size)` and `strlcat(dest, src, size)` return a pair: the
  text that fits in a destination of `size` characters and the length the
  full result would have needed.

```python
from sigtalk.cstring import split, strlcpy
split("  a  b ", " ")        # ["a", "b"]
strlcpy("Bonjour 42", 5)     # ("Bonj", 10)
```

### `sigtalk.convert`

- `atoi(text)` parses a leading decimal integer: leading whitespace is
  skipped, one sign is honoured, parsing stops at the first non-digit, and
  the result wraps to a signed 32-bit integer.
- `itoa(n)` gives the decimal text of a signed 32-bit integer and raises
  `OverflowError` outside that range.
- `strmapi(text, func)` builds a new string from `func(index, char)`.
- `striteri(chars, func)` calls `func(index, char)` over a mutable sequence
  of characters, replacing each character with the returned value unless it
  is `None`.

### `sigtalk.fdio`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream,
`sys.stdout` when none is given.

### `sigtalk.linked`

`Node` and `LinkedList`, a singly linked list with `push_front`,
`push_back`, `last`, `len()`, iteration, `clear(delete)`, `iterate(func)`
and `map(func, delete)`. If `func` raises during `map`, the contents mapped
so far are passed to `delete` and the exception propagates.

```python
from sigtalk.linked import LinkedList
list(LinkedList([1, 2, 3]).map(lambda x: x * 2))   # [2, 4, 6]
```

### `sigtalk.formatting`

A minimal printf supporting `%c %s %d %i %u %x %X %p %%`. Integers follow
32-bit `int` / `unsigned int` rules; a `None` string prints `(null)` and a
`None` pointer `(nil)`.

- `format_printf(fmt, *args)` returns the text.
- `printf(fmt, *args, stream=None)` writes it and returns its length.

An unsupported conversion or a missing argument raises `FormatError`.

```python
from sigtalk.formatting import format_printf
format_printf("%d %x %u", -1, 255, -1)   # "-1 ff 4294967295"
```

## What it does not do

The package has no process-to-process messaging: nothing in it sends or
receives signals, there is no server or client, and it installs no
commands. It is the helper library only.

## Tests

```
pip install ".[test]"
pytest
```