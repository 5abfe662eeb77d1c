import sys

import pytest

from sigtalk.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buffer = bytearray(20)
    result = memset(buffer, 67, 5)
    assert result is buffer
    assert buffer[:5] == bytes([67] * 5)
    assert buffer[5:] == bytes(15)


def test_memset_truncates_value_to_byte():
    buffer = bytearray(3)
    memset(buffer, 0x141, 3)
    assert buffer == bytearray([0x41] * 3)


def test_memset_past_end_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_memset_negative_count_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


def test_bzero_clears_prefix():
    buffer = bytearray(b"abcdefghij")
    bzero(buffer, 3)
    assert buffer == bytearray(3) + b"defghij"


def test_memcpy_copies_prefix():
    dest = bytearray(b"xxxxx")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abcxx")


def test_memcpy_both_missing_returns_none():
    assert memcpy(None, None, 4) is None


def test_memcpy_one_missing_raises():
    with pytest.raises(TypeError):
        memcpy(bytearray(3), None, 3)


def test_memcpy_source_too_short_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_forward_overlap():
    buffer = bytearray(b"123456789")
    memmove(buffer, 2, 0, 5)
    assert buffer == bytearray(b"121234589")


def test_memmove_backward_overlap():
    buffer = bytearray(b"123456789")
    memmove(buffer, 0, 2, 5)
    assert buffer == bytearray(b"345676789")


def test_memmove_matches_non_overlapping_copy():
    original = bytes(range(16))
    buffer = bytearray(original)
    memmove(buffer, 8, 0, 4)
    assert buffer[8:12] == original[0:4]
    assert buffer[:8] == original[:8]
    assert buffer[12:] == original[12:]


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_not_found():
    text = b"Hello, world!"
    assert memchr(text, ord("a"), len(text)) is None


def test_memchr_finds_nul_byte():
    data = bytes([ord("a"), ord("b"), 0, ord("d")])
    assert memchr(data, 0, 4) == 2


def test_memchr_respects_limit():
    data = b"abcdef"
    assert memchr(data, ord("e"), 3) is None
    assert memchr(data, ord("e"), 6) == data.index(b"e")


def test_memcmp_equal():
    assert memcmp(b"hello", b"hello", 5) == 0


def test_memcmp_zero_length():
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_sign_and_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 3) == -memcmp(b"abd", b"abc", 3)


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcmp_ignores_bytes_after_limit():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_calloc_zeroed():
    buffer = calloc(7, 4)
    assert len(buffer) == 28
    assert not any(buffer)


def test_calloc_zero_size():
    assert calloc(5, 0) == bytearray()


def test_calloc_overflow_raises():
    with pytest.raises(MemoryError):
        calloc(sys.maxsize, 2)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)