import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, 65, 3)
    assert result is buf
    assert buf == bytearray(b"AAAdef")


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix_only():
    buf = bytearray(b"xyz123")
    bzero(buf, 3)
    assert buf[:3] == bytearray(3)
    assert buf[3:] == bytearray(b"123")


def test_calloc_is_zero_filled():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert all(b == 0 for b in buf)


def test_calloc_zero_elements():
    assert calloc(0, 8) == bytearray()


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"hello"
    idx = memchr(data, ord("l"), len(data))
    assert data[idx] == ord("l")
    assert ord("l") not in data[:idx]


def test_memchr_respects_count():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_wraps_value_to_byte():
    assert memchr(b"hello", 256 + ord("h"), 5) == 0


def test_memchr_count_past_end_raises():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 3)


def test_memcmp_equal_and_sign():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x00\xff\x10", b"\x00\x01\x20"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\x80", b"\x01", 1) > 0


def test_memcmp_size_zero_and_prefix():
    assert memcmp(b"abc", b"xyz", 0) == 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abc...")


def test_memcpy_both_none():
    assert memcpy(None, None, 5) is None


def test_memcpy_one_none_raises():
    with pytest.raises(TypeError):
        memcpy(bytearray(3), None, 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefgh")
    view = memoryview(buf)
    result = memmove(view[2:], view, 5)
    assert bytes(result) == b"abcdeh"
    assert buf == bytearray(b"ababcdeh")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdefgh")
    view = memoryview(buf)
    result = memmove(view, view[2:], 5)
    assert bytes(result) == b"cdefgfgh"
    assert buf[:5] == bytearray(b"cdefg")
    assert buf[5:] == bytearray(b"fgh")


def test_memmove_same_buffer_is_identity():
    buf = bytearray(b"same")
    assert memmove(buf, buf, 4) == bytearray(b"same")


def test_memmove_count_past_end_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(2), b"abcd", 3)