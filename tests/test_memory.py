import pytest

from cadetkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_truncates_to_byte():
    buf = bytearray(b"123456789")
    result = memset(buf, 378, 5)
    assert result is buf
    assert buf == bytearray(b"zzzzz6789")


def test_memset_whole_buffer_matches_wrapped_value():
    a = memset(bytearray(b"123456789"), 322, 9)
    b = memset(bytearray(b"123456789"), 322 - 256, 9)
    assert a == b
    assert len(set(a)) == 1


def test_memset_zero_length_is_noop():
    buf = bytearray(b"abc")
    assert memset(buf, 65, 0) == bytearray(b"abc")


def test_memset_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"lo"


def test_calloc_is_zeroed():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert buf == bytearray(12)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"abcabc"
    assert memchr(data, ord("c"), 6) == 2
    assert data[memchr(data, ord("b"), 6)] == ord("b")


def test_memchr_respects_length():
    assert memchr(b"abcabc", ord("c"), 2) is None


def test_memchr_wraps_value():
    data = bytes([1, 2, 3])
    assert memchr(data, 256 + 3, 3) == memchr(data, 3, 3)


def test_memcmp_equal():
    assert memcmp(b"hello", b"hello", 5) == 0
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_and_symmetry():
    a, b = b"abd", b"abc"
    assert memcmp(a, b, 3) > 0
    assert memcmp(b, a, 3) == -memcmp(a, b, 3)


def test_memcmp_unsigned_bytes():
    assert memcmp(bytes([200]), bytes([1]), 1) > 0


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abcdef", 3)
    assert result is dest
    assert dest == bytearray(b"abc...")


def test_memcpy_too_long():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf[2:] == b"abcd"
    assert buf[:2] == b"ab"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf[:4] == b"cdef"
    assert buf[4:] == b"ef"


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)