import pytest

from pipeweld.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == b"xxxdef"


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_rejects_overlong_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf == b"\0\0llo"


def test_bzero_with_zero_count_changes_nothing():
    buf = bytearray(b"hello")
    bzero(buf, 0)
    assert buf == b"hello"


def test_calloc_is_zero_filled_and_sized():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_items():
    assert calloc(0, 8) == bytearray()


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_match():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_limit():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None


def test_memchr_zero_count():
    assert memchr(b"abc", ord("a"), 0) is None


def test_memchr_masks_value():
    data = b"\x00\x41"
    assert memchr(data, 0x141, 2) == 1


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_follows_first_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x10\x20\xff", b"\x10\x20\x01"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\x80", b"\x01", 1) > 0


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == b"abc..."


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ab" + b"abcd"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == b"cdef" + b"ef"


def test_memmove_same_offset_is_identity():
    buf = bytearray(b"abcdef")
    memmove(buf, 1, 1, 4)
    assert buf == b"abcdef"


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), 2, 0, 2)
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), -1, 0, 1)