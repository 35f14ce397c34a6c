import pytest

from pushswap.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buffer = bytearray(b"hello")
    result = memset(buffer, ord("x"), 3)
    assert result is buffer
    assert result[:3] == b"xxx"
    assert result[3:] == b"lo"


def test_memset_uses_low_byte():
    buffer = bytearray(4)
    memset(buffer, 0x141, 4)
    assert buffer == bytearray([0x41] * 4)


def test_memset_past_end_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears_prefix():
    buffer = bytearray(b"abcdef")
    bzero(buffer, 4)
    assert buffer[:4] == bytes(4)
    assert buffer[4:] == b"ef"


def test_calloc_is_zeroed_and_sized():
    block = calloc(3, 4)
    assert len(block) == 12
    assert not any(block)


def test_calloc_zero_count():
    assert len(calloc(0, SIZE_MAX)) == 0


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2, SIZE_MAX // 2 + 1)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    src = b"abcdef"
    result = memcpy(dest, src, 4)
    assert result is dest
    assert dest[:4] == src[:4]
    assert dest[4:] == b".."


def test_memcpy_both_none():
    assert memcpy(None, None, 5) is None


def test_memcpy_one_missing():
    with pytest.raises(TypeError):
        memcpy(bytearray(3), None, 1)


def test_memmove_forward_overlap():
    original = b"abcdefgh"
    buffer = bytearray(original)
    memmove(buffer, 2, 0, 5)
    assert buffer[2:7] == original[0:5]
    assert buffer[:2] == original[:2]


def test_memmove_backward_overlap():
    original = b"abcdefgh"
    buffer = bytearray(original)
    memmove(buffer, 0, 3, 5)
    assert buffer[0:5] == original[3:8]


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_limit():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None


def test_memchr_missing():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_and_antisymmetry():
    first, second = b"abcX", b"abcY"
    forward = memcmp(first, second, 4)
    assert forward < 0
    assert memcmp(second, first, 4) == -forward


def test_memcmp_difference_of_bytes():
    assert memcmp(b"\xff", b"\x00", 1) == 255


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0