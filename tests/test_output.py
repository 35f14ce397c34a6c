import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    buffer = io.StringIO()
    put_char("q", buffer)
    assert buffer.getvalue() == "q"


def test_put_char_integer_code():
    buffer = io.StringIO()
    put_char(ord("A"), buffer)
    assert buffer.getvalue() == "A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text_unchanged():
    text = "hello world"
    buffer = io.StringIO()
    put_str(text, buffer)
    assert buffer.getvalue() == text


def test_put_str_empty():
    buffer = io.StringIO()
    put_str("", buffer)
    assert buffer.getvalue() == ""


def test_put_endl_appends_newline():
    text = "pa"
    buffer = io.StringIO()
    put_endl(text, buffer)
    assert buffer.getvalue() == text + "\n"


@pytest.mark.parametrize("n", [0, 7, 42, -1, -305, 2147483647])
def test_put_nbr_round_trip(n):
    buffer = io.StringIO()
    put_nbr(n, buffer)
    assert int(buffer.getvalue()) == n


def test_put_nbr_int_min():
    buffer = io.StringIO()
    put_nbr(-2147483648, buffer)
    assert buffer.getvalue() == "-2147483648"


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2**31, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("ra")
    put_endl("")
    assert capsys.readouterr().out == "ra\n"