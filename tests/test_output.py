import io

import pytest

from ftlib.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("a", out)
    put_char("b", out)
    assert out.getvalue() == "ab"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_put_char_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        put_char(bad, io.StringIO())


def test_put_str_writes_text_unchanged():
    out = io.StringIO()
    put_str("Hola que tal", out)
    assert out.getvalue() == "Hola que tal"


def test_put_str_empty_writes_nothing():
    out = io.StringIO()
    put_str("", out)
    assert out.getvalue() == ""


def test_put_str_rejects_non_str():
    with pytest.raises(TypeError):
        put_str(42, io.StringIO())


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("hello", out)
    assert out.getvalue() == "hello\n"


def test_put_nbr_minimum_int():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -9, 42, 2147483647, -1000])
def test_put_nbr_round_trips_through_int(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_rejects_bool():
    with pytest.raises(TypeError):
        put_nbr(True, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("x", None)
    put_nbr(5)
    assert capsys.readouterr().out == "x5"