import io

import pytest

from stpp.source import CharSource


def test_get_until_end_of_stream():
    source = CharSource(io.StringIO("ab"))
    assert [source.get(), source.get(), source.get()] == ["a", "b", ""]


def test_unget_returns_last_char():
    source = CharSource(io.StringIO("xy"))
    assert source.get() == "x"
    source.unget()
    assert source.get() == "x"
    assert source.get() == "y"


def test_only_one_char_of_pushback():
    source = CharSource(io.StringIO("xy"))
    source.get()
    source.unget()
    with pytest.raises(RuntimeError):
        source.unget()


def test_line_tracking_survives_unget_of_newline():
    source = CharSource(io.StringIO("a\nb"))
    source.get()
    assert source.get() == "\n"
    assert source.line == 2
    source.unget()
    assert source.line == 1
    source.get()
    assert source.line == 2


def test_read_line_consumes_newline():
    source = CharSource(io.StringIO("rest of line\nnext"))
    assert source.read_line() == "rest of line"
    assert source.read_line() == "next"
    assert source.read_line() == ""
