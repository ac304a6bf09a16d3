import pytest

from notedeck.abbrev import floor_char_boundary

TEXT = "héllo€x😀z".encode("utf-8")


def test_ascii_is_identity():
    data = b"hello"
    assert [floor_char_boundary(data, i) for i in range(len(data))] == list(range(len(data)))


def test_past_end_returns_length():
    assert floor_char_boundary(TEXT, len(TEXT) + 10) == len(TEXT)
    assert floor_char_boundary(TEXT, len(TEXT)) == len(TEXT)


def test_two_byte_char():
    assert floor_char_boundary("é".encode("utf-8"), 1) == 0


@pytest.mark.parametrize("index", range(len(TEXT)))
def test_result_is_boundary(index):
    result = floor_char_boundary(TEXT, index)
    assert result <= index
    assert index - result <= 3
    TEXT[:result].decode("utf-8")
    assert TEXT[result:].decode("utf-8")


def test_accepts_str():
    assert floor_char_boundary("héllo", 2) == floor_char_boundary("héllo".encode("utf-8"), 2)


def test_invalid_utf8():
    with pytest.raises(ValueError):
        floor_char_boundary(b"\x80\x80\x80\x80\x80", 4)