import pytest

from oiiashell.chars import is_white_space, str_change, valid_key_length, will_eat


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_whitespace_characters(c):
    assert is_white_space(c)


@pytest.mark.parametrize("c", ["a", "_", "$", "", "0", "\x00"])
def test_non_whitespace_characters(c):
    assert not is_white_space(c)


@pytest.mark.parametrize("c", list("0123456789#@*!"))
def test_will_eat_specials_and_digits(c):
    assert will_eat(c)


@pytest.mark.parametrize("c", ["a", "Z", "_", "?", "-", "$", ""])
def test_will_not_eat_others(c):
    assert not will_eat(c)


def test_valid_key_whole_word():
    assert valid_key_length("HOME") == len("HOME")


def test_valid_key_stops_at_invalid_character():
    assert valid_key_length("PATH_2x-rest") == len("PATH_2x")


def test_valid_key_underscore_only():
    assert valid_key_length("_") == 1


@pytest.mark.parametrize("text", ["", None, "1abc", "-x", "?", " HOME"])
def test_invalid_key_start(text):
    assert valid_key_length(text) == 0


def test_str_change_replaces_span():
    assert str_change("hello world", "there", 6, 5) == "hello there"


@pytest.mark.parametrize("text", ["", "abc", "hello world"])
def test_str_change_identity(text):
    for i in range(len(text) + 1):
        assert str_change(text, "", i, 0) == text
        assert str_change(text, text[i:i + 2], i, 2) == text


def test_str_change_length_invariant():
    dst, src = "abcdefgh", "XYZW"
    for idx in range(len(dst)):
        for length in range(len(dst) - idx + 1):
            result = str_change(dst, src, idx, length)
            assert len(result) == len(dst) - length + len(src)
            assert result.startswith(dst[:idx])
            assert result.endswith(dst[idx + length:])


def test_str_change_negative_index():
    with pytest.raises(ValueError):
        str_change("abc", "x", -1, 1)