import pytest

from fillit.strings import (
    concat,
    count_words,
    duplicate,
    iter_chars,
    iter_chars_indexed,
    map_chars,
    map_chars_indexed,
    split_words,
    substring,
    trim,
    word_len,
)


def test_split_words_drops_empty_runs():
    words = ["alpha", "beta", "gamma"]
    text = "**" + "***".join(words) + "*"
    assert split_words(text, "*") == words


def test_split_words_without_delimiter_gives_whole_string():
    assert split_words("solid", " ") == ["solid"]


def test_split_words_only_delimiters():
    assert split_words("    ", " ") == []


def test_split_words_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split_words("a b", "ab")


@pytest.mark.parametrize("text", ["", "a", " a ", "a  b c", "xx yy  zz   "])
def test_count_words_matches_split(text):
    assert count_words(text, " ") == len(split_words(text, " "))


def test_count_words_empty():
    assert count_words("", ",") == 0


def test_word_len_skips_leading_delimiters():
    assert word_len("   hello world", " ") == len("hello")


def test_word_len_last_word():
    assert word_len("word", " ") == len("word")


def test_trim_strips_blanks():
    assert trim(" \t\n core text \n\t ") == "core text"


def test_trim_keeps_other_whitespace():
    text = "\rcore\r"
    assert trim(text) == text


def test_trim_all_blank_is_empty():
    assert trim(" \n\t ") == ""


@pytest.mark.parametrize("text", ["", "x", "  a b  ", "\t\tz\n"])
def test_trim_is_idempotent(text):
    once = trim(text)
    assert trim(once) == once


def test_concat_parts():
    left, right = "fill", "it"
    joined = concat(left, right)
    assert joined.startswith(left)
    assert joined.endswith(right)
    assert len(joined) == len(left) + len(right)


def test_concat_empty_is_identity():
    assert concat("", "abc") == "abc"
    assert concat("abc", "") == "abc"


def test_concat_rejects_none():
    with pytest.raises(TypeError):
        concat(None, "abc")


@pytest.mark.parametrize("split_at", [0, 3, 7])
def test_substring_round_trip(split_at):
    text = "tetrino"
    head = substring(text, 0, split_at)
    tail = substring(text, split_at, len(text) - split_at)
    assert concat(head, tail) == text


def test_substring_out_of_range():
    with pytest.raises(IndexError):
        substring("abc", 2, 5)


def test_substring_negative():
    with pytest.raises(ValueError):
        substring("abc", -1, 1)


def test_map_chars_upper():
    text = "Hello, World"
    assert map_chars(text, str.upper) == text.upper()


def test_map_chars_indexed_sees_indices():
    text = "abcd"
    seen = []

    def record(index, ch):
        seen.append(index)
        return ch

    assert map_chars_indexed(text, record) == text
    assert seen == list(range(len(text)))


def test_iter_chars_replaces_in_place():
    chars = list("abc")
    iter_chars(chars, str.upper)
    assert "".join(chars) == "abc".upper()


def test_iter_chars_visitor_leaves_unchanged():
    chars = list("xyz")
    seen = []
    iter_chars(chars, seen.append)
    assert seen == list("xyz")
    assert chars == list("xyz")


def test_iter_chars_indexed():
    chars = list("abcd")
    iter_chars_indexed(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C", "d"]


def test_duplicate_bytearray_is_independent():
    original = bytearray(b"data")
    copy = duplicate(original)
    copy[0] = ord("D")
    assert original == bytearray(b"data")
    assert copy[1:] == original[1:]


def test_duplicate_str_equal():
    assert duplicate("same") == "same"


def test_duplicate_none_raises():
    with pytest.raises(TypeError):
        duplicate(None)