"""Tests for word tokenizing and line breaking."""

import pytest
from pipy_text import WordToken, words, divide_line, break_offsets


class TestWords:
    def test_basic(self):
        assert words("foo bar baz") == [(0, 4, "foo "), (4, 8, "bar "), (8, 11, "baz")]

    def test_leading_whitespace(self):
        assert words("  hello world") == [(0, 8, "  hello "), (8, 13, "world")]

    def test_trailing_whitespace(self):
        assert words("hello world  ") == [(0, 6, "hello "), (6, 13, "world  ")]

    def test_multiple_spaces(self):
        assert words("foo   bar") == [(0, 6, "foo   "), (6, 9, "bar")]

    def test_empty_and_blank(self):
        assert words("") == []
        assert words("   ") == []

    def test_character_offsets_for_wide_text(self):
        # Offsets count characters, not bytes or cells
        assert words("あ い") == [(0, 2, "あ "), (2, 3, "い")]

    def test_named_fields(self):
        token = words("foo")[0]
        assert isinstance(token, WordToken)
        assert token.start == 0
        assert token.end == 3
        assert token.word == "foo"


class TestDivideLine:
    @pytest.mark.parametrize(
        "text,width,expected",
        [
            ("foo bar baz", 3, [4, 8]),
            ("foo bar baz", 4, [4, 8]),
            ("foo bar baz", 7, [8]),
            ("foo bar baz", 11, []),
            ("foo bar baz", 20, []),
            ("abracadabra", 4, [4, 8]),
            ("XX 12345678912", 4, [3, 7, 11]),
            ("abcd", 1, [1, 2, 3]),
            ("ああああ", 4, [2]),
        ],
    )
    def test_fold(self, text, width, expected):
        assert divide_line(text, width, fold=True) == expected

    def test_no_fold_keeps_long_word(self):
        assert divide_line("abracadabra", 4, fold=False) == []

    def test_no_fold_long_word_after_short(self):
        assert divide_line("XX 12345678912", 4, fold=False) == [3]

    def test_zero_width(self):
        assert divide_line("foo bar", 0) == []

    def test_no_leading_cut(self):
        # A long first word never produces a cut at offset 0
        assert 0 not in divide_line("abracadabra foo", 4)

    def test_fold_then_continue_on_same_line(self):
        # The folded word ends with "a " (2 cells), so "x" still fits
        assert divide_line("abracadabra x", 5) == [5, 10]

    def test_alias(self):
        assert break_offsets("foo bar baz", 3, True) == [4, 8]
