"""Tests for Lines and justification."""

from rich.style import Style
from pipy_text import Lines, Text, Span

BOLD = Style(bold=True)


class TestLinesContainer:
    def test_sequence_behaviour(self):
        lines = Lines([Text("a"), Text("b")])
        assert len(lines) == 2
        assert [line.plain for line in lines] == ["a", "b"]
        assert lines[1].plain == "b"
        assert [line.plain for line in lines[:1]] == ["a"]

    def test_slice_returns_lines(self):
        lines = Lines([Text("a"), Text("b"), Text("c")])
        head = lines[:2]
        assert isinstance(head, Lines)
        assert head.plain == ["a", "b"]
        head.justify(3, "right")
        assert head.plain == ["  a", "  b"]

    def test_mutation(self):
        lines = Lines()
        lines.append(Text("a"))
        lines.extend([Text("b"), Text("c")])
        lines[0] = Text("z")
        assert lines.plain == ["z", "b", "c"]
        assert lines.pop().plain == "c"
        assert lines.plain == ["z", "b"]


class TestJustify:
    def test_left(self):
        lines = Lines([Text("foo"), Text("ab")])
        lines.justify(6, "left")
        assert lines.plain == ["foo   ", "ab    "]

    def test_center(self):
        lines = Lines([Text("foo")])
        lines.justify(6, "center")
        assert lines.plain == [" foo  "]

    def test_center_ignores_trailing_space(self):
        lines = Lines([Text("foo  ")])
        lines.justify(7, "center")
        assert lines.plain == ["  foo  "]

    def test_center_shifts_spans(self):
        lines = Lines([Text.styled("foo", "bold")])
        lines.justify(7, "center")
        assert lines[0].spans == [Span(2, 5, BOLD)]

    def test_right(self):
        lines = Lines([Text("foo ")])
        lines.justify(6, "right")
        assert lines.plain == ["   foo"]

    def test_overflow(self):
        lines = Lines([Text("foo bar")])
        lines.justify(5, "left", "ellipsis")
        assert lines.plain == ["foo …"]

    def test_full(self):
        lines = Lines([Text("a b c"), Text("d")])
        lines.justify(9, "full")
        assert lines.plain == ["a   b   c", "d        "]

    def test_full_last_line_is_left_justified(self):
        lines = Lines([Text("a b c")])
        lines.justify(9, "full")
        assert lines.plain == ["a b c    "]

    def test_full_remainder_goes_right(self):
        lines = Lines([Text("a b c d"), Text("")])
        lines.justify(11, "full")
        assert lines[0].plain == "a  b  c   d"

        lines = Lines([Text("a b c d"), Text("")])
        lines.justify(12, "full")
        assert lines[0].plain == "a  b   c   d"

    def test_full_shifts_spans(self):
        line = Text("a b c")
        line.stylize("bold", 2, 3)
        line.stylize("italic", 4, 5)
        lines = Lines([line, Text("d")])
        lines.justify(9, "full")
        assert lines[0].plain == "a   b   c"
        assert lines[0].spans == [Span(4, 5, BOLD), Span(8, 9, Style(italic=True))]

    def test_full_span_across_gap(self):
        line = Text.styled("a b c", "bold")
        lines = Lines([line, Text("d")])
        lines.justify(9, "full")
        assert lines[0].spans == [Span(0, 9, BOLD)]

    def test_full_single_word(self):
        lines = Lines([Text("abc"), Text("d")])
        lines.justify(5, "full")
        assert lines.plain == ["abc  ", "d    "]

    def test_full_strips_trailing_space(self):
        lines = Lines([Text("a b "), Text("d")])
        lines.justify(5, "full")
        assert lines[0].plain == "a   b"
