"""Styled text: a string plus a list of style spans."""

import logging
import re
from bisect import bisect_left, bisect_right
from functools import reduce
from math import gcd
from operator import itemgetter
from typing import TYPE_CHECKING, Iterable, Iterator, NamedTuple, Union

from rich.errors import StyleSyntaxError
from rich.measure import Measurement as ConsoleMeasurement
from rich.segment import Segment
from rich.style import Style

from .cells import cell_len, set_cell_size
from .lines import Lines
from .settings import DEFAULT_SETTINGS, JustifyMethod, OverflowMethod, TextSettings
from .span import Span
from .style import StyleType, combine_styles, get_style
from .wrap import divide_line

if TYPE_CHECKING:
    from rich.console import Console, ConsoleOptions, RenderResult

logger = logging.getLogger(__name__)

# Bell, backspace, vertical tab, form feed, carriage return
CONTROL_CODES = frozenset((7, 8, 11, 12, 13))
_CONTROL_STRIP_TABLE = dict.fromkeys(CONTROL_CODES)

_re_trailing_whitespace = re.compile(r"\s+$")

TextType = Union[str, "Text"]
TextPart = Union[str, "Text", tuple[str, StyleType]]


def strip_control_codes(text: str) -> str:
    """Remove control codes that would move the cursor or ring the bell."""
    return text.translate(_CONTROL_STRIP_TABLE)


class Measurement(NamedTuple):
    """Minimum and maximum widths of a Text, in cells."""

    minimum: int  # Widest single word
    maximum: int  # Widest line


class _Run(NamedTuple):
    start: int
    end: int
    style: Style
    covered: bool  # At least one span is active in this run


class Text:
    """Text with a base style and any number of overlapping style spans.

    Spans are kept in insertion order; where spans overlap, later ones are
    layered on top of earlier ones.

    Example:
        text = Text("Hello, World!")
        text.stylize("bold", 0, 5)
        for line in text.wrap(8):
            segments = line.render()
    """

    def __init__(
        self,
        text: str = "",
        style: StyleType = "",
        *,
        justify: JustifyMethod | None = None,
        overflow: OverflowMethod | None = None,
        no_wrap: bool | None = None,
        end: str = "\n",
        tab_size: int | None = None,
        spans: Iterable[Span] | None = None,
    ) -> None:
        self._text = strip_control_codes(text)
        self.style = get_style(style)
        self.justify = justify
        self.overflow = overflow
        self.no_wrap = no_wrap
        self.end = end
        self.tab_size = tab_size
        self._spans: list[Span] = []
        if spans:
            self._spans = [Span(start, stop, get_style(span_style)) for start, stop, span_style in spans]
            self.trim_spans()

    def __len__(self) -> int:
        return len(self._text)

    def __bool__(self) -> bool:
        return bool(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Text({self._text!r}, style={self.style!r}, spans={self._spans!r})"

    def __add__(self, other: object) -> "Text":
        if isinstance(other, (str, Text)):
            result = self.copy()
            result.append(other)
            return result
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Text):
            return NotImplemented
        return self._text == other._text and self._spans == other._spans

    def __contains__(self, other: object) -> bool:
        if isinstance(other, str):
            return other in self._text
        if isinstance(other, Text):
            return other._text in self._text
        return False

    def __getitem__(self, index: int | slice) -> "Text":
        if isinstance(index, int):
            if index < 0:
                index += len(self)
            return self.char_at(index)

        start, stop, step = index.indices(len(self))
        if step != 1:
            raise TypeError("Text slices may not have a step")
        return self.slice(start, stop)

    # === Construction ===

    @classmethod
    def empty(cls) -> "Text":
        """An empty Text with no style."""
        return cls()

    @classmethod
    def styled(
        cls,
        text: str,
        style: StyleType = "",
        *,
        justify: JustifyMethod | None = None,
        overflow: OverflowMethod | None = None,
    ) -> "Text":
        """Construct a Text with ``style`` applied as a span over all of it.

        Unlike the base style, the span is carried along when the text is
        appended to another Text.
        """
        styled_text = cls(text, justify=justify, overflow=overflow)
        styled_text.stylize(style)
        return styled_text

    @classmethod
    def assemble(
        cls,
        *parts: TextPart,
        style: StyleType = "",
        justify: JustifyMethod | None = None,
        overflow: OverflowMethod | None = None,
        no_wrap: bool | None = None,
        end: str = "\n",
        tab_size: int | None = None,
    ) -> "Text":
        """Construct a Text from strings, Texts and ``(str, style)`` pairs.

        Example:
            >>> Text.assemble(("Hello", "bold"), ", World!").plain
            'Hello, World!'
        """
        text = cls(
            style=style,
            justify=justify,
            overflow=overflow,
            no_wrap=no_wrap,
            end=end,
            tab_size=tab_size,
        )
        for part in parts:
            if isinstance(part, (str, Text)):
                text.append(part)
            else:
                text.append(*part)
        return text

    def blank_copy(self, plain: str = "") -> "Text":
        """A new Text with the same formatting settings but no spans."""
        return Text(
            plain,
            style=self.style,
            justify=self.justify,
            overflow=self.overflow,
            no_wrap=self.no_wrap,
            end=self.end,
            tab_size=self.tab_size,
        )

    def copy(self) -> "Text":
        """A copy of this Text; spans are not shared."""
        copy_self = self.blank_copy(self._text)
        copy_self._spans = self._spans[:]
        return copy_self

    # === Properties ===

    @property
    def plain(self) -> str:
        """The text without any style information."""
        return self._text

    @plain.setter
    def plain(self, new_text: str) -> None:
        self.set_plain(new_text)

    def set_plain(self, new_text: str) -> None:
        """Replace the text, dropping or clamping spans past the new end."""
        sanitized = strip_control_codes(new_text)
        if sanitized != self._text:
            self._text = sanitized
            self.trim_spans()

    @property
    def spans(self) -> list[Span]:
        """The style spans, in layering order."""
        return self._spans

    @spans.setter
    def spans(self, spans: Iterable[Span]) -> None:
        self._spans = [Span(start, stop, get_style(span_style)) for start, stop, span_style in spans]
        self.trim_spans()

    @property
    def cell_len(self) -> int:
        """Width of the text in terminal cells."""
        return cell_len(self._text)

    # === Mutation ===

    def append(self, text: TextType, style: StyleType | None = None) -> "Text":
        """Append a str or Text.

        Appending an empty string is a no-op. A Text keeps its spans (shifted
        to the new position) and its base style becomes a span.

        Args:
            text: Text to append
            style: Style for an appended str; not allowed with a Text

        Returns:
            self, so calls can be chained
        """
        if not isinstance(text, (str, Text)):
            raise TypeError("Only str or Text can be appended to Text")

        if isinstance(text, str):
            sanitized = strip_control_codes(text)
            if not sanitized:
                return self
            offset = len(self)
            self._text += sanitized
            if style is not None:
                new_style = get_style(style)
                if new_style:
                    self._spans.append(Span(offset, offset + len(sanitized), new_style))
            return self

        if style is not None:
            raise ValueError("style must not be set when appending a Text")
        return self.append_text(text)

    def append_text(self, text: "Text") -> "Text":
        """Append another Text, keeping its spans."""
        if not text._text:
            return self
        offset = len(self)
        if text.style:
            self._spans.append(Span(offset, offset + len(text), text.style))
        self._text += text._text
        self._spans.extend(span.move(offset) for span in text._spans)
        return self

    def append_tokens(self, tokens: Iterable[tuple[str, StyleType | None]]) -> "Text":
        """Append ``(text, style)`` pairs."""
        for content, style in tokens:
            self.append(content, style)
        return self

    def copy_styles(self, text: "Text") -> None:
        """Copy the spans of another Text on top of this one."""
        self._spans.extend(text._spans)

    def _clamp_range(self, start: int, end: int | None) -> tuple[int, int] | None:
        length = len(self)
        if start < 0:
            start += length
        if end is None:
            end = length
        elif end < 0:
            end += length
        start = max(0, start)
        end = min(length, end)
        if start >= end:
            return None
        return start, end

    def stylize(self, style: StyleType, start: int = 0, end: int | None = None) -> None:
        """Apply a style on top of the existing spans.

        Offsets are clamped to the text; negative offsets count from the end.
        Nothing happens if the range is empty or the style is null.
        """
        new_style = get_style(style)
        span_range = self._clamp_range(start, end)
        if new_style and span_range is not None:
            self._spans.append(Span(*span_range, new_style))

    def stylize_before(self, style: StyleType, start: int = 0, end: int | None = None) -> None:
        """Apply a style underneath the existing spans."""
        new_style = get_style(style)
        span_range = self._clamp_range(start, end)
        if new_style and span_range is not None:
            self._spans.insert(0, Span(*span_range, new_style))

    def trim_spans(self) -> None:
        """Drop spans that start past the end and clamp those that run over it."""
        max_offset = len(self)
        self._spans[:] = [
            span if span.end <= max_offset else Span(span.start, max_offset, span.style)
            for span in self._spans
            if span.start < max_offset
        ]

    def pad(self, count: int, character: str = " ") -> None:
        """Pad both sides with ``count`` characters."""
        self.pad_left(count, character)
        self.pad_right(count, character)

    def pad_left(self, count: int, character: str = " ") -> None:
        """Pad the left side, shifting every span."""
        if len(character) != 1:
            raise ValueError("character must be a string of length 1")
        if count > 0:
            self._text = f"{character * count}{self._text}"
            self._spans[:] = [span.move(count) for span in self._spans]

    def pad_right(self, count: int, character: str = " ") -> None:
        """Pad the right side."""
        if len(character) != 1:
            raise ValueError("character must be a string of length 1")
        if count > 0:
            self._text = f"{self._text}{character * count}"

    def right_crop(self, amount: int = 1) -> None:
        """Remove ``amount`` characters from the end."""
        if amount <= 0:
            return
        self.set_plain(self._text[: max(0, len(self) - amount)])

    def set_length(self, new_length: int) -> None:
        """Crop or pad with spaces to exactly ``new_length`` characters."""
        length = len(self)
        if length > new_length:
            self.right_crop(length - new_length)
        elif length < new_length:
            self.pad_right(new_length - length)

    def remove_suffix(self, suffix: str) -> None:
        """Remove ``suffix`` if the text ends with it."""
        if suffix and self._text.endswith(suffix):
            self.right_crop(len(suffix))

    def rstrip(self) -> None:
        """Strip trailing whitespace."""
        self.set_plain(self._text.rstrip())

    def rstrip_end(self, size: int) -> None:
        """Strip trailing whitespace, but only beyond character ``size``.

        Whitespace before ``size`` is kept, so indentation that lands at the
        start of a wrapped line survives.
        """
        text_length = len(self)
        if text_length > size:
            excess = text_length - size
            whitespace_match = _re_trailing_whitespace.search(self._text)
            if whitespace_match is not None:
                whitespace_count = len(whitespace_match.group(0))
                self.right_crop(min(whitespace_count, excess))

    def extend_style(self, spaces: int) -> None:
        """Add spaces to the end, extending spans that reach the end."""
        if spaces <= 0:
            return
        end_offset = len(self)
        self._spans[:] = [span.extend(spaces) if span.end >= end_offset else span for span in self._spans]
        self._text += " " * spaces

    def truncate(
        self,
        max_width: int,
        *,
        overflow: OverflowMethod | None = None,
        pad: bool = False,
        settings: TextSettings = DEFAULT_SETTINGS,
    ) -> None:
        """Truncate the text to fit ``max_width`` cells.

        Args:
            max_width: Maximum width in cells
            overflow: "ellipsis" crops one cell short and adds an ellipsis,
                "crop" and "fold" crop hard, "ignore" leaves the text wide
            pad: Pad with spaces up to ``max_width`` if narrower
            settings: Supplies the default overflow and the ellipsis glyph
        """
        _overflow = overflow or self.overflow or settings.overflow
        if _overflow != "ignore":
            length = cell_len(self._text)
            if length > max_width:
                if _overflow == "ellipsis":
                    if max_width <= 0:
                        self.set_plain("")
                    else:
                        self.set_plain(set_cell_size(self._text, max_width - 1) + settings.ellipsis)
                else:
                    self.set_plain(set_cell_size(self._text, max_width))
        if pad:
            length = cell_len(self._text)
            if length < max_width:
                self.pad_right(max_width - length)

    def align(self, align: JustifyMethod, width: int, character: str = " ") -> None:
        """Crop and pad the text to ``width`` cells with the given alignment."""
        self.truncate(width)
        excess_space = width - cell_len(self._text)
        if excess_space > 0:
            if align == "center":
                left = excess_space // 2
                self.pad_left(left, character)
                self.pad_right(excess_space - left, character)
            elif align == "right":
                self.pad_left(excess_space, character)
            else:
                self.pad_right(excess_space, character)

    def expand_tabs(self, tab_size: int | None = None) -> None:
        """Replace each tab with ``tab_size`` spaces, moving spans to match.

        A tab at offset k moves every later offset forward by tab_size - 1.
        """
        if "\t" not in self._text:
            return
        if tab_size is None:
            tab_size = self.tab_size or DEFAULT_SETTINGS.tab_size

        new_offsets: list[int] = []
        position = 0
        for character in self._text:
            new_offsets.append(position)
            position += tab_size if character == "\t" else 1
        new_offsets.append(position)

        self._text = self._text.replace("\t", " " * tab_size)
        self._spans[:] = [
            Span(new_offsets[start], new_offsets[end], style)
            for start, end, style in self._spans
            if new_offsets[end] > new_offsets[start]
        ]

    def highlight_regex(
        self,
        re_highlight: Union[re.Pattern[str], str],
        style: StyleType | None = None,
        *,
        style_prefix: str = "",
    ) -> int:
        """Apply a style to every match of a regular expression.

        Named groups are styled with ``f"{style_prefix}{group_name}"``; groups
        whose name does not parse as a style are left unstyled.

        Returns:
            Number of matches
        """
        if isinstance(re_highlight, str):
            re_highlight = re.compile(re_highlight)

        match_style = get_style(style)
        count = 0
        for match in re_highlight.finditer(self._text):
            start, end = match.span()
            if match_style and end > start:
                self._spans.append(Span(start, end, match_style))
            for name in match.groupdict():
                group_start, group_end = match.span(name)
                if group_end <= group_start:
                    continue
                try:
                    group_style = get_style(f"{style_prefix}{name}")
                except StyleSyntaxError:
                    logger.debug(f"Group {name!r} is not a style, leaving it unstyled")
                    continue
                if group_style:
                    self._spans.append(Span(group_start, group_end, group_style))
            count += 1
        return count

    def highlight_words(
        self,
        words: Iterable[str],
        style: StyleType,
        *,
        case_sensitive: bool = True,
    ) -> int:
        """Apply a style to every occurrence of the given words.

        Returns:
            Number of occurrences
        """
        alternatives = [re.escape(word) for word in words if word]
        if not alternatives:
            return 0

        word_style = get_style(style)
        flags = 0 if case_sensitive else re.IGNORECASE
        count = 0
        for match in re.finditer("|".join(alternatives), self._text, flags=flags):
            start, end = match.span()
            if word_style:
                self._spans.append(Span(start, end, word_style))
            count += 1
        return count

    # === Decomposition ===

    def divide(self, offsets: Iterable[int]) -> Lines:
        """Cut the text at the given character offsets.

        Produces ``len(offsets) + 1`` pieces. Each span is re-emitted, in
        piece-local coordinates, into every piece it overlaps.
        """
        _offsets = list(offsets)
        if not _offsets:
            return Lines([self.copy()])

        text = self._text
        text_length = len(text)
        boundaries = [0, *sorted(min(max(0, offset), text_length) for offset in _offsets), text_length]
        line_count = len(boundaries) - 1

        new_lines = Lines(self.blank_copy(text[start:end]) for start, end in zip(boundaries, boundaries[1:]))
        if not self._spans:
            return new_lines

        line_spans = [line._spans for line in new_lines]
        for span_start, span_end, style in self._spans:
            if span_end <= span_start:
                continue
            # First piece ending after the span starts, last piece starting before it ends
            first_line = min(max(bisect_right(boundaries, span_start) - 1, 0), line_count - 1)
            last_line = min(bisect_left(boundaries, span_end) - 1, line_count - 1)
            for line_index in range(first_line, last_line + 1):
                line_start = boundaries[line_index]
                line_end = boundaries[line_index + 1]
                overlap_start = max(span_start, line_start)
                overlap_end = min(span_end, line_end)
                if overlap_end > overlap_start:
                    line_spans[line_index].append(Span(overlap_start - line_start, overlap_end - line_start, style))

        return new_lines

    def split(
        self,
        separator: str = "\n",
        *,
        include_separator: bool = False,
        allow_blank: bool = False,
    ) -> Lines:
        """Split on a literal separator.

        Args:
            separator: String to split on
            include_separator: Keep the separator at the end of each piece
            allow_blank: Keep the empty piece after a trailing separator

        Raises:
            ValueError: If separator is empty
        """
        if not separator:
            raise ValueError("separator must not be empty")

        text = self._text
        if separator not in text:
            return Lines([self.copy()])

        re_separator = re.compile(re.escape(separator))
        if include_separator:
            lines = self.divide(match.end() for match in re_separator.finditer(text))
        else:

            def separator_offsets() -> Iterator[int]:
                for match in re_separator.finditer(text):
                    start, end = match.span()
                    yield start
                    yield end

            lines = Lines(line for line in self.divide(separator_offsets()) if line.plain != separator)

        if not allow_blank and text.endswith(separator):
            lines.pop()

        return lines

    def slice(self, start: int, end: int | None = None) -> "Text":
        """Extract ``[start, end)`` with its spans; out of range gives an empty Text."""
        length = len(self)
        if end is None:
            end = length
        start = min(max(0, start), length)
        end = min(max(0, end), length)
        if start >= end:
            return self.blank_copy()
        return self.divide([start, end])[1]

    def char_at(self, index: int) -> "Text":
        """The character at ``index`` with the styles covering it."""
        if not 0 <= index < len(self):
            return self.blank_copy()
        character = self.blank_copy(self._text[index])
        character._spans = [Span(0, 1, style) for start, end, style in self._spans if start <= index < end]
        return character

    def fit(self, width: int) -> Lines:
        """Split into lines and force each to exactly ``width`` cells."""
        lines = Lines()
        for line in self.split(allow_blank=True):
            line.truncate(width, overflow="crop", pad=True)
            lines.append(line)
        return lines

    def join(self, lines: Iterable["Text"]) -> "Text":
        """Join Texts using this one as the separator."""
        new_text = self.blank_copy()
        for index, line in enumerate(lines):
            if index and self._text:
                new_text.append_text(self)
            new_text.append_text(line)
        return new_text

    # === Rendering ===

    def _runs(self) -> Iterator[_Run]:
        """Sweep span entry/exit events, yielding maximal runs of one style.

        The active list starts with the base style; spans join it in order of
        their start offset (ties in insertion order) and leave it at their end.
        """
        text_length = len(self._text)
        styles = [self.style, *(get_style(span.style) for span in self._spans)]
        live_spans = [(index, span) for index, span in enumerate(self._spans, 1) if span]

        events = [(span.start, False, index) for index, span in live_spans]
        events.extend((span.end, True, index) for index, span in live_spans)
        events.sort(key=itemgetter(0, 1))

        stack: list[int] = [0]
        style_cache: dict[tuple[int, ...], Style] = {}

        def current_style() -> Style:
            key = tuple(stack)
            style = style_cache.get(key)
            if style is None:
                style = style_cache[key] = combine_styles(styles[style_id] for style_id in key)
            return style

        last_offset = 0
        for offset, leaving, style_id in events:
            offset = min(offset, text_length)
            if offset > last_offset:
                yield _Run(last_offset, offset, current_style(), len(stack) > 1)
                last_offset = offset
            if leaving:
                stack.remove(style_id)
            else:
                stack.append(style_id)

        if last_offset < text_length:
            yield _Run(last_offset, text_length, current_style(), len(stack) > 1)

    def render(self) -> list[Segment]:
        """Render to segments, one per run of identically styled characters.

        The terminator (``end``) follows as its own unstyled segment.
        """
        text = self._text
        segments: list[Segment] = []

        if not self._spans:
            segments.append(Segment(text, self.style or None))
        else:
            for start, end, style, _covered in self._runs():
                segments.append(Segment(text[start:end], style or None))

        if self.end:
            segments.append(Segment(self.end))
        return segments

    def flatten_spans(self) -> list[Span]:
        """Resolve overlapping spans into non-overlapping ones.

        Each span carries the fully combined style (base style included).
        Adjacent ranges with equal styles are merged, and ranges no span
        covers, or whose combined style is null, are left out.
        """
        flattened: list[Span] = []
        for start, end, style, covered in self._runs():
            if not covered or not style:
                continue
            if flattened and flattened[-1].end == start and flattened[-1].style == style:
                flattened[-1] = flattened[-1].extend(end - start)
            else:
                flattened.append(Span(start, end, style))
        return flattened

    def get_style_at_offset(self, offset: int) -> Style:
        """The combined style of the character at ``offset``."""
        if offset < 0:
            offset += len(self)
        covering = sorted(
            (span for span in self._spans if span.start <= offset < span.end),
            key=lambda span: span.start,
        )
        return combine_styles([self.style, *(span.style for span in covering)])

    def measure(self) -> Measurement:
        """Widest word (minimum) and widest line (maximum), in cells."""
        text = self._text
        if not text:
            return Measurement(0, 0)
        maximum = max(cell_len(line) for line in text.split("\n"))
        minimum = max((cell_len(word) for word in text.split()), default=0)
        return Measurement(minimum, maximum)

    def wrap(
        self,
        width: int,
        *,
        justify: JustifyMethod | None = None,
        overflow: OverflowMethod | None = None,
        tab_size: int | None = None,
        no_wrap: bool | None = None,
        settings: TextSettings = DEFAULT_SETTINGS,
    ) -> Lines:
        """Word-wrap the text into lines of at most ``width`` cells.

        Newlines always start a new line. Words wider than ``width`` are
        folded. Lines that are still too wide (``no_wrap``) are truncated
        according to ``overflow``.

        Args:
            width: Maximum cells per line
            justify: Justify each paragraph; None leaves lines as wrapped
            overflow: Overflow method for lines that don't fit
            tab_size: Spaces per tab
            no_wrap: Keep each paragraph on one line
            settings: Defaults for anything not given here or on the Text

        Returns:
            The wrapped lines
        """
        wrap_justify = justify or self.justify or settings.justify
        wrap_overflow = overflow or self.overflow or settings.overflow
        _tab_size = tab_size or self.tab_size or settings.tab_size
        _no_wrap = no_wrap if no_wrap is not None else bool(self.no_wrap)

        lines = Lines()
        for line in self.split(allow_blank=True):
            line.expand_tabs(_tab_size)
            if _no_wrap:
                new_lines = Lines([line])
            else:
                offsets = divide_line(line.plain, width, fold=True)
                new_lines = line.divide(offsets)
                for new_line in new_lines:
                    new_line.rstrip_end(width)
            if wrap_justify:
                new_lines.justify(width, justify=wrap_justify, overflow=wrap_overflow, settings=settings)
            for new_line in new_lines:
                if new_line.cell_len > width:
                    new_line.truncate(width, overflow=wrap_overflow, settings=settings)
            lines.extend(new_lines)

        logger.debug(f"Wrapped {len(self)} characters into {len(lines)} lines at width {width}")
        return lines

    def detect_indentation(self) -> int:
        """Guess the indentation step from the even leading-space counts."""
        indentations = {
            len(line) - len(line.lstrip(" ")) for line in self._text.split("\n") if line.strip()
        }
        even_indentations = [indent for indent in indentations if indent and not indent % 2]
        if not even_indentations:
            return 1
        return reduce(gcd, even_indentations)

    def with_indent_guides(
        self,
        indent_size: int | None = None,
        *,
        character: str = "│",
        style: StyleType = "dim green",
    ) -> "Text":
        """A copy with indentation replaced by vertical guide characters.

        Args:
            indent_size: Spaces per level; detected if None
            character: Guide character
            style: Style of the guides

        Returns:
            New Text with guides
        """
        _indent_size = self.detect_indentation() if indent_size is None else indent_size
        text = self.copy()
        text.expand_tabs()
        indent_line = f"{character}{' ' * (_indent_size - 1)}"

        new_lines: list[Text] = []
        blank_lines = 0
        for line in text.split(allow_blank=True):
            plain = line.plain
            stripped = plain.lstrip(" ")
            if not stripped:
                blank_lines += 1
                continue
            full_indents, remaining_space = divmod(len(plain) - len(stripped), _indent_size)
            new_indent = f"{indent_line * full_indents}{' ' * remaining_space}"
            line.plain = new_indent + plain[len(new_indent) :]
            line.stylize(style, 0, len(new_indent))
            if blank_lines:
                new_lines.extend(Text(new_indent, style=style) for _ in range(blank_lines))
                blank_lines = 0
            new_lines.append(line)
        if blank_lines:
            new_lines.extend(Text("", style=style) for _ in range(blank_lines))

        return text.blank_copy("\n").join(new_lines)

    # === Console protocol ===

    def __rich_console__(self, console: "Console", options: "ConsoleOptions") -> "RenderResult":
        tab_size = console.tab_size if self.tab_size is None else self.tab_size
        no_wrap = self.no_wrap if self.no_wrap is not None else bool(options.no_wrap)
        lines = self.wrap(
            options.max_width,
            justify=self.justify or options.justify,
            overflow=self.overflow or options.overflow,
            tab_size=tab_size,
            no_wrap=no_wrap,
        )
        all_lines = Text("\n").join(lines)
        all_lines.end = self.end
        yield from all_lines.render()

    def __rich_measure__(self, console: "Console", options: "ConsoleOptions") -> ConsoleMeasurement:
        minimum, maximum = self.measure()
        return ConsoleMeasurement(minimum, maximum)
