"""A list of Text lines, as produced by splitting or wrapping."""

import logging
from bisect import bisect_left
from itertools import accumulate
from typing import TYPE_CHECKING, Iterable, Iterator, overload

from .settings import DEFAULT_SETTINGS, JustifyMethod, OverflowMethod, TextSettings
from .span import Span

if TYPE_CHECKING:
    from rich.console import Console, ConsoleOptions, RenderResult

    from .text import Text

logger = logging.getLogger(__name__)


class Lines:
    """A list-like container of :class:`~pipy_text.text.Text` lines."""

    def __init__(self, lines: Iterable["Text"] = ()) -> None:
        self._lines: list["Text"] = list(lines)

    def __repr__(self) -> str:
        return f"Lines({self._lines!r})"

    def __iter__(self) -> Iterator["Text"]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    @overload
    def __getitem__(self, index: int) -> "Text": ...

    @overload
    def __getitem__(self, index: slice) -> "Lines": ...

    def __getitem__(self, index: int | slice) -> "Text | Lines":
        if isinstance(index, slice):
            return Lines(self._lines[index])
        return self._lines[index]

    def __setitem__(self, index: int, value: "Text") -> None:
        self._lines[index] = value

    def __rich_console__(self, console: "Console", options: "ConsoleOptions") -> "RenderResult":
        yield from self._lines

    def append(self, line: "Text") -> None:
        self._lines.append(line)

    def extend(self, lines: Iterable["Text"]) -> None:
        self._lines.extend(lines)

    def pop(self, index: int = -1) -> "Text":
        return self._lines.pop(index)

    @property
    def plain(self) -> list[str]:
        """The plain text of every line."""
        return [line.plain for line in self._lines]

    def justify(
        self,
        width: int,
        justify: JustifyMethod = "left",
        overflow: OverflowMethod = "fold",
        *,
        settings: TextSettings = DEFAULT_SETTINGS,
    ) -> None:
        """Justify every line in place to ``width`` cells.

        - left/default: truncate and pad on the right
        - center: split the shortfall between both sides (extra on the right)
        - right: pad on the left
        - full: stretch every line but the last by widening the gaps between
          words; leftover spaces go to the rightmost gaps first

        Args:
            width: Target width in cells
            justify: Justification method
            overflow: How to handle lines wider than ``width``
            settings: Supplies the ellipsis for ``overflow="ellipsis"``
        """
        logger.debug(f"Justifying {len(self._lines)} lines to width {width} ({justify})")

        if justify in ("left", "default"):
            for line in self._lines:
                line.truncate(width, overflow=overflow, pad=True, settings=settings)
        elif justify == "center":
            for line in self._lines:
                line.rstrip()
                line.truncate(width, overflow=overflow, settings=settings)
                shortfall = width - line.cell_len
                if shortfall > 0:
                    left = shortfall // 2
                    line.pad_left(left)
                    line.pad_right(shortfall - left)
        elif justify == "right":
            for line in self._lines:
                line.rstrip()
                line.truncate(width, overflow=overflow, settings=settings)
                shortfall = width - line.cell_len
                if shortfall > 0:
                    line.pad_left(shortfall)
        elif justify == "full":
            last_index = len(self._lines) - 1
            for index, line in enumerate(self._lines):
                if index == last_index:
                    line.truncate(width, overflow=overflow, pad=True, settings=settings)
                else:
                    _stretch_line(line, width, overflow, settings)


def _stretch_line(line: "Text", width: int, overflow: OverflowMethod, settings: TextSettings) -> None:
    """Widen the single-space gaps of a line until it is ``width`` cells."""
    line.rstrip()
    plain = line.plain
    words = plain.split(" ")
    gaps = len(words) - 1
    current_width = line.cell_len

    if gaps < 1 or current_width >= width:
        line.truncate(width, overflow=overflow, pad=True, settings=settings)
        return

    per_gap, remainder = divmod(width - current_width, gaps)
    extra_spaces = [per_gap] * gaps
    for index in range(remainder):
        extra_spaces[gaps - 1 - index] += 1

    # Character offsets of the separating spaces
    separators: list[int] = []
    position = 0
    for word in words[:-1]:
        position += len(word)
        separators.append(position)
        position += 1

    inserted = list(accumulate(extra_spaces))

    def shift(offset: int) -> int:
        # Spaces are inserted after each separator, so only separators
        # strictly before the offset move it
        preceding = bisect_left(separators, offset)
        return offset + (inserted[preceding - 1] if preceding else 0)

    pieces: list[str] = []
    for index, word in enumerate(words):
        pieces.append(word)
        if index < gaps:
            pieces.append(" " * (1 + extra_spaces[index]))

    spans = [Span(shift(start), shift(end), style) for start, end, style in line.spans]
    line.plain = "".join(pieces)
    line.spans = spans
