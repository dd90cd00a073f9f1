"""Styled character ranges."""

from typing import NamedTuple, Optional

from .style import StyleType


class Span(NamedTuple):
    """A style applied to the half-open character range ``[start, end)``."""

    start: int
    end: int
    style: StyleType

    def __bool__(self) -> bool:
        return self.end > self.start

    def split(self, offset: int) -> tuple["Span", Optional["Span"]]:
        """Split the span in two at ``offset``.

        Returns the span unchanged (and None) if offset is outside it.
        """
        if offset < self.start or offset >= self.end:
            return self, None

        start, end, style = self
        return Span(start, offset, style), Span(offset, end, style)

    def move(self, offset: int) -> "Span":
        """Shift both ends by ``offset`` characters."""
        start, end, style = self
        return Span(start + offset, end + offset, style)

    def right_crop(self, offset: int) -> "Span":
        """Crop the end of the span to ``offset``."""
        start, end, style = self
        if offset >= end:
            return self
        return Span(start, offset, style)

    def extend(self, cells: int) -> "Span":
        """Extend the end of the span by ``cells``."""
        if not cells:
            return self
        start, end, style = self
        return Span(start, end + cells, style)
