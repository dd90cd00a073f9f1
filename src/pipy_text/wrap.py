"""Word tokenizing and line breaking for wrapped text."""

import re
from typing import NamedTuple

from .cells import cell_len, chop_cells

_re_word = re.compile(r"\s*\S+\s*")


class WordToken(NamedTuple):
    """A word with its surrounding whitespace and position in the line."""

    start: int  # Character offset of the first character
    end: int  # Character offset one past the last character
    word: str  # Leading whitespace + word + trailing whitespace


def words(text: str) -> list[WordToken]:
    """Split text into words, each carrying its own trailing whitespace.

    Offsets are character offsets, so wide characters count once.

    Example:
        >>> words("foo bar")
        [WordToken(start=0, end=4, word='foo '), WordToken(start=4, end=7, word='bar')]
    """
    return [WordToken(match.start(), match.end(), match.group(0)) for match in _re_word.finditer(text)]


def divide_line(text: str, width: int, fold: bool = True) -> list[int]:
    """Find the character offsets at which a line must be cut to fit ``width``.

    Args:
        text: A single line (no newlines)
        width: Maximum cells per output line
        fold: Break words longer than ``width`` into pieces

    Returns:
        Ascending cut offsets; never contains 0

    Example:
        >>> divide_line("foo bar baz", 3)
        [4, 8]
        >>> divide_line("abracadabra", 4)
        [4, 8]
    """
    if width <= 0:
        return []

    break_positions: list[int] = []
    append = break_positions.append
    cell_offset = 0

    for start, _end, word in words(text):
        word_length = cell_len(word.rstrip())
        remaining_space = width - cell_offset

        if remaining_space >= word_length:
            cell_offset += cell_len(word)
        elif word_length > width:
            # Too long for any line
            if fold:
                folded_word = chop_cells(word, width)
                last_index = len(folded_word) - 1
                for index, piece in enumerate(folded_word):
                    if start:
                        append(start)
                    if index == last_index:
                        cell_offset = cell_len(piece)
                    else:
                        start += len(piece)
            else:
                if start:
                    append(start)
                cell_offset = cell_len(word)
        else:
            if cell_offset and start:
                append(start)
            cell_offset = cell_len(word)

    return break_positions


break_offsets = divide_line
