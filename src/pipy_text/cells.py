"""Terminal cell width utilities."""

import unicodedata
from functools import lru_cache


@lru_cache(maxsize=4096)
def get_character_cell_size(character: str) -> int:
    """Get the number of terminal cells a single character occupies.

    Accounts for:
    - Control characters (C0, DEL, C1) = 0 cells
    - Combining marks and format characters = 0 cells
    - Wide characters (CJK, emoji) = 2 cells
    - Everything else = 1 cell

    Args:
        character: A single character

    Returns:
        0, 1 or 2
    """
    codepoint = ord(character)

    # Control characters
    if codepoint < 32 or 0x7F <= codepoint < 0xA0:
        return 0

    # Zero-width characters
    category = unicodedata.category(character)
    if category in ("Mn", "Me", "Cf"):  # Mark, Enclosing, Format
        return 0

    # Wide characters (CJK, emoji, etc.)
    if unicodedata.east_asian_width(character) in ("F", "W"):
        return 2

    return 1


def _is_ascii_printable(text: str) -> bool:
    return text.isascii() and text.isprintable()


def cell_len(text: str) -> int:
    """Calculate the width of text in terminal cells.

    Args:
        text: Text to measure

    Returns:
        Width in terminal columns
    """
    if _is_ascii_printable(text):
        return len(text)
    return sum(map(get_character_cell_size, text))


def is_single_cell_widths(text: str) -> bool:
    """Check if every character in text is exactly one cell wide."""
    if _is_ascii_printable(text):
        return True
    return all(get_character_cell_size(character) == 1 for character in text)


def set_cell_size(text: str, total: int) -> str:
    """Crop or pad text so it is exactly ``total`` cells wide.

    A double-width character that would straddle the limit is replaced by
    spaces, so the result never contains half a glyph.

    Example:
        >>> set_cell_size("foo", 5)
        'foo  '
        >>> set_cell_size("😽😽", 3)
        '😽 '
    """
    if total <= 0:
        return ""

    current_width = cell_len(text)
    if current_width == total:
        return text
    if current_width < total:
        return text + " " * (total - current_width)

    result = []
    position = 0
    for character in text:
        character_width = get_character_cell_size(character)
        if position + character_width > total:
            result.append(" " * (total - position))
            break
        result.append(character)
        position += character_width

    return "".join(result)


def chop_cells(text: str, width: int) -> list[str]:
    """Break text into chunks that are at most ``width`` cells wide.

    A character that would overflow the current chunk starts the next one.

    Example:
        >>> chop_cells("abcdefghijk", 3)
        ['abc', 'def', 'ghi', 'jk']
    """
    if width <= 0:
        return []

    chunks: list[str] = []
    current: list[str] = []
    current_width = 0

    for character in text:
        character_width = get_character_cell_size(character)
        if current and current_width + character_width > width:
            chunks.append("".join(current))
            current = []
            current_width = 0
        current.append(character)
        current_width += character_width

    if current:
        chunks.append("".join(current))

    return chunks


# Names used by layout code that thinks in "fit" and "chunk" terms
cell_width = get_character_cell_size
fit_to_width = set_cell_size
chunk_by_width = chop_cells
is_single_cell = is_single_cell_widths
