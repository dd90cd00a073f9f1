"""Style helpers.

Style values are rich's :class:`~rich.style.Style`. Strings such as
``"bold red"`` are accepted anywhere a style is and parsed on the way in.
"""

from typing import Iterable, Union

from rich.style import Style

StyleType = Union[str, Style]

NULL_STYLE = Style.null()


def get_style(style: StyleType | None) -> Style:
    """Normalize a style argument to a Style.

    Raises:
        rich.errors.StyleSyntaxError: If a style string can't be parsed
    """
    if style is None:
        return NULL_STYLE
    if isinstance(style, Style):
        return style
    if not style.strip():
        return NULL_STYLE
    return Style.parse(style)


def combine_styles(styles: Iterable[StyleType]) -> Style:
    """Merge styles left to right; later styles override earlier attributes."""
    resolved = [get_style(style) for style in styles]
    if not resolved:
        return NULL_STYLE
    return Style.combine(resolved)


def is_null(style: StyleType | None) -> bool:
    """Check if a style sets no attributes."""
    return not get_style(style)
