"""
pipy-text - Styled terminal text with cell-aware wrapping, built on Rich styles.

Example:
    from pipy_text import Text

    text = Text("Hello, World! Wrapped to fit a narrow terminal.")
    text.stylize("bold magenta", 0, 5)

    for line in text.wrap(16, justify="full"):
        for segment in line.render():
            print(segment.text, segment.style)
"""

__version__ = "0.1.0"

# Core types
from .text import Text, Measurement, strip_control_codes
from .lines import Lines
from .span import Span

# Styles and segments
from rich.segment import Segment
from .style import StyleType, get_style, combine_styles, is_null

# Cell widths
from .cells import (
    cell_len,
    get_character_cell_size,
    set_cell_size,
    chop_cells,
    is_single_cell_widths,
    cell_width,
    fit_to_width,
    chunk_by_width,
    is_single_cell,
)

# Line breaking
from .wrap import WordToken, words, divide_line, break_offsets

# Settings
from .settings import (
    JustifyMethod,
    OverflowMethod,
    TextSettings,
    DEFAULT_SETTINGS,
    load_settings,
    settings_from_env,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Text",
    "Lines",
    "Span",
    "Measurement",
    "strip_control_codes",
    # Styles
    "Segment",
    "StyleType",
    "get_style",
    "combine_styles",
    "is_null",
    # Cells
    "cell_len",
    "get_character_cell_size",
    "set_cell_size",
    "chop_cells",
    "is_single_cell_widths",
    "cell_width",
    "fit_to_width",
    "chunk_by_width",
    "is_single_cell",
    # Wrap
    "WordToken",
    "words",
    "divide_line",
    "break_offsets",
    # Settings
    "JustifyMethod",
    "OverflowMethod",
    "TextSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "settings_from_env",
]
