"""weft-tui: cell buffers, frame diffing and constraint layout for terminal UIs."""

# Geometry and layout
from weft.tui.layout import (
    Constraint,
    Direction,
    Fill,
    Flex,
    Fraction,
    Layout,
    Length,
    Margin,
    Max,
    Min,
    Percentage,
    Position,
    Ratio,
    Rect,
    Size,
)

# Styling
from weft.tui.style import (
    Ansi,
    AnsiColor,
    Color,
    Colors,
    Indexed,
    Modifier,
    ResetColor,
    Rgb,
    Style,
)
from weft.tui.text import Line, Span

# Buffer and diff
from weft.tui.buffer import Buffer, Cell, CellUpdate

# Rendering
from weft.tui.config import RenderSettings
from weft.tui.terminal import AnsiBackend, Backend, CompletedFrame, Frame, Terminal
from weft.tui.widget import StatefulWidget, Widget

# Utilities
from weft.tui.utils import char_width, strip_ansi, visible_width

__all__ = [
    # Layout
    "Constraint",
    "Direction",
    "Fill",
    "Flex",
    "Fraction",
    "Layout",
    "Length",
    "Margin",
    "Max",
    "Min",
    "Percentage",
    "Position",
    "Ratio",
    "Rect",
    "Size",
    # Styling
    "Ansi",
    "AnsiColor",
    "Color",
    "Colors",
    "Indexed",
    "Modifier",
    "ResetColor",
    "Rgb",
    "Style",
    "Line",
    "Span",
    # Buffer
    "Buffer",
    "Cell",
    "CellUpdate",
    # Rendering
    "AnsiBackend",
    "Backend",
    "CompletedFrame",
    "Frame",
    "RenderSettings",
    "StatefulWidget",
    "Terminal",
    "Widget",
    # Utilities
    "char_width",
    "strip_ansi",
    "visible_width",
]
