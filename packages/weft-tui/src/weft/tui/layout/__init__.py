"""Geometry primitives and the constraint-based layout solver."""

from weft.tui.layout.constraint import (
    Constraint,
    Direction,
    Fill,
    Flex,
    Length,
    Max,
    Min,
    Percentage,
    Ratio,
    fill,
    length,
    max_,
    min_,
    percentage,
    ratio,
)
from weft.tui.layout.fraction import Fraction
from weft.tui.layout.layout import Layout, configure_layout_cache, solve_sizes
from weft.tui.layout.rect import Margin, Position, Rect, Size

__all__ = [
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
    "configure_layout_cache",
    "fill",
    "length",
    "max_",
    "min_",
    "percentage",
    "ratio",
    "solve_sizes",
]
