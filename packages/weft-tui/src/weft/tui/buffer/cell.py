"""Single terminal cell and the diff output unit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from weft.tui.style import Style


class Cell:
    """One terminal position: a grapheme-cluster ``symbol`` plus a ``Style``.

    The symbol is a single space for a blank cell, a grapheme cluster for
    visible content, or ``""`` for the continuation column of a wide
    character.  Cells are immutable; the ``with_*`` methods return new
    instances.  The hash is computed once since diffing compares cells
    constantly.
    """

    __slots__ = ("_symbol", "_style", "_hash")

    EMPTY: ClassVar[Cell]
    CONTINUATION: ClassVar[Cell]

    def __init__(self, symbol: str = " ", style: Style = Style.EMPTY) -> None:
        self._symbol = symbol
        self._style = style
        self._hash = hash((symbol, style))

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def style(self) -> Style:
        return self._style

    def with_symbol(self, symbol: str) -> Cell:
        if symbol == self._symbol:
            return self
        return Cell(symbol, self._style)

    def with_style(self, style: Style) -> Cell:
        if style == self._style:
            return self
        return Cell(self._symbol, style)

    def patch_style(self, style: Style) -> Cell:
        """Return a cell whose style is this style patched with *style*."""
        patched = self._style.patch(style)
        if patched is self._style:
            return self
        return Cell(self._symbol, patched)

    def is_continuation(self) -> bool:
        return self._symbol == ""

    def is_blank(self) -> bool:
        return self._symbol == " " and self._style == Style.EMPTY

    def reset(self) -> Cell:
        return Cell.EMPTY

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Cell):
            return NotImplemented
        return (
            self._hash == other._hash
            and self._symbol == other._symbol
            and self._style == other._style
        )

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"Cell({self._symbol!r}, {self._style!r})"


Cell.EMPTY = Cell(" ")
Cell.CONTINUATION = Cell("")


@dataclass(frozen=True)
class CellUpdate:
    """A changed cell at absolute position ``(x, y)``."""

    x: int
    y: int
    cell: Cell
