"""Off-screen cell grid that widgets paint into, plus frame diffing.

A ``Buffer`` covers a ``Rect`` with one ``Cell`` per position, stored
row-major in a flat list.  Reads outside the area return ``Cell.EMPTY``
and writes outside it are dropped, so widgets never need to bounds-check.
"""

from __future__ import annotations

from typing import Callable, Iterator, NamedTuple, Union

from weft.tui.ansi import RESET, style_to_ansi
from weft.tui.buffer.cell import Cell, CellUpdate
from weft.tui.layout.rect import Position, Rect
from weft.tui.style import Style
from weft.tui.text import Line, Span
from weft.tui.utils import ZWJ, char_width, is_control, is_regional_indicator, visible_width

StyledContentListener = Callable[[Style, Rect], None]


# ---------------------------------------------------------------------------
# set_string tokenizer
# ---------------------------------------------------------------------------

_GLYPH = 0    # occupies ``width`` new cells
_ATTACH = 1   # zero-width, appended to the preceding base cell
_JOIN = 2     # follows a ZWJ: appended if a base cell exists, else a glyph


class _Unit(NamedTuple):
    kind: int
    symbol: str
    width: int


def _placement_units(text: str) -> Iterator[_Unit]:
    """Split *text* into cell placement units.

    Columns are not known here; the apply loop in :meth:`Buffer.set_string`
    assigns them.
    """
    join_next = False
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        cp = ord(ch)
        i += 1

        if is_control(cp):
            continue

        width = char_width(cp)
        if width == 0:
            yield _Unit(_ATTACH, ch, 0)
            if cp == ZWJ:
                join_next = True
            continue

        if is_regional_indicator(cp) and i < n and is_regional_indicator(ord(text[i])):
            yield _Unit(_GLYPH, ch + text[i], 2)
            i += 1
            join_next = False
            continue

        if join_next:
            join_next = False
            yield _Unit(_JOIN, ch, width)
            continue

        yield _Unit(_GLYPH, ch, width)


# ---------------------------------------------------------------------------
# Buffer
# ---------------------------------------------------------------------------


class Buffer:
    """A mutable grid of cells covering ``area``."""

    __slots__ = ("_area", "_content", "_listener")

    def __init__(self, area: Rect, content: list[Cell] | None = None) -> None:
        if content is None:
            content = [Cell.EMPTY] * area.area
        elif len(content) != area.area:
            raise ValueError(
                f"Content length {len(content)} does not match area {area.width}x{area.height}"
            )
        self._area = area
        self._content = content
        self._listener: StyledContentListener | None = None

    # -- construction -------------------------------------------------------

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        return cls(area)

    @classmethod
    def filled(cls, area: Rect, cell: Cell) -> Buffer:
        return cls(area, [cell] * area.area)

    @classmethod
    def with_lines(cls, *lines: Union[str, Line, None]) -> Buffer:
        """Build a buffer at the origin holding one row per line.

        The width is the widest line's display width; shorter rows are
        padded with blank cells.
        """
        if not lines:
            return cls.empty(Rect.ZERO)
        width = 0
        for line in lines:
            if isinstance(line, Line):
                width = max(width, line.width)
            elif line is not None:
                width = max(width, visible_width(line))
        buf = cls.empty(Rect(0, 0, width, len(lines)))
        for y, line in enumerate(lines):
            if isinstance(line, Line):
                buf.set_line(0, y, line)
            elif line is not None:
                buf.set_string(0, y, line, Style.EMPTY)
        return buf

    def set_styled_content_listener(self, listener: StyledContentListener | None) -> None:
        """Register a callback told about each styled span written (``None`` disables)."""
        self._listener = listener

    # -- accessors ----------------------------------------------------------

    @property
    def area(self) -> Rect:
        return self._area

    @property
    def width(self) -> int:
        return self._area.width

    @property
    def height(self) -> int:
        return self._area.height

    @property
    def content(self) -> list[Cell]:
        return self._content

    def _index(self, x: int, y: int) -> int:
        a = self._area
        return (y - a.y) * a.width + (x - a.x)

    def get(self, x: int | Position, y: int | None = None) -> Cell:
        if isinstance(x, Position):
            x, y = x.x, x.y
        if not self._area.contains(x, y):
            return Cell.EMPTY
        return self._content[self._index(x, y)]

    def set(self, x: int | Position, y: int | Cell, cell: Cell | None = None) -> None:
        if isinstance(x, Position):
            cell = y  # type: ignore[assignment]
            x, y = x.x, x.y
        if self._area.contains(x, y):
            self._content[self._index(x, y)] = cell  # type: ignore[index]

    # -- text ---------------------------------------------------------------

    def _find_base_cell(self, col: int, y: int) -> int:
        """Column of the nearest non-continuation cell left of *col*, or -1."""
        left = self._area.left
        search = min(col, self._area.right) - 1
        while search >= left:
            if not self._content[self._index(search, y)].is_continuation():
                return search
            search -= 1
        return -1

    def _append_to_base(
        self, col: int, y: int, symbol: str, wide_only: bool = False
    ) -> bool:
        base = self._find_base_cell(col, y)
        if base < 0:
            return False
        i = self._index(base, y)
        if wide_only and (
            base + 1 >= self._area.right or not self._content[i + 1].is_continuation()
        ):
            return False
        cell = self._content[i]
        self._content[i] = cell.with_symbol(cell.symbol + symbol)
        return True

    def _place(self, col: int, y: int, symbol: str, width: int, style: Style) -> None:
        """Write one glyph of *width* columns at *col*, keeping wide pairs intact."""
        a = self._area
        content = self._content
        i = self._index(col, y)
        existing = content[i]
        # Overwriting the right half of a wide char orphans its left half.
        if existing.is_continuation() and col > a.left:
            content[i - 1] = content[i - 1].with_symbol(" ")
        content[i] = existing.patch_style(style).with_symbol(symbol)
        if width == 2:
            content[i + 1] = Cell.CONTINUATION
        after = col + width
        # Overwriting the left half of a wide char orphans its right half.
        if after < a.right and content[i + width].is_continuation():
            content[i + width] = content[i + width].with_symbol(" ")

    def set_string(self, x: int, y: int, text: str, style: Style) -> int:
        """Write *text* starting at ``(x, y)``, clipped to the row.

        Styles are patched onto the existing cells.  Returns the column
        after the last one written.
        """
        a = self._area
        if y < a.top or y >= a.bottom:
            return x

        col = x
        for unit in _placement_units(text):
            if unit.kind == _ATTACH:
                self._append_to_base(col, y, unit.symbol)
                continue
            if unit.kind == _JOIN:
                # Past the row end only a wide base may grow.
                full = col >= a.right
                if self._append_to_base(col, y, unit.symbol, wide_only=full):
                    continue

            if col >= a.right:
                break

            if unit.width == 2 and col + 1 >= a.right:
                # No room for the continuation column; nothing may join the blank.
                if col >= a.left:
                    self._place(col, y, " ", 1, style)
                col += 1
                break

            if col >= a.left:
                self._place(col, y, unit.symbol, unit.width, style)
            col += unit.width

        return col

    def set_span(self, x: int, y: int, span: Span) -> int:
        end = self.set_string(x, y, span.content, span.style)
        if self._listener is not None and end > x:
            self._listener(span.style, Rect(x, y, end - x, 1))
        return end

    def set_line(self, x: int, y: int, line: Line) -> int:
        col = x
        for span in line.spans:
            if line.style != Style.EMPTY:
                span = Span(span.content, line.style.patch(span.style))
            col = self.set_span(col, y, span)
        return col

    # -- regions ------------------------------------------------------------

    def set_style(self, area: Rect, style: Style) -> None:
        region = self._area.intersection(area)
        if region.is_empty():
            return
        content = self._content
        for y in range(region.top, region.bottom):
            for x in range(region.left, region.right):
                i = self._index(x, y)
                content[i] = content[i].patch_style(style)

    def fill(self, area: Rect, cell: Cell) -> None:
        region = self._area.intersection(area)
        if region.is_empty():
            return
        content = self._content
        for y in range(region.top, region.bottom):
            start = self._index(region.left, y)
            content[start : start + region.width] = [cell] * region.width

    def clear(self, area: Rect | None = None) -> None:
        if area is None:
            self._content[:] = [Cell.EMPTY] * len(self._content)
        else:
            self.fill(area, Cell.EMPTY)

    def merge(self, other: Buffer, offset_x: int = 0, offset_y: int = 0) -> None:
        """Copy every cell of *other* into this buffer, shifted by the offset."""
        oa = other.area
        for y in range(oa.height):
            for x in range(oa.width):
                dest_x = offset_x + x
                dest_y = offset_y + y
                if self._area.contains(dest_x, dest_y):
                    self._content[self._index(dest_x, dest_y)] = other.get(
                        oa.x + x, oa.y + y
                    )

    def copy(self) -> Buffer:
        return Buffer(self._area, list(self._content))

    # -- diff ---------------------------------------------------------------

    def diff(self, other: Buffer) -> list[CellUpdate]:
        """Updates that turn this buffer into *other*, in row-major order.

        When the areas differ every cell of *other* is reported.
        """
        oa = other.area
        if self._area != oa:
            return [
                CellUpdate(x, y, other.get(x, y))
                for y in range(oa.top, oa.bottom)
                for x in range(oa.left, oa.right)
            ]

        updates: list[CellUpdate] = []
        width = self._area.width
        ax = self._area.x
        ay = self._area.y
        for i, (mine, theirs) in enumerate(zip(self._content, other._content)):
            if mine is not theirs and mine != theirs:
                row, column = divmod(i, width)
                updates.append(CellUpdate(ax + column, ay + row, theirs))
        return updates

    # -- serialization ------------------------------------------------------

    def _render_rows(self, trim: bool, cursor_positioning: bool) -> str:
        a = self._area
        content = self._content
        out: list[str] = []
        last_style: Style | None = None

        for row in range(a.height):
            if cursor_positioning:
                out.append(f"\x1b[{row + 1};1H")
            elif row > 0:
                out.append("\r\n")

            start = row * a.width
            end = start + a.width
            if trim:
                while end > start:
                    cell = content[end - 1]
                    if not cell.is_continuation() and not cell.is_blank():
                        break
                    end -= 1

            for i in range(start, end):
                cell = content[i]
                if cell.is_continuation():
                    continue
                if cell.style != last_style:
                    out.append(style_to_ansi(cell.style))
                    last_style = cell.style
                out.append(cell.symbol)

        out.append(RESET)
        return "".join(out)

    def to_ansi_string(self) -> str:
        """Render as text with SGR codes, rows joined by ``\\r\\n``."""
        return self._render_rows(trim=False, cursor_positioning=False)

    def to_ansi_string_with_cursor_positioning(self) -> str:
        """Render with an absolute cursor move before each row."""
        return self._render_rows(trim=False, cursor_positioning=True)

    def to_ansi_string_trimmed(self) -> str:
        """Like :meth:`to_ansi_string` but drops trailing blank cells per row."""
        return self._render_rows(trim=True, cursor_positioning=False)

    # -- dunder -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Buffer):
            return NotImplemented
        return self._area == other._area and self._content == other._content

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Buffer(area={self._area!r}, width={self.width}, height={self.height})"
