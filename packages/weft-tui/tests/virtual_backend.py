"""Virtual backend for testing -- implements the Backend protocol in-memory.

This module provides a ``VirtualBackend`` class that satisfies the
``weft.tui.terminal.Backend`` protocol without performing any real I/O.
Every call is recorded and the drawn cells are kept in a screen buffer
for assertions.
"""

from __future__ import annotations

from typing import Iterable

from weft.tui.buffer import Buffer, CellUpdate
from weft.tui.layout import Position, Rect, Size


class VirtualBackend:
    """In-memory backend that records all draws for test inspection.

    Parameters
    ----------
    width:
        Number of terminal columns.
    height:
        Number of terminal rows.
    """

    def __init__(self, width: int = 80, height: int = 24) -> None:
        self._width = width
        self._height = height
        self.screen = Buffer.empty(Rect.of(width, height))
        self.draws: list[list[CellUpdate]] = []
        self.calls: list[str] = []
        self.cursor_visible = True
        self.cursor_position: Position | None = None

    # -- Backend protocol ---------------------------------------------------

    def draw(self, updates: Iterable[CellUpdate]) -> None:
        batch = list(updates)
        self.draws.append(batch)
        self.calls.append("draw")
        for u in batch:
            self.screen.set(u.x, u.y, u.cell)

    def flush(self) -> None:
        self.calls.append("flush")

    def clear(self) -> None:
        self.calls.append("clear")
        self.screen = Buffer.empty(Rect.of(self._width, self._height))

    def size(self) -> Size:
        return Size(self._width, self._height)

    def show_cursor(self) -> None:
        self.calls.append("show_cursor")
        self.cursor_visible = True

    def hide_cursor(self) -> None:
        self.calls.append("hide_cursor")
        self.cursor_visible = False

    def set_cursor_position(self, position: Position) -> None:
        self.calls.append("set_cursor_position")
        self.cursor_position = position

    # -- Test helpers -------------------------------------------------------

    def simulate_resize(self, width: int, height: int) -> None:
        """Change the reported size; the next ``draw`` picks it up."""
        self._width = width
        self._height = height

    @property
    def last_draw(self) -> list[CellUpdate]:
        """Return the updates of the most recent ``draw`` (empty if none)."""
        return self.draws[-1] if self.draws else []

    def row_text(self, y: int) -> str:
        """Return the symbols of screen row *y* joined together."""
        return "".join(
            self.screen.get(x, y).symbol for x in range(self.screen.width)
        )
