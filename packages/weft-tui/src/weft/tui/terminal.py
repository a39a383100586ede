"""Frame driver: double-buffered rendering onto a ``Backend``.

``Terminal.draw`` hands a ``Frame`` to the application's renderer, diffs
the freshly painted buffer against the previous frame and sends only the
changed cells to the backend.  ``AnsiBackend`` turns those cell updates
into escape sequences on a text stream.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Protocol, TextIO

from weft.tui.ansi import CLEAR_SCREEN, HIDE_CURSOR, RESET, SHOW_CURSOR, move_to, style_to_ansi
from weft.tui.buffer import Buffer, CellUpdate
from weft.tui.config import RenderSettings
from weft.tui.layout.layout import configure_layout_cache
from weft.tui.layout.rect import Position, Rect, Size
from weft.tui.style import Style
from weft.tui.utils import visible_width
from weft.tui.widget import StatefulWidget, Widget

logger = logging.getLogger(__name__)

_FALLBACK_SIZE = Size(80, 24)


# ---------------------------------------------------------------------------
# Backend protocol
# ---------------------------------------------------------------------------


class Backend(Protocol):
    """Output surface the frame driver draws onto."""

    def draw(self, updates: Iterable[CellUpdate]) -> None: ...

    def flush(self) -> None: ...

    def clear(self) -> None: ...

    def size(self) -> Size: ...

    def show_cursor(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def set_cursor_position(self, position: Position) -> None: ...


# ---------------------------------------------------------------------------
# AnsiBackend implementation
# ---------------------------------------------------------------------------


class AnsiBackend:
    """Writes cell updates as ANSI escape sequences to a text stream.

    The cursor is only repositioned when an update is not directly to the
    right of the previous one, and SGR codes are only emitted when the style
    changes.  Write errors propagate to the caller.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    @property
    def stream(self) -> TextIO:
        return self._stream

    def draw(self, updates: Iterable[CellUpdate]) -> None:
        out: list[str] = []
        next_x: int | None = None
        next_y: int | None = None
        last_style: Style | None = None
        for update in updates:
            cell = update.cell
            if cell.is_continuation():
                continue
            if update.x != next_x or update.y != next_y:
                out.append(move_to(update.x, update.y))
            if cell.style != last_style:
                out.append(style_to_ansi(cell.style))
                last_style = cell.style
            out.append(cell.symbol)
            next_x = update.x + max(1, visible_width(cell.symbol))
            next_y = update.y
        if out:
            out.append(RESET)
            self._stream.write("".join(out))

    def flush(self) -> None:
        self._stream.flush()

    def clear(self) -> None:
        self._stream.write(CLEAR_SCREEN)

    def size(self) -> Size:
        try:
            ts = os.get_terminal_size(self._stream.fileno())
        except (ValueError, OSError):
            return _FALLBACK_SIZE
        return Size(ts.columns, ts.lines)

    def show_cursor(self) -> None:
        self._stream.write(SHOW_CURSOR)

    def hide_cursor(self) -> None:
        self._stream.write(HIDE_CURSOR)

    def set_cursor_position(self, position: Position) -> None:
        self._stream.write(move_to(position.x, position.y))


# ---------------------------------------------------------------------------
# Frame
# ---------------------------------------------------------------------------


class Frame:
    """The drawing surface passed to a renderer for one ``Terminal.draw``."""

    def __init__(self, buffer: Buffer) -> None:
        self._buffer = buffer
        self._cursor_position: Position | None = None

    @property
    def buffer(self) -> Buffer:
        return self._buffer

    @property
    def area(self) -> Rect:
        return self._buffer.area

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def height(self) -> int:
        return self._buffer.height

    def render_widget(self, widget: Widget, area: Rect) -> None:
        widget.render(area, self._buffer)

    def render_stateful_widget(
        self, widget: StatefulWidget[Any], area: Rect, state: Any
    ) -> None:
        widget.render(area, self._buffer, state)

    def set_cursor_position(self, x: int | Position, y: int | None = None) -> None:
        """Show the cursor at the given cell once the frame is drawn."""
        if not isinstance(x, Position):
            if y is None:
                raise TypeError("set_cursor_position() needs a Position or both x and y")
            x = Position(x, y)
        self._cursor_position = x

    @property
    def cursor_position(self) -> Position | None:
        return self._cursor_position

    @property
    def cursor_visible(self) -> bool:
        return self._cursor_position is not None


@dataclass(frozen=True)
class CompletedFrame:
    """Result of ``Terminal.draw``: the buffer that is now on screen."""

    buffer: Buffer
    area: Rect


# ---------------------------------------------------------------------------
# Terminal
# ---------------------------------------------------------------------------


class Terminal:
    """Double-buffered frame driver over a ``Backend``.

    Explicit *settings* replace the environment, including the layout
    solver's cache size, which is reconfigured process-wide.

    Can be used as a context manager; the cursor is restored on exit::

        with Terminal(AnsiBackend()) as term:
            term.draw(lambda frame: frame.render_widget(app, frame.area))
    """

    def __init__(
        self,
        backend: Backend,
        settings: RenderSettings | None = None,
    ) -> None:
        self._backend = backend
        if settings is None:
            settings = RenderSettings.from_env()
        else:
            # The import-time cache size came from the environment.
            configure_layout_cache(settings.layout_cache_size)
        self._settings = settings
        size = backend.size()
        area = Rect.of(size.width, size.height)
        self._current = Buffer.empty(area)
        self._previous = Buffer.empty(area)
        self._hidden_cursor = False
        self._frame_count = 0

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def settings(self) -> RenderSettings:
        return self._settings

    @property
    def area(self) -> Rect:
        return self._current.area

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def _resize(self, area: Rect) -> None:
        logger.debug("Terminal resized from %r to %r", self._current.area, area)
        self._current = Buffer.empty(area)
        self._previous = Buffer.empty(area)
        self._backend.clear()

    def draw(self, renderer: Callable[[Frame], None]) -> CompletedFrame:
        """Render one frame and send the changed cells to the backend."""
        size = self._backend.size()
        area = Rect.of(size.width, size.height)
        if area != self._current.area:
            self._resize(area)

        self._current.clear()
        frame = Frame(self._current)
        renderer(frame)

        if self._settings.force_full_redraw:
            logger.debug("Forcing full redraw of %r", area)
            updates = Buffer.empty(Rect.ZERO).diff(self._current)
        else:
            updates = self._previous.diff(self._current)
        logger.debug("Frame %d: %d cell updates", self._frame_count, len(updates))
        if updates:
            self._backend.draw(updates)

        position = frame.cursor_position
        if position is not None:
            self._backend.set_cursor_position(position)
            if self._hidden_cursor:
                self._backend.show_cursor()
                self._hidden_cursor = False
        elif not self._hidden_cursor:
            self._backend.hide_cursor()
            self._hidden_cursor = True

        self._backend.flush()

        self._previous, self._current = self._current, self._previous
        completed = CompletedFrame(self._previous, area)
        if self._settings.debug_dir:
            self._dump_frame(completed)
        self._frame_count += 1
        return completed

    def _dump_frame(self, completed: CompletedFrame) -> None:
        path = os.path.join(
            self._settings.debug_dir or "", f"frame-{self._frame_count:06d}.ansi"
        )
        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(completed.buffer.to_ansi_string_trimmed())
        except OSError as exc:
            logger.warning("Could not write frame dump %s: %s", path, exc)

    def clear(self) -> None:
        """Clear the screen and forget the previous frame."""
        self._backend.clear()
        area = self._current.area
        self._current = Buffer.empty(area)
        self._previous = Buffer.empty(area)

    def show_cursor(self) -> None:
        self._backend.show_cursor()
        self._hidden_cursor = False

    def hide_cursor(self) -> None:
        self._backend.hide_cursor()
        self._hidden_cursor = True

    def __enter__(self) -> Terminal:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._hidden_cursor:
            self.show_cursor()
        self._backend.flush()
