"""Tests for weft.tui.text and the widget protocols."""

from __future__ import annotations

from weft.tui.buffer import Buffer
from weft.tui.layout import Rect
from weft.tui.style import Style
from weft.tui.text import Line, Span
from weft.tui.widget import Widget


class TestSpan:
    def test_raw_has_empty_style(self) -> None:
        assert Span.raw("x").style == Style.EMPTY

    def test_width_counts_columns(self) -> None:
        assert Span("a世").width == 3


class TestLine:
    def test_width_sums_spans(self) -> None:
        line = Line.from_spans(Span("ab"), Span.styled("世", Style.EMPTY.bold()))
        assert line.width == 4

    def test_plain(self) -> None:
        assert Line.from_spans(Span("ab"), Span("cd")).plain() == "abcd"

    def test_raw(self) -> None:
        assert Line.raw("hi").spans == (Span("hi"),)

    def test_empty_line(self) -> None:
        assert Line().width == 0


class Blank:
    def render(self, area: Rect, buffer: Buffer) -> None:
        pass


class TestWidgetProtocols:
    def test_structural_widget(self) -> None:
        assert isinstance(Blank(), Widget)
        assert not isinstance(object(), Widget)
