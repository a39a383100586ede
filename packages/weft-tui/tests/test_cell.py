"""Tests for weft.tui.buffer.cell."""

from __future__ import annotations

from weft.tui.buffer import Cell, CellUpdate
from weft.tui.style import Colors, Style


class TestCell:
    def test_singletons(self) -> None:
        assert Cell.EMPTY.symbol == " "
        assert Cell.EMPTY.style == Style.EMPTY
        assert Cell.CONTINUATION.symbol == ""
        assert Cell.CONTINUATION.is_continuation()
        assert not Cell.EMPTY.is_continuation()

    def test_with_symbol_returns_new_cell(self) -> None:
        c = Cell.EMPTY.with_symbol("x")
        assert c.symbol == "x"
        assert Cell.EMPTY.symbol == " "

    def test_unchanged_symbol_returns_same_cell(self) -> None:
        c = Cell("a")
        assert c.with_symbol("a") is c

    def test_patch_style(self) -> None:
        c = Cell("a", Style.EMPTY.with_bg(Colors.BLUE))
        patched = c.patch_style(Style.EMPTY.with_fg(Colors.RED))
        assert patched.style.bg == Colors.BLUE
        assert patched.style.fg == Colors.RED
        assert patched.symbol == "a"

    def test_patch_with_empty_style_is_identity(self) -> None:
        c = Cell("a", Style.EMPTY.bold())
        assert c.patch_style(Style.EMPTY) is c

    def test_structural_equality(self) -> None:
        a = Cell("x", Style.EMPTY.with_fg(Colors.RED))
        b = Cell("x", Style.EMPTY.with_fg(Colors.RED))
        assert a == b
        assert hash(a) == hash(b)
        assert a != Cell("x")
        assert a != Cell("y", Style.EMPTY.with_fg(Colors.RED))

    def test_reset(self) -> None:
        assert Cell("q", Style.EMPTY.bold()).reset() is Cell.EMPTY

    def test_blank(self) -> None:
        assert Cell.EMPTY.is_blank()
        assert not Cell(" ", Style.EMPTY.with_bg(Colors.RED)).is_blank()


class TestCellUpdate:
    def test_value_semantics(self) -> None:
        assert CellUpdate(1, 2, Cell("a")) == CellUpdate(1, 2, Cell("a"))
        assert CellUpdate(1, 2, Cell("a")) != CellUpdate(2, 1, Cell("a"))
