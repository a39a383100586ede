"""Tests for grapheme-aware writes in Buffer.set_string.

Covers combining marks, ZWJ emoji sequences, regional-indicator flags,
skin-tone modifiers and overwriting wide characters.
"""

from __future__ import annotations

from weft.tui.buffer import Buffer, Cell
from weft.tui.layout import Rect
from weft.tui.style import Style


def row(buf: Buffer, y: int = 0) -> list[str]:
    return [buf.get(x, y).symbol for x in range(buf.area.left, buf.area.right)]


def write(buf: Buffer, x: int, text: str) -> int:
    return buf.set_string(x, 0, text, Style.EMPTY)


# ---------------------------------------------------------------------------
# Zero-width code points
# ---------------------------------------------------------------------------


class TestCombining:
    def test_combining_mark_joins_previous_cell(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        end = write(buf, 0, "e\u0301x")
        assert row(buf) == ["e\u0301", "x", " ", " "]
        assert end == 2

    def test_combining_mark_after_last_column_still_attaches(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 1, 1))
        write(buf, 0, "e\u0301")
        assert row(buf) == ["e\u0301"]

    def test_combining_mark_without_base_is_dropped(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 2, 1))
        end = write(buf, 0, "\u0301a")
        assert row(buf) == ["a", " "]
        assert end == 1

    def test_combining_mark_skips_continuation(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        write(buf, 0, "世\u0301")
        assert row(buf) == ["世\u0301", "", " ", " "]

    def test_variation_selector_attaches(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        write(buf, 0, "\u2764\ufe0f")
        assert buf.get(0, 0).symbol == "\u2764\ufe0f"


class TestZwj:
    def test_family_emoji_is_one_cell(self) -> None:
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        buf = Buffer.empty(Rect(0, 0, 5, 1))
        end = write(buf, 0, family + "a")
        assert buf.get(0, 0).symbol == family
        assert buf.get(1, 0).is_continuation()
        assert buf.get(2, 0).symbol == "a"
        assert end == 3

    def test_joined_char_without_base_is_placed(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        end = write(buf, 0, "\u200dx")
        assert row(buf) == ["x", " ", " "]
        assert end == 1

    def test_nothing_joins_blank_left_by_wide_char_at_edge(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        end = write(buf, 0, "ab\U0001F468\u200d\U0001F469")
        assert row(buf) == ["a", "b", " "]
        assert end == 3

    def test_narrow_cell_at_edge_does_not_absorb_joined_emoji(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        write(buf, 0, "abc\u200d\U0001F469")
        assert "\U0001F469" not in buf.get(2, 0).symbol
        assert all(len(c.symbol) <= 2 for c in buf.content)

    def test_family_emoji_filling_the_row_stays_whole(self) -> None:
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        end = write(buf, 0, "ab" + family)
        assert row(buf) == ["a", "b", family, ""]
        assert end == 4

    def test_skin_tone_modifier_attaches(self) -> None:
        thumbs = "\U0001F44D\U0001F3FD"
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        end = write(buf, 0, thumbs)
        assert buf.get(0, 0).symbol == thumbs
        assert buf.get(1, 0).is_continuation()
        assert end == 2


class TestRegionalIndicators:
    def test_flag_pair_is_one_wide_cell(self) -> None:
        flag = "\U0001F1EF\U0001F1F5"
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        end = write(buf, 0, flag)
        assert row(buf) == [flag, "", " ", " "]
        assert end == 2

    def test_two_flags(self) -> None:
        jp = "\U0001F1EF\U0001F1F5"
        fr = "\U0001F1EB\U0001F1F7"
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        write(buf, 0, jp + fr)
        assert row(buf) == [jp, "", fr, ""]

    def test_flag_without_room_degrades_to_blank(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        end = write(buf, 2, "\U0001F1EF\U0001F1F5")
        assert row(buf) == [" ", " ", " "]
        assert end == 3

    def test_flag_at_edge_ignores_following_marks(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        write(buf, 2, "\U0001F1EF\U0001F1F5\u200d\U0001F469")
        assert buf.get(2, 0).symbol == " "

    def test_lone_regional_indicator_is_narrow(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        end = write(buf, 0, "\U0001F1EFa")
        assert row(buf) == ["\U0001F1EF", "a", " "]
        assert end == 2


# ---------------------------------------------------------------------------
# Wide characters
# ---------------------------------------------------------------------------


class TestWideCharacters:
    def test_wide_char_occupies_two_cells(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        end = write(buf, 0, "世界")
        assert row(buf) == ["世", "", "界", ""]
        assert end == 4

    def test_wide_char_at_last_column_becomes_blank(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        end = write(buf, 0, "ab世")
        assert row(buf) == ["a", "b", " "]
        assert end == 3
        assert not any(c.is_continuation() for c in buf.content)

    def test_blank_edge_keeps_patched_style(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 1, 1))
        buf.set_string(0, 0, "世", Style.EMPTY.bold())
        assert buf.get(0, 0) == Cell(" ", Style.EMPTY.bold())

    def test_overwrite_left_half_clears_continuation(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        write(buf, 0, "世")
        write(buf, 0, "a")
        assert row(buf) == ["a", " ", " "]

    def test_overwrite_right_half_clears_owner(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 3, 1))
        write(buf, 0, "世")
        write(buf, 1, "b")
        assert row(buf) == [" ", "b", " "]

    def test_wide_over_offset_wide(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 4, 1))
        write(buf, 0, "世界")
        write(buf, 1, "中")
        assert row(buf) == [" ", "中", "", " "]

    def test_no_orphan_continuations_after_overwrites(self) -> None:
        buf = Buffer.empty(Rect(0, 0, 6, 1))
        write(buf, 0, "世界中")
        write(buf, 1, "xyz")
        write(buf, 4, "a")
        cells = buf.content
        for i, cell in enumerate(cells):
            if cell.is_continuation():
                assert i > 0
                assert not cells[i - 1].is_continuation()
                assert cells[i - 1].symbol != " "

    def test_diff_includes_continuation(self) -> None:
        before = Buffer.empty(Rect(0, 0, 3, 1))
        after = before.copy()
        after.set_string(0, 0, "世", Style.EMPTY)
        updates = before.diff(after)
        assert [(u.x, u.cell.symbol) for u in updates] == [(0, "世"), (1, "")]
