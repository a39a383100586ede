"""ANSI escape sequences for styles and cursor control."""

from __future__ import annotations

from weft.tui.style import (
    ALL_MODIFIERS,
    Ansi,
    Color,
    Indexed,
    ResetColor,
    Rgb,
    Style,
)

ESC = "\x1b"
CSI = "\x1b["
RESET = "\x1b[0m"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J\x1b[H"


def fg_code(color: Color) -> str:
    if isinstance(color, ResetColor):
        return "39"
    if isinstance(color, Ansi):
        return str(color.color.fg_code)
    if isinstance(color, Indexed):
        return f"38;5;{color.index}"
    if isinstance(color, Rgb):
        return f"38;2;{color.r};{color.g};{color.b}"
    raise TypeError(f"Unsupported color: {color!r}")


def bg_code(color: Color) -> str:
    if isinstance(color, ResetColor):
        return "49"
    if isinstance(color, Ansi):
        return str(color.color.bg_code)
    if isinstance(color, Indexed):
        return f"48;5;{color.index}"
    if isinstance(color, Rgb):
        return f"48;2;{color.r};{color.g};{color.b}"
    raise TypeError(f"Unsupported color: {color!r}")


def underline_code(color: Color) -> str | None:
    # Only palette and true-color underline colors have an SGR form.
    if isinstance(color, Indexed):
        return f"58;5;{color.index}"
    if isinstance(color, Rgb):
        return f"58;2;{color.r};{color.g};{color.b}"
    return None


def style_to_ansi(style: Style) -> str:
    """Serialize *style* as a full SGR sequence that starts with a reset.

    ``Style.EMPTY`` serializes to ``ESC[0m``.
    """
    parts = [CSI, "0"]
    if style.fg is not None:
        parts.append(";")
        parts.append(fg_code(style.fg))
    if style.bg is not None:
        parts.append(";")
        parts.append(bg_code(style.bg))
    mods = style.effective_modifiers
    for m in ALL_MODIFIERS:
        if m in mods:
            parts.append(";")
            parts.append(str(m.code))
    if style.underline_color is not None:
        code = underline_code(style.underline_color)
        if code is not None:
            parts.append(";")
            parts.append(code)
    parts.append("m")
    return "".join(parts)


def move_to(x: int, y: int) -> str:
    """Cursor-position sequence for 0-based column *x* and row *y*."""
    return f"{CSI}{y + 1};{x + 1}H"
