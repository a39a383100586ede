"""Colors, text modifiers and the patchable ``Style`` value type."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag
from typing import ClassVar, Union


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class AnsiColor(Enum):
    """The 16 standard terminal colors, valued by their SGR foreground code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    @property
    def fg_code(self) -> int:
        return self.value

    @property
    def bg_code(self) -> int:
        return self.value + 10


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be 0-255: {value}")


@dataclass(frozen=True)
class ResetColor:
    """The terminal's default color."""


@dataclass(frozen=True)
class Ansi:
    color: AnsiColor


@dataclass(frozen=True)
class Indexed:
    """An entry of the 256-color palette."""

    index: int

    def __post_init__(self) -> None:
        _check_byte("Color index", self.index)


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_byte("Red", self.r)
        _check_byte("Green", self.g)
        _check_byte("Blue", self.b)

    @classmethod
    def from_hex(cls, hex_color: str) -> Rgb:
        h = hex_color[1:] if hex_color.startswith("#") else hex_color
        if len(h) != 6:
            raise ValueError(f"Hex color must be 6 characters: {hex_color}")
        try:
            return cls(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
        except ValueError:
            raise ValueError(f"Invalid hex color: {hex_color}") from None


Color = Union[ResetColor, Ansi, Indexed, Rgb]


class Colors:
    """Named color constants."""

    RESET = ResetColor()
    BLACK = Ansi(AnsiColor.BLACK)
    RED = Ansi(AnsiColor.RED)
    GREEN = Ansi(AnsiColor.GREEN)
    YELLOW = Ansi(AnsiColor.YELLOW)
    BLUE = Ansi(AnsiColor.BLUE)
    MAGENTA = Ansi(AnsiColor.MAGENTA)
    CYAN = Ansi(AnsiColor.CYAN)
    # ANSI "white" (37) renders as light gray on most terminals
    GRAY = Ansi(AnsiColor.WHITE)
    DARK_GRAY = Ansi(AnsiColor.BRIGHT_BLACK)
    LIGHT_RED = Ansi(AnsiColor.BRIGHT_RED)
    LIGHT_GREEN = Ansi(AnsiColor.BRIGHT_GREEN)
    LIGHT_YELLOW = Ansi(AnsiColor.BRIGHT_YELLOW)
    LIGHT_BLUE = Ansi(AnsiColor.BRIGHT_BLUE)
    LIGHT_MAGENTA = Ansi(AnsiColor.BRIGHT_MAGENTA)
    LIGHT_CYAN = Ansi(AnsiColor.BRIGHT_CYAN)
    WHITE = Ansi(AnsiColor.BRIGHT_WHITE)


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------


class Modifier(Flag):
    """Text attributes; each member maps to one SGR code."""

    NONE = 0
    BOLD = 1 << 0
    DIM = 1 << 1
    ITALIC = 1 << 2
    UNDERLINED = 1 << 3
    SLOW_BLINK = 1 << 4
    RAPID_BLINK = 1 << 5
    REVERSED = 1 << 6
    HIDDEN = 1 << 7
    CROSSED_OUT = 1 << 8

    @property
    def code(self) -> int:
        """SGR code of a single modifier (BOLD=1 .. CROSSED_OUT=9)."""
        return self.value.bit_length()


ALL_MODIFIERS: tuple[Modifier, ...] = (
    Modifier.BOLD,
    Modifier.DIM,
    Modifier.ITALIC,
    Modifier.UNDERLINED,
    Modifier.SLOW_BLINK,
    Modifier.RAPID_BLINK,
    Modifier.REVERSED,
    Modifier.HIDDEN,
    Modifier.CROSSED_OUT,
)


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Style:
    """Foreground/background colors plus added and removed modifiers.

    Styles are layered with :meth:`patch`: attributes the overlay leaves
    unset (``None`` colors, untouched modifiers) keep the base value.
    Equality is structural and the hash is computed once.
    """

    fg: Color | None = None
    bg: Color | None = None
    underline_color: Color | None = None
    add_modifiers: Modifier = Modifier.NONE
    sub_modifiers: Modifier = Modifier.NONE
    _hash: int = field(init=False, repr=False, compare=False)

    EMPTY: ClassVar[Style]

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_hash",
            hash(
                (
                    self.fg,
                    self.bg,
                    self.underline_color,
                    self.add_modifiers,
                    self.sub_modifiers,
                )
            ),
        )

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Style):
            return NotImplemented
        return (
            self._hash == other._hash
            and self.fg == other.fg
            and self.bg == other.bg
            and self.underline_color == other.underline_color
            and self.add_modifiers == other.add_modifiers
            and self.sub_modifiers == other.sub_modifiers
        )

    # -- builders -----------------------------------------------------------

    def with_fg(self, color: Color | None) -> Style:
        return Style(color, self.bg, self.underline_color, self.add_modifiers, self.sub_modifiers)

    def with_bg(self, color: Color | None) -> Style:
        return Style(self.fg, color, self.underline_color, self.add_modifiers, self.sub_modifiers)

    def with_underline_color(self, color: Color | None) -> Style:
        return Style(self.fg, self.bg, color, self.add_modifiers, self.sub_modifiers)

    def add_modifier(self, modifier: Modifier) -> Style:
        return Style(
            self.fg,
            self.bg,
            self.underline_color,
            self.add_modifiers | modifier,
            self.sub_modifiers & ~modifier,
        )

    def remove_modifier(self, modifier: Modifier) -> Style:
        return Style(
            self.fg,
            self.bg,
            self.underline_color,
            self.add_modifiers & ~modifier,
            self.sub_modifiers | modifier,
        )

    def bold(self) -> Style:
        return self.add_modifier(Modifier.BOLD)

    def dim(self) -> Style:
        return self.add_modifier(Modifier.DIM)

    def italic(self) -> Style:
        return self.add_modifier(Modifier.ITALIC)

    def underlined(self) -> Style:
        return self.add_modifier(Modifier.UNDERLINED)

    def reversed(self) -> Style:
        return self.add_modifier(Modifier.REVERSED)

    def crossed_out(self) -> Style:
        return self.add_modifier(Modifier.CROSSED_OUT)

    # -- layering -----------------------------------------------------------

    def patch(self, other: Style) -> Style:
        """Overlay *other* on top of this style."""
        if other is Style.EMPTY or other == Style.EMPTY:
            return self
        if self is Style.EMPTY and other.sub_modifiers == Modifier.NONE:
            return other
        return Style(
            other.fg if other.fg is not None else self.fg,
            other.bg if other.bg is not None else self.bg,
            (
                other.underline_color
                if other.underline_color is not None
                else self.underline_color
            ),
            (self.add_modifiers & ~other.sub_modifiers) | other.add_modifiers,
            (self.sub_modifiers & ~other.add_modifiers) | other.sub_modifiers,
        )

    @property
    def effective_modifiers(self) -> Modifier:
        return self.add_modifiers & ~self.sub_modifiers


Style.EMPTY = Style()
