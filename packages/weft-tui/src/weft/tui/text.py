"""Styled text runs written into a buffer with ``set_span`` / ``set_line``."""

from __future__ import annotations

from dataclasses import dataclass, field

from weft.tui.style import Style
from weft.tui.utils import visible_width


@dataclass(frozen=True)
class Span:
    """A run of text sharing one style."""

    content: str
    style: Style = Style.EMPTY

    @classmethod
    def raw(cls, content: str) -> Span:
        return cls(content)

    @classmethod
    def styled(cls, content: str, style: Style) -> Span:
        return cls(content, style)

    @property
    def width(self) -> int:
        return visible_width(self.content)


@dataclass(frozen=True)
class Line:
    """A sequence of spans rendered on one row.

    The line ``style`` is applied beneath every span, so span styles patch
    over it.
    """

    spans: tuple[Span, ...] = field(default_factory=tuple)
    style: Style = Style.EMPTY

    @classmethod
    def from_spans(cls, *spans: Span, style: Style = Style.EMPTY) -> Line:
        return cls(tuple(spans), style)

    @classmethod
    def raw(cls, content: str) -> Line:
        return cls((Span(content),))

    @property
    def width(self) -> int:
        return sum(s.width for s in self.spans)

    def plain(self) -> str:
        return "".join(s.content for s in self.spans)
