"""Geometry value types: ``Position``, ``Size``, ``Margin`` and ``Rect``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Position:
    """A column/row coordinate on the terminal grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """A width/height pair."""

    width: int
    height: int


@dataclass(frozen=True)
class Margin:
    """Space reserved around the edges of an area."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    NONE: ClassVar[Margin]

    @classmethod
    def uniform(cls, value: int) -> Margin:
        return cls(value, value, value, value)

    @classmethod
    def symmetric(cls, vertical: int, horizontal: int) -> Margin:
        return cls(vertical, horizontal, vertical, horizontal)

    @classmethod
    def horizontal(cls, value: int) -> Margin:
        return cls(0, value, 0, value)

    @classmethod
    def vertical(cls, value: int) -> Margin:
        return cls(value, 0, value, 0)

    @property
    def horizontal_total(self) -> int:
        return self.left + self.right

    @property
    def vertical_total(self) -> int:
        return self.top + self.bottom

    def inner(self, area: Rect) -> Rect:
        return area.inner(self)


Margin.NONE = Margin()


@dataclass(frozen=True)
class Rect:
    """An immutable axis-aligned integer rectangle.

    A rect with zero width or height is *empty*; ``right`` and ``bottom``
    are exclusive edges.
    """

    x: int
    y: int
    width: int
    height: int
    _hash: int = field(init=False, repr=False, compare=False)

    ZERO: ClassVar[Rect]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect dimensions cannot be negative: {self.width}x{self.height}"
            )
        object.__setattr__(
            self, "_hash", hash((self.x, self.y, self.width, self.height))
        )

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Rect):
            return NotImplemented
        return (
            self._hash == other._hash
            and self.x == other.x
            and self.y == other.y
            and self.width == other.width
            and self.height == other.height
        )

    @classmethod
    def of(cls, width: int, height: int) -> Rect:
        return cls(0, 0, width, height)

    # -- edges --------------------------------------------------------------

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    # -- geometry -----------------------------------------------------------

    def contains(self, x: int | Position, y: int | None = None) -> bool:
        if isinstance(x, Position):
            x, y = x.x, x.y
        return self.x <= x < self.right and self.y <= y < self.bottom

    def inner(self, margin: Margin) -> Rect:
        """Shrink by *margin*, never below zero width/height."""
        return Rect(
            self.x + margin.left,
            self.y + margin.top,
            max(0, self.width - margin.horizontal_total),
            max(0, self.height - margin.vertical_total),
        )

    def intersection(self, other: Rect) -> Rect:
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.right, other.right)
        y2 = min(self.bottom, other.bottom)
        if x1 >= x2 or y1 >= y2:
            return Rect.ZERO
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def intersects(self, other: Rect) -> bool:
        return not self.intersection(other).is_empty()

    def union(self, other: Rect) -> Rect:
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        x1 = min(self.x, other.x)
        y1 = min(self.y, other.y)
        x2 = max(self.right, other.right)
        y2 = max(self.bottom, other.bottom)
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def clamp(self, inner: Rect) -> Rect:
        """Move and shrink *inner* so it lies within this rect."""
        width = min(inner.width, self.width)
        height = min(inner.height, self.height)
        x = max(self.x, min(inner.x, self.right - width))
        y = max(self.y, min(inner.y, self.bottom - height))
        return Rect(x, y, width, height)

    # -- iteration ----------------------------------------------------------

    def rows(self) -> Iterator[Rect]:
        for row in range(self.y, self.bottom):
            yield Rect(self.x, row, self.width, 1)

    def columns(self) -> Iterator[Rect]:
        for col in range(self.x, self.right):
            yield Rect(col, self.y, 1, self.height)

    def positions(self) -> Iterator[Position]:
        for row in range(self.y, self.bottom):
            for col in range(self.x, self.right):
                yield Position(col, row)


Rect.ZERO = Rect(0, 0, 0, 0)
