"""Renderer protocols consumed by ``Frame``."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from weft.tui.buffer import Buffer
from weft.tui.layout.rect import Rect

S = TypeVar("S", contravariant=True)


@runtime_checkable
class Widget(Protocol):
    """Anything that can paint itself into a region of a buffer."""

    def render(self, area: Rect, buffer: Buffer) -> None:
        """Paint into *buffer*, staying within *area*."""
        ...


@runtime_checkable
class StatefulWidget(Protocol[S]):
    """A widget whose rendering reads (and may update) external state."""

    def render(self, area: Rect, buffer: Buffer, state: S) -> None: ...
