"""Constraint-based layout solver.

``Layout`` splits a ``Rect`` along one axis into one sub-rect per
constraint.  Sizing is resolved by priority:

1.  ``Length``, ``Min`` and ``Max`` take their stated value.
2.  ``Percentage`` and ``Ratio`` take their exact share of the length left
    after margin and spacing, rounded by cumulative flooring so
    complementary shares tile the axis exactly.
3.  ``Fill(weight)`` and ``Min`` share whatever is left, proportionally.

When the resolved sizes overflow, the lowest-priority regions are shrunk
first (``Fill``, ``Ratio``, ``Percentage``, ``Max``, ``Length``, ``Min``,
trailing regions before leading ones).  When they underflow and nothing can
grow, the free space is placed according to the ``Flex`` mode.
"""

from __future__ import annotations

import functools
import logging
from typing import Callable, Iterable, Sequence

from weft.tui.config import RenderSettings
from weft.tui.layout.constraint import (
    Constraint,
    Direction,
    Fill,
    Flex,
    Length,
    Max,
    Min,
    Percentage,
    Ratio,
)
from weft.tui.layout.fraction import Fraction
from weft.tui.layout.rect import Margin, Rect

logger = logging.getLogger(__name__)

__all__ = ["Layout", "configure_layout_cache", "solve_sizes"]

# ---------------------------------------------------------------------------
# Priority tiers (lower number = shrunk later)
# ---------------------------------------------------------------------------

_TIER_MIN = 0
_TIER_LENGTH = 1
_TIER_MAX = 2
_TIER_PERCENTAGE = 3
_TIER_RATIO = 4
_TIER_FILL = 5

_SHRINK_ORDER = (
    _TIER_FILL,
    _TIER_RATIO,
    _TIER_PERCENTAGE,
    _TIER_MAX,
    _TIER_LENGTH,
    _TIER_MIN,
)


def _tier(c: Constraint) -> int:
    if isinstance(c, Min):
        return _TIER_MIN
    if isinstance(c, Length):
        return _TIER_LENGTH
    if isinstance(c, Max):
        return _TIER_MAX
    if isinstance(c, Percentage):
        return _TIER_PERCENTAGE
    if isinstance(c, Ratio):
        return _TIER_RATIO
    return _TIER_FILL


def _distribute(total: int, weights: Sequence[int]) -> list[int]:
    """Split *total* proportionally to *weights*, summing exactly to *total*."""
    weight_sum = sum(weights)
    shares: list[int] = []
    acc = Fraction.ZERO
    prev = 0
    for w in weights:
        acc = acc + Fraction(total * w, weight_sum)
        cur = acc.floor()
        shares.append(cur - prev)
        prev = cur
    return shares


# ---------------------------------------------------------------------------
# Solver
# ---------------------------------------------------------------------------


def solve_sizes(
    constraints: tuple[Constraint, ...],
    available: int,
    flex: Flex,
) -> tuple[int, ...]:
    """Resolve each constraint to a concrete non-negative size.

    *available* is the distributable length (margin and spacing already
    removed).  The result sums to at most *available*.
    """
    n = len(constraints)
    if n == 0:
        return ()
    available = max(0, available)

    sizes = [0] * n
    acc = Fraction.ZERO
    prev_floor = 0
    for i, c in enumerate(constraints):
        if isinstance(c, (Length, Min, Max)):
            sizes[i] = c.value
        elif isinstance(c, (Percentage, Ratio)):
            acc = acc + c.to_fraction() * available
            cur = acc.floor()
            sizes[i] = cur - prev_floor
            prev_floor = cur

    total = sum(sizes)

    if total > available:
        excess = total - available
        for tier in _SHRINK_ORDER:
            for i in range(n - 1, -1, -1):
                if excess == 0:
                    break
                if _tier(constraints[i]) != tier:
                    continue
                cut = min(sizes[i], excess)
                sizes[i] -= cut
                excess -= cut
            if excess == 0:
                break
        return tuple(sizes)

    leftover = available - total
    if leftover == 0:
        return tuple(sizes)

    growers: list[tuple[int, int]] = []
    for i, c in enumerate(constraints):
        if isinstance(c, Fill):
            growers.append((i, c.weight))
        elif isinstance(c, Min):
            growers.append((i, 1))

    if growers:
        weights = [w for _, w in growers]
        if sum(weights) == 0:
            weights = [1] * len(growers)
        for (i, _), share in zip(growers, _distribute(leftover, weights)):
            sizes[i] += share
    elif flex is Flex.LEGACY:
        for i in range(n - 1, -1, -1):
            if not isinstance(constraints[i], Max):
                sizes[i] += leftover
                break

    return tuple(sizes)


_solve: Callable[[tuple[Constraint, ...], int, Flex], tuple[int, ...]] = solve_sizes


def configure_layout_cache(size: int) -> None:
    """Rebuild the solver memo with room for *size* entries (0 disables it)."""
    global _solve
    if size <= 0:
        _solve = solve_sizes
    else:
        _solve = functools.lru_cache(maxsize=size)(solve_sizes)
    logger.debug("Layout cache size set to %d", size)


configure_layout_cache(RenderSettings.from_env().layout_cache_size)


# ---------------------------------------------------------------------------
# Flex gaps
# ---------------------------------------------------------------------------


def _flex_gaps(count: int, remaining: int, flex: Flex) -> list[int]:
    """Return ``count + 1`` gaps: before the first region, between each
    pair, and after the last region.
    """
    gaps = [0] * (count + 1)
    if remaining <= 0 or count == 0:
        return gaps

    if flex is Flex.START or flex is Flex.LEGACY:
        gaps[count] = remaining
    elif flex is Flex.END:
        gaps[0] = remaining
    elif flex is Flex.CENTER:
        gaps[0] = remaining // 2
        gaps[count] = remaining - gaps[0]
    elif flex is Flex.SPACE_BETWEEN:
        if count > 1:
            gap, extra = divmod(remaining, count - 1)
            for i in range(1, count):
                gaps[i] = gap + (1 if i <= extra else 0)
        else:
            # A lone region has no neighbour to space from: center it.
            gaps[0] = remaining // 2
            gaps[count] = remaining - gaps[0]
    elif flex is Flex.SPACE_AROUND:
        unit, extra = divmod(remaining, count * 2)
        gaps[0] = unit + (1 if extra > 0 else 0)
        if extra > 0:
            extra -= 1
        for i in range(1, count):
            bonus = min(2, extra)
            gaps[i] = unit * 2 + bonus
            extra -= bonus
        gaps[count] = unit + extra
    elif flex is Flex.SPACE_EVENLY:
        gap, extra = divmod(remaining, count + 1)
        for i in range(count + 1):
            gaps[i] = gap + (1 if i < extra else 0)

    return gaps


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class Layout:
    """Immutable description of how to split an area.

    Every builder method returns a new ``Layout``::

        areas = (
            Layout.horizontal()
            .constraints(Length(20), Fill(), Percentage(30))
            .spacing(1)
            .flex(Flex.CENTER)
            .split(Rect(0, 0, 100, 50))
        )
    """

    __slots__ = ("_direction", "_constraints", "_margin", "_spacing", "_flex")

    def __init__(
        self,
        direction: Direction = Direction.VERTICAL,
        constraints: Iterable[Constraint] = (),
        margin: Margin = Margin.NONE,
        spacing: int = 0,
        flex: Flex = Flex.START,
    ) -> None:
        if spacing < 0:
            raise ValueError(f"Spacing cannot be negative: {spacing}")
        self._direction = direction
        self._constraints: tuple[Constraint, ...] = tuple(constraints)
        self._margin = margin
        self._spacing = spacing
        self._flex = flex

    @classmethod
    def vertical(cls) -> Layout:
        return cls(Direction.VERTICAL)

    @classmethod
    def horizontal(cls) -> Layout:
        return cls(Direction.HORIZONTAL)

    def _with(self, **changes: object) -> Layout:
        params: dict[str, object] = {
            "direction": self._direction,
            "constraints": self._constraints,
            "margin": self._margin,
            "spacing": self._spacing,
            "flex": self._flex,
        }
        params.update(changes)
        return Layout(**params)  # type: ignore[arg-type]

    # -- builder ------------------------------------------------------------

    def constraints(self, *constraints: Constraint | Iterable[Constraint]) -> Layout:
        """Set the ordered constraints; accepts varargs or a single list."""
        if len(constraints) == 1 and not isinstance(
            constraints[0], (Length, Percentage, Ratio, Min, Max, Fill)
        ):
            return self._with(constraints=tuple(constraints[0]))  # type: ignore[arg-type]
        return self._with(constraints=constraints)

    def margin(self, margin: Margin | int) -> Layout:
        if isinstance(margin, int):
            margin = Margin.uniform(margin)
        return self._with(margin=margin)

    def horizontal_margin(self, value: int) -> Layout:
        m = self._margin
        return self._with(margin=Margin(m.top, value, m.bottom, value))

    def vertical_margin(self, value: int) -> Layout:
        m = self._margin
        return self._with(margin=Margin(value, m.right, value, m.left))

    def spacing(self, spacing: int) -> Layout:
        return self._with(spacing=spacing)

    def flex(self, flex: Flex) -> Layout:
        return self._with(flex=flex)

    # -- accessors ----------------------------------------------------------

    @property
    def direction(self) -> Direction:
        return self._direction

    def get_constraints(self) -> tuple[Constraint, ...]:
        return self._constraints

    def get_margin(self) -> Margin:
        return self._margin

    def get_spacing(self) -> int:
        return self._spacing

    def get_flex(self) -> Flex:
        return self._flex

    # -- split --------------------------------------------------------------

    def split(self, area: Rect) -> list[Rect]:
        """Return one ``Rect`` per constraint, in constraint order."""
        n = len(self._constraints)
        if n == 0:
            return []

        inner = area.inner(self._margin)
        horizontal = self._direction is Direction.HORIZONTAL
        available = inner.width if horizontal else inner.height
        start = inner.x if horizontal else inner.y
        end = start + available

        total_spacing = self._spacing * (n - 1)
        distributable = max(0, available - total_spacing)

        sizes = _solve(self._constraints, distributable, self._flex)

        remaining = max(0, available - sum(sizes) - total_spacing)
        gaps = _flex_gaps(n, remaining, self._flex)

        result: list[Rect] = []
        pos = start + gaps[0]
        for i, size in enumerate(sizes):
            x = min(pos, end)
            if horizontal:
                result.append(Rect(x, inner.y, size, inner.height))
            else:
                result.append(Rect(inner.x, x, inner.width, size))
            pos += size + self._spacing + (gaps[i + 1] if i < n - 1 else 0)

        return result

    # -- dunder -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layout):
            return NotImplemented
        return (
            self._direction is other._direction
            and self._constraints == other._constraints
            and self._margin == other._margin
            and self._spacing == other._spacing
            and self._flex is other._flex
        )

    def __hash__(self) -> int:
        return hash(
            (self._direction, self._constraints, self._margin, self._spacing, self._flex)
        )

    def __repr__(self) -> str:
        return (
            f"Layout(direction={self._direction.name}, "
            f"constraints={list(self._constraints)!r}, margin={self._margin!r}, "
            f"spacing={self._spacing}, flex={self._flex.name})"
        )
