"""Sizing constraints, split direction and flex distribution modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from weft.tui.layout.fraction import Fraction


class Direction(Enum):
    """Axis along which a layout splits its area."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Flex(Enum):
    """How free space left over after sizing is placed around the regions.

    ``LEGACY`` (alias ``STRETCH``) gives all leftover space to the trailing
    region instead of leaving gaps.
    """

    START = "start"
    END = "end"
    CENTER = "center"
    SPACE_BETWEEN = "space_between"
    SPACE_AROUND = "space_around"
    SPACE_EVENLY = "space_evenly"
    LEGACY = "legacy"
    STRETCH = "legacy"


# ---------------------------------------------------------------------------
# Constraint variants
# ---------------------------------------------------------------------------


def _non_negative(kind: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{kind} cannot be negative: {value}")


@dataclass(frozen=True)
class Length:
    """Exactly ``value`` cells."""

    value: int

    def __post_init__(self) -> None:
        _non_negative("Length", self.value)


@dataclass(frozen=True)
class Percentage:
    """``value`` percent of the available length."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 100:
            raise ValueError(
                f"Percentage must be between 0 and 100: {self.value}"
            )

    def to_fraction(self) -> Fraction:
        return Fraction(self.value, 100)


@dataclass(frozen=True)
class Ratio:
    """``numerator / denominator`` of the available length."""

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.denominator <= 0:
            raise ValueError(
                f"Ratio denominator must be positive: {self.denominator}"
            )
        _non_negative("Ratio numerator", self.numerator)

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)


@dataclass(frozen=True)
class Min:
    """At least ``value`` cells; grows into leftover space."""

    value: int

    def __post_init__(self) -> None:
        _non_negative("Min", self.value)


@dataclass(frozen=True)
class Max:
    """At most ``value`` cells."""

    value: int

    def __post_init__(self) -> None:
        _non_negative("Max", self.value)


@dataclass(frozen=True)
class Fill:
    """Share of the leftover space proportional to ``weight``."""

    weight: int = 1

    def __post_init__(self) -> None:
        _non_negative("Fill weight", self.weight)


Constraint = Union[Length, Percentage, Ratio, Min, Max, Fill]


# Convenience factories, mirroring the builder-style call sites widgets use.

def length(value: int) -> Length:
    return Length(value)


def percentage(value: int) -> Percentage:
    return Percentage(value)


def ratio(numerator: int, denominator: int) -> Ratio:
    return Ratio(numerator, denominator)


def min_(value: int) -> Min:
    return Min(value)


def max_(value: int) -> Max:
    return Max(value)


def fill(weight: int = 1) -> Fill:
    return Fill(weight)
