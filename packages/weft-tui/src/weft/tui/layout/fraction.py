"""Exact rational arithmetic for layout math.

``Fraction`` values are immutable, always stored in lowest terms with the
sign folded into the numerator, so that ratio and percentage splits add back
up to the original length without floating-point drift.
"""

from __future__ import annotations

import math
from typing import Union

_Operand = Union["Fraction", int]


class Fraction:
    """An immutable rational number ``numerator / denominator``."""

    __slots__ = ("_numerator", "_denominator")

    ZERO: Fraction
    ONE: Fraction
    NEG_ONE: Fraction

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        if denominator == 0:
            raise ZeroDivisionError("Fraction denominator cannot be zero")
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        g = math.gcd(numerator, denominator)
        if g > 1:
            numerator //= g
            denominator //= g
        self._numerator = numerator
        self._denominator = denominator

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> Fraction:
        """Build a normalized fraction; a zero denominator raises."""
        return cls(numerator, denominator)

    @staticmethod
    def _coerce(value: _Operand) -> Fraction:
        if isinstance(value, Fraction):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return Fraction(value)
        raise TypeError(f"unsupported operand type: {type(value).__name__}")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_positive(self) -> bool:
        return self._numerator > 0

    def is_negative(self) -> bool:
        return self._numerator < 0

    def signum(self) -> int:
        return (self._numerator > 0) - (self._numerator < 0)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: _Operand) -> Fraction:
        o = self._coerce(other)
        if o._numerator == 0:
            return self
        if self._numerator == 0:
            return o
        return Fraction(
            self._numerator * o._denominator + o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    def subtract(self, other: _Operand) -> Fraction:
        return self.add(self._coerce(other).negate())

    def multiply(self, other: _Operand) -> Fraction:
        o = self._coerce(other)
        if self._numerator == 0 or o._numerator == 0:
            return Fraction.ZERO
        return Fraction(
            self._numerator * o._numerator,
            self._denominator * o._denominator,
        )

    def divide(self, other: _Operand) -> Fraction:
        o = self._coerce(other)
        if o._numerator == 0:
            raise ZeroDivisionError("Division by a zero fraction")
        return Fraction(
            self._numerator * o._denominator,
            self._denominator * o._numerator,
        )

    def negate(self) -> Fraction:
        if self._numerator == 0:
            return self
        return Fraction(-self._numerator, self._denominator)

    def abs(self) -> Fraction:
        return self.negate() if self._numerator < 0 else self

    def reciprocal(self) -> Fraction:
        if self._numerator == 0:
            raise ZeroDivisionError("Cannot compute reciprocal of zero")
        return Fraction(self._denominator, self._numerator)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_int(self) -> int:
        """Truncate toward zero."""
        q = abs(self._numerator) // self._denominator
        return -q if self._numerator < 0 else q

    to_long = to_int

    def floor(self) -> int:
        return self._numerator // self._denominator

    def to_float(self) -> float:
        return self._numerator / self._denominator

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Fraction:
        if not isinstance(other, (Fraction, int)) or isinstance(other, bool):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> Fraction:
        if not isinstance(other, (Fraction, int)) or isinstance(other, bool):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> Fraction:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Fraction(other).subtract(self)

    def __mul__(self, other: object) -> Fraction:
        if not isinstance(other, (Fraction, int)) or isinstance(other, bool):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Fraction:
        if not isinstance(other, (Fraction, int)) or isinstance(other, bool):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> Fraction:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Fraction(other).divide(self)

    def __neg__(self) -> Fraction:
        return self.negate()

    def __abs__(self) -> Fraction:
        return self.abs()

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Comparison / hashing
    # ------------------------------------------------------------------

    def _cmp(self, other: object) -> int | None:
        if isinstance(other, bool):
            return None
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return None
        left = self._numerator * other._denominator
        right = other._numerator * self._denominator
        return (left > right) - (left < right)

    def __eq__(self, other: object) -> bool:
        c = self._cmp(other)
        if c is None:
            return NotImplemented
        return c == 0

    def __lt__(self, other: object) -> bool:
        c = self._cmp(other)
        if c is None:
            return NotImplemented
        return c < 0

    def __le__(self, other: object) -> bool:
        c = self._cmp(other)
        if c is None:
            return NotImplemented
        return c <= 0

    def __gt__(self, other: object) -> bool:
        c = self._cmp(other)
        if c is None:
            return NotImplemented
        return c > 0

    def __ge__(self, other: object) -> bool:
        c = self._cmp(other)
        if c is None:
            return NotImplemented
        return c >= 0

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"


Fraction.ZERO = Fraction(0)
Fraction.ONE = Fraction(1)
Fraction.NEG_ONE = Fraction(-1)
