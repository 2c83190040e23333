"""
Coefficients for polynomials.

A polynomial can hold coefficients of any type which behaves like a number: it should add, subtract and multiply
with its own kind and with the integer 0 (which plays the part of the additive identity), compare with ==, and for
the division-family operations also support /. The ordering > is only used to decide which signs to print.

>>> Mod.of(10, 7)
Mod(3, 7)
>>> Mod(3, 7) / 2
Mod(5, 7)
>>> divide(6, 3), divide(1, 2)
(2, Fraction(1, 2))
"""
from __future__ import annotations

import dataclasses
import numbers
from fractions import Fraction
from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Coefficient(Protocol):
    """The operations a coefficient type must provide."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __eq__(self, other: object) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=Coefficient)


def divide(a, b):
    """
    Divide two coefficients exactly. Integers are divided inside the rationals, so that dividing the integer
    polynomial 3x^2 + 2x + 1 by x + 1 does not lose anything to floating point. Whole results stay integers.

    >>> divide(-4, 2)
    -2
    >>> divide(3, -6)
    Fraction(-1, 2)
    >>> divide(1.0, 4)
    0.25
    """
    if isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral):
        result = Fraction(int(a), int(b))
        return result.numerator if result.denominator == 1 else result

    return a / b


@dataclasses.dataclass(frozen=True, eq=False)
class Mod:
    """
    An element of the prime field Z/pZ, stored as its canonical representative 0 <= value < modulus. Plain integers
    are treated as elements of whichever field they are combined with, so Mod(3, 7) + 5 == Mod(1, 7), and Mod(6, 7)
    compares equal to -1. Only a prime modulus gives a field: for a composite modulus, dividing by a zero divisor
    such as Mod(2, 4) raises ZeroDivisionError. A Mod hashes like its canonical representative, so Mod(3, 7) and 3
    share a set slot; other integers equal to it modulo p, such as 10 or -4, do not.

    >>> Mod(6, 7) == -1
    True
    >>> Mod(2, 7) ** -1
    Mod(4, 7)
    """
    value: int
    modulus: int

    def __post_init__(self):
        if self.modulus < 2:
            raise ValueError(f"The modulus must be at least 2, was given {self.modulus}.")
        if not 0 <= self.value < self.modulus:
            raise ValueError(f"Value {self.value} is not a canonical representative modulo {self.modulus}.")

    @classmethod
    def of(cls, n: int, modulus: int) -> Mod:
        """Reduce an arbitrary integer into Z/pZ."""
        return cls(n % modulus, modulus)

    def _lift(self, other) -> Mod:
        if isinstance(other, Mod):
            if other.modulus != self.modulus:
                raise ValueError(f"Cannot combine elements modulo {self.modulus} and modulo {other.modulus}.")
            return other
        if isinstance(other, numbers.Integral):
            return Mod.of(int(other), self.modulus)

        return NotImplemented

    def inverse(self) -> Mod:
        """
        The multiplicative inverse. Elements sharing a factor with the modulus have none.

        >>> Mod(3, 7).inverse()
        Mod(5, 7)
        """
        try:
            return Mod(pow(self.value, -1, self.modulus), self.modulus)
        except ValueError:
            raise ZeroDivisionError(f"{self!r} has no inverse.") from None

    def __add__(self, other):
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return Mod.of(self.value + other.value, self.modulus)

    def __sub__(self, other):
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return Mod.of(self.value - other.value, self.modulus)

    def __rsub__(self, other):
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return Mod.of(other.value - self.value, self.modulus)

    def __mul__(self, other):
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return Mod.of(self.value * other.value, self.modulus)

    __radd__ = __add__
    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self.inverse()

    def __neg__(self) -> Mod:
        return Mod.of(-self.value, self.modulus)

    def __pow__(self, n: int) -> Mod:
        if n < 0:
            return self.inverse() ** -n

        return Mod(pow(self.value, n, self.modulus), self.modulus)

    def __eq__(self, other):
        if isinstance(other, Mod):
            return (self.value, self.modulus) == (other.value, other.modulus)
        if isinstance(other, numbers.Integral):
            return self.value == int(other) % self.modulus

        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __gt__(self, other):
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return self.value > other.value

    def __lt__(self, other):
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return self.value < other.value

    def __repr__(self):
        return f'Mod({self.value}, {self.modulus})'

    def __str__(self):
        return str(self.value)
