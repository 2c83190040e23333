"""
Dense univariate polynomials.

In this module, a polynomial is represented by a list of coefficients starting with the constant term, for instance
3 - x + 2x^2 would be the list [3, -1, 2]. The coefficients can be of any type which behaves like a number (see
unipoly.field): ints, Fractions, floats and Mod elements all work, and plain integers mix in freely.

>>> p, q = Polynomial([1, 2, 3]), Polynomial([1, 1])
>>> print(p + q, p * q, sep='\\n')
3*x^2+3*x+2
3*x^3+5*x^2+3*x+1
>>> divmod(p, q)
(Polynomial('3*x-1'), Polynomial('2'))
>>> gcd(Polynomial([-1, 0, 1]), Polynomial([1, 2, 1]))
Polynomial('x+1')
"""
from __future__ import annotations

import itertools
import logging
from typing import Generic, Iterable, Iterator, Literal

from .field import Coefficient, T, divide

_logger = logging.getLogger(__name__)


class Polynomial(Generic[T]):
    """
    A polynomial with a dense list of coefficients starting with the constant term. Thus Polynomial([1]) is the
    constant 1, and Polynomial([0, 1]) is the variable x. Trailing zeros are always trimmed, so the zero polynomial
    has no coefficients at all.

    >>> Polynomial([1, 0, 1, 0, 0])
    Polynomial('x^2+1')
    >>> Polynomial([0, 0])
    Polynomial('0')
    """
    __slots__ = ('_coeffs',)

    def __init__(self, coeffs: Iterable[T] = ()):
        self._coeffs: list[T] = list(coeffs)
        self._normalize()

    @classmethod
    def constant(cls, c: T) -> Polynomial[T]:
        """
        >>> Polynomial.constant(5), Polynomial.constant(0)
        (Polynomial('5'), Polynomial('0'))
        """
        return cls([c])

    @classmethod
    def from_range(cls, coeffs: Iterable[T], start: int = 0, stop: int | None = None) -> Polynomial[T]:
        """
        Build a polynomial from the coefficients in positions [start, stop) of any iterable.

        >>> Polynomial.from_range(iter([9, 1, 2, 0, 7]), 1, 4)
        Polynomial('2*x+1')
        """
        return cls(itertools.islice(coeffs, start, stop))

    @classmethod
    def monomial(cls, c: T, degree: int) -> Polynomial[T]:
        """
        >>> Polynomial.monomial(4, 3)
        Polynomial('4*x^3')
        """
        if degree < 0:
            raise ValueError(f"A monomial cannot have negative degree {degree}.")

        return cls([0] * degree + [c])

    @staticmethod
    def coerce(other) -> Polynomial:
        """Polynomials are returned unchanged, and anything else is taken to be a constant."""
        if isinstance(other, Polynomial):
            return other
        return Polynomial.constant(other)

    def _normalize(self):
        # Trim trailing zeros.
        while self._coeffs and self._coeffs[-1] == 0:
            self._coeffs.pop()

    def degree(self) -> int:
        """The degree of a polynomial is the degree of its leading term. The zero polynomial has degree -1."""
        return len(self._coeffs) - 1

    def is_zero(self) -> bool:
        return len(self._coeffs) == 0

    def leading_coefficient(self) -> T:
        return self._coeffs[-1] if self._coeffs else 0

    @property
    def coeffs(self) -> tuple[T, ...]:
        return tuple(self._coeffs)

    def __getitem__(self, degree: int) -> T:
        """
        The coefficient of x^degree, which is zero for any degree outside the stored range.

        >>> p = Polynomial([3, -1, 2])
        >>> p[2], p[5], p[-1]
        (2, 0, 0)
        """
        if 0 <= degree < len(self._coeffs):
            return self._coeffs[degree]
        return 0

    def __iter__(self) -> Iterator[T]:
        return iter(self._coeffs)

    def __bool__(self):
        return not self.is_zero()

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Polynomial, Coefficient)):
            return NotImplemented

        other = Polynomial.coerce(other)
        deg = self.degree()
        if deg != other.degree():
            return False

        return all(self[i] == other[i] for i in range(deg + 1))

    # Mutable under the in-place operators.
    __hash__ = None  # type: ignore

    def __repr__(self):
        return f"Polynomial('{self.fmt()}')"

    def __str__(self):
        return self.fmt()

    def fmt(self, var: str = 'x', mode: Literal[None, 'latex'] = None) -> str:
        """
        Render the polynomial with its terms in descending degree order.

        >>> Polynomial([3, -1, 2]).fmt()
        '2*x^2-x+3'
        >>> Polynomial([-1, 1, 0, -1]).fmt(var='t')
        '-t^3+t-1'
        >>> Polynomial([1, 0, 0, 0, 0, 0, 0, 0, 0, 0, -4]).fmt(mode='latex')
        '-4x^{10}+1'
        """
        if self.is_zero():
            return '0'

        power_fmt = '{}^{}' if mode is None else '{}^{{{}}}'
        times = '*' if mode is None else ''

        parts: list[str] = []
        for i, c in reversed(list(enumerate(self._coeffs))):
            if c == 0:
                continue

            term = '' if i == 0 else var if i == 1 else power_fmt.format(var, i)
            if term and c == -1:
                parts += ['-' + term]
                continue

            sign = '+' if (parts and c > 0) else ''
            coeff = '' if (term and c == 1) else f'{c}{times}' if term else f'{c}'
            parts += [sign + coeff + term]

        return ''.join(parts)

    def _repr_latex_(self):
        return self.fmt(mode='latex')

    def __add__(self, other) -> Polynomial:
        other = Polynomial.coerce(other)
        size = max(len(self._coeffs), len(other._coeffs))
        return Polynomial([self[i] + other[i] for i in range(size)])

    def __sub__(self, other) -> Polynomial:
        other = Polynomial.coerce(other)
        size = max(len(self._coeffs), len(other._coeffs))
        return Polynomial([self[i] - other[i] for i in range(size)])

    def __rsub__(self, other) -> Polynomial:
        return Polynomial.coerce(other) - self

    def __neg__(self) -> Polynomial:
        return Polynomial([-c for c in self._coeffs])

    def __mul__(self, other) -> Polynomial:
        other = Polynomial.coerce(other)
        result = [0] * (len(self._coeffs) + len(other._coeffs))
        for (i, c), (j, d) in itertools.product(enumerate(self._coeffs), enumerate(other._coeffs)):
            result[i + j] += c * d
        return Polynomial(result)

    def __rmul__(self, other) -> Polynomial:
        return Polynomial.coerce(other) * self

    __radd__ = __add__

    def __iadd__(self, other) -> Polynomial:
        other = Polynomial.coerce(other)
        size = max(len(self._coeffs), len(other._coeffs))
        self._coeffs.extend([0] * (size - len(self._coeffs)))
        for i in range(size):
            self._coeffs[i] += other[i]
        self._normalize()
        return self

    def __isub__(self, other) -> Polynomial:
        other = Polynomial.coerce(other)
        size = max(len(self._coeffs), len(other._coeffs))
        self._coeffs.extend([0] * (size - len(self._coeffs)))
        for i in range(size):
            self._coeffs[i] -= other[i]
        self._normalize()
        return self

    def __imul__(self, other) -> Polynomial:
        self._coeffs = (self * other)._coeffs
        return self

    def __pow__(self, n: int) -> Polynomial:
        if n < 0:
            raise ValueError("Cannot invert a polynomial.")
        if n == 0:
            return Polynomial.constant(1)
        if n == 1:
            return Polynomial(self._coeffs)

        sqrt = self ** (n // 2)
        return sqrt * sqrt if n % 2 == 0 else sqrt * sqrt * self

    def evaluate(self, x):
        """
        Evaluate the polynomial at some point by Horner's method. The point may itself be a polynomial.

        >>> Polynomial([1, 1, 1]).evaluate(2)
        7
        >>> Polynomial([1, 1, 1]).evaluate(Polynomial([0, 2]))
        Polynomial('4*x^2+2*x+1')
        >>> Polynomial().evaluate(10)
        0
        """
        result = 0
        for c in reversed(self._coeffs):
            result = c + result * x
        return result

    def __call__(self, x):
        return self.evaluate(x)

    def compose(self, other) -> Polynomial:
        """
        Return the composition self(other(x)). Each nonzero term c x^i contributes c * other^i, where the powers of
        other are built up one multiplication at a time, for O(deg(self)^2 deg(other)) coefficient products.

        >>> Polynomial([0, 0, 1]).compose(Polynomial([1, 1]))
        Polynomial('x^2+2*x+1')
        """
        other = Polynomial.coerce(other)
        composition: Polynomial = Polynomial()
        power: Polynomial = Polynomial.constant(1)
        for i, c in enumerate(self._coeffs):
            if i > 0:
                power *= other
            if c != 0:
                composition += Polynomial.constant(c) * power

        return composition

    def _long_division(self, other: Polynomial) -> tuple[list, list]:
        """Long division, returning the quotient and the working remainder as coefficient lists."""
        if other.is_zero():
            raise ZeroDivisionError("polynomial division by zero")

        d, lead = other.degree(), other.leading_coefficient()
        remainder = list(self._coeffs)
        quotient = [0] * max(len(remainder) - d, 0)
        _logger.debug("dividing %s by %s", self, other)

        # The eliminated slot is cleared exactly, whatever the coefficient arithmetic left there.
        for shift in reversed(range(len(quotient))):
            c = remainder[shift + d]
            if c == 0:
                continue

            t = divide(c, lead)
            for j, b in enumerate(other._coeffs):
                remainder[shift + j] -= b * t
            remainder[shift + d] = 0
            quotient[shift] += t

        return quotient, remainder

    def _quotient(self, other: Polynomial) -> Polynomial:
        quotient, _ = self._long_division(other)
        return Polynomial(quotient)

    def _reduce(self, other: Polynomial) -> Polynomial:
        """The remainder left by long division, whose degree is always below that of other."""
        _, remainder = self._long_division(other)
        return Polynomial(remainder)

    def __truediv__(self, other) -> Polynomial:
        """
        The quotient of polynomial long division. Dividing by a scalar divides every coefficient.

        >>> Polynomial([-1, 0, 0, 1]) / Polynomial([-1, 1])
        Polynomial('x^2+x+1')
        >>> Polynomial([2, 4]) / 4
        Polynomial('x+1/2')
        """
        return self._quotient(Polynomial.coerce(other))

    __floordiv__ = __truediv__

    def __mod__(self, other) -> Polynomial:
        other = Polynomial.coerce(other)
        return self - (self / other) * other

    def __divmod__(self, other) -> tuple[Polynomial, Polynomial]:
        """
        Return the quotient and remainder of self/other, i.e. the unique q, r with self = q * other + r and
        deg(r) < deg(other).

        >>> divmod(Polynomial(), Polynomial([1]))
        (Polynomial('0'), Polynomial('0'))
        >>> divmod(Polynomial([-1, 0, 1]), Polynomial([1, 1]))
        (Polynomial('x-1'), Polynomial('0'))
        """
        other = Polynomial.coerce(other)
        quotient = self / other
        return quotient, self - quotient * other


def gcd(p, q) -> Polynomial:
    """
    The monic greatest common divisor of two polynomials over a field, by the Euclidean algorithm. Coprime
    polynomials have gcd 1, and so does any pair involving a nonzero constant. The gcd of the zero polynomial with
    q is q made monic, and gcd(0, 0) is 0.

    >>> gcd(Polynomial([2, 3, 1]), Polynomial([3, 4, 1]))
    Polynomial('x+1')
    >>> gcd(Polynomial([1, 1]), Polynomial([-1, 1]))
    Polynomial('1')
    >>> gcd(Polynomial(), Polynomial([4, 2]))
    Polynomial('x+2')
    """
    first, second = Polynomial.coerce(p), Polynomial.coerce(q)
    if first.degree() < second.degree():
        first, second = second, first

    while second.degree() > 0:
        remainder = first._reduce(second)
        _logger.debug("gcd step: (%s) mod (%s) = %s", first, second, remainder)
        first, second = second, remainder

    if second != 0:
        return Polynomial.constant(1)
    if first.is_zero():
        return Polynomial()

    return first / first.leading_coefficient()
