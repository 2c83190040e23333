import itertools
import unittest
from fractions import Fraction

import pytest

from unipoly import Polynomial


def P(*coeffs):
    return Polynomial(coeffs)


SAMPLES = [
    P(),
    P(1),
    P(0, 1),
    P(1, 2, 3),
    P(1, 1),
    P(-3, 0, 0, 2),
    P(Fraction(1, 2), -1),
    P(5, 0, -1, 0, 1),
]
PAIRS = list(itertools.product(SAMPLES, repeat=2))


class TestConstruction(unittest.TestCase):
    def test_trims_trailing_zeros(self):
        self.assertEqual((1, 2), Polynomial([1, 2, 0, 0]).coeffs)
        self.assertEqual((), Polynomial([0, 0, 0]).coeffs)
        self.assertEqual((0, 0, 1), Polynomial([0, 0, 1]).coeffs)
        self.assertEqual((), Polynomial([0.0, 0]).coeffs)

    def test_constant(self):
        self.assertEqual((), Polynomial.constant(0).coeffs)
        self.assertEqual((7,), Polynomial.constant(7).coeffs)

    def test_from_range(self):
        data = [4, 0, 5, 0, 0, 6]
        self.assertEqual((0, 5), Polynomial.from_range(data, 1, 5).coeffs)
        self.assertEqual((4, 0, 5, 0, 0, 6), Polynomial.from_range(data).coeffs)
        self.assertEqual((), Polynomial.from_range(data, 3, 5).coeffs)
        self.assertEqual((1, 2), Polynomial.from_range(iter([1, 2, 0])).coeffs)

    def test_monomial(self):
        self.assertEqual(P(0, 0, 0, 2), Polynomial.monomial(2, 3))
        self.assertTrue(Polynomial.monomial(0, 3).is_zero())
        with self.assertRaises(ValueError):
            Polynomial.monomial(1, -1)

    def test_copies_coefficients(self):
        data = [1, 2]
        p = Polynomial(data)
        data.append(3)
        self.assertEqual((1, 2), p.coeffs)

        q = Polynomial(p)
        q += P(0, 0, 1)
        self.assertEqual(P(1, 2), p)
        self.assertEqual(P(1, 2, 1), q)


class TestDegreeAndAccess(unittest.TestCase):
    def test_degree(self):
        self.assertEqual(-1, P().degree())
        self.assertEqual(-1, P(0, 0).degree())
        self.assertEqual(0, P(5).degree())
        self.assertEqual(3, P(-3, 0, 0, 2).degree())

    def test_degree_after_cancellation(self):
        p = P(1, 2, 3)
        p -= P(0, 0, 3)
        self.assertEqual(1, p.degree())
        p -= P(1, 2)
        self.assertEqual(-1, p.degree())
        self.assertTrue(p.is_zero())

    def test_coefficient_lookup_is_total(self):
        p = P(1, 2, 3)
        self.assertEqual(1, p[0])
        self.assertEqual(3, p[2])
        self.assertEqual(0, p[3])
        self.assertEqual(0, p[100])
        self.assertEqual(0, p[-1])
        self.assertEqual(0, P()[0])

    def test_leading_coefficient(self):
        self.assertEqual(3, P(1, 2, 3).leading_coefficient())
        self.assertEqual(0, P().leading_coefficient())

    def test_iteration_is_restartable(self):
        p = P(3, -1, 2)
        self.assertEqual([3, -1, 2], list(p))
        self.assertEqual([3, -1, 2], list(p))
        self.assertEqual([], list(P()))


def test_equality():
    assert P(1, 2) == P(1, 2, 0)
    assert P(1, 2) != P(1, 3)
    assert P(1, 2) != P(1, 2, 3)
    assert P() == 0
    assert P(4) == 4
    assert 4 == P(4)
    assert P(1.0, 2.0) == P(1, 2)
    assert P(Fraction(1, 2)) == P(0.5)


def test_equality_with_non_numbers():
    assert P(1) != 'a'
    assert not P(1) == [1]
    assert P(1).__eq__('1') is NotImplemented
    assert P().__eq__(()) is NotImplemented


def test_unhashable():
    with pytest.raises(TypeError):
        hash(P(1))


def test_concrete_scenario():
    p, q = P(1, 2, 3), P(1, 1)
    assert p + q == P(2, 3, 3)
    assert str(p + q) == '3*x^2+3*x+2'
    assert p * q == P(1, 3, 5, 3)
    assert str(p * q) == '3*x^3+5*x^2+3*x+1'

    quotient, remainder = p / q, p % q
    assert quotient == P(-1, 3)
    assert remainder == P(2)
    assert p == q * quotient + remainder


def test_zero_polynomial():
    zero, p = P(), P(1, 2, 3)
    assert zero.degree() == -1
    assert zero + p == p
    assert p + zero == p
    assert zero * p == zero
    assert p * zero == zero
    assert zero(5) == 0
    assert zero(Fraction(2, 3)) == 0
    assert str(zero) == '0'
    assert not zero
    assert p


def test_scalar_mixing():
    x = P(0, 1)
    assert 1 + x == P(1, 1)
    assert x + 1 == P(1, 1)
    assert 1 - x == P(1, -1)
    assert x - 1 == P(-1, 1)
    assert 3 * x == P(0, 3)
    assert x * 3 == P(0, 3)
    assert -x == P(0, -1)


def test_in_place_operators_mutate_receiver():
    p = P(1, 2, 3)
    alias = p

    p += P(0, 0, -3)
    assert p is alias
    assert p == P(1, 2)
    assert p.degree() == 1

    p -= P(1, 2)
    assert p.is_zero()

    p += 5
    assert p == P(5)

    p *= P(1, 1)
    assert p is alias
    assert p == P(5, 5)


def test_in_place_with_itself():
    p = P(1, 2)
    p += p
    assert p == P(2, 4)
    p -= p
    assert p.is_zero()


def test_binary_operators_do_not_mutate():
    p, q = P(1, 2), P(3)
    p + q, p - q, p * q, p / q, p % q, p.compose(q)
    assert p == P(1, 2)
    assert q == P(3)


def test_power():
    x1 = P(1, 1)
    assert x1 ** 0 == P(1)
    assert x1 ** 1 == x1
    assert x1 ** 2 == P(1, 2, 1)
    assert x1 ** 3 == P(1, 3, 3, 1)
    assert x1 ** 5 == x1 * x1 * x1 * x1 * x1
    with pytest.raises(ValueError):
        x1 ** -1


@pytest.mark.parametrize("p, q", PAIRS)
def test_additive_round_trip(p, q):
    assert (p + q) - q == p

    r = Polynomial(p)
    r += q
    r -= q
    assert r == p


@pytest.mark.parametrize("p, q", PAIRS)
def test_multiplication_commutes(p, q):
    assert p * q == q * p
    assert (p * q).degree() == (-1 if p.is_zero() or q.is_zero() else p.degree() + q.degree())


@pytest.mark.parametrize("p, q, r", list(itertools.product(SAMPLES[1:6], repeat=3)))
def test_distributive(p, q, r):
    assert p * (q + r) == p * q + p * r


@pytest.mark.parametrize("p, q", [(p, q) for p, q in PAIRS if not q.is_zero()])
def test_division_identity(p, q):
    quotient, remainder = divmod(p, q)
    assert p == quotient * q + remainder
    assert remainder.degree() < q.degree()
    assert p / q == quotient
    assert p // q == quotient
    assert p % q == remainder


def test_division_examples():
    assert P(-1, 0, 0, 1) / P(-1, 1) == P(1, 1, 1)
    assert P(-1, 0, 0, 1) % P(-1, 1) == 0
    assert P(1, 2) / P(1, 2, 3) == 0
    assert P(1, 2) % P(1, 2, 3) == P(1, 2)
    assert P(2, 4) / 4 == P(Fraction(1, 2), 1)
    assert P(3, 6) / P(3) == P(1, 2)


def test_float_division_terminates():
    quotient = P(0, 0, 1.0) / P(1.0, 49.0)
    assert quotient.degree() == 1


@pytest.mark.parametrize("divisor", [P(), 0, P(0, 0)])
def test_division_by_zero_polynomial(divisor):
    p = P(1, 2)
    with pytest.raises(ZeroDivisionError):
        p / divisor
    with pytest.raises(ZeroDivisionError):
        p % divisor
    with pytest.raises(ZeroDivisionError):
        divmod(p, divisor)


@pytest.mark.parametrize("p", SAMPLES)
@pytest.mark.parametrize("x", [0, 1, -2, 3, Fraction(1, 3)])
def test_horner_matches_direct_summation(p, x):
    assert p(x) == sum(c * x**i for i, c in enumerate(p))
    assert p.evaluate(x) == p(x)


def test_float_evaluation():
    assert P(1.5, -2.0)(2.0) == -2.5


def test_composition_scenario():
    assert P(0, 0, 1).compose(P(1, 1)) == P(1, 2, 1)
    assert P(1, 2, 3).compose(2) == 17
    assert P().compose(P(1, 1)) == 0


@pytest.mark.parametrize("p, q", PAIRS)
def test_composition_agrees_with_evaluation(p, q):
    composition = p.compose(q)
    assert composition == p(q)
    for x in [-1, 0, 2]:
        assert composition(x) == p(q(x))


@pytest.mark.parametrize("coeffs, text", [
    ((), '0'),
    ((3, -1, 2), '2*x^2-x+3'),
    ((1,), '1'),
    ((-1,), '-1'),
    ((0, 1), 'x'),
    ((0, -1), '-x'),
    ((0, 0, 1), 'x^2'),
    ((0, 0, -1), '-x^2'),
    ((1, 1, 1), 'x^2+x+1'),
    ((-1, -1, -1), '-x^2-x-1'),
    ((0, 2, 0, -5), '-5*x^3+2*x'),
    ((Fraction(1, 2), Fraction(-3, 4)), '-3/4*x+1/2'),
    ((1.5, 0, 2.0), '2.0*x^2+1.5'),
])
def test_format(coeffs, text):
    assert str(Polynomial(coeffs)) == text


def test_repr_and_latex():
    p = P(3, -1, 2)
    assert repr(p) == "Polynomial('2*x^2-x+3')"
    assert p.fmt(var='y') == '2*y^2-y+3'
    assert p._repr_latex_() == '2x^{2}-x+3'
