from fractions import Fraction

import pytest

from ecprims.polynomial import Polynomial


def test_from_coefficients_keeps_order():
    p = Polynomial.from_coefficients([5, 6, 7])
    assert p.coefficients == (5, 6, 7)


def test_degree_is_length_minus_one():
    assert Polynomial([1, 2, 3, 4]).degree() == 3
    assert Polynomial([9]).degree() == 0


def test_degree_of_empty_raises():
    with pytest.raises(ValueError):
        Polynomial([]).degree()


def test_eval_worked_example():
    assert Polynomial([1, 2, 3]).eval(2) == 17


def test_eval_at_zero_is_constant_term():
    assert Polynomial([7, 3, 11]).eval(0) == 7


def test_eval_of_product_is_product_of_evals():
    p = Polynomial([3, -1, 4])
    q = Polynomial([2, 5])
    for x in range(-3, 4):
        assert (p * q).eval(x) == p.eval(x) * q.eval(x)


def test_eval_of_sum_and_difference():
    p = Polynomial([1, 4, 9, 2])
    q = Polynomial([6, -2])
    for x in range(-2, 3):
        assert (p + q).eval(x) == p.eval(x) + q.eval(x)
        assert (p - q).eval(x) == p.eval(x) - q.eval(x)


def test_add_is_commutative_and_keeps_longer_tail():
    p = Polynomial([1, 2, 3])
    q = Polynomial([10])
    assert p + q == q + p
    assert (p + q).coefficients[1:] == (2, 3)


def test_sub_self_is_zero():
    p = Polynomial([4, 5, 6])
    assert p - p == Polynomial([0])


def test_sub_shorter_from_longer_negates_tail():
    p = Polynomial([1])
    q = Polynomial([1, 2, 3])
    assert (p - q) == -Polynomial([0, 2, 3])


def test_neg_twice_is_identity():
    p = Polynomial([1, -2, 3])
    assert -(-p) == p


def test_add_scalar_changes_constant_term():
    p = Polynomial([1, 2, 3])
    assert (p + 5).coefficients == (6, 2, 3)
    assert (5 + p) == p + 5


def test_add_scalar_to_empty_raises():
    with pytest.raises(IndexError):
        Polynomial([]) + 1


def test_scalar_mul_scales_evaluation():
    p = Polynomial([2, 0, 1])
    assert (p * 3).eval(4) == 3 * p.eval(4)
    assert 3 * p == p * 3


def test_mul_two_empty_raises():
    with pytest.raises(ValueError):
        Polynomial([]) * Polynomial([])


def test_eq_ignores_trailing_zeros():
    assert Polynomial([1, 2]) == Polynomial([1, 2, 0, 0])
    assert Polynomial([1, 2, 0]) != Polynomial([1, 2, 1])
    assert Polynomial([1, 3]) != Polynomial([1, 2, 0])


def test_root_quotient_recovers_factor():
    r = Fraction(3)
    q = Polynomial([Fraction(2), Fraction(-1), Fraction(5)])
    p = Polynomial([-r, Fraction(1)]) * q
    assert p.eval(r) == 0
    assert p.root_quotient(r) == q


def test_root_quotient_of_constant_raises():
    with pytest.raises(ValueError):
        Polynomial([Fraction(1)]).root_quotient(Fraction(2))


def test_as_field_converts_each_coefficient():
    p = Polynomial([1, 2, 3]).as_field(Fraction)
    assert all(isinstance(c, Fraction) for c in p.coefficients)
    assert p == Polynomial([1, 2, 3])