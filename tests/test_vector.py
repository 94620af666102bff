import pytest

from ecsengine.vector import Vect2D


def test_default_is_origin():
    assert Vect2D() == Vect2D(0, 0)


def test_add_then_subtract_round_trip():
    a = Vect2D(1.5, -2.0)
    b = Vect2D(3.25, 4.5)
    assert (a + b) - b == a


def test_add_is_commutative():
    a = Vect2D(1, 2)
    b = Vect2D(7, -3)
    assert a + b == b + a


def test_add_does_not_mutate_operands():
    a = Vect2D(1, 2)
    b = Vect2D(3, 4)
    _ = a + b
    assert a == Vect2D(1, 2)
    assert b == Vect2D(3, 4)


def test_iadd_mutates_in_place():
    a = Vect2D(1, 2)
    original = a
    a += Vect2D(3, 4)
    assert a is original
    assert a == Vect2D(1, 2) + Vect2D(3, 4)


def test_isub_mutates_in_place():
    a = Vect2D(5, 5)
    original = a
    a -= Vect2D(5, 5)
    assert a is original
    assert a == Vect2D()


def test_multiply_by_two_equals_self_addition():
    a = Vect2D(1.5, -2.5)
    assert a * 2 == a + a


def test_divide_then_multiply_round_trip():
    a = Vect2D(3.0, 9.0)
    assert (a / 3.0) * 3.0 == a


def test_divide_by_zero_gives_zero_vector():
    assert Vect2D(4.0, 8.0) / 0 == Vect2D()


def test_integer_division_truncates_toward_zero():
    assert Vect2D(7, -7) / 2 == Vect2D(3, -3)


def test_zero_and_ones_return_self():
    v = Vect2D(9, 9)
    assert v.zero() is v
    assert v == Vect2D(0, 0)
    assert v.ones() is v
    assert v == Vect2D(1, 1)


@pytest.mark.parametrize(
    "vector, text",
    [(Vect2D(3, 4), "(3 4)"), (Vect2D(1.0, 1.0), "(1 1)"), (Vect2D(0.5, -2), "(0.5 -2)")],
)
def test_str_format(vector, text):
    assert str(vector) == text