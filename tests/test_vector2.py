import pytest

from lawndefense.vector2 import (
    Vector2,
    bezier_point,
    cross,
    dot,
    gcd,
    length_squared,
    magnitude,
    round_div,
)

PAIRS = [
    ((7, 3), (2, -1)),
    ((-11, 4), (3, 5)),
    ((0, 9), (-4, 2)),
    ((100, -37), (6, 6)),
]


def _vectors(a, b):
    return Vector2(*a), Vector2(*b)


@pytest.mark.parametrize("a,b", PAIRS)
def test_add_then_sub_round_trip(a, b):
    va, vb = _vectors(a, b)
    assert va + vb - vb == Vector2(*a)


@pytest.mark.parametrize("a,b", PAIRS)
def test_complex_product_commutes(a, b):
    va, vb = _vectors(a, b)
    assert va * vb == vb * va


@pytest.mark.parametrize("a,b", PAIRS)
def test_unit_is_identity(a, b):
    va, vb = _vectors(a, b)
    assert va * Vector2(1, 0) == va
    assert vb * Vector2(1, 0) == vb


@pytest.mark.parametrize("a,b", PAIRS)
def test_multiply_then_divide_round_trip(a, b):
    va, vb = _vectors(a, b)
    assert (va * vb) / vb == Vector2(*a)


@pytest.mark.parametrize("a,b", PAIRS)
def test_remainder_is_small_and_reconstructs(a, b):
    va, vb = _vectors(a, b)
    rem = va % vb
    assert 2 * length_squared(rem) <= length_squared(vb)
    assert (va / vb) * vb + rem == va


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_divides_both(a, b):
    va, vb = _vectors(a, b)
    g = gcd(va, vb)
    assert va % g == Vector2()
    assert vb % g == Vector2()


def test_gcd_with_zero_returns_first():
    v = Vector2(12, -5)
    assert gcd(v, Vector2()) == v


def test_gcd_of_common_multiple_is_divisible_by_factor():
    factor = Vector2(2, 1)
    g = gcd(Vector2(3, 0) * factor, Vector2(0, 5) * factor)
    assert g % factor == Vector2()


def test_round_div_half_away_from_zero():
    assert round_div(5, 2) == 3
    assert round_div(-5, 2) == -round_div(5, 2)
    assert round_div(5, -2) == round_div(-5, 2)


@pytest.mark.parametrize("a,b", [(7, 3), (10, 4), (9, 9), (123, 7)])
def test_round_div_exact_multiple(a, b):
    assert round_div(a * b, b) == a
    assert round_div(-a, b) == -round_div(a, b)


def test_round_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        round_div(1, 0)


def test_division_by_zero_vector():
    with pytest.raises(ZeroDivisionError):
        Vector2(1, 2) / Vector2()


def test_magnitude_of_pythagorean_triple():
    assert magnitude(Vector2(3, 4)) == 5


@pytest.mark.parametrize("a,b", PAIRS)
def test_products(a, b):
    va, vb = _vectors(a, b)
    assert cross(va, va) == 0
    assert dot(va, va) == length_squared(va)
    assert cross(va, vb) == -cross(vb, va)
    assert dot(va, vb) == dot(vb, va)


def test_scalar_multiply_truncates_toward_zero():
    assert Vector2(3, -3) * 0.5 + Vector2(-3, 3) * 0.5 == Vector2()


@pytest.mark.parametrize("a,b", PAIRS)
def test_scalar_multiply(a, b):
    va, vb = _vectors(a, b)
    assert 2 * va == va + va
    assert va * 1.0 == va
    assert 0 * vb == Vector2()


def test_multiply_by_unsupported_type():
    with pytest.raises(TypeError):
        Vector2(1, 1) * "x"


def test_bezier_endpoints():
    p0, p1, p2, p3 = Vector2(0, 0), Vector2(10, 40), Vector2(60, 40), Vector2(80, 0)
    assert bezier_point(0.0, p0, p1, p2, p3) == p0
    assert bezier_point(1.0, p0, p1, p2, p3) == p3