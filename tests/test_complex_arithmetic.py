import cmath
import math

import pytest

from complex_arithmetic import Complex, ZERO, ONE, add, sub, multiply, inverse, pow_real_base

SAMPLES = [
    Complex(1.0, 0.0),
    Complex(0.5, 14.134725),
    Complex(-3.25, 2.0),
    Complex(1e-3, -7.5),
    Complex(2.0, -0.0),
]


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_add_commutes(a, b):
    assert add(a, b) == add(b, a)
    assert a + b == add(a, b)


def test_componentwise_sum_and_difference():
    a = Complex(1.5, -2.0)
    b = Complex(0.25, 4.0)
    assert add(a, b) == Complex(1.75, 2.0)
    assert sub(a, b) == Complex(1.25, -6.0)
    assert a - b == sub(a, b)


def test_multiply_matches_builtin_complex():
    a = Complex(3.0, -1.0)
    b = Complex(-2.0, 5.0)
    expected = a.to_complex() * b.to_complex()
    result = multiply(a, b)
    assert result.re == pytest.approx(expected.real)
    assert result.im == pytest.approx(expected.imag)
    assert a * b == result


@pytest.mark.parametrize("a", SAMPLES)
def test_multiply_by_inverse_is_one(a):
    prod = multiply(a, inverse(a))
    assert prod.re == pytest.approx(1.0, abs=1e-12)
    assert prod.im == pytest.approx(0.0, abs=1e-12)


def test_inverse_of_zero_is_nan():
    inv = inverse(ZERO)
    assert math.isnan(inv.re) and math.isnan(inv.im)
    # NaN keeps propagating through further arithmetic
    assert math.isnan(multiply(ONE, inv).re)


@pytest.mark.parametrize("n", [1, 2, 3, 10, 97, 200])
@pytest.mark.parametrize("s", SAMPLES)
def test_pow_real_base_magnitude_and_phase(n, s):
    z = pow_real_base(n, s)
    assert abs(z) == pytest.approx(n ** s.re, rel=1e-12)
    if n > 1:
        diff = (cmath.phase(z.to_complex()) - s.im * math.log(n)) % (2 * math.pi)
        assert min(diff, 2 * math.pi - diff) < 1e-9


def test_pow_real_base_integer_exponent():
    z = pow_real_base(2, Complex(3.0, 0.0))
    assert z.re == pytest.approx(8.0)
    assert z.im == pytest.approx(0.0, abs=1e-15)


def test_values_are_immutable():
    z = Complex(1.0, 2.0)
    with pytest.raises(AttributeError):
        z.re = 5.0


def test_from_complex_roundtrip():
    assert Complex.from_complex(complex(0.5, -3.0)) == Complex(0.5, -3.0)
