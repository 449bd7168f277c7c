import math

import pytest
from sympy import isprime

from prime_approximations import (
    is_prime, primes_up_to, prime_counting_step, prime_count_at,
    logarithmic_integral, logarithmic_integral_value, x_over_ln_x,
    explicit_formula_wave, paired_wave, riemann_explicit_sum,
)
from zero_tables import DEFAULT_ZERO_TABLE


def test_is_prime_matches_ground_truth():
    for n in range(0, 1001):
        assert is_prime(n) == isprime(n), n


def test_is_prime_small_cases():
    assert is_prime(2)
    assert not is_prime(1)
    assert not is_prime(0)
    assert is_prime(97)
    assert not is_prime(-7)


def test_primes_up_to_hundred():
    primes = primes_up_to(100)
    assert len(primes) == 25
    assert primes[:5] == [2, 3, 5, 7, 11]
    assert primes[-1] == 97


def test_step_function_up_to_thirty():
    primes = primes_up_to(30)
    step = prime_counting_step(primes, 30)
    assert step[0] == (0, 0)
    assert step[-1] == (30, 10)
    assert len(step) == 2 + 2 * len(primes)
    assert max(c for x, c in step if x == 29) == 10
    for (x0, c0), (x1, c1) in zip(step, step[1:]):
        assert x1 >= x0
        assert c1 >= c0


def test_step_function_vertical_jumps():
    step = prime_counting_step([2, 3], 4)
    assert step == [(0, 0), (2, 0), (2, 1), (3, 1), (3, 2), (4, 2)]


@pytest.mark.parametrize("x,expected", [(1.5, 0), (2, 1), (2.5, 1), (28.9, 9), (29, 10), (30, 10)])
def test_prime_count_at(x, expected):
    step = prime_counting_step(primes_up_to(30), 30)
    assert prime_count_at(step, x) == expected


def test_logarithmic_integral_hundred():
    value = logarithmic_integral_value(100, 0.1)
    assert value == pytest.approx(30.0, rel=0.1)
    # li(100) - li(2)
    assert value == pytest.approx(29.081, rel=1e-3)


def test_logarithmic_integral_curve_shape():
    points = logarithmic_integral(2, 100, 0.1)
    assert points[0] == (2, 0.0)
    assert points[-1][0] == 100
    assert len(points) == 981
    for (x0, v0), (x1, v1) in zip(points, points[1:]):
        assert x1 > x0
        assert v1 > v0


def test_logarithmic_integral_ends_exactly_at_stop():
    points = logarithmic_integral(2, 10.05, 0.1)
    assert points[-1][0] == 10.05
    assert points[-2][0] == pytest.approx(10.0)


def test_logarithmic_integral_empty_range():
    assert logarithmic_integral(2, 2, 0.1) == [(2, 0.0)]


def test_x_over_ln_x():
    assert x_over_ln_x(math.e) == pytest.approx(math.e)
    assert x_over_ln_x(100) == pytest.approx(21.7147, rel=1e-4)


def test_wave_formula():
    x, g = 50.0, 14.134725
    expected = -(math.sqrt(x) / g) * math.sin(g * math.log(x))
    assert explicit_formula_wave(x, g) == pytest.approx(expected)
    assert explicit_formula_wave(x, -g) == pytest.approx(-expected)


def test_paired_wave_doubles_positive_wave():
    for x in (2.0, 10.0, 75.5):
        for g in DEFAULT_ZERO_TABLE.ordinates:
            assert paired_wave(x, g) == pytest.approx(2 * explicit_formula_wave(x, g))


def test_explicit_sum_is_li_plus_waves():
    x = 40.0
    gammas = DEFAULT_ZERO_TABLE.ordinates
    assert riemann_explicit_sum(x, []) == logarithmic_integral_value(x)
    expected = logarithmic_integral_value(x) + sum(paired_wave(x, g) for g in gammas)
    assert riemann_explicit_sum(x, gammas) == pytest.approx(expected)


def test_functions_are_deterministic():
    assert logarithmic_integral(2, 50, 0.2) == logarithmic_integral(2, 50, 0.2)
    gammas = DEFAULT_ZERO_TABLE.ordinates
    assert riemann_explicit_sum(77.7, gammas) == riemann_explicit_sum(77.7, gammas)
