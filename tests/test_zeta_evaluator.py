import math

import numpy as np
import pytest

from complex_arithmetic import Complex
from zeta_evaluator import eta_partial_sum, zeta, zeta_sample, zeta_on_vertical_line


def test_zeta_two_is_basel_constant():
    z = zeta(Complex(2.0, 0.0), 200)
    assert z.re == pytest.approx(math.pi ** 2 / 6, abs=1e-2)
    assert z.im == pytest.approx(0.0, abs=1e-12)


def test_zeta_small_near_first_zero():
    near = abs(zeta(Complex(0.5, 14.134725), 200))
    far = abs(zeta(Complex(0.5, 5.0), 200))
    assert near < 0.3
    assert near < far


@pytest.mark.parametrize("gamma", [21.022040, 25.010858, 30.424876])
def test_zeta_small_at_further_zeros(gamma):
    assert abs(zeta(Complex(0.5, gamma), 200)) < 0.3


def test_eta_single_term_is_one():
    assert eta_partial_sum(Complex(0.5, 3.0), 1) == Complex(1.0, 0.0)


def test_eta_alternates_signs():
    s = Complex(2.0, 0.0)
    eta = eta_partial_sum(s, 3)
    assert eta.re == pytest.approx(1.0 - 0.25 + 1.0 / 9.0)


@pytest.mark.parametrize("terms", [0, -5])
def test_zeta_rejects_empty_series(terms):
    with pytest.raises(ValueError):
        zeta(Complex(0.5, 1.0), terms)
    with pytest.raises(ValueError):
        zeta_on_vertical_line(0.5, [1.0], terms)


def test_zeta_at_one_is_nan():
    z = zeta(Complex(1.0, 0.0), 100)
    assert math.isnan(z.re) and math.isnan(z.im)


def test_zeta_is_deterministic():
    s = Complex(0.5, 37.586178)
    assert zeta(s, 150) == zeta(s, 150)


def test_zeta_sample_records_inputs():
    s = Complex(0.25, 2.0)
    sample = zeta_sample(s, 50)
    assert sample.s == s
    assert sample.terms == 50
    assert sample.value == zeta(s, 50)


def test_vertical_line_matches_scalar_path():
    ts = np.array([-10.0, 0.0, 5.0, 14.134725, 49.773832])
    values = zeta_on_vertical_line(0.5, ts, 100)
    assert values.dtype == np.complex128
    assert values.shape == ts.shape
    for t, v in zip(ts, values):
        z = zeta(Complex(0.5, t), 100)
        assert v.real == pytest.approx(z.re, abs=1e-9)
        assert v.imag == pytest.approx(z.im, abs=1e-9)


def test_vertical_line_nan_at_pole():
    values = zeta_on_vertical_line(1.0, [0.0, 3.0], 50)
    assert np.isnan(values[0].real)
    assert np.isfinite(values[1].real)
