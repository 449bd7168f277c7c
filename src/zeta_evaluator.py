#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# =============================================================================
#
#   Riemann Zeta Evaluator via the Dirichlet Eta Series
#
#   zeta(s) = eta(s) / (1 - 2^(1-s)),  eta(s) = sum_{n>=1} (-1)^(n-1) n^(-s)
#
#   The eta series is summed directly and truncated after `terms` terms. This
#   is an approximation meant for plotting inside and near the critical strip:
#   the truncation error grows with |Im(s)| (see approximation_verifier.py for
#   a measured term sweep), so the term count is an accuracy/speed knob.
#
#   Known limitation: at s = 1 the continuation denominator 1 - 2^(1-s) is
#   exactly zero and the result is NaN.
#
#   Date:   2026-10-18
#   Version: 1.0
#
# =============================================================================

from __future__ import annotations
import math
from dataclasses import dataclass
import numpy as np
from numba import jit

from complex_arithmetic import Complex, ZERO, ONE, add, sub, multiply, inverse, pow_real_base

DEFAULT_TERMS = 100


@dataclass(frozen=True)
class ZetaSample:
    s: Complex
    value: Complex
    terms: int


def _check_terms(terms: int) -> None:
    if terms < 1:
        raise ValueError(f"The eta series needs at least one term (got terms={terms}).")


# =============================================================================
# SCALAR EVALUATION
# =============================================================================

def eta_partial_sum(s: Complex, terms: int) -> Complex:
    """
    Partial sum of the alternating eta series, n = 1..terms.

    Summation runs in increasing n; the order is part of the contract so
    repeated evaluations are bit-identical.
    """
    _check_terms(terms)
    eta = ZERO
    for n in range(1, terms + 1):
        term = inverse(pow_real_base(n, s))  # n^(-s)
        if n % 2 == 1:
            eta = add(eta, term)
        else:
            eta = sub(eta, term)
    return eta


def zeta(s: Complex, terms: int = DEFAULT_TERMS) -> Complex:
    """Approximate zeta(s) by analytic continuation of the eta partial sum."""
    eta = eta_partial_sum(s, terms)
    one_minus_s = Complex(1.0 - s.re, -s.im)
    two_pow = pow_real_base(2, one_minus_s)
    denominator = sub(ONE, two_pow)
    return multiply(eta, inverse(denominator))


def zeta_sample(s: Complex, terms: int = DEFAULT_TERMS) -> ZetaSample:
    return ZetaSample(s=s, value=zeta(s, terms), terms=terms)


# =============================================================================
# BATCH EVALUATION ALONG A VERTICAL LINE
# =============================================================================

@jit(nopython=True, error_model="numpy")
def _zeta_line_kernel(sigma: float, ts: np.ndarray, terms: int):
    """
    Same per-term arithmetic as zeta(), unrolled into floats for numba.
    No fastmath: the fold must not be reassociated, and 0/0 must give NaN.
    """
    out_re = np.empty(ts.shape[0])
    out_im = np.empty(ts.shape[0])
    ln2 = math.log(2.0)
    for k in range(ts.shape[0]):
        t = ts[k]
        eta_re = 0.0
        eta_im = 0.0
        for n in range(1, terms + 1):
            ln_n = math.log(n)
            exp_a = math.exp(sigma * ln_n)
            b = t * ln_n
            p_re = exp_a * math.cos(b)
            p_im = exp_a * math.sin(b)
            d = p_re * p_re + p_im * p_im
            inv_re = p_re / d
            inv_im = -p_im / d
            if n % 2 == 1:
                eta_re = eta_re + inv_re
                eta_im = eta_im + inv_im
            else:
                eta_re = eta_re - inv_re
                eta_im = eta_im - inv_im

        exp_a = math.exp((1.0 - sigma) * ln2)
        b = -t * ln2
        den_re = 1.0 - exp_a * math.cos(b)
        den_im = 0.0 - exp_a * math.sin(b)
        d = den_re * den_re + den_im * den_im
        inv_re = den_re / d
        inv_im = -den_im / d

        out_re[k] = eta_re * inv_re - eta_im * inv_im
        out_im[k] = eta_re * inv_im + eta_im * inv_re
    return out_re, out_im


def zeta_on_vertical_line(sigma: float, ts, terms: int = DEFAULT_TERMS) -> np.ndarray:
    """
    Evaluates zeta(sigma + i t) for every t in `ts` and returns a complex128
    array of the same length. Used for the dense curve samples of the
    critical-line plot, where the scalar path would be too slow.
    """
    _check_terms(terms)
    ts = np.ascontiguousarray(ts, dtype=np.float64)
    re, im = _zeta_line_kernel(float(sigma), ts, int(terms))
    return re + 1j * im
