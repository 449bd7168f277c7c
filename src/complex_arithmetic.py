#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# =============================================================================
#
#   Complex Arithmetic for the Prime / Zeta Visualizations
#
#   A small immutable complex value type with the handful of operations the
#   eta-series evaluator needs. The formulas are written out explicitly
#   (instead of relying on Python's builtin complex) so that the summation
#   in zeta_evaluator.py is reproducible term by term.
#
#   Date:   2026-10-18
#   Version: 1.0
#
# =============================================================================

from __future__ import annotations
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Complex:
    re: float
    im: float

    def __add__(self, other: "Complex") -> "Complex":
        return add(self, other)

    def __sub__(self, other: "Complex") -> "Complex":
        return sub(self, other)

    def __mul__(self, other: "Complex") -> "Complex":
        return multiply(self, other)

    def __abs__(self) -> float:
        return math.hypot(self.re, self.im)

    def to_complex(self) -> complex:
        return complex(self.re, self.im)

    @classmethod
    def from_complex(cls, z) -> "Complex":
        """Accepts builtin complex as well as mpmath.mpc values."""
        return cls(float(z.real), float(z.imag))


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)

# =============================================================================
# OPERATIONS
# =============================================================================

def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.re + b.re, a.im + b.im)


def sub(a: Complex, b: Complex) -> Complex:
    return Complex(a.re - b.re, a.im - b.im)


def multiply(a: Complex, b: Complex) -> Complex:
    return Complex(
        a.re * b.re - a.im * b.im,
        a.re * b.im + a.im * b.re
    )


def inverse(a: Complex) -> Complex:
    """
    1 / a = (re / d, -im / d) with d = re^2 + im^2.

    The zero value has no inverse; in that case the result is (nan, nan),
    matching IEEE 0/0, and callers see it propagate through any further
    arithmetic. Python floats raise on division by zero, hence the branch.
    """
    d = a.re * a.re + a.im * a.im
    if d == 0.0:
        return Complex(math.nan, math.nan)
    return Complex(a.re / d, -a.im / d)


def pow_real_base(base: float, exponent: Complex) -> Complex:
    """
    base^exponent = exp(exponent * ln(base)) for a positive real base.

    With a = Re(exponent) ln(base) and b = Im(exponent) ln(base) the result
    is exp(a) * (cos b, sin b). A non-positive base is out of contract.
    """
    ln_base = math.log(base)
    a = exponent.re * ln_base
    b = exponent.im * ln_base
    exp_a = math.exp(a)
    return Complex(exp_a * math.cos(b), exp_a * math.sin(b))
