#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# =============================================================================
#
#   Number-Theoretic Approximations of the Prime Counting Function
#
#   pi(x) as a step function, the logarithmic integral Li(x) by midpoint
#   quadrature, the asymptotic x / ln x, and the oscillatory correction
#   terms of the explicit formula indexed by zeta zero ordinates.
#
#   All functions are pure and real-valued. Inputs outside the documented
#   ranges are not validated; they give NaN or Python's own math errors.
#
#   Date:   2026-10-18
#   Version: 1.0
#
# =============================================================================

from __future__ import annotations
import math
from math import isqrt
from typing import Iterable, List, Sequence, Tuple

Point = Tuple[float, float]

# -------------------------- Primes & pi(x) ---------------------------------

def is_prime(n: int) -> bool:
    if n < 2:
        return False
    for d in range(2, isqrt(n) + 1):
        if n % d == 0:
            return False
    return True


def primes_up_to(n: int) -> List[int]:
    """Primes in [0, n] by trial division."""
    return [k for k in range(0, n + 1) if is_prime(k)]


def prime_counting_step(primes: Sequence[int], upper_bound: float) -> List[Point]:
    """
    Vertices of the right-continuous step function pi(x).

    Starts at (0, 0). For each prime p there is a horizontal run to (p, count)
    followed by the jump to (p, count + 1); the last run ends at upper_bound.
    """
    points: List[Point] = [(0, 0)]
    count = 0
    for p in primes:
        if p > points[-1][0]:
            points.append((p, count))
        count += 1
        points.append((p, count))
    points.append((upper_bound, count))
    return points


def prime_count_at(step_points: Sequence[Point], x: float) -> int:
    """Reads pi(x) off the step vertices (right-continuous: the jump at p counts)."""
    count = 0
    for px, c in step_points:
        if px > x:
            break
        count = c
    return int(count)

# -------------------------- Smooth approximations --------------------------

def logarithmic_integral(start: float, stop: float, step: float) -> List[Point]:
    """
    Li(x) = integral of 1/ln(t) from `start`, sampled as (x, value) points.

    Midpoint rule with a fixed step; the last step is shortened so the curve
    ends exactly at `stop`. The first point is (start, 0).
    """
    points: List[Point] = [(start, 0.0)]
    n_steps = max(0, math.ceil((stop - start) / step - 1e-9))
    value = 0.0
    for k in range(n_steps):
        x = start + k * step
        h = min(step, stop - x)
        mid = x + h / 2.0
        value += (1.0 / math.log(mid)) * h
        points.append((stop if k == n_steps - 1 else x + h, value))
    return points


def logarithmic_integral_value(x: float, step: float = 0.1, start: float = 2.0) -> float:
    return logarithmic_integral(start, x, step)[-1][1]


def x_over_ln_x(x: float) -> float:
    return x / math.log(x)

# -------------------------- Explicit formula --------------------------------

def explicit_formula_wave(x: float, gamma: float) -> float:
    """
    Approximate contribution -Re Li(x^rho) of one zero rho = 1/2 + i gamma:
    -(sqrt(x) / |gamma|) * sin(gamma * ln x).
    """
    amp = math.sqrt(x) / abs(gamma)
    return -amp * math.sin(gamma * math.log(x))


def paired_wave(x: float, gamma: float) -> float:
    """
    Real correction of the conjugate pair rho = 1/2 +- i gamma, counted once
    per positive ordinate: -2 (sqrt(x) / gamma) sin(gamma ln x).
    """
    amp = math.sqrt(x) / gamma
    return -2.0 * amp * math.sin(gamma * math.log(x))


def riemann_explicit_sum(x: float, gammas: Iterable[float], step: float = 0.1) -> float:
    """
    Li(x) corrected by the paired waves of the given zero ordinates.
    A visual overlay for pi(x); not accurate for small x.
    """
    correction = 0.0
    for gamma in gammas:
        correction += paired_wave(x, gamma)
    return logarithmic_integral_value(x, step) + correction
