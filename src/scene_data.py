#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# =============================================================================
#
#   Scene Data for the Prime-Distribution and Critical-Line Visualizations
#
#   Turns the numerical core into the 3D point sequences the renderer draws.
#   World axes:
#     primes scene : x = number line, y = counts / wave height, z = zero rank
#     zeta scene   : x = Re zeta, y = t = Im s, z = Im zeta
#
#   Date:   2026-10-18
#   Version: 1.0
#
# =============================================================================

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Dict, List
import numpy as np
from tqdm import tqdm

from prime_approximations import (
    primes_up_to, prime_counting_step, logarithmic_integral, x_over_ln_x,
    explicit_formula_wave, riemann_explicit_sum,
)
from zero_tables import ZeroTable, DEFAULT_ZERO_TABLE
from zeta_evaluator import zeta_on_vertical_line


def sample_grid(start: float, stop: float, step: float) -> np.ndarray:
    """start + k*step for k = 0..floor((stop-start)/step), without drift."""
    if step <= 0:
        raise ValueError(f"Sampling step must be positive (got {step}).")
    n = int(math.floor((stop - start) / step + 1e-9))
    return start + step * np.arange(n + 1)


def _xy_curve(xs, ys, z: float = 0.0) -> np.ndarray:
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    return np.column_stack([xs, ys, np.full(xs.shape, z)])

# =============================================================================
# PRIME DISTRIBUTION SCENE
# =============================================================================

@dataclass
class WaveCurve:
    gamma: float
    z_offset: float
    points: np.ndarray


@dataclass
class PrimeScene:
    max_n: int
    primes: List[int]
    prime_points: np.ndarray
    step_curve: np.ndarray
    approx_curve: np.ndarray
    li_curve: np.ndarray
    wave_curves: List[WaveCurve]
    sum_curve: np.ndarray
    ticks: List[int] = field(default_factory=list)


def build_prime_scene(max_n: int = 100,
                      zero_table: ZeroTable = DEFAULT_ZERO_TABLE,
                      approx_step: float = 0.5,
                      li_step: float = 0.1,
                      wave_step: float = 0.2,
                      wave_spacing: float = 4.0) -> PrimeScene:
    """
    Builds every curve of the prime-distribution plot.

    Each zero ordinate gets two wave curves (for +gamma and -gamma), placed
    at z = sign * (rank + 1) * wave_spacing so the lowest zero sits closest
    to the number line. The summed curve uses the paired waves instead.
    """
    if max_n < 2:
        raise ValueError(f"max_n must be at least 2 (got {max_n}).")

    primes = primes_up_to(max_n)
    prime_points = _xy_curve(primes, np.zeros(len(primes)))

    step = np.array(prime_counting_step(primes, max_n), dtype=float)
    step_curve = _xy_curve(step[:, 0], step[:, 1])

    xs = sample_grid(2.0, max_n, approx_step)
    approx_curve = _xy_curve(xs, [x_over_ln_x(x) for x in xs])

    li = np.array(logarithmic_integral(2.0, max_n, li_step), dtype=float)
    li_curve = _xy_curve(li[:, 0], li[:, 1])

    wave_xs = sample_grid(2.0, max_n, wave_step)
    wave_curves = []
    for gamma in zero_table.symmetric():
        sign = 1.0 if gamma > 0 else -1.0
        z_offset = sign * (zero_table.rank(gamma) + 1) * wave_spacing
        ys = [explicit_formula_wave(x, gamma) for x in wave_xs]
        wave_curves.append(WaveCurve(gamma, z_offset, _xy_curve(wave_xs, ys, z_offset)))

    sum_ys = [riemann_explicit_sum(x, zero_table.ordinates, li_step) for x in wave_xs]
    sum_curve = _xy_curve(wave_xs, sum_ys)

    return PrimeScene(
        max_n=max_n,
        primes=primes,
        prime_points=prime_points,
        step_curve=step_curve,
        approx_curve=approx_curve,
        li_curve=li_curve,
        wave_curves=wave_curves,
        sum_curve=sum_curve,
        ticks=list(range(0, max_n + 1, 10)),
    )

# =============================================================================
# CRITICAL LINE SCENE
# =============================================================================

@dataclass
class ZetaScene:
    sigma: float
    terms: int
    ts: np.ndarray
    values: np.ndarray
    curve: np.ndarray
    zero_markers: np.ndarray
    trivial_markers: np.ndarray
    strip_lines: Dict[float, float]


def re_to_world_x(re: float, re_scale: float = 8.0, center: float = 0.5) -> float:
    """Places Re(s) on the world x axis: Re(s) = 1/2 at x = 0, `re_scale` units per 1."""
    return (re - center) * re_scale


def build_zeta_scene(sigma: float = 0.5,
                     t_max: float = 60.0,
                     t_step: float = 0.01,
                     terms: int = 200,
                     zero_table: ZeroTable = DEFAULT_ZERO_TABLE,
                     re_scale: float = 8.0,
                     chunks: int = 50,
                     progress: bool = False) -> ZetaScene:
    """
    Samples zeta(sigma + i t) for t in [-t_max, t_max] and lays out the
    markers. The zeros sit on the t axis, (0, t, 0), where the value curve
    passes through the origin of the Re/Im plane.
    """
    ts = sample_grid(-t_max, t_max, t_step)
    parts = np.array_split(ts, max(1, min(chunks, ts.size)))
    if progress:
        parts = tqdm(parts, desc="      Progress")
    values = np.concatenate([zeta_on_vertical_line(sigma, part, terms) for part in parts])

    curve = np.column_stack([values.real, ts, values.imag])

    gammas = zero_table.symmetric()
    zero_markers = np.array([[0.0, g, 0.0] for g in gammas]).reshape(-1, 3)
    trivial_markers = np.array(
        [[re_to_world_x(z, re_scale), 0.0, 0.0] for z in zero_table.trivial]
    ).reshape(-1, 3)
    strip_lines = {re: re_to_world_x(re, re_scale) for re in (0.0, 0.5, 1.0)}

    return ZetaScene(
        sigma=sigma,
        terms=terms,
        ts=ts,
        values=values,
        curve=curve,
        zero_markers=zero_markers,
        trivial_markers=trivial_markers,
        strip_lines=strip_lines,
    )
