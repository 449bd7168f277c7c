#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# =============================================================================
#
#   Zero Tables for the Riemann Zeta Function
#
#   The non-trivial zero ordinates are external domain knowledge: they are
#   not computed by the evaluator. They live in an injectable table so the
#   plots can use more zeros, or zeros produced by mpmath's root finder.
#
#   Date:   2026-10-18
#   Version: 1.0
#
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

# First ten ordinates gamma_k of zeta(1/2 + i gamma_k) = 0
FIRST_TEN_ORDINATES = (
    14.134725, 21.022040, 25.010858, 30.424876, 32.935062,
    37.586178, 40.918719, 43.327073, 48.005151, 49.773832,
)
TRIVIAL_ZEROS = (-2, -4, -6, -8)


@dataclass(frozen=True)
class ZeroTable:
    ordinates: Tuple[float, ...]
    trivial: Tuple[int, ...] = TRIVIAL_ZEROS

    def __post_init__(self):
        ords = tuple(float(g) for g in self.ordinates)
        if any(g <= 0.0 for g in ords):
            raise ValueError("Zero ordinates must be positive; negatives are derived by symmetry.")
        if any(b <= a for a, b in zip(ords, ords[1:])):
            raise ValueError("Zero ordinates must be strictly increasing.")
        if any(z >= 0 or z % 2 != 0 for z in self.trivial):
            raise ValueError("Trivial zeros are negative even integers.")
        object.__setattr__(self, "ordinates", ords)
        object.__setattr__(self, "trivial", tuple(int(z) for z in self.trivial))

    def __len__(self) -> int:
        return len(self.ordinates)

    def symmetric(self) -> Tuple[float, ...]:
        """Positive ordinates followed by their negations, in table order."""
        return self.ordinates + tuple(-g for g in self.ordinates)

    def first(self, count: int) -> "ZeroTable":
        return ZeroTable(self.ordinates[:count], self.trivial)

    def rank(self, gamma: float) -> int:
        """Index of |gamma| in the table (0 for the lowest zero)."""
        return self.ordinates.index(abs(gamma))

    @classmethod
    def from_mpmath(cls, count: int, dps: int = 15) -> "ZeroTable":
        """Computes the first `count` ordinates with mpmath.zetazero."""
        import mpmath

        with mpmath.workdps(dps):
            ordinates = tuple(float(mpmath.zetazero(k).imag) for k in range(1, count + 1))
        return cls(ordinates)


DEFAULT_ZERO_TABLE = ZeroTable(FIRST_TEN_ORDINATES)
