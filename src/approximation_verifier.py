#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# =============================================================================
#
#   Reference Verifier for the Zeta / Prime-Counting Approximations
#
#   Cross-checks the double-precision approximations used by the plots
#   against reference values:
#   - |zeta(1/2 + i gamma)| at every tabulated zero ordinate (mpmath.zeta)
#   - zeta(2) against pi^2 / 6
#   - a term sweep: error of the truncated eta series vs |t| and term count
#   - pi(x) from the step function vs sympy.primepi, and the midpoint Li(x)
#     vs mpmath.li(x, offset=True)
#
#   Date:   2026-10-18
#   Version: 1.0
#
#   Usage examples:
#   $ python approximation_verifier.py
#   $ python approximation_verifier.py --terms 400 --zeros 20
#   $ python approximation_verifier.py --sweep-terms 50 100 200 400 800 --sweep-t 5 25 50 100
#
#   Outputs:
#   - JSON report    : approximation_report.json  (change via --json)
#   - CSV  summary   : approximation_summary.csv  (change via --csv)
#   - Console report : human-readable overview
#
# =============================================================================

from __future__ import annotations
import argparse
import csv
import dataclasses
import json
import math
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
import numpy as np
import mpmath
from sympy import primepi
from tqdm import tqdm

from complex_arithmetic import Complex
from prime_approximations import (
    primes_up_to, prime_counting_step, prime_count_at, logarithmic_integral_value,
    x_over_ln_x, riemann_explicit_sum,
)
from zero_tables import ZeroTable, DEFAULT_ZERO_TABLE
from zeta_evaluator import ZetaSample, zeta, zeta_sample

PI = math.pi

# ------------------------------- Config ------------------------------------

@dataclass
class Config:
    # Zeta evaluation
    terms: int = 200                # Eta series truncation for the zero / sanity checks
    zeros: int = 0                  # 0: use the built-in table; >0: compute this many with mpmath
    zero_tol: float = 0.3           # |zeta| at a tabulated zero must stay below this
    sanity_tol: float = 1e-2        # |zeta(2) - pi^2/6|
    mp_dps: int = 30                # Working precision of the reference values

    # Term sweep (informational, documents error growth with |t|)
    sweep_t: Tuple[float, ...] = (5.0, 14.134725, 30.0, 49.773832)
    sweep_terms: Tuple[int, ...] = (50, 100, 200, 400)

    # Prime counting
    x_values: Tuple[float, ...] = (10.0, 20.0, 30.0, 50.0, 100.0)
    li_step: float = 0.1
    li_rel_tol: float = 1e-3

    # Output files
    json_path: str = "verification_results/approximation_report.json"
    csv_path: str = "verification_results/approximation_summary.csv"

    # UX
    progress: bool = True

    def validate(self) -> None:
        if self.terms < 1 or any(n < 1 for n in self.sweep_terms):
            raise ValueError("Term counts must be at least 1.")
        if self.li_step <= 0:
            raise ValueError(f"li_step must be positive (got {self.li_step}).")
        if any(x < 2 for x in self.x_values):
            raise ValueError("Prime-count sample points must satisfy x >= 2.")
        if self.zeros < 0:
            raise ValueError("zeros must be non-negative.")

# ------------------------------ Data models ------------------------------

@dataclass
class ZeroRecord:
    gamma: float
    abs_approx: float
    abs_reference: float
    ok: bool
    sample: ZetaSample


@dataclass
class SanityRecord:
    s: Tuple[float, float]
    approx: Tuple[float, float]
    expected: Tuple[float, float]
    abs_error: float
    ok: bool
    sample: ZetaSample


@dataclass
class TermSweepRecord:
    t: float
    terms: int
    abs_error: float
    rel_error: float


@dataclass
class PrimeCountRecord:
    x: float
    pi_step: int
    pi_reference: int
    li_approx: float
    li_reference: float
    li_rel_error: float
    x_over_ln_x: float
    explicit_sum: float
    ok: bool


@dataclass
class Report:
    terms: int
    zero_ordinates: List[float]
    zero_records: List[ZeroRecord]
    sanity: SanityRecord
    term_sweep: List[TermSweepRecord]
    prime_counts: List[PrimeCountRecord]
    elapsed_seconds: float = 0.0
    all_ok: bool = field(default=False)

# ---------------------------- Reference values ----------------------------

def reference_zeta(s: Complex, dps: int) -> Complex:
    with mpmath.workdps(dps):
        return Complex.from_complex(mpmath.zeta(mpmath.mpc(s.re, s.im)))


def reference_li(x: float, dps: int) -> float:
    """Offset logarithmic integral, the integral of 1/ln t from 2 to x."""
    with mpmath.workdps(dps):
        return float(mpmath.li(x, offset=True))

# ---------------------------- Orchestration ------------------------------

def check_zeros(table: ZeroTable, cfg: Config) -> List[ZeroRecord]:
    records = []
    gammas = table.ordinates
    if cfg.progress:
        gammas = tqdm(gammas, desc="      zeros")
    for g in gammas:
        s = Complex(0.5, g)
        sample = zeta_sample(s, cfg.terms)
        approx = abs(sample.value)
        ref = abs(reference_zeta(s, cfg.mp_dps))
        records.append(ZeroRecord(gamma=g, abs_approx=approx, abs_reference=ref,
                                  ok=approx <= cfg.zero_tol, sample=sample))
    return records


def check_sanity(cfg: Config) -> SanityRecord:
    s = Complex(2.0, 0.0)
    sample = zeta_sample(s, cfg.terms)
    z = sample.value
    expected = Complex(PI ** 2 / 6.0, 0.0)
    err = abs(z - expected)
    return SanityRecord(s=(s.re, s.im), approx=(z.re, z.im), expected=(expected.re, expected.im),
                        abs_error=err, ok=err <= cfg.sanity_tol, sample=sample)


def term_sweep(cfg: Config) -> List[TermSweepRecord]:
    records = []
    grid = [(t, n) for t in cfg.sweep_t for n in cfg.sweep_terms]
    if cfg.progress:
        grid = tqdm(grid, desc="      sweep")
    for t, n in grid:
        s = Complex(0.5, t)
        ref = reference_zeta(s, cfg.mp_dps)
        err = abs(zeta(s, n) - ref)
        ref_abs = abs(ref)
        rel = err / ref_abs if ref_abs > 0.0 else math.inf
        records.append(TermSweepRecord(t=t, terms=n, abs_error=err, rel_error=rel))
    return records


def check_prime_counts(table: ZeroTable, cfg: Config) -> List[PrimeCountRecord]:
    upper = int(math.ceil(max(cfg.x_values)))
    step = prime_counting_step(primes_up_to(upper), upper)
    records = []
    for x in cfg.x_values:
        pi_step = prime_count_at(step, x)
        pi_ref = int(primepi(int(math.floor(x))))
        li = logarithmic_integral_value(x, cfg.li_step)
        li_ref = reference_li(x, cfg.mp_dps)
        rel = abs(li - li_ref) / li_ref if li_ref != 0.0 else abs(li)
        records.append(PrimeCountRecord(
            x=x,
            pi_step=pi_step,
            pi_reference=pi_ref,
            li_approx=li,
            li_reference=li_ref,
            li_rel_error=rel,
            x_over_ln_x=x_over_ln_x(x),
            explicit_sum=riemann_explicit_sum(x, table.ordinates, cfg.li_step),
            ok=(pi_step == pi_ref) and rel <= cfg.li_rel_tol,
        ))
    return records


def analyze(cfg: Config, table: Optional[ZeroTable] = None) -> Report:
    cfg.validate()
    start = time.monotonic()

    if table is None:
        if cfg.zeros > 0:
            print(f"    INFO: Computing the first {cfg.zeros} zero ordinates with mpmath...")
            table = ZeroTable.from_mpmath(cfg.zeros, dps=cfg.mp_dps)
        else:
            table = DEFAULT_ZERO_TABLE

    zero_records = check_zeros(table, cfg)
    sanity = check_sanity(cfg)
    sweep = term_sweep(cfg)
    prime_counts = check_prime_counts(table, cfg)

    all_ok = sanity.ok and all(r.ok for r in zero_records) and all(r.ok for r in prime_counts)
    return Report(
        terms=cfg.terms,
        zero_ordinates=list(table.ordinates),
        zero_records=zero_records,
        sanity=sanity,
        term_sweep=sweep,
        prime_counts=prime_counts,
        elapsed_seconds=time.monotonic() - start,
        all_ok=all_ok,
    )

# ------------------------------ Output -----------------------------------

def make_json_safe(obj):
    """
    Recursively convert dataclasses, numpy scalars/arrays, Path, and
    non-finite floats into plain JSON-serializable Python types.
    """
    if dataclasses.is_dataclass(obj):
        obj = dataclasses.asdict(obj)

    if isinstance(obj, dict):
        return {k: make_json_safe(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [make_json_safe(v) for v in obj]

    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, (np.integer, np.floating)):
        obj = obj.item()

    if isinstance(obj, np.ndarray):
        return obj.tolist()

    if isinstance(obj, Path):
        return str(obj)

    # JSON has no NaN / Infinity
    if isinstance(obj, float) and not math.isfinite(obj):
        return str(obj)

    return obj


def write_json(report: Report, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = make_json_safe(report)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)


def write_csv(report: Report, path: Path) -> None:
    """
    One row per check. Columns:
        kind, key, approx, reference, error, ok
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["kind", "key", "approx", "reference", "error", "ok"])
        for r in report.zero_records:
            w.writerow(["zero", r.gamma, r.abs_approx, r.abs_reference, r.abs_approx, r.ok])
        s = report.sanity
        w.writerow(["sanity", s.s[0], s.approx[0], s.expected[0], s.abs_error, s.ok])
        for r in report.term_sweep:
            w.writerow(["sweep", f"t={r.t};terms={r.terms}", "", "", r.abs_error, ""])
        for r in report.prime_counts:
            w.writerow(["pi", r.x, r.pi_step, r.pi_reference, r.pi_step - r.pi_reference, r.pi_step == r.pi_reference])
            w.writerow(["li", r.x, r.li_approx, r.li_reference, r.li_rel_error, r.ok])


def _pf(ok: bool) -> str:
    return "OK " if ok else "FAIL"


def console_summary(report: Report) -> str:
    lines = []
    lines.append("=" * 72)
    lines.append(f" Approximation verifier | terms={report.terms} | zeros={len(report.zero_records)}")
    lines.append("=" * 72)

    s = report.sanity
    lines.append(f" zeta(2) = {s.approx[0]:.8f}{s.approx[1]:+.2e}i  (pi^2/6 = {s.expected[0]:.8f})"
                 f"  err={s.abs_error:.2e}  [{_pf(s.ok)}]")

    lines.append("")
    lines.append(" Non-trivial zeros: |zeta(1/2 + i gamma)|")
    for r in report.zero_records:
        lines.append(f"   gamma={r.gamma:10.6f}  approx={r.abs_approx:.3e}  ref={r.abs_reference:.3e}  [{_pf(r.ok)}]")

    lines.append("")
    lines.append(" Term sweep: |zeta_N(1/2 + it) - zeta(1/2 + it)|")
    for r in report.term_sweep:
        lines.append(f"   t={r.t:10.4f}  N={r.terms:5d}  abs_err={r.abs_error:.3e}  rel_err={r.rel_error:.3e}")

    lines.append("")
    lines.append(" Prime counting")
    for r in report.prime_counts:
        lines.append(
            f"   x={r.x:7.1f}  pi={r.pi_step:4d} (ref {r.pi_reference:4d})  "
            f"Li={r.li_approx:9.4f} (ref {r.li_reference:9.4f})  x/ln x={r.x_over_ln_x:9.4f}  "
            f"explicit={r.explicit_sum:9.4f}  [{_pf(r.ok)}]"
        )

    lines.append("-" * 72)
    lines.append(f" Overall: {'PASS' if report.all_ok else 'FAIL'}  ({report.elapsed_seconds:.2f} s)")
    return "\n".join(lines)

# ------------------------------ Command line -------------------------------

def parse_args(argv: Optional[List[str]] = None) -> Config:
    p = argparse.ArgumentParser(
        description="Check the zeta and prime-counting approximations against mpmath/sympy references."
    )
    p.add_argument("--terms", type=int, default=Config.terms, help=f"Eta series terms (default: {Config.terms}).")
    p.add_argument("--zeros", type=int, default=Config.zeros,
                   help="Compute this many zero ordinates with mpmath instead of using the built-in table.")
    p.add_argument("--zero-tol", type=float, default=Config.zero_tol, dest="zero_tol",
                   help=f"Tolerance for |zeta| at a zero (default: {Config.zero_tol:g}).")
    p.add_argument("--sanity-tol", type=float, default=Config.sanity_tol, dest="sanity_tol")
    p.add_argument("--dps", type=int, default=Config.mp_dps, dest="mp_dps", help="mpmath working precision.")
    p.add_argument("--sweep-t", type=float, nargs="+", default=list(Config.sweep_t), dest="sweep_t")
    p.add_argument("--sweep-terms", type=int, nargs="+", default=list(Config.sweep_terms), dest="sweep_terms")
    p.add_argument("--x", type=float, nargs="+", default=list(Config.x_values), dest="x_values",
                   help="Sample points for pi(x) and Li(x).")
    p.add_argument("--li-step", type=float, default=Config.li_step, dest="li_step")
    p.add_argument("--li-rel-tol", type=float, default=Config.li_rel_tol, dest="li_rel_tol")
    p.add_argument("--json", type=str, default=Config.json_path, help="Path to JSON report.")
    p.add_argument("--csv", type=str, default=Config.csv_path, help="Path to CSV summary.")
    p.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    args = p.parse_args(argv)

    return Config(
        terms=args.terms,
        zeros=args.zeros,
        zero_tol=args.zero_tol,
        sanity_tol=args.sanity_tol,
        mp_dps=args.mp_dps,
        sweep_t=tuple(args.sweep_t),
        sweep_terms=tuple(args.sweep_terms),
        x_values=tuple(args.x_values),
        li_step=args.li_step,
        li_rel_tol=args.li_rel_tol,
        json_path=args.json,
        csv_path=args.csv,
        progress=(not args.no_progress),
    )


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(argv)
    try:
        cfg.validate()
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    report = analyze(cfg)

    write_json(report, Path(cfg.json_path))
    write_csv(report, Path(cfg.csv_path))
    print(f"    SUCCESS: Wrote '{cfg.json_path}' and '{cfg.csv_path}'.")

    print(console_summary(report))
    return 0 if report.all_ok else 1


if __name__ == "__main__":
    sys.exit(main())
