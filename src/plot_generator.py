#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# =============================================================================
#
#   Plotting Script for the Prime / Zeta Visualizations
#
#   Renders two 3D scenes:
#   - Prime distribution: primes, pi(x), x/ln x, Li(x), one explicit-formula
#     wave per zeta zero (+/- gamma), and the reconstruction Li(x) + waves.
#   - Zeta along the critical line: the curve (Re zeta, t, Im zeta) for
#     s = 1/2 + i t, the strip boundaries, and the trivial / non-trivial zeros.
#
#   Date:   2026-10-18
#   Version: 1.0
#
#   Usage examples:
#   $ python plot_generator.py
#   $ python plot_generator.py --only zeta --t-max 30 --terms 150
#   $ python plot_generator.py --max-n 200 --format png --dpi 150
#
# =============================================================================

from __future__ import annotations
import argparse
import os
import sys
import time
from typing import List, Optional
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D

from scene_data import build_prime_scene, build_zeta_scene
from zero_tables import DEFAULT_ZERO_TABLE

# =============================================================================
# CENTRAL CONFIGURATION
# =============================================================================
class Config:
    # --- Prime Scene ---
    PRIME_MAX_N = 100
    APPROX_STEP = 0.5         # x / ln x sampling
    LI_STEP = 0.1             # midpoint quadrature step for Li(x)
    WAVE_STEP = 0.2           # sampling of waves and the explicit sum
    WAVE_SPACING = 4.0        # z distance between consecutive zero ranks
    LABEL_PRIMES = True

    # --- Zeta Scene ---
    ZETA_SIGMA = 0.5
    ZETA_T_MAX = 60.0
    ZETA_T_STEP = 0.01
    ZETA_TERMS = 200          # eta series truncation; error grows with |t|
    ZETA_RE_SCALE = 8.0       # world units per unit of Re(s)
    ZETA_CHUNKS = 50          # progress granularity of the curve sweep

    ZERO_TABLE = DEFAULT_ZERO_TABLE

    # --- General Plotting Configuration ---
    PROGRESS = True
    PLOT_DPI = 200
    PLOT_FILE_FORMAT = 'pdf'
    PLOT_FILE_FORMATS = ('pdf', 'png', 'jpg')
    PLOT_PRIMES_FIGSIZE = (20, 14)
    PLOT_ZETA_FIGSIZE = (16, 16)
    FIGURES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "../figures")


def validate_config(config: Config) -> None:
    if config.PRIME_MAX_N < 2:
        raise ValueError(f"max-n must be at least 2 (got {config.PRIME_MAX_N}).")
    for name in ("APPROX_STEP", "LI_STEP", "WAVE_STEP", "ZETA_T_STEP", "ZETA_T_MAX"):
        if getattr(config, name) <= 0:
            raise ValueError(f"{name} must be positive (got {getattr(config, name)}).")
    if config.ZETA_TERMS < 1:
        raise ValueError(f"terms must be at least 1 (got {config.ZETA_TERMS}).")
    if config.PLOT_DPI <= 0:
        raise ValueError(f"dpi must be positive (got {config.PLOT_DPI}).")
    if config.PLOT_FILE_FORMAT not in config.PLOT_FILE_FORMATS:
        raise ValueError(f"Unsupported figure format '{config.PLOT_FILE_FORMAT}' "
                         f"(choose from {', '.join(config.PLOT_FILE_FORMATS)}).")

# =============================================================================
# PLOTTING SUITE
# =============================================================================

def _plot3(ax, points: np.ndarray, **kwargs):
    """Draws world points (x, y, z) with y as the vertical matplotlib axis."""
    return ax.plot(points[:, 0], points[:, 2], points[:, 1], **kwargs)


class Plotter:
    """Generates the prime-distribution and critical-line figures."""

    def __init__(self, config: Config):
        validate_config(config)
        self.config = config
        self.figures_dir = config.FIGURES_DIR
        if not os.path.isdir(self.figures_dir):
            os.makedirs(self.figures_dir, exist_ok=True)
            print(f"INFO: Created figures directory at '{self.figures_dir}'")
        print("Initializing plotter...")

    def _save(self, fig, name: str) -> str:
        filename = os.path.join(self.figures_dir, f"{name}.{self.config.PLOT_FILE_FORMAT}")
        fig.savefig(filename, dpi=self.config.PLOT_DPI, bbox_inches='tight')
        plt.close(fig)
        return filename

    def generate_prime_distribution_plot(self) -> str:
        """
        Primes on the number line together with pi(x) and its smooth and
        oscillatory approximations.
        """
        cfg = self.config
        print(f"\n--- Generating Prime Distribution Plot (x <= {cfg.PRIME_MAX_N}) ---")
        start_time = time.time()

        scene = build_prime_scene(
            max_n=cfg.PRIME_MAX_N,
            zero_table=cfg.ZERO_TABLE,
            approx_step=cfg.APPROX_STEP,
            li_step=cfg.LI_STEP,
            wave_step=cfg.WAVE_STEP,
            wave_spacing=cfg.WAVE_SPACING,
        )
        print(f"    INFO: Found {len(scene.primes)} primes; {len(scene.wave_curves)} wave curves.")
        print(f"    INFO: Data computation finished in {time.time() - start_time:.2f} seconds.")

        fig = plt.figure(figsize=cfg.PLOT_PRIMES_FIGSIZE)
        ax = fig.add_subplot(projection='3d')

        ax.scatter(scene.prime_points[:, 0], scene.prime_points[:, 2], scene.prime_points[:, 1],
                   c='red', s=12, depthshade=False)
        if cfg.LABEL_PRIMES:
            for p in scene.primes:
                ax.text(p, 0, -2, str(p), color='#cc2222', fontsize=7, ha='center')

        _plot3(ax, scene.step_curve, c='darkcyan', lw=2.0)
        _plot3(ax, scene.approx_curve, c='magenta', lw=1.5)
        _plot3(ax, scene.li_curve, c='orange', lw=1.5)
        for wave in scene.wave_curves:
            color = '#2e8b57' if wave.gamma > 0 else '#cd5c5c'
            _plot3(ax, wave.points, c=color, lw=0.8, alpha=0.5)
            end = wave.points[-1]
            ax.text(end[0] + 2, wave.z_offset, 0, f"i{wave.gamma:.2f}", color=color, fontsize=7)
        _plot3(ax, scene.sum_curve, c='gold', lw=2.0)

        ax.set_xticks(scene.ticks)
        ax.set_xlabel("x", fontsize=14)
        ax.set_ylabel("zero rank (z)", fontsize=14)
        ax.set_zlabel(r"$\pi(x)$ / wave height", fontsize=14)
        ax.set_title("Prime Number Distribution", fontsize=20, pad=20)
        ax.view_init(elev=25, azim=-70)

        legend_elements = [
            Line2D([0], [0], marker='o', color='red', label='Primes', linestyle='None'),
            Line2D([0], [0], color='darkcyan', lw=2, label=r'Prime Counting Function $\pi(x)$'),
            Line2D([0], [0], color='magenta', lw=2, label=r'$x / \ln x$'),
            Line2D([0], [0], color='orange', lw=2, label=r'Logarithmic Integral Li$(x)$'),
            Line2D([0], [0], color='gold', lw=2, label='Riemann Sum (Li(x) + Waves)'),
            Line2D([0], [0], color='#2e8b57', lw=2, label=r'Waves for zeros with $\gamma > 0$'),
            Line2D([0], [0], color='#cd5c5c', lw=2, label=r'Waves for zeros with $\gamma < 0$'),
        ]
        ax.legend(handles=legend_elements, loc='upper left', fontsize=11)

        filename = self._save(fig, "plot_prime_distribution")
        print(f"    SUCCESS: Saved prime distribution plot to '{filename}'.")
        return filename

    def generate_zeta_critical_line_plot(self) -> str:
        """
        The value curve of zeta(1/2 + i t) winding around the t axis; it
        meets the axis at the non-trivial zeros.
        """
        cfg = self.config
        print(f"\n--- Generating Critical Line Plot (|t| <= {cfg.ZETA_T_MAX}, {cfg.ZETA_TERMS} terms) ---")
        start_time = time.time()

        print("    INFO: Evaluating zeta along the critical line...")
        scene = build_zeta_scene(
            sigma=cfg.ZETA_SIGMA,
            t_max=cfg.ZETA_T_MAX,
            t_step=cfg.ZETA_T_STEP,
            terms=cfg.ZETA_TERMS,
            zero_table=cfg.ZERO_TABLE,
            re_scale=cfg.ZETA_RE_SCALE,
            chunks=cfg.ZETA_CHUNKS,
            progress=cfg.PROGRESS,
        )
        print(f"    INFO: Grid computation of {scene.ts.size} samples finished in {time.time() - start_time:.2f} seconds.")

        fig = plt.figure(figsize=cfg.PLOT_ZETA_FIGSIZE)
        ax = fig.add_subplot(projection='3d')

        t_extent = cfg.ZETA_T_MAX + 10
        for re, x in scene.strip_lines.items():
            color = 'cyan' if re == cfg.ZETA_SIGMA else '#888888'
            ax.plot([x, x], [0, 0], [-t_extent, t_extent], c=color, lw=1.5)
            ax.text(x, 0, t_extent, f"Re(s) = {re:g}", color=color, fontsize=9)

        _plot3(ax, scene.curve, c='magenta', lw=0.8)

        ax.scatter(scene.zero_markers[:, 0], scene.zero_markers[:, 2], scene.zero_markers[:, 1],
                   c='gold', s=25, depthshade=False, edgecolors='black', linewidth=0.4)
        for g in cfg.ZERO_TABLE.symmetric():
            ax.text(0.5, 0, g, f"i{g:.1f}", color='#b8860b', fontsize=7)

        ax.scatter(scene.trivial_markers[:, 0], scene.trivial_markers[:, 2], scene.trivial_markers[:, 1],
                   c='gold', s=25, depthshade=False, edgecolors='black', linewidth=0.4)
        for z, marker in zip(cfg.ZERO_TABLE.trivial, scene.trivial_markers):
            ax.text(marker[0], 0, 4, f"s={z}", color='#b8860b', fontsize=8)

        ax.set_xlabel(r"Re $\zeta$", fontsize=14)
        ax.set_ylabel(r"Im $\zeta$", fontsize=14)
        ax.set_zlabel(r"$t$ = Im $s$", fontsize=14)
        ax.set_title(r"Riemann Zeta Function $\zeta(1/2 + it)$", fontsize=20, pad=20)
        ax.view_init(elev=15, azim=-60)

        legend_elements = [
            Line2D([0], [0], color='cyan', lw=2, label='Re(s) = 1/2 (Critical Line)'),
            Line2D([0], [0], color='magenta', lw=2, label=r'Zeta Value $\zeta(1/2 + it)$'),
            Line2D([0], [0], color='#888888', lw=2, label='Critical Strip boundaries (Re(s) = 0, 1)'),
            Line2D([0], [0], marker='o', color='gold', label='Zeros (Trivial & Non-trivial)', linestyle='None'),
        ]
        ax.legend(handles=legend_elements, loc='upper left', fontsize=11)

        filename = self._save(fig, "plot_zeta_critical_line")
        print(f"    SUCCESS: Saved critical line plot to '{filename}'.")
        return filename

# =============================================================================
# COMMAND LINE
# =============================================================================

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Render the prime-distribution and zeta critical-line figures."
    )
    p.add_argument("--figures-dir", type=str, default=Config.FIGURES_DIR, dest="figures_dir",
                   help="Output directory for the figures.")
    p.add_argument("--only", choices=["primes", "zeta"], default=None,
                   help="Render just one of the two figures.")
    p.add_argument("--max-n", type=int, default=Config.PRIME_MAX_N, dest="max_n",
                   help=f"Upper bound of the prime scene (default: {Config.PRIME_MAX_N}).")
    p.add_argument("--t-max", type=float, default=Config.ZETA_T_MAX, dest="t_max",
                   help=f"Sample t in [-t_max, t_max] (default: {Config.ZETA_T_MAX:g}).")
    p.add_argument("--t-step", type=float, default=Config.ZETA_T_STEP, dest="t_step",
                   help=f"Sampling step in t (default: {Config.ZETA_T_STEP:g}).")
    p.add_argument("--terms", type=int, default=Config.ZETA_TERMS,
                   help=f"Eta series terms (default: {Config.ZETA_TERMS}).")
    p.add_argument("--format", type=str, default=Config.PLOT_FILE_FORMAT, dest="file_format",
                   choices=list(Config.PLOT_FILE_FORMATS),
                   help="Figure file format: pdf, png or jpg.")
    p.add_argument("--dpi", type=int, default=Config.PLOT_DPI)
    p.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    config = Config()
    config.FIGURES_DIR = args.figures_dir
    config.PRIME_MAX_N = args.max_n
    config.ZETA_T_MAX = args.t_max
    config.ZETA_T_STEP = args.t_step
    config.ZETA_TERMS = args.terms
    config.PLOT_FILE_FORMAT = args.file_format
    config.PLOT_DPI = args.dpi
    config.PROGRESS = not args.no_progress
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = config_from_args(args)
    try:
        validate_config(config)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    plotter = Plotter(config)
    if args.only in (None, "primes"):
        plotter.generate_prime_distribution_plot()
    if args.only in (None, "zeta"):
        plotter.generate_zeta_critical_line_plot()
    return 0


if __name__ == "__main__":
    sys.exit(main())
