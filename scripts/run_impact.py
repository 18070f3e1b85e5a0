#!/usr/bin/env python3
"""
DiscNoise Impact Run — CLI entry point.

Pipeline:
  1. Load a CSV with feature columns and a continuous dependent column
  2. Validate the run options (fails before any model is fitted)
  3. Tune once, then sweep the noise levels 0, step, 2·step, … ≤ limit
  4. Print the Performance_impact and Importance_impact tables
  5. Optionally pickle the raw per-level matrices and plot them

Usage:
    python scripts/run_impact.py data.csv --dep-var bugs --classifier rf --limit 50 --step 25
    python scripts/run_impact.py data.csv --dep-var bugs --classifier glm --limit 20 --step 5 \\
        --parallel --cores 4 --boot-size 50
    python scripts/run_impact.py data.csv --dep-var bugs --classifier knn --limit 30 --step 10 \\
        --save-dir results/ --plot levels.png -v
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Ensure the src/ tree is importable when run from a checkout
_src_root = Path(__file__).resolve().parent.parent / "src"
if str(_src_root) not in sys.path:
    sys.path.insert(0, str(_src_root))


def _header(title: str) -> str:
    width = 60
    return f"\n{'═' * width}\n  {title}\n{'═' * width}"


def _subheader(title: str) -> str:
    return f"\n  ── {title} {'─' * max(1, 50 - len(title))}"


def _kv(key: str, value, indent: int = 4) -> str:
    pad = " " * indent
    return f"{pad}{key}: {value}"


def _fmt(value) -> str:
    if isinstance(value, float):
        return "NaN" if value != value else f"{value:.4f}"
    return str(value)


def main() -> None:
    from disc_noise.learning.classifiers import CLASSIFIERS

    parser = argparse.ArgumentParser(
        description="DiscNoise — impact of discretization noise on a classifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("data", type=str, help="CSV file with features and the dependent column")
    parser.add_argument("--dep-var", type=str, required=True, help="Continuous dependent column")
    parser.add_argument(
        "--classifier", type=str, default="rf", choices=sorted(CLASSIFIERS),
        help="Classifier family (default: rf)",
    )
    parser.add_argument(
        "--limit", type=float, required=True,
        help="Largest noise level, as a percentage of the cutpoint",
    )
    parser.add_argument("--step", type=float, required=True, help="Noise increment (percent)")
    parser.add_argument("--parallel", action="store_true", help="Run iterations on a process pool")
    parser.add_argument("--cores", type=int, default=None, help="Worker count with --parallel")
    parser.add_argument(
        "--boot-size", type=int, default=100,
        help="Bootstrap iterations per noise level (default: 100)",
    )
    parser.add_argument(
        "--cutpoint", type=float, default=None,
        help="Discretization cutpoint (default: median of the dependent)",
    )
    parser.add_argument(
        "--save-dir", type=str, default=None,
        help="Pickle per-level performance/importance matrices here",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Sampler seed (default: the library's fixed seed)",
    )
    parser.add_argument("--plot", type=str, default=None, help="Save a per-level box plot to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    import pandas as pd
    from tabulate import tabulate

    from disc_noise.core.config import ImpactConfig, percentage_label
    from disc_noise.core.errors import DiscNoiseError
    from disc_noise.experiment.driver import report_levels, sweep_noise_levels

    frame = pd.read_csv(args.data)
    config = ImpactConfig(
        dep_var=args.dep_var,
        classifier=args.classifier,
        limit=args.limit,
        step_size=args.step,
        parallel=args.parallel,
        n_cores=args.cores,
        boot_size=args.boot_size,
        cutpoint=args.cutpoint,
        save_interim_results=args.save_dir is not None,
        dest_path=args.save_dir,
        seed=True if args.seed is None else args.seed,
    )

    print(_header("DISCNOISE IMPACT RUN"))
    print(_kv("Data", f"{args.data} ({len(frame)} rows, {frame.shape[1]} columns)"))
    print(_kv("Dependent", args.dep_var))
    print(_kv("Classifier", CLASSIFIERS[args.classifier].name))
    print(_kv("Noise limit / step", f"{args.limit:g}% / {args.step:g}%"))
    print(_kv("Bootstrap iterations", args.boot_size))

    t0 = time.time()
    try:
        levels, feature_names = sweep_noise_levels(frame, config)
        report = report_levels(levels, feature_names, config)
    except DiscNoiseError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    elapsed = time.time() - t0

    # ── Performance impact ───────────────────────────────────────────────
    print(_subheader("Performance impact (first vs last level)"))
    rows = [[_fmt(v) for v in row] for row in report.performance.itertuples(index=False)]
    print(tabulate(rows, headers=list(report.performance.columns), tablefmt="simple", stralign="right"))

    # ── Importance impact ────────────────────────────────────────────────
    print(_subheader("Importance impact (rank stability)"))
    rows = [[_fmt(v) for v in row] for row in report.importance.itertuples(index=False)]
    print(tabulate(rows, headers=list(report.importance.columns), tablefmt="simple", stralign="right"))

    if args.save_dir:
        print(_kv("Interim results", args.save_dir))

    if args.plot:
        from disc_noise.viz.levels import plot_performance_levels

        performance_results = {percentage_label(lv.percentage): lv.performance for lv in levels}
        fig, _ = plot_performance_levels(performance_results)
        fig.savefig(args.plot, dpi=150, bbox_inches="tight")
        print(_kv("Plot", args.plot))

    print(_kv("Elapsed", f"{elapsed:.1f}s"))


if __name__ == "__main__":
    main()
