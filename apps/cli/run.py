# apps/cli/run.py
"""
CLI entry point for running decipher solver experiments.

This script:
  1) Validates the game configuration (colors, slots, attempts).
  2) Instantiates the requested solver.
  3) Plays a batch of games with a live progress indicator and writes:
       - CSV:  per-game results + guess/feedback history columns
       - JSON: manifest with config, summary statistics, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from decipher.engine import GameConfig, InvalidConfig
from decipher.harness import run_case, summarize, pretty_summary
from decipher.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from decipher.solvers import create_solver, get_solver_ids


def main():
    """
    Parse CLI args, validate the config, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="decipher — run solver experiments")
    ap.add_argument("--solver", default="entropy",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--colors", type=int, default=5, help="palette size (4-10)")
    ap.add_argument("--slots", type=int, default=5, help="code length (3-8)")
    ap.add_argument("--attempts", type=int, default=8, help="guess budget (5-15)")
    ap.add_argument("--games", type=int, default=50, help="number of games to play")
    ap.add_argument("--sample-cap", type=int,
                    help="codes sampled per turn before filtering (solver default if omitted)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate configuration up front
    try:
        config = GameConfig(args.colors, args.slots, args.attempts).validate()
    except InvalidConfig as e:
        raise SystemExit(f"Invalid configuration: {e}")

    # 2) Instantiate solver by id
    kwargs = {"sample_cap": args.sample_cap} if args.sample_cap else {}
    solver = create_solver(args.solver, **kwargs)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    total = args.games
    results = []
    start = time.time()
    last_print = 0.0

    cases = range(1, total + 1)
    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 4) Run batch with live progress
    for idx in iterator:
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = args.seed + idx * 1013904223
        r = run_case(solver, config, seed=per_seed)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    summary = summarize(results)
    print(pretty_summary(summary))

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_attempts=config.max_attempts,
              num_colors=config.num_colors)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "summary": summary,
        "num_cases": len(results),
        "solver_id": solver.id,
        "agent_stats": {"win_rate": solver.stats.win_rate,
                        "avg_attempts": solver.stats.avg_attempts},
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
