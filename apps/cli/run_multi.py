# apps/cli/run_multi.py
"""
Run multiple solvers in one shot against the same secrets.

Writes per-solver outputs to: <outdir>/<solver_id>/run_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List, Tuple

from tqdm import tqdm

from decipher.engine import GameConfig, InvalidConfig, random_code
from decipher.harness import run_case, summarize, pretty_summary
from decipher.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from decipher.solvers import create_solver, get_solver_ids


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_one_solver(solver_id: str, secrets: List[tuple], *, config: GameConfig,
                    base_seed: int, sample_cap: int | None, outdir: Path,
                    progress: str) -> Tuple[str, str, dict]:
    solver = create_solver(solver_id, **({"sample_cap": sample_cap} if sample_cap else {}))
    results = []
    total = len(secrets)
    mode = _progress_mode(progress)
    iterator = tqdm(secrets, ncols=80, desc=f"{solver_id}", unit="game") if mode == "bar" else secrets
    start = time.time()
    last_print = 0.0

    for idx, secret in enumerate(iterator, 1):
        per_seed = base_seed + idx * 2654435761
        r = run_case(solver, config, secret=secret, seed=per_seed)
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
                    f"\r[{solver_id}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # write outputs under <outdir>/<solver_id>/
    summary = summarize(results)
    run_id = timestamp_id()
    sdir = outdir / solver_id
    sdir.mkdir(parents=True, exist_ok=True)
    csv_path = sdir / f"run_{run_id}.csv"
    manifest_path = sdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_attempts=config.max_attempts,
              num_colors=config.num_colors)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {"solver": solver_id, "colors": config.num_colors,
                   "slots": config.num_slots, "attempts": config.max_attempts,
                   "seed": base_seed, "sample_cap": sample_cap},
        "summary": summary,
        "num_cases": len(results),
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))
    return str(csv_path), str(manifest_path), summary


def main():
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="decipher — run many solvers at once")
    ap.add_argument("--solvers", nargs="+", required=True,
                    help=f"list of solver ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="solver ids to skip (only if --solvers ALL)")
    ap.add_argument("--colors", type=int, default=5)
    ap.add_argument("--slots", type=int, default=5)
    ap.add_argument("--attempts", type=int, default=8)
    ap.add_argument("--games", type=int, default=50)
    ap.add_argument("--sample-cap", type=int)
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--outdir", default="reports/batch")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = GameConfig(args.colors, args.slots, args.attempts).validate()
    except InvalidConfig as e:
        raise SystemExit(f"Invalid configuration: {e}")

    # shared secrets (deterministic by seed) so every solver faces the same games
    rng = random.Random(args.seed)
    secrets = [random_code(config.num_colors, config.num_slots, rng) for _ in range(args.games)]

    if len(args.solvers) == 1 and args.solvers[0].lower() == "all":
        todo = [s for s in registered if s not in set(args.exclude)]
    else:
        todo = args.solvers
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown solver ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    for sid in todo:
        if args.progress != "off":
            print(f"\n=== Running {sid} on {len(secrets)} games "
                  f"({config.num_colors} colors x {config.num_slots} slots) ===")
        csv_path, manifest_path, summary = _run_one_solver(
            sid, secrets, config=config, base_seed=args.seed,
            sample_cap=args.sample_cap, outdir=outdir, progress=args.progress
        )
        print(pretty_summary(summary))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
