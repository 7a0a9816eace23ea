"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config and metadata.
- summarize:     aggregate win rate and attempt statistics for a batch.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Feedback cells look like "1-2" (exact-partial). They are prefixed with an
  apostrophe so spreadsheet apps do not turn them into dates.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence
import csv
import json
import subprocess
import datetime as dt

import numpy as np

from decipher.engine import Palette


def _excel_safe_feedback(feedback: Sequence[int]) -> str:
    """
    Example: (1, 2) -> "'1-2"
    """
    exact, partial = feedback
    return f"'{exact}-{partial}"


def _code_text(code: Sequence[int], palette: Palette) -> str:
    return " ".join(palette.to_names(code))


def write_csv(results: List[Dict], path: str, max_attempts: int, num_colors: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, secret, success, guesses, time_ms,
      guess_1, fb_1, guess_2, fb_2, ..., guess_max_attempts, fb_max_attempts

    Codes are written as space-separated color names.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    palette = Palette(num_colors)

    fields = ["solver", "secret", "success", "guesses", "time_ms"]
    for i in range(1, max_attempts + 1):
        fields += [f"guess_{i}", f"fb_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "secret": _code_text(r["secret"], palette),
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            hist = r.get("history", [])
            for i in range(1, max_attempts + 1):
                if i <= len(hist):
                    g, fb = hist[i - 1]
                    row[f"guess_{i}"] = _code_text(g, palette)
                    row[f"fb_{i}"] = _excel_safe_feedback(fb)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"fb_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, sizes, seed, games, outdir)
      - summary: output of summarize(...)
      - num_cases: number of games in this batch
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: games, wins, win rate (%), and attempt statistics.

    Attempt statistics (mean, median, p90, max) are computed over won games
    only; they are None when nothing was won.
    """
    games = len(results)
    won = np.array([r["guesses"] for r in results if r["success"]], dtype=float)
    times = np.array([float(r["time_ms"]) for r in results], dtype=float)

    summary = {
        "games": games,
        "wins": int(won.size),
        "win_rate": round(100.0 * won.size / games, 2) if games else 0.0,
        "mean_attempts": None,
        "median_attempts": None,
        "p90_attempts": None,
        "max_attempts": None,
        "mean_time_ms": round(float(times.mean()), 3) if games else 0.0,
    }
    if won.size:
        summary.update(
            mean_attempts=round(float(won.mean()), 3),
            median_attempts=float(np.median(won)),
            p90_attempts=float(np.percentile(won, 90)),
            max_attempts=int(won.max()),
        )
    return summary


def pretty_summary(summary: Dict) -> str:
    """One-line human readable form of summarize()."""
    s = f"games={summary['games']} wins={summary['wins']} win_rate={summary['win_rate']}%"
    if summary["mean_attempts"] is not None:
        s += f" mean_attempts={summary['mean_attempts']} p90={summary['p90_attempts']}"
    return s


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
