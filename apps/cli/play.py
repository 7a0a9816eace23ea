# apps/cli/play.py
"""
Play decipher in the terminal.

Type a guess as color names or unambiguous prefixes separated by spaces,
e.g. "red blue gr y pu". Type "hint" to ask the entropy solver for a
suggestion, or "quit" to give up and reveal the secret.
"""

from __future__ import annotations

import argparse
import logging

from decipher.engine import GameConfig, InvalidConfig, InvalidInput
from decipher.harness import Session
from decipher.solvers import EntropySolver, ManualAgent


def _fmt(names) -> str:
    return " ".join(names)


def main():
    ap = argparse.ArgumentParser(description="decipher — play against a hidden code")
    ap.add_argument("--colors", type=int, default=5, help="palette size (4-10)")
    ap.add_argument("--slots", type=int, default=5, help="code length (3-8)")
    ap.add_argument("--attempts", type=int, default=8, help="guess budget (5-15)")
    ap.add_argument("--seed", type=int, help="RNG seed (same seed, same secret)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = GameConfig(args.colors, args.slots, args.attempts).validate()
    except InvalidConfig as e:
        raise SystemExit(f"Invalid configuration: {e}")

    palette = config.palette
    agent = ManualAgent()
    session = Session(agent)
    session.start_game(config, seed=args.seed)

    # hint solver shares nothing with the session; it only reads the snapshot
    helper = EntropySolver(sample_cap=2000)
    helper.reset(config, seed=None if args.seed is None else args.seed + 1)

    print(f"Colors: {_fmt(palette.names)}")
    print(f"Find the {config.num_slots}-color code in {config.max_attempts} attempts.")

    while not session.get_snapshot().over:
        state = session.get_snapshot()
        try:
            line = input(f"[{state.attempts + 1}/{config.max_attempts}] guess> ").strip()
        except EOFError:
            break
        if not line:
            continue
        if line.lower() == "quit":
            break
        if line.lower() == "hint":
            suggestion = helper.propose_next_guess(state)
            print(f"  try: {_fmt(palette.to_names(suggestion))}")
            continue

        try:
            agent.set_guess(palette.to_indices(line.replace(",", " ").split()))
            outcome = session.play_turn()
        except InvalidInput as e:
            print(f"  {e}")
            continue

        fb = outcome.feedback
        print(f"  exact={fb.exact} partial={fb.partial}")

    state = session.get_snapshot()
    if state.won:
        print(f"Solved in {state.attempts} attempt(s)!")
    else:
        print(f"Secret was: {_fmt(palette.to_names(state.secret))}")


if __name__ == "__main__":
    main()
