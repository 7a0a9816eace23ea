import logging
import random
from itertools import product

import pytest
from decipher.engine import Feedback, GameConfig, filter_consistent, sample_universe
from decipher.harness import run_case
from decipher.solvers import EntropySolver, create_solver, information_gain
from decipher.solvers.entropy import _gains


def test_entropy_smoke():
    solver = create_solver("entropy")
    for seed in (1, 2, 3):
        r = run_case(solver, GameConfig(4, 3, 10), seed=seed)
        assert r["success"] is True
    assert solver.stats.total_games == 3 and solver.stats.win_rate == 100.0


def test_entropy_solves_fixed_secret():
    solver = EntropySolver(sample_cap=2000, rng=random.Random(0))
    r = run_case(solver, GameConfig(5, 4, 10), secret=(0, 0, 3, 4), seed=42)
    assert r["success"] is True
    assert r["history"][-1] == ((0, 0, 3, 4), (4, 0))


def test_singleton_returns_the_candidate():
    solver = EntropySolver()
    solver.reset(GameConfig(4, 3, 8))
    assert solver.choose_next([(2, 1, 3)]) == (2, 1, 3)


def test_empty_candidates_fall_back_to_random_code(caplog):
    solver = EntropySolver(rng=random.Random(3))
    solver.reset(GameConfig(6, 5, 8))
    with caplog.at_level(logging.WARNING, logger="decipher.solvers.entropy"):
        guess = solver.choose_next([])
    assert len(guess) == 5 and all(0 <= c < 6 for c in guess)
    assert any(rec.levelno == logging.WARNING for rec in caplog.records)


def test_choice_maximizes_information_gain():
    universe = list(product(range(4), repeat=3))
    cands = filter_consistent(universe, [((0, 0, 1), Feedback(1, 0))])
    solver = EntropySolver()
    solver.reset(GameConfig(4, 3, 8))
    best = solver.choose_next(cands)
    assert best in cands
    top = max(information_gain(c, cands) for c in cands)
    assert information_gain(best, cands) == pytest.approx(top)


def test_information_gain_edge_cases():
    assert information_gain((0, 0, 0), []) == 0.0
    assert information_gain((0, 0, 0), [(1, 1, 1)]) == 0.0
    # two candidates told apart by the probe: one full bit
    assert information_gain((0, 0, 0), [(0, 0, 0), (1, 1, 1)]) == pytest.approx(1.0)


def test_candidates_contain_secret_when_space_fully_sampled():
    solver = EntropySolver(sample_cap=100, rng=random.Random(8))
    solver.reset(GameConfig(4, 3, 8))
    solver.on_feedback((0, 1, 2), Feedback(1, 1))
    cands = solver.candidates()
    assert (0, 2, 3) in cands  # evaluate((0,1,2),(0,2,3)) == (1, 1)
    assert all(len(c) == 3 for c in cands)


def _eight_color_candidates():
    sample = sample_universe(3000, 8, 4, random.Random(5))
    return filter_consistent(sample, [((1, 5, 1, 0), Feedback(1, 1))])


def test_batch_gains_match_information_gain():
    cands = _eight_color_candidates()
    assert len(cands) > 1
    gains = _gains(cands, 8)
    for c, g in zip(cands, gains):
        assert g == pytest.approx(information_gain(c, cands))


def test_choice_independent_of_configured_palette():
    cands = _eight_color_candidates()
    solver = EntropySolver()  # not reset: still on the 5-color default
    best = solver.choose_next(cands)
    top = max(information_gain(c, cands) for c in cands)
    assert information_gain(best, cands) == pytest.approx(top)
