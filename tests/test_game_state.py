import random

import pytest
from decipher.engine import (GameConfig, GameEngine, GameOverError, InvalidConfig, InvalidInput,
                             Status)


def test_win_on_exact_match_regardless_of_budget():
    eng = GameEngine(GameConfig(4, 4, 10), secret=(0, 1, 2, 3))
    fb = eng.submit_guess([0, 1, 2, 3])
    assert fb == (4, 0)
    state = eng.get_state()
    assert state.status is Status.WON and state.over and state.won
    assert state.attempts == 1 and state.attempts_left == 9


def test_lost_after_max_attempts():
    eng = GameEngine(GameConfig(4, 3, 5), secret=(0, 0, 0))
    for i in range(5):
        assert not eng.over
        assert eng.submit_guess((1, 1, 1)) == (0, 0)
    state = eng.get_state()
    assert state.status is Status.LOST and not state.won
    assert len(state.history) == 5


def test_guess_after_game_over_raises():
    eng = GameEngine(GameConfig(4, 3, 5), secret=(0, 0, 0))
    eng.submit_guess((0, 0, 0))
    with pytest.raises(GameOverError):
        eng.submit_guess((1, 1, 1))
    assert len(eng.history) == 1


def test_invalid_guess_does_not_consume_attempt():
    eng = GameEngine(GameConfig(4, 3, 5), secret=(0, 1, 2))
    with pytest.raises(InvalidInput):
        eng.submit_guess((0, 1))
    with pytest.raises(InvalidInput):
        eng.submit_guess((0, 1, 9))
    assert eng.get_state().attempts == 0


def test_history_records_are_immutable_snapshot():
    eng = GameEngine(GameConfig(4, 3, 5), secret=(0, 1, 2))
    eng.submit_guess([2, 1, 0])
    state = eng.get_state()
    (rec,) = state.history
    assert rec.guess == (2, 1, 0) and rec.feedback == (1, 2)
    with pytest.raises(AttributeError):
        rec.guess = (0, 0, 0)
    eng.submit_guess([0, 0, 0])
    assert len(state.history) == 1  # older snapshot unchanged


def test_reset_draws_new_secret_and_clears_history():
    eng = GameEngine(GameConfig(6, 6, 8), rng=random.Random(11))
    secrets = set()
    for _ in range(5):
        eng.submit_guess([0] * 6)
        eng.reset()
        state = eng.get_state()
        assert state.status is Status.IN_PROGRESS and state.history == ()
        assert len(state.secret) == 6 and all(0 <= c < 6 for c in state.secret)
        secrets.add(state.secret)
    assert len(secrets) > 1


def test_reset_with_new_sizes():
    eng = GameEngine(rng=random.Random(3))
    eng.reset(num_colors=8, num_slots=7, max_attempts=12)
    state = eng.get_state()
    assert len(state.secret) == 7 and state.max_attempts == 12 and state.num_colors == 8
    with pytest.raises(InvalidConfig):
        eng.reset(num_slots=9)


def test_seeded_engines_draw_same_secret():
    a = GameEngine(GameConfig(), rng=random.Random(99))
    b = GameEngine(GameConfig(), rng=random.Random(99))
    assert a.secret == b.secret


@pytest.mark.parametrize("cfg", [
    GameConfig(3, 5, 8), GameConfig(11, 5, 8), GameConfig(5, 2, 8),
    GameConfig(5, 9, 8), GameConfig(5, 5, 4), GameConfig(5, 5, 16),
])
def test_config_out_of_range(cfg):
    with pytest.raises(InvalidConfig):
        cfg.validate()


def test_explicit_secret_is_validated():
    with pytest.raises(InvalidInput):
        GameEngine(GameConfig(4, 3, 5), secret=(0, 1, 7))


def test_config_defaults_and_universe():
    cfg = GameConfig().validate()
    assert (cfg.num_colors, cfg.num_slots, cfg.max_attempts) == (5, 5, 8)
    assert cfg.universe_size == 3125
    assert cfg.palette.names[-1] == "purple"


def test_exact_match_on_last_attempt_wins():
    eng = GameEngine(GameConfig(4, 3, 5), secret=(2, 2, 3))
    for _ in range(4):
        eng.submit_guess((0, 0, 0))
    assert not eng.over
    assert eng.submit_guess((2, 2, 3)) == (3, 0)
    state = eng.get_state()
    assert state.status is Status.WON and state.attempts == 5
