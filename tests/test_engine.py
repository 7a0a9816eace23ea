import random

import pytest
from decipher.engine import (Feedback, InvalidInput, Palette, evaluate, filter_consistent,
                             validate_code)

PAL = Palette(5)


# --- golden tests with named colors (duplicates + placements) ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("red blue green yellow", "red blue green yellow", (4, 0)),
    ("red blue green yellow", "yellow green blue red", (0, 4)),
    ("red blue green yellow", "red green blue purple", (1, 2)),
    ("red red blue green", "red yellow red blue", (1, 2)),
    ("red blue green yellow", "purple purple purple purple", (0, 0)),
    ("red red blue blue", "blue blue red red", (0, 4)),
    ("red red red blue", "red blue blue blue", (2, 0)),
])
def test_evaluate_golden(secret, guess, expected):
    assert PAL.evaluate(secret.split(), guess.split()) == expected


def test_feedback_fields():
    fb = evaluate((0, 1, 2, 3), (0, 2, 1, 4))
    assert isinstance(fb, Feedback)
    assert fb.exact == 1 and fb.partial == 2


def test_evaluate_properties_random_codes():
    rng = random.Random(2024)
    for _ in range(300):
        n = rng.randint(3, 8)
        k = rng.randint(4, 10)
        a = tuple(rng.randrange(k) for _ in range(n))
        b = tuple(rng.randrange(k) for _ in range(n))
        assert evaluate(a, a) == (n, 0)
        ab = evaluate(a, b)
        assert ab == evaluate(b, a)
        assert ab.exact + ab.partial <= n


def test_evaluate_rejects_length_mismatch():
    with pytest.raises(InvalidInput):
        evaluate((0, 1, 2), (0, 1, 2, 3))


def test_evaluate_rejects_out_of_palette():
    with pytest.raises(InvalidInput):
        evaluate((0, 1, 2), (0, 1, 5), num_colors=5)
    with pytest.raises(InvalidInput):
        PAL.evaluate(["red", "blue", "green"], ["red", "blue", "lime"])


def test_validate_code():
    assert validate_code([0, 1, 2], 3, 4) == (0, 1, 2)
    with pytest.raises(InvalidInput):
        validate_code([0, 1], 3, 4)
    with pytest.raises(InvalidInput):
        validate_code([0, 1, 4], 3, 4)
    with pytest.raises(InvalidInput):
        validate_code([0, -1, 2], 3, 4)
    with pytest.raises(InvalidInput):
        validate_code([0, -1, 2], 3)  # no palette given
    with pytest.raises(InvalidInput):
        validate_code("012", 3, 4)


def test_palette_names_and_prefixes():
    assert PAL.names == ["red", "blue", "green", "yellow", "purple"]
    assert PAL.to_indices(["RED", "b", "gr", "y", "pu"]) == (0, 1, 2, 3, 4)
    assert PAL.to_names((4, 0)) == ("purple", "red")
    with pytest.raises(InvalidInput):
        PAL.index_of("cyan")  # not in a 5-color palette
    with pytest.raises(InvalidInput):
        Palette(10).index_of("p")  # purple / pink


def test_filter_consistent_history():
    sample = [(0, 1, 2), (3, 3, 3), (0, 0, 1), (1, 0, 0)]
    history = [((0, 0, 1), Feedback(1, 1))]
    cand = filter_consistent(sample, history)
    assert (0, 1, 2) in cand
    assert (3, 3, 3) not in cand and (0, 0, 1) not in cand


def test_filter_consistent_keeps_order_and_empty_history():
    sample = [(2, 2, 2), (0, 1, 2), (1, 1, 1)]
    assert filter_consistent(sample, []) == sample
