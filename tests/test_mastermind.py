import random

import pytest

from filrouge.mastermind import (
    BLACK,
    CODE_LENGTH,
    COLOR_COUNT,
    DEFAULT_COLORS,
    RED,
    WHITE,
    Feedback,
    LinearColor,
    MastermindGame,
    MastermindRow,
    MastermindSphere,
    score_answer,
)


def test_exact_match_is_all_good():
    fb = score_answer([0, 1, 2, 3], [0, 1, 2, 3])
    assert fb == Feedback(CODE_LENGTH, 0)
    assert fb.solved


def test_disjoint_colours_score_nothing():
    assert score_answer([0, 0, 1, 1], [2, 3, 4, 5]) == Feedback(0, 0)


def test_permutation_counts_every_peg():
    fb = score_answer([0, 1, 2, 3], [3, 2, 1, 0])
    assert fb.good_places == 0
    assert fb.good_places + fb.wrong_places == CODE_LENGTH


def test_duplicates_not_counted_twice():
    fb = score_answer([0, 0, 0, 0], [0, 1, 1, 1])
    assert fb == Feedback(1, 0)


@pytest.mark.parametrize("seed", range(20))
def test_score_bounds(seed):
    rng = random.Random(seed)
    solution = [rng.randint(0, 5) for _ in range(CODE_LENGTH)]
    answer = [rng.randint(0, 5) for _ in range(CODE_LENGTH)]
    fb = score_answer(solution, answer)
    assert 0 <= fb.good_places + fb.wrong_places <= CODE_LENGTH
    assert fb == score_answer(answer, solution)


@pytest.mark.parametrize("answer", [[0, 1, 2], [0, 1, 2, 3, 4], []])
def test_wrong_length_rejected(answer):
    with pytest.raises(ValueError):
        score_answer([0, 1, 2, 3], answer)


def test_default_palette_and_out_of_range_color():
    game = MastermindGame(solution=[0, 0, 0, 0])
    assert game.get_color(0) == RED
    assert game.get_color(COLOR_COUNT - 1) == WHITE
    assert game.get_color(COLOR_COUNT) == BLACK
    assert game.get_color(-1) == BLACK


def test_custom_palette():
    custom = [LinearColor(0.25, 0.5, 0.75)]
    game = MastermindGame(colors=custom, solution=[0, 0, 0, 0])
    assert game.get_color(0) == custom[0]
    assert game.get_color(1) == BLACK


def test_create_solution_in_range_and_reproducible():
    a = MastermindGame(rng=random.Random(42))
    b = MastermindGame(rng=random.Random(42))
    assert a.solution == b.solution
    assert len(a.solution) == CODE_LENGTH
    assert all(0 <= peg < COLOR_COUNT for peg in a.solution)
    new = a.create_solution()
    assert new == a.solution


def test_check_answer_notifies_subscribers():
    game = MastermindGame(solution=[0, 1, 2, 3])
    received = []
    game.subscribe(lambda good, wrong: received.append((good, wrong)))
    assert game.check_answer([0, 1, 2, 3]) is True
    assert game.check_answer([3, 2, 1, 0]) is False
    assert received[0] == (CODE_LENGTH, 0)
    assert received[1] == (0, CODE_LENGTH)


def test_invalid_solution_rejected():
    with pytest.raises(ValueError):
        MastermindGame(solution=[0, 1])


def test_sphere_starts_blocked_and_cycles():
    game = MastermindGame(solution=[0, 0, 0, 0])
    sphere = MastermindSphere(game)
    assert sphere.color == BLACK
    sphere.click()
    assert sphere.color_number == 1
    assert sphere.color == DEFAULT_COLORS[1]
    for _ in range(COLOR_COUNT - 1):
        sphere.click()
    assert sphere.color_number == 0
    assert sphere.color == RED


def test_sphere_without_manager_keeps_color():
    sphere = MastermindSphere(blocked_color=WHITE)
    sphere.click()
    assert sphere.color_number == 1
    assert sphere.color == WHITE


def test_change_color():
    sphere = MastermindSphere()
    sphere.change_color(RED)
    assert sphere.color == RED


def test_row_submits_sphere_colors():
    game = MastermindGame(solution=[0, 1, 2, 3])
    spheres = [MastermindSphere(game, color_number=n) for n in (0, 1, 2, 3)]
    row = MastermindRow(game, spheres)
    assert row.feedback is None
    assert row.click() is True
    assert row.feedback == Feedback(CODE_LENGTH, 0)


def test_row_reports_misplaced():
    game = MastermindGame(solution=[0, 1, 2, 3])
    spheres = [MastermindSphere(game, color_number=n) for n in (3, 2, 1, 0)]
    row = MastermindRow(game, spheres)
    assert row.click() is False
    assert row.feedback == Feedback(0, CODE_LENGTH)


def test_apply_solution_records_feedback():
    game = MastermindGame(solution=[0, 0, 0, 0])
    row = MastermindRow(game, [])
    row.apply_solution(2, 1)
    assert row.feedback == Feedback(2, 1)