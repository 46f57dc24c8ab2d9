"""Mastermind: a hidden four-peg code, coloured spheres and answer rows."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

CODE_LENGTH = 4
COLOR_COUNT = 6


@dataclass(frozen=True)
class LinearColor:
    """An RGBA colour with float channels in linear space."""

    r: float
    g: float
    b: float
    a: float = 1.0


RED = LinearColor(1.0, 0.0, 0.0)
YELLOW = LinearColor(1.0, 1.0, 0.0)
GREEN = LinearColor(0.0, 1.0, 0.0)
BLUE = LinearColor(0.0, 0.0, 1.0)
GRAY = LinearColor(0.5, 0.5, 0.5)
WHITE = LinearColor(1.0, 1.0, 1.0)
BLACK = LinearColor(0.0, 0.0, 0.0)

DEFAULT_COLORS: tuple[LinearColor, ...] = (RED, YELLOW, GREEN, BLUE, GRAY, WHITE)


@dataclass(frozen=True)
class Feedback:
    """Result of scoring an answer: pegs in the right place and misplaced pegs."""

    good_places: int
    wrong_places: int

    @property
    def solved(self) -> bool:
        return self.good_places == CODE_LENGTH


def _as_code(values: Iterable[int], what: str) -> list[int]:
    code = list(values)
    if len(code) != CODE_LENGTH:
        raise ValueError(f"{what} must hold {CODE_LENGTH} pegs, got {len(code)}")
    return code


def score_answer(solution: Sequence[int], answer: Sequence[int]) -> Feedback:
    """Count well-placed and misplaced pegs of ``answer`` against ``solution``."""
    solution = _as_code(solution, "solution")
    answer = _as_code(answer, "answer")

    exact = [s == a for s, a in zip(solution, answer)]
    good = sum(exact)

    remaining = [s for s, hit in zip(solution, exact) if not hit]
    wrong = 0
    for peg, hit in zip(answer, exact):
        if not hit and peg in remaining:
            remaining.remove(peg)
            wrong += 1

    return Feedback(good, wrong)


FeedbackCallback = Callable[[int, int], None]


class MastermindGame:
    """Holds the palette and the hidden code, and scores answers."""

    def __init__(
        self,
        colors: Sequence[LinearColor] | None = None,
        solution: Sequence[int] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.colors: list[LinearColor] = list(DEFAULT_COLORS if colors is None else colors)
        self._rng = rng if rng is not None else random.Random()
        self._listeners: list[FeedbackCallback] = []
        if solution is None:
            self.solution: list[int] = []
            self.create_solution()
        else:
            self.solution = _as_code(solution, "solution")

    def get_color(self, number: int) -> LinearColor:
        """Return the palette colour at ``number``, or black when out of range."""
        if 0 <= number < len(self.colors):
            return self.colors[number]
        return BLACK

    def create_solution(self) -> list[int]:
        """Draw a new random hidden code and return it."""
        self.solution = [self._rng.randint(0, COLOR_COUNT - 1) for _ in range(CODE_LENGTH)]
        return list(self.solution)

    def subscribe(self, callback: FeedbackCallback) -> None:
        """Register ``callback(good_places, wrong_places)`` for every checked answer."""
        self._listeners.append(callback)

    def check_answer(self, answer: Sequence[int]) -> bool:
        """Score ``answer``, notify subscribers, and tell whether it is the code."""
        feedback = score_answer(self.solution, answer)
        for listener in list(self._listeners):
            listener(feedback.good_places, feedback.wrong_places)
        return feedback.solved


class MastermindSphere:
    """A clickable peg that cycles through the palette."""

    def __init__(
        self,
        manager: MastermindGame | None = None,
        color_number: int = 0,
        blocked_color: LinearColor = BLACK,
    ) -> None:
        self.manager = manager
        self.color_number = color_number
        self.blocked_color = blocked_color
        self.color = blocked_color

    def click(self) -> None:
        """Advance to the next colour, wrapping after the last one."""
        self.color_number += 1
        if self.color_number >= COLOR_COUNT:
            self.color_number = 0
        if self.manager is not None:
            self.change_color(self.manager.get_color(self.color_number))

    def change_color(self, color: LinearColor) -> None:
        self.color = color


class MastermindRow:
    """A row of player spheres that submits its colours as an answer."""

    def __init__(self, manager: MastermindGame, player_spheres: Sequence[MastermindSphere]) -> None:
        self.manager = manager
        self.player_spheres = list(player_spheres)
        self.feedback: Feedback | None = None
        manager.subscribe(self.apply_solution)

    def click(self) -> bool:
        """Submit the row's colours to the manager and return whether they solve it."""
        answer = [sphere.color_number for sphere in self.player_spheres[:CODE_LENGTH]]
        return self.manager.check_answer(answer)

    def apply_solution(self, good_places: int, wrong_places: int) -> None:
        self.feedback = Feedback(good_places, wrong_places)