"""Memory card game: cards that flip and a score keeper."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MemoryCard:
    """A card that can be flipped face up or face down."""

    is_clickable: bool = True
    face_up: bool = True

    @property
    def rotation(self) -> tuple[float, float, float]:
        """Pitch, yaw and roll of the card in degrees."""
        return (0.0, 0.0, 0.0) if self.face_up else (180.0, 0.0, 0.0)

    def turn(self) -> None:
        """Flip the card and toggle whether it accepts clicks."""
        self.is_clickable = not self.is_clickable
        self.face_up = not self.face_up


@dataclass
class MemoryGame:
    """Keeps the score and the previously revealed card."""

    score: int = 0
    previous_card: MemoryCard | None = None

    def update_score(self, value: int) -> None:
        self.score += value

    @staticmethod
    def is_pair(first_value: int, second_value: int) -> bool:
        return first_value == second_value