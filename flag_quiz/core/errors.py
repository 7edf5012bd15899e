"""Error types raised by the quiz core."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for every error the quiz core reports to its callers."""


class InvalidDifficultyError(QuizError):
    """Raised when a session is requested for a difficulty outside the known tiers."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown difficulty: {value!r}")
        self.value = value


class InsufficientPoolError(QuizError):
    """Raised when the filtered country pool is too small to build questions."""

    def __init__(self, difficulty: str, pool_size: int, required: int) -> None:
        super().__init__(
            f"Difficulty '{difficulty}' produced {pool_size} countries; at least {required} are required."
        )
        self.difficulty = difficulty
        self.pool_size = pool_size
        self.required = required


class InsufficientCandidatesError(QuizError):
    """Raised when not enough wrong answers can be drawn for a question."""

    def __init__(self, correct_id: str, available: int, required: int) -> None:
        super().__init__(
            f"Only {available} distractors available for '{correct_id}'; {required} are required."
        )
        self.correct_id = correct_id
        self.available = available
        self.required = required


class DataUnavailableError(QuizError):
    """Raised when the country reference data cannot be loaded."""
