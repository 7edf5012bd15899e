"""Domain models for the flag quiz."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from flag_quiz.constants.quiz_constants import DEFAULT_LANGUAGE
from flag_quiz.core.errors import InvalidDifficultyError


class Difficulty(str, Enum):
    """Named difficulty tiers."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @classmethod
    def parse(cls, value: Difficulty | str | None) -> Difficulty:
        """Return the tier for ``value`` or raise :class:`InvalidDifficultyError`.

        Accepts the tier names as well as the ``easy``/``medium``/``hard`` aliases.
        """
        if isinstance(value, Difficulty):
            return value
        if not isinstance(value, str):
            raise InvalidDifficultyError(value)
        normalized = value.strip().lower()
        normalized = _DIFFICULTY_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError as exc:
            raise InvalidDifficultyError(value) from exc


_DIFFICULTY_ALIASES = {
    "easy": Difficulty.BEGINNER.value,
    "medium": Difficulty.INTERMEDIATE.value,
    "hard": Difficulty.ADVANCED.value,
}


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class CountryRecord:
    """Read-only reference data for a single country."""

    id: str
    display_names: Mapping[str, str]
    region: str
    subregion: str = ""
    coordinates: Coordinates | None = None
    flag_image_ref: str = ""
    population: int = 0

    def display_name(self, language: str = DEFAULT_LANGUAGE) -> str:
        """Name for ``language``, falling back to the default name and then the id."""
        return (
            self.display_names.get(language)
            or self.display_names.get(DEFAULT_LANGUAGE)
            or self.id
        )


@dataclass(slots=True)
class Question:
    """One flag question with exactly four shuffled options."""

    correct: CountryRecord
    options: list[CountryRecord]
    correct_option_index: int


@dataclass(slots=True)
class AnswerOutcome:
    """Result of grading a submitted option."""

    is_correct: bool
    selected_option_index: int
    correct_option_index: int
    correct_country: CountryRecord


@dataclass(frozen=True, slots=True)
class FinalResults:
    """Summary reported when a session ends."""

    score: int
    total: int
    accuracy: int
    questions_answered: int


@dataclass(slots=True)
class SessionState:
    """Mutable state of one quiz session, owned by the session engine.

    Create idle handles with :meth:`QuizSessionEngine.new_session` and change them
    only through engine operations.
    """

    difficulty: Difficulty | None = None
    pool: tuple[CountryRecord, ...] = ()
    question_index: int = 0
    total_questions: int = 0
    score: int = 0
    used_ids: set[str] = field(default_factory=set)
    current_question: Question | None = None
    active: bool = False
    answered: bool = False
