"""Presenter that keeps the latest display payloads for polling clients."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Sequence

from flag_quiz.core.models import Coordinates, FinalResults


@dataclass(slots=True)
class AnswerDisplay:
    correct_index: int
    selected_index: int
    correct_display_name: str

    @property
    def is_correct(self) -> bool:
        return self.correct_index == self.selected_index


@dataclass(slots=True)
class HighlightDisplay:
    country_id: str
    latitude: float
    longitude: float


@dataclass(slots=True)
class SessionSnapshot:
    """Records what a display would currently show.

    Implements both the presentation and the geo-highlight interfaces so a
    browser client polling the API sees the same updates the Qt window gets.
    """

    total_questions: int = 0
    flag_ref: str | None = None
    option_names: list[str] = field(default_factory=list)
    answer: AnswerDisplay | None = None
    score: int = 0
    questions_answered: int = 0
    progress: int = 0
    results: FinalResults | None = None
    highlighted: HighlightDisplay | None = None

    def on_session_start(self, total_questions: int) -> None:
        self.total_questions = total_questions
        self.flag_ref = None
        self.option_names = []
        self.answer = None
        self.results = None

    def on_question_ready(self, flag_ref: str, option_names: Sequence[str]) -> None:
        self.flag_ref = flag_ref
        self.option_names = list(option_names)
        self.answer = None

    def on_answer_result(
        self, correct_index: int, selected_index: int, correct_display_name: str
    ) -> None:
        self.answer = AnswerDisplay(correct_index, selected_index, correct_display_name)

    def on_score_changed(self, score: int, questions_answered: int) -> None:
        self.score = score
        self.questions_answered = questions_answered

    def on_progress_changed(self, percent: int) -> None:
        self.progress = percent

    def on_session_end(self, results: FinalResults) -> None:
        self.results = results
        self.flag_ref = None
        self.option_names = []

    def highlight(self, country_id: str, coordinates: Coordinates) -> None:
        self.highlighted = HighlightDisplay(country_id, coordinates.latitude, coordinates.longitude)

    def clear_highlight(self) -> None:
        self.highlighted = None

    def reset(self) -> None:
        """Return to the blank state shown before any session."""
        self.on_session_start(0)
        self.score = 0
        self.questions_answered = 0
        self.progress = 0
        self.highlighted = None

    def to_dict(self) -> dict[str, object]:
        payload = asdict(self)
        if self.answer is not None:
            payload["answer"]["is_correct"] = self.answer.is_correct
        return payload
