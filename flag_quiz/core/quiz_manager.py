"""Business logic facade shared between the Qt window and the web API."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock

from flag_quiz.constants.quiz_constants import DEFAULT_LANGUAGE
from flag_quiz.core import statistics
from flag_quiz.core.adapters import (
    CompositeGeoHighlighter,
    CompositePresenter,
    CountryProvider,
    GeoHighlightAdapter,
    PresentationAdapter,
)
from flag_quiz.core.country_provider import FileCountryProvider
from flag_quiz.core.difficulty_policy import DifficultyPolicy
from flag_quiz.core.models import AnswerOutcome, Difficulty, FinalResults, Question
from flag_quiz.core.services.quiz_session import QuizSessionEngine
from flag_quiz.core.services.session_snapshot import SessionSnapshot
from flag_quiz.core.statistics import GameStatus, ScoreStatistics


@dataclass(frozen=True, slots=True)
class SessionView:
    """Consistent read of everything a polling client displays."""

    status: GameStatus
    display: dict[str, object]
    question: Question | None
    language: str


class QuizManager:
    """Facade over the session engine and the one session it runs.

    The Qt GUI thread and the API server thread both drive the game, so every
    call goes through a single lock; each engine operation runs to completion
    before the next one starts.
    """

    def __init__(
        self,
        provider: CountryProvider | None = None,
        policy: DifficultyPolicy | None = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self._lock = Lock()

        self._snapshot = SessionSnapshot()
        self._presenters = CompositePresenter(self._snapshot)
        self._highlighters = CompositeGeoHighlighter(self._snapshot)

        self._engine = QuizSessionEngine(
            provider=provider or FileCountryProvider(),
            presenter=self._presenters,
            geo_highlighter=self._highlighters,
            policy=policy,
            language=language,
        )
        self._state = self._engine.new_session()

    # --- Listeners ---

    def add_presenter(self, presenter: PresentationAdapter) -> None:
        with self._lock:
            self._presenters.add(presenter)

    def add_geo_highlighter(self, highlighter: GeoHighlightAdapter) -> None:
        with self._lock:
            self._highlighters.add(highlighter)

    # --- Session lifecycle ---

    def can_start(self, difficulty: Difficulty | str | None) -> bool:
        with self._lock:
            return self._engine.can_start(self._state, difficulty)

    def start_session(self, difficulty: Difficulty | str | None) -> GameStatus:
        with self._lock:
            self._engine.start_session(self._state, difficulty)
            return statistics.game_status(self._state)

    def submit_answer(self, selected_index: int) -> AnswerOutcome | None:
        with self._lock:
            return self._engine.submit_answer(self._state, selected_index)

    def advance(self) -> GameStatus:
        with self._lock:
            self._engine.advance(self._state)
            return statistics.game_status(self._state)

    def end_session(self) -> FinalResults | None:
        with self._lock:
            return self._engine.end_session(self._state)

    def restart_session(self, same_difficulty: bool = False) -> GameStatus:
        with self._lock:
            try:
                self._engine.restart_session(self._state, same_difficulty=same_difficulty)
            finally:
                if not self._state.active:
                    self._snapshot.reset()
            return statistics.game_status(self._state)

    # --- Queries ---

    def is_active(self) -> bool:
        with self._lock:
            return self._state.active

    def get_current_question(self) -> Question | None:
        with self._lock:
            return self._state.current_question

    def is_answered(self) -> bool:
        with self._lock:
            return self._state.answered

    def get_game_status(self) -> GameStatus:
        with self._lock:
            return statistics.game_status(self._state)

    def get_score_statistics(self) -> ScoreStatistics:
        with self._lock:
            return statistics.score_statistics(self._state)

    def is_state_valid(self) -> bool:
        with self._lock:
            return statistics.is_valid(self._state)

    def get_snapshot(self) -> dict[str, object]:
        with self._lock:
            return self._snapshot.to_dict()

    def get_view(self) -> SessionView:
        """Status, display payload and current question read under one lock."""
        with self._lock:
            return SessionView(
                status=statistics.game_status(self._state),
                display=self._snapshot.to_dict(),
                question=self._state.current_question,
                language=self._engine.get_language(),
            )

    # --- Settings ---

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._engine.set_seed(seed)

    def set_language(self, language: str) -> None:
        with self._lock:
            self._engine.set_language(language)

    def get_language(self) -> str:
        with self._lock:
            return self._engine.get_language()
