"""Session engine: question sequencing, grading and session lifecycle."""

from __future__ import annotations

import logging
import random

from flag_quiz.constants.quiz_constants import (
    DEFAULT_LANGUAGE,
    DISTRACTOR_COUNT,
    MIN_POOL_SIZE,
    SUPPORTED_LANGUAGES,
)
from flag_quiz.core import statistics
from flag_quiz.core.adapters import (
    CountryProvider,
    GeoHighlightAdapter,
    NullGeoHighlighter,
    NullPresenter,
    PresentationAdapter,
)
from flag_quiz.core.difficulty_policy import DifficultyPolicy
from flag_quiz.core.distractors import build_question
from flag_quiz.core.errors import InsufficientCandidatesError, InsufficientPoolError, QuizError
from flag_quiz.core.models import (
    AnswerOutcome,
    CountryRecord,
    Difficulty,
    FinalResults,
    SessionState,
)

logger = logging.getLogger(__name__)


class QuizSessionEngine:
    """Drives flag quiz sessions.

    The engine holds no session data of its own. Every operation receives the
    :class:`SessionState` handle it should act on, mutates it in place and
    returns it (or a result object). Display and map updates are pushed to the
    adapters the engine was constructed with.

    ``submit_answer`` and ``advance`` are no-ops when their timing is wrong
    (inactive session, double submission, advancing before answering);
    invalid input and unusable data raise :class:`QuizError` subclasses before
    the handle is touched.
    """

    def __init__(
        self,
        provider: CountryProvider,
        presenter: PresentationAdapter | None = None,
        geo_highlighter: GeoHighlightAdapter | None = None,
        policy: DifficultyPolicy | None = None,
        language: str = DEFAULT_LANGUAGE,
        rng: random.Random | None = None,
    ) -> None:
        self._provider = provider
        self._presenter = presenter or NullPresenter()
        self._geo = geo_highlighter or NullGeoHighlighter()
        self._policy = policy or DifficultyPolicy()
        self._rng = rng or random.Random()
        self._language = DEFAULT_LANGUAGE
        self.set_language(language)

    # --- Configuration ---

    def set_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def set_language(self, language: str) -> None:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language '{language}'.")
        self._language = language

    def get_language(self) -> str:
        return self._language

    @property
    def policy(self) -> DifficultyPolicy:
        return self._policy

    # --- Lifecycle ---

    def new_session(self) -> SessionState:
        """Return an idle session handle."""
        return SessionState()

    def can_start(self, state: SessionState, difficulty: Difficulty | str | None) -> bool:
        if state.active:
            return False
        try:
            Difficulty.parse(difficulty)
        except QuizError:
            return False
        return True

    def start_session(self, state: SessionState, difficulty: Difficulty | str | None) -> SessionState:
        """Reset ``state`` for a new session and present the first question.

        Raises InvalidDifficultyError, DataUnavailableError or
        InsufficientPoolError without modifying ``state``.
        """
        tier_key = Difficulty.parse(difficulty)
        tier = self._policy.resolve(tier_key)
        countries = self._provider.get_country_pool()
        pool = self._policy.build_pool(countries, tier_key)
        if len(pool) < MIN_POOL_SIZE:
            raise InsufficientPoolError(tier_key.value, len(pool), MIN_POOL_SIZE)

        state.difficulty = tier_key
        state.pool = tuple(pool)
        state.question_index = 0
        state.total_questions = tier.question_count
        state.score = 0
        state.used_ids = set()
        state.current_question = None
        state.answered = False
        state.active = True

        logger.info(
            "Starting %s session: %d questions from %d countries",
            tier_key.value,
            state.total_questions,
            len(state.pool),
        )
        self._presenter.on_session_start(state.total_questions)
        self._presenter.on_score_changed(0, 0)
        self._presenter.on_progress_changed(0)
        self._next_question(state)
        return state

    def submit_answer(self, state: SessionState, selected_index: int) -> AnswerOutcome | None:
        """Grade ``selected_index`` for the current question.

        Returns None without side effects when the session is inactive or the
        question was already answered.
        """
        question = state.current_question
        if not state.active or state.answered or question is None:
            return None
        if not 0 <= selected_index < len(question.options):
            raise ValueError(
                f"Option index must be between 0 and {len(question.options) - 1}."
            )

        state.answered = True
        is_correct = selected_index == question.correct_option_index
        if is_correct:
            state.score += 1

        correct = question.correct
        correct_name = correct.display_name(self._language)
        logger.debug(
            "Answer %d for question %d (%s): %s",
            selected_index,
            state.question_index + 1,
            correct.id,
            "correct" if is_correct else "incorrect",
        )

        self._presenter.on_score_changed(state.score, state.question_index + 1)
        self._presenter.on_progress_changed(statistics.progress_percent(state))
        # The map shows the answer whether or not the player got it right.
        if correct.coordinates is not None:
            self._geo.highlight(correct.id, correct.coordinates)
        self._presenter.on_answer_result(question.correct_option_index, selected_index, correct_name)

        return AnswerOutcome(
            is_correct=is_correct,
            selected_option_index=selected_index,
            correct_option_index=question.correct_option_index,
            correct_country=correct,
        )

    def advance(self, state: SessionState) -> SessionState:
        """Move past an answered question, ending the session after the last one."""
        if not state.active or not state.answered:
            return state

        state.question_index += 1
        state.answered = False
        if state.question_index < state.total_questions:
            self._next_question(state)
        else:
            self.end_session(state)
        return state

    def end_session(self, state: SessionState) -> FinalResults | None:
        """Finish the active session and report the final tally."""
        if not state.active:
            return None

        if state.answered:
            # An answered question still on screen counts as completed.
            state.question_index += 1
        results = statistics.final_results(state)
        state.active = False
        state.answered = False
        state.current_question = None

        logger.info(
            "Session ended: %d/%d correct (%d%%) after %d questions",
            results.score,
            results.total,
            results.accuracy,
            results.questions_answered,
        )
        self._presenter.on_session_end(results)
        return results

    def restart_session(self, state: SessionState, same_difficulty: bool = False) -> SessionState:
        """End any running session and return to idle, or start over at the same tier."""
        previous = state.difficulty
        if state.active:
            self.end_session(state)

        self._reset(state)
        self._geo.clear_highlight()
        self._presenter.on_score_changed(0, 0)
        self._presenter.on_progress_changed(0)

        if same_difficulty and previous is not None:
            logger.info("Restarting with %s difficulty", previous.value)
            return self.start_session(state, previous)
        return state

    # --- Internals ---

    def _next_question(self, state: SessionState) -> None:
        available = [country for country in state.pool if country.id not in state.used_ids]
        if not available:
            logger.warning(
                "All %d countries have been asked; allowing repeats", len(state.pool)
            )
            state.used_ids.clear()
            available = list(state.pool)

        correct = self._rng.choice(available)
        state.used_ids.add(correct.id)

        try:
            question = build_question(
                correct, state.pool, DISTRACTOR_COUNT, state.used_ids, self._rng
            )
        except InsufficientCandidatesError:
            logger.error("Cannot build options for %s; ending session", correct.id)
            state.active = False
            state.answered = False
            state.current_question = None
            raise

        state.current_question = question
        state.answered = False

        logger.debug("Question %d: %s", state.question_index + 1, correct.id)
        self._geo.clear_highlight()
        self._presenter.on_question_ready(
            correct.flag_image_ref, self._option_names(question.options)
        )
        self._presenter.on_progress_changed(statistics.progress_percent(state))

    def _option_names(self, options: list[CountryRecord]) -> list[str]:
        return [option.display_name(self._language) for option in options]

    @staticmethod
    def _reset(state: SessionState) -> None:
        state.difficulty = None
        state.pool = ()
        state.question_index = 0
        state.total_questions = 0
        state.score = 0
        state.used_ids = set()
        state.current_question = None
        state.active = False
        state.answered = False
