"""Score and progress figures derived from a session state."""

from __future__ import annotations

from dataclasses import dataclass

from flag_quiz.core.models import FinalResults, SessionState


@dataclass(frozen=True, slots=True)
class ScoreStatistics:
    """Snapshot of the tally for completed questions."""

    score: int
    total_questions: int
    questions_answered: int
    accuracy: int
    correct_answers: int
    incorrect_answers: int
    remaining_questions: int


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Snapshot of the session for status displays."""

    is_active: bool
    difficulty: str | None
    question_index: int
    total_questions: int
    score: int
    accuracy: int
    progress: int
    is_answered: bool
    remaining_questions: int
    countries_available: int


def _percent(numerator: int, denominator: int) -> int:
    if denominator <= 0:
        return 0
    # Half-up rounding in integer arithmetic; round() would round 12.5 down.
    return (200 * numerator + denominator) // (2 * denominator)


def progress_percent(state: SessionState) -> int:
    return _percent(state.question_index, state.total_questions)


def current_accuracy(state: SessionState) -> int:
    """Live accuracy; the question on screen already counts toward the denominator."""
    return _percent(state.score, state.question_index + 1)


def final_accuracy(state: SessionState) -> int:
    """Accuracy over completed questions only."""
    return _percent(state.score, state.question_index)


def remaining_questions(state: SessionState) -> int:
    return state.total_questions - state.question_index


def final_results(state: SessionState) -> FinalResults:
    return FinalResults(
        score=state.score,
        total=state.total_questions,
        accuracy=final_accuracy(state),
        questions_answered=state.question_index,
    )


def score_statistics(state: SessionState) -> ScoreStatistics:
    answered = state.question_index
    return ScoreStatistics(
        score=state.score,
        total_questions=state.total_questions,
        questions_answered=answered,
        accuracy=final_accuracy(state),
        correct_answers=state.score,
        incorrect_answers=answered - state.score,
        remaining_questions=remaining_questions(state),
    )


def game_status(state: SessionState) -> GameStatus:
    return GameStatus(
        is_active=state.active,
        difficulty=state.difficulty.value if state.difficulty is not None else None,
        question_index=state.question_index,
        total_questions=state.total_questions,
        score=state.score,
        accuracy=current_accuracy(state),
        progress=progress_percent(state),
        is_answered=state.answered,
        remaining_questions=remaining_questions(state),
        countries_available=len(state.pool),
    )


def is_valid(state: SessionState) -> bool:
    """Check the structural invariants of ``state``.

    Meant for assertions and tests, not for control flow.
    """
    completed = state.question_index + (1 if state.active and state.answered else 0)
    if not 0 <= state.score <= completed:
        return False
    if not 0 <= state.question_index <= state.total_questions:
        return False
    pool_ids = {country.id for country in state.pool}
    if not state.used_ids <= pool_ids:
        return False
    if state.current_question is not None:
        if not state.active:
            return False
        question = state.current_question
        option_ids = [option.id for option in question.options]
        if len(set(option_ids)) != len(option_ids):
            return False
        if not 0 <= question.correct_option_index < len(option_ids):
            return False
        if option_ids[question.correct_option_index] != question.correct.id:
            return False
    return True
