"""Terminal front end for playing or scripting a flag quiz session."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Callable, Iterator, Sequence

from flag_quiz.constants.quiz_constants import DEFAULT_LANGUAGE, OPTION_COUNT, SUPPORTED_LANGUAGES
from flag_quiz.core.country_provider import FileCountryProvider
from flag_quiz.core.errors import QuizError
from flag_quiz.core.models import Coordinates, Difficulty, FinalResults
from flag_quiz.core.services.quiz_session import QuizSessionEngine
from flag_quiz.utils.logging_config import configure_logging


class ConsolePresenter:
    """Prints engine notifications to a text stream."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write
        self._total = 0
        self._question_number = 0

    def on_session_start(self, total_questions: int) -> None:
        self._total = total_questions
        self._question_number = 0
        self._write(f"New session: {total_questions} questions.")

    def on_question_ready(self, flag_ref: str, option_names: Sequence[str]) -> None:
        self._question_number += 1
        self._write("")
        self._write(f"Q{self._question_number}/{self._total}: which country uses this flag?")
        self._write(f"  {flag_ref}")
        for idx, name in enumerate(option_names):
            self._write(f"  {idx + 1}. {name}")

    def on_answer_result(
        self, correct_index: int, selected_index: int, correct_display_name: str
    ) -> None:
        if correct_index == selected_index:
            self._write(f"Correct! It is {correct_display_name}.")
        else:
            self._write(f"Incorrect. Answer: {correct_index + 1}. {correct_display_name}")

    def on_score_changed(self, score: int, questions_answered: int) -> None:
        if questions_answered:
            self._write(f"Score: {score}/{questions_answered}")

    def on_progress_changed(self, percent: int) -> None:
        pass

    def on_session_end(self, results: FinalResults) -> None:
        self._write("")
        self._write(
            f"Final score: {results.score}/{results.total} "
            f"({results.accuracy}% of {results.questions_answered} answered)"
        )


class ConsoleMap:
    """Reports highlighted countries as coordinates."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write

    def highlight(self, country_id: str, coordinates: Coordinates) -> None:
        self._write(f"  Map: {country_id} at {coordinates.latitude:.2f}, {coordinates.longitude:.2f}")

    def clear_highlight(self) -> None:
        pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a flag quiz in the terminal.")
    parser.add_argument(
        "--difficulty",
        default=Difficulty.BEGINNER.value,
        help="beginner, intermediate or advanced (easy/medium/hard also work)",
    )
    parser.add_argument("--countries", type=Path, default=None, help="country data JSON file")
    parser.add_argument("--language", choices=SUPPORTED_LANGUAGES, default=DEFAULT_LANGUAGE)
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible sessions")
    parser.add_argument(
        "--answers",
        default=None,
        help="comma-separated option numbers (1-4) to play without prompting",
    )
    parser.add_argument("--verbose", action="store_true", help="log engine activity")
    return parser


def _scripted_answers(raw: str) -> Iterator[str]:
    for item in raw.split(","):
        yield item.strip()


def _read_choice(prompt: Callable[[], str], write: Callable[[str], None]) -> int | None:
    """Ask until a valid option number is given; None when input runs out."""
    while True:
        try:
            raw = prompt()
        except (EOFError, StopIteration):
            return None
        try:
            choice = int(raw)
        except ValueError:
            write(f"Please enter a number between 1 and {OPTION_COUNT}.")
            continue
        if 1 <= choice <= OPTION_COUNT:
            return choice - 1
        write(f"Please enter a number between 1 and {OPTION_COUNT}.")


def main(
    argv: Sequence[str] | None = None,
    input_func: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging(logging.DEBUG)

    engine = QuizSessionEngine(
        provider=FileCountryProvider(args.countries),
        presenter=ConsolePresenter(write),
        geo_highlighter=ConsoleMap(write),
        language=args.language,
    )
    engine.set_seed(args.seed)

    if args.answers is not None:
        scripted = _scripted_answers(args.answers)
        prompt = lambda: next(scripted)  # noqa: E731
    else:
        prompt = lambda: input_func(f"Your answer (1-{OPTION_COUNT}): ")  # noqa: E731

    state = engine.new_session()
    try:
        engine.start_session(state, args.difficulty)
    except QuizError as exc:
        write(f"Could not start the quiz: {exc}")
        return 2

    while state.active:
        choice = _read_choice(prompt, write)
        if choice is None:
            engine.end_session(state)
            break
        engine.submit_answer(state, choice)
        engine.advance(state)
    return 0


if __name__ == "__main__":
    sys.exit(main())
