"""Wrong-answer selection and option shuffling."""

from __future__ import annotations

import logging
import random
from typing import Collection, Sequence, TypeVar

from flag_quiz.core.errors import InsufficientCandidatesError
from flag_quiz.core.models import CountryRecord, Question

logger = logging.getLogger(__name__)

T = TypeVar("T")


def shuffle_options(items: Sequence[T], rng: random.Random) -> list[T]:
    """Return a shuffled copy of ``items``.

    ``random.Random.shuffle`` is a Fisher-Yates shuffle, so a seeded ``rng``
    always yields the same permutation for the same input.
    """
    shuffled = list(items)
    rng.shuffle(shuffled)
    return shuffled


def generate_distractors(
    correct: CountryRecord,
    pool: Sequence[CountryRecord],
    count: int,
    used_ids: Collection[str],
    rng: random.Random,
) -> list[CountryRecord]:
    """Pick ``count`` wrong answers for ``correct`` from ``pool``.

    Countries already asked this session are avoided while enough others
    remain. Once they run short the used-id exclusion is dropped; ``correct``
    itself is never returned.
    """
    candidates = [
        country for country in pool if country.id != correct.id and country.id not in used_ids
    ]
    if len(candidates) < count:
        logger.info(
            "Only %d unused distractors for %s; allowing previously asked countries",
            len(candidates),
            correct.id,
        )
        candidates = [country for country in pool if country.id != correct.id]

    if len(candidates) < count:
        raise InsufficientCandidatesError(correct.id, len(candidates), count)

    return shuffle_options(candidates, rng)[:count]


def build_question(
    correct: CountryRecord,
    pool: Sequence[CountryRecord],
    distractor_count: int,
    used_ids: Collection[str],
    rng: random.Random,
) -> Question:
    """Assemble a question with shuffled options and a matching correct index."""
    distractors = generate_distractors(correct, pool, distractor_count, used_ids, rng)
    options = shuffle_options([correct, *distractors], rng)
    correct_index = next(idx for idx, option in enumerate(options) if option.id == correct.id)
    return Question(correct=correct, options=options, correct_option_index=correct_index)
