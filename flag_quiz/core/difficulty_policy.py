"""Difficulty tiers and construction of the per-session country pool."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Mapping

from flag_quiz.core.errors import InvalidDifficultyError
from flag_quiz.core.models import CountryRecord, Difficulty

logger = logging.getLogger(__name__)

ALL_REGIONS = None
"""Sentinel for a tier without a region restriction."""


@dataclass(frozen=True, slots=True)
class DifficultyTier:
    """Pool size, region scope and question count for one difficulty."""

    pool_size: int
    regions: frozenset[str] | None
    question_count: int
    priority_ids: tuple[str, ...] = ()


DEFAULT_TIERS: Mapping[Difficulty, DifficultyTier] = {
    Difficulty.BEGINNER: DifficultyTier(
        pool_size=25,
        regions=frozenset({"Europe", "Americas"}),
        question_count=10,
        priority_ids=("US", "CA", "DE", "FR", "GB", "JP", "AU", "IT", "ES"),
    ),
    Difficulty.INTERMEDIATE: DifficultyTier(
        pool_size=60,
        regions=frozenset({"Europe", "Asia", "Americas", "Oceania"}),
        question_count=15,
    ),
    Difficulty.ADVANCED: DifficultyTier(
        pool_size=150,
        regions=ALL_REGIONS,
        question_count=20,
    ),
}


class DifficultyPolicy:
    """Lookup table mapping difficulties to tiers.

    ``resolve`` is total: anything it does not recognise gets the beginner tier.
    Strict validation of user input happens in the session engine.
    """

    def __init__(self, tiers: Mapping[Difficulty, DifficultyTier] | None = None) -> None:
        self._tiers = dict(tiers if tiers is not None else DEFAULT_TIERS)
        if Difficulty.BEGINNER not in self._tiers:
            raise ValueError("A beginner tier is required as the fallback tier.")

    def resolve(self, difficulty: Difficulty | str | None) -> DifficultyTier:
        try:
            key = Difficulty.parse(difficulty)
        except InvalidDifficultyError:
            logger.debug("Unknown difficulty %r, using beginner tier", difficulty)
            return self._tiers[Difficulty.BEGINNER]
        return self._tiers.get(key, self._tiers[Difficulty.BEGINNER])

    def build_pool(
        self,
        countries: Iterable[CountryRecord],
        difficulty: Difficulty | str | None,
    ) -> list[CountryRecord]:
        """Filter, order and truncate ``countries`` for ``difficulty``.

        Priority countries come first in their input order; the rest follow by
        descending population. Sorting is stable, so equal populations keep
        their input order.
        """
        tier = self.resolve(difficulty)
        filtered = [
            country
            for country in countries
            if tier.regions is ALL_REGIONS or country.region in tier.regions
        ]

        if tier.priority_ids:
            priority_ids = set(tier.priority_ids)
            priority = [country for country in filtered if country.id in priority_ids]
            others = [country for country in filtered if country.id not in priority_ids]
            others.sort(key=lambda country: country.population or 0, reverse=True)
            ordered = priority + others
        else:
            ordered = sorted(filtered, key=lambda country: country.population or 0, reverse=True)

        pool = ordered[: tier.pool_size]
        logger.debug(
            "Built %d-country pool for %s (%d after region filter)",
            len(pool),
            difficulty,
            len(filtered),
        )
        return pool
