"""File-backed country reference provider."""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock

from flag_quiz.core.country_importer import CountryImportError, load_countries_from_file
from flag_quiz.core.errors import DataUnavailableError
from flag_quiz.core.models import CountryRecord

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "countries.json"


class FileCountryProvider:
    """Loads country records from a JSON file once and serves them from memory."""

    def __init__(self, data_path: Path | None = None) -> None:
        self._data_path = data_path or DEFAULT_DATA_PATH
        self._countries: list[CountryRecord] | None = None
        self._lock = Lock()

    @property
    def data_path(self) -> Path:
        return self._data_path

    def get_country_pool(self) -> list[CountryRecord]:
        with self._lock:
            if self._countries is None:
                self._countries = self._load()
            return list(self._countries)

    def reload(self) -> None:
        """Drop the cached records so the next request reads the file again."""
        with self._lock:
            self._countries = None

    def _load(self) -> list[CountryRecord]:
        try:
            imported = load_countries_from_file(self._data_path)
        except (OSError, CountryImportError) as exc:
            logger.error("Could not load country data from %s: %s", self._data_path, exc)
            raise DataUnavailableError(f"Country data unavailable: {exc}") from exc
        logger.info("Loaded %d countries from %s", len(imported.countries), imported.source_path)
        return imported.countries
