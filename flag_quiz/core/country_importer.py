"""Import country reference data from JSON files.

The file holds a JSON array of objects in the REST Countries v3 layout,
trimmed to the fields the quiz uses:

    {
      "name": {"common": "France", "official": "French Republic"},
      "cca2": "FR",
      "region": "Europe",
      "subregion": "Western Europe",
      "latlng": [46.0, 2.0],
      "flags": {"png": "https://flagcdn.com/w320/fr.png"},
      "population": 67391582,
      "translations": {"japanese": "フランス", "hiragana": "ふらんす"}
    }

``translations`` is optional. Keys are either language modes mapped to a
plain name, as above, or REST Countries translation codes mapped to
``{"common": ..., "official": ...}`` objects (``"jpn"`` becomes the
``japanese`` name). Names stored directly under ``name`` as ``japanese`` or
``hiragana`` take precedence over ``translations``. The common name is
always stored as the ``english`` name.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from flag_quiz.constants.quiz_constants import DEFAULT_LANGUAGE
from flag_quiz.core.models import Coordinates, CountryRecord


class CountryImportError(Exception):
    """Raised when a country data file cannot be parsed."""


_TRANSLATION_CODES = {"jpn": "japanese"}


class _CountryName(BaseModel):
    common: str
    official: str | None = None
    japanese: str | None = None
    hiragana: str | None = None


class _TranslatedName(BaseModel):
    common: str | None = None
    official: str | None = None


class _CountryFlags(BaseModel):
    png: str
    svg: str | None = None


class _CountryEntry(BaseModel):
    name: _CountryName
    cca2: str = Field(min_length=2, max_length=2)
    region: str
    subregion: str = ""
    latlng: list[float] = Field(default_factory=list)
    flags: _CountryFlags
    population: int = 0
    translations: dict[str, str | _TranslatedName] = Field(default_factory=dict)

    @field_validator("cca2")
    @classmethod
    def _normalize_code(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("subregion", mode="before")
    @classmethod
    def _blank_subregion(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("population", mode="before")
    @classmethod
    def _blank_population(cls, value: object) -> object:
        return 0 if value is None else value


@dataclass(slots=True)
class ImportedCountries:
    """Container for imported country records and their source."""

    source_path: Path
    countries: list[CountryRecord]


def load_countries_from_file(file_path: Path) -> ImportedCountries:
    text = file_path.read_text(encoding="utf-8")
    countries = parse_countries_json(text)
    if not countries:
        raise CountryImportError("Country file did not contain any countries.")
    return ImportedCountries(source_path=file_path, countries=countries)


def parse_countries_json(text: str) -> list[CountryRecord]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CountryImportError(f"Country file is not valid JSON: {exc}") from exc
    if not isinstance(raw, list):
        raise CountryImportError("Country file must contain a JSON array.")

    countries: list[CountryRecord] = []
    seen_ids: set[str] = set()
    for position, item in enumerate(raw):
        try:
            entry = _CountryEntry.model_validate(item)
        except ValidationError as exc:
            raise CountryImportError(f"Invalid country entry at position {position}: {exc}") from exc
        record = _to_record(entry)
        if record.id in seen_ids:
            raise CountryImportError(f"Duplicate country code '{record.id}'.")
        seen_ids.add(record.id)
        countries.append(record)
    return countries


def _display_names(entry: _CountryEntry) -> dict[str, str]:
    names: dict[str, str] = {}
    for key, value in entry.translations.items():
        if isinstance(value, _TranslatedName):
            language = _TRANSLATION_CODES.get(key, key)
            text = value.common or value.official or ""
        else:
            language, text = key, value
        if text.strip():
            names[language] = text.strip()

    for language in ("japanese", "hiragana"):
        text = getattr(entry.name, language)
        if text and text.strip():
            names[language] = text.strip()

    names[DEFAULT_LANGUAGE] = entry.name.common.strip()
    return names


def _to_record(entry: _CountryEntry) -> CountryRecord:
    names = _display_names(entry)

    coordinates = None
    if len(entry.latlng) >= 2:
        coordinates = Coordinates(latitude=entry.latlng[0], longitude=entry.latlng[1])

    return CountryRecord(
        id=entry.cca2,
        display_names=names,
        region=entry.region,
        subregion=entry.subregion,
        coordinates=coordinates,
        flag_image_ref=entry.flags.png,
        population=entry.population,
    )
