from __future__ import annotations

import json

import pytest

from flag_quiz.core.country_importer import (
    CountryImportError,
    load_countries_from_file,
    parse_countries_json,
)
from flag_quiz.core.country_provider import DEFAULT_DATA_PATH, FileCountryProvider
from flag_quiz.core.difficulty_policy import DifficultyPolicy
from flag_quiz.core.errors import DataUnavailableError
from flag_quiz.core.models import Coordinates, Difficulty


def _entry(code="FR", name="France", region="Europe", **extra):
    entry = {
        "name": {"common": name, "official": f"Republic of {name}"},
        "cca2": code,
        "region": region,
        "subregion": "Western Europe",
        "latlng": [46.0, 2.0],
        "flags": {"png": f"https://flagcdn.com/w320/{code.lower()}.png"},
        "population": 67_000_000,
    }
    entry.update(extra)
    return entry


def test_parse_builds_country_records():
    text = json.dumps([_entry(translations={"japanese": "フランス", "hiragana": "ふらんす"})])

    (country,) = parse_countries_json(text)

    assert country.id == "FR"
    assert country.display_name() == "France"
    assert country.display_name("japanese") == "フランス"
    assert country.display_name("hiragana") == "ふらんす"
    assert country.region == "Europe"
    assert country.subregion == "Western Europe"
    assert country.coordinates == Coordinates(46.0, 2.0)
    assert country.flag_image_ref == "https://flagcdn.com/w320/fr.png"
    assert country.population == 67_000_000


def test_parse_reads_rest_countries_translation_objects():
    text = json.dumps(
        [
            _entry(
                translations={
                    "jpn": {"official": "フランス共和国", "common": "フランス"},
                    "deu": {"official": "Französische Republik", "common": "Frankreich"},
                }
            )
        ]
    )

    (country,) = parse_countries_json(text)

    assert country.display_name("japanese") == "フランス"
    assert country.display_name("hiragana") == "France"
    assert country.display_name() == "France"


def test_parse_reads_names_stored_under_name():
    entry = _entry()
    entry["name"].update({"japanese": "フランス", "hiragana": "ふらんす"})

    (country,) = parse_countries_json(json.dumps([entry]))

    assert country.display_name("japanese") == "フランス"
    assert country.display_name("hiragana") == "ふらんす"


def test_names_under_name_take_precedence_over_translations():
    entry = _entry(translations={"jpn": {"common": "フランス共和国"}})
    entry["name"]["japanese"] = "フランス"

    (country,) = parse_countries_json(json.dumps([entry]))

    assert country.display_name("japanese") == "フランス"


def test_parse_normalises_optional_fields():
    text = json.dumps([_entry(code="aq", subregion=None, population=None, latlng=[])])

    (country,) = parse_countries_json(text)

    assert country.id == "AQ"
    assert country.subregion == ""
    assert country.population == 0
    assert country.coordinates is None


@pytest.mark.parametrize(
    "text, message",
    [
        ("not json", "not valid JSON"),
        ('{"cca2": "FR"}', "JSON array"),
        (json.dumps([{"cca2": "FR"}]), "position 0"),
        (json.dumps([_entry(), _entry(name="Other")]), "Duplicate"),
    ],
)
def test_parse_rejects_bad_input(text, message):
    with pytest.raises(CountryImportError, match=message):
        parse_countries_json(text)


def test_load_rejects_empty_file(tmp_path):
    path = tmp_path / "countries.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(CountryImportError):
        load_countries_from_file(path)


def test_provider_caches_until_reload(tmp_path):
    path = tmp_path / "countries.json"
    path.write_text(json.dumps([_entry()]), encoding="utf-8")
    provider = FileCountryProvider(path)

    assert [c.id for c in provider.get_country_pool()] == ["FR"]

    path.write_text(json.dumps([_entry(), _entry(code="DE", name="Germany")]), encoding="utf-8")
    assert len(provider.get_country_pool()) == 1

    provider.reload()
    assert len(provider.get_country_pool()) == 2


def test_provider_returns_copies(tmp_path):
    path = tmp_path / "countries.json"
    path.write_text(json.dumps([_entry()]), encoding="utf-8")
    provider = FileCountryProvider(path)

    provider.get_country_pool().clear()

    assert len(provider.get_country_pool()) == 1


def test_provider_reports_missing_file(tmp_path):
    provider = FileCountryProvider(tmp_path / "missing.json")
    with pytest.raises(DataUnavailableError):
        provider.get_country_pool()


def test_provider_reports_invalid_file(tmp_path):
    path = tmp_path / "countries.json"
    path.write_text("{broken", encoding="utf-8")
    with pytest.raises(DataUnavailableError):
        FileCountryProvider(path).get_country_pool()


def test_bundled_data_supports_every_tier():
    provider = FileCountryProvider()
    countries = provider.get_country_pool()
    policy = DifficultyPolicy()

    assert provider.data_path == DEFAULT_DATA_PATH
    for difficulty in Difficulty:
        assert len(policy.build_pool(countries, difficulty)) >= 4

    beginner = policy.build_pool(countries, Difficulty.BEGINNER)
    assert len(beginner) == 25
    assert [c.id for c in beginner[:7]] == ["US", "CA", "DE", "FR", "GB", "IT", "ES"]
    assert {c.region for c in beginner} <= {"Europe", "Americas"}
