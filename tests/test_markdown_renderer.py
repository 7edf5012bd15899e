from conftest import make_country
from flag_quiz.core.markdown_renderer import (
    MarkdownRenderer,
    country_card_markdown,
    results_markdown,
)
from flag_quiz.core.models import Coordinates, FinalResults


def test_render_fragment_handles_empty_input():
    assert "No content provided" in MarkdownRenderer().render_fragment("   ")


def test_render_full_document_wraps_fragment():
    html = MarkdownRenderer().render_full_document("**bold**", title="Card")
    assert "<title>Card</title>" in html
    assert "<strong>bold</strong>" in html


def test_country_card_lists_location_and_population():
    country = make_country(
        "BR", region="Americas", name="Brazil", population=212_559_409, coordinates=Coordinates(-10.0, -55.0)
    )
    card = country_card_markdown(country)

    assert card.startswith("### Brazil")
    assert "Region: Americas" in card
    assert "10.0°S, 55.0°W" in card
    assert "212,559,409" in card


def test_country_card_shows_english_name_under_translation():
    country = make_country("JP", name="Japan", japanese="日本")
    card = country_card_markdown(country, "japanese")
    assert card.startswith("### 日本")
    assert "*Japan*" in card


def test_results_table_renders():
    results = FinalResults(score=7, total=10, accuracy=70, questions_answered=10)
    html = MarkdownRenderer().render_fragment(results_markdown(results))
    assert "<table>" in html
    assert "7 / 10" in html
    assert "70%" in html
