"""Markdown rendering helpers shared by Qt and web clients.

Feedback cards and result summaries are written as markdown once and rendered
to HTML here, so the Qt map panel and the browser page show identical text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt

from flag_quiz.constants.quiz_constants import DEFAULT_LANGUAGE
from flag_quiz.core.models import CountryRecord, FinalResults


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable("table")

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_document(self, body_html: str, title: str = "FlagQuiz") -> str:
        """Wrap a fragment inside a minimal standalone HTML document."""

        return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{title}</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 0.75rem; }}
      iframe {{ width: 100%; height: 320px; border: 0; border-radius: 6px; }}
      table {{ border-collapse: collapse; }}
      td, th {{ padding: 0.2rem 0.6rem; text-align: left; }}
    </style>
  </head>
  <body>
    {body_html}
  </body>
</html>"""

    def render_full_document(self, markdown_text: str, title: str = "FlagQuiz") -> str:
        return self.wrap_document(self.render_fragment(markdown_text), title=title)


def country_card_markdown(country: CountryRecord, language: str = DEFAULT_LANGUAGE) -> str:
    """Markdown description of ``country`` for the map panel."""
    lines = [f"### {country.display_name(language)}"]
    english = country.display_name(DEFAULT_LANGUAGE)
    if language != DEFAULT_LANGUAGE and english != country.display_name(language):
        lines.append(f"*{english}*")
    region = " / ".join(part for part in (country.region, country.subregion) if part)
    if region:
        lines.append(f"Region: {region}")
    if country.coordinates is not None:
        lines.append(
            f"Location: {_format_latitude(country.coordinates.latitude)}, "
            f"{_format_longitude(country.coordinates.longitude)}"
        )
    if country.population:
        lines.append(f"Population: {country.population:,}")
    return "\n\n".join(lines)


def results_markdown(results: FinalResults) -> str:
    """Markdown table summarising a finished session."""
    incorrect = results.questions_answered - results.score
    return "\n".join(
        [
            "## Results",
            "",
            "| Result | Value |",
            "|---|---|",
            f"| Score | {results.score} / {results.total} |",
            f"| Questions answered | {results.questions_answered} |",
            f"| Correct | {results.score} |",
            f"| Incorrect | {incorrect} |",
            f"| Accuracy | {results.accuracy}% |",
        ]
    )


def _format_latitude(value: float) -> str:
    hemisphere = "N" if value >= 0 else "S"
    return f"{abs(value):.1f}°{hemisphere}"


def _format_longitude(value: float) -> str:
    hemisphere = "E" if value >= 0 else "W"
    return f"{abs(value):.1f}°{hemisphere}"


renderer = MarkdownRenderer()
