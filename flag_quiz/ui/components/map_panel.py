"""Component highlighting the answer country on a map."""

from __future__ import annotations

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QVBoxLayout, QWidget

from flag_quiz.constants.ui_constants import MAP_PLACEHOLDER, MAP_ZOOM_DEGREES
from flag_quiz.core.markdown_renderer import renderer


def osm_embed_html(latitude: float, longitude: float, zoom_degrees: float = MAP_ZOOM_DEGREES) -> str:
    """OpenStreetMap iframe centred on a point with a marker."""
    bbox = ",".join(
        f"{value:.4f}"
        for value in (
            longitude - zoom_degrees,
            latitude - zoom_degrees,
            longitude + zoom_degrees,
            latitude + zoom_degrees,
        )
    )
    return (
        '<iframe src="https://www.openstreetmap.org/export/embed.html'
        f'?bbox={bbox}&amp;layer=mapnik&amp;marker={latitude:.4f},{longitude:.4f}"></iframe>'
    )


class MapPanel(QWidget):
    """Web view with a map of the answer country and its description card."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._card_html: str = ""
        self._map_html: str = ""
        self._build_ui()
        self.clear()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(layout)

        self.view = QWebEngineView(self)
        self.view.setMinimumWidth(320)
        layout.addWidget(self.view)

    def show_location(self, latitude: float, longitude: float) -> None:
        self._map_html = osm_embed_html(latitude, longitude)
        self._render()

    def show_card(self, card_markdown: str) -> None:
        self._card_html = renderer.render_fragment(card_markdown)
        self._render()

    def clear(self) -> None:
        self._map_html = ""
        self._card_html = ""
        self._render()

    def _render(self) -> None:
        if not self._map_html and not self._card_html:
            body = renderer.render_fragment(f"*{MAP_PLACEHOLDER}*")
        else:
            body = self._map_html + self._card_html
        self.view.setHtml(renderer.wrap_document(body))
