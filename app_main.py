"""Application entry point for the FlagQuiz desktop game."""

from __future__ import annotations

import socket
import sys

from PySide6.QtWidgets import QApplication

from flag_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from flag_quiz.core.quiz_manager import QuizManager
from flag_quiz.server.api_server import start_api_server
from flag_quiz.ui.main_window import MainWindow
from flag_quiz.utils.logging_config import configure_logging


def _determine_player_url(port: int) -> str:
    """Best-effort determination of the local IP for the browser player URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def main() -> None:
    """Initialize logging, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting FlagQuiz...")

    quiz_manager = QuizManager()
    start_api_server(quiz_manager=quiz_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    player_url = _determine_player_url(DEFAULT_PORT)
    logger.info("Browser player available at %s", player_url)

    app = QApplication(sys.argv)
    window = MainWindow(quiz_manager=quiz_manager, player_url=player_url)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
