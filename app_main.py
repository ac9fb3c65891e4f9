"""Application entry point for KanaPractice."""

from __future__ import annotations

import socket
import sys

from PySide6.QtWidgets import QApplication

from kana_practice.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from kana_practice.core.practice_manager import PracticeManager
from kana_practice.server.api_server import start_api_server
from kana_practice.ui.practice_main_window import PracticeMainWindow
from kana_practice.utils.logging_config import configure_logging


def _determine_practice_url(port: int) -> str:
    """Best-effort determination of the local IP for the practice page URL."""
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
    logger.info("Starting KanaPractice…")

    practice_manager = PracticeManager()
    start_api_server(practice_manager=practice_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    practice_url = _determine_practice_url(DEFAULT_PORT)
    logger.info("Practice page available at %s", practice_url)

    app = QApplication(sys.argv)
    window = PracticeMainWindow(practice_manager=practice_manager, practice_url=practice_url)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
