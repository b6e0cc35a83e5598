"""Application entry point for the quiz runner."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quiz_runner.constants.about import APP_NAME, APP_VERSION
from quiz_runner.core.services.quiz_session import QuizSession
from quiz_runner.ui.quiz_window import QuizWindow
from quiz_runner.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, build the quiz session, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    session = QuizSession()

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    window = QuizWindow(session=session)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
