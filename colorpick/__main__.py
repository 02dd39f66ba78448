#!/usr/bin/env python3
"""Module: colorpick.__main__

Author: Michael Economou
Date: 2026-10-18

Entry point: python -m colorpick

Opens the change color dialog over the in-memory repository, with the
selection persisted in the user data directory.
"""

import sys

from PyQt5.QtWidgets import QApplication, QDialog

from colorpick.app.services.resources import StringResources
from colorpick.app.state import SavedStateStore
from colorpick.config import APP_NAME, APP_VERSION
from colorpick.infra import InMemoryColorsRepository
from colorpick.ui.dialogs import ChangeColorDialog
from colorpick.utils.logging.init_logging import init_logging
from colorpick.utils.logging.logger_factory import get_cached_logger
from colorpick.utils.paths import AppPaths
from colorpick.utils.threading import AsyncLoopThread

logger = get_cached_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    init_logging(APP_NAME, AppPaths.get_logs_dir())
    logger.info("[main] Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName(APP_NAME)

    loop_thread = AsyncLoopThread()
    loop_thread.start()
    try:
        repository = InMemoryColorsRepository()
        current_color = loop_thread.run_sync(repository.get_current_color)

        dialog = ChangeColorDialog(
            loop_thread,
            repository,
            SavedStateStore(AppPaths.get_state_path()),
            StringResources(),
            current_color.id,
        )
        if dialog.exec_() == QDialog.Accepted and dialog.selected_color is not None:
            logger.info("[main] Color changed to %s", dialog.selected_color.name)
        else:
            logger.info("[main] Color change cancelled")
    finally:
        loop_thread.stop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
