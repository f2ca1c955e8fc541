import logging

import flet as ft

from studyplanner.config.settings import settings
from studyplanner.logging_setup import setup_logging
from studyplanner.ui.app import main

logger = logging.getLogger(__name__)


def run() -> None:
    log_file = setup_logging(log_dir=settings.log_path, console_level=settings.log_level.upper())
    logger.info("Starting StudyPlanner storage=%s log=%s", settings.storage_path, log_file)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
