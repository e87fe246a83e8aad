from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from jank.di.container import Container
from jank.services.config.app_config import build_editor_config
from jank.utils.constants import APP_NAME, APP_ORG

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Loads config, bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = build_editor_config()
    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()
    logger.info("%s started", APP_NAME)

    return app.exec()
