from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from jank.domain.interfaces import IFileService, IMarkdownRenderer, ISettingsService
from jank.services.config.app_config import EditorConfig
from jank.services.file_service import FileService
from jank.services.markdown_renderer import MarkdownRenderer
from jank.services.scroll_sync import ScrollSynchronizer
from jank.services.settings_service import SettingsService
from jank.services.theme.theme_engine import ThemeEngine
from jank.services.ui.main_window import MainWindow
from jank.services.ui.presenters.presentation_controller import PresentationController
from jank.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services from EditorConfig if not provided
      - Restores the persisted theme once, at construction
      - Builds the presentation controller and the Qt window around it
    """

    def __init__(
        self,
        config: EditorConfig | None = None,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
    ) -> None:
        self.config = config or EditorConfig()

        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer(
            pygments_style=self.config.pygments_style,
            guess_untagged=self.config.guess_untagged,
        )
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )

        self.theme_engine = ThemeEngine(
            self.settings_service, default_preset=self.config.default_preset
        )
        self.theme_engine.restore()
        self.scroll_sync = ScrollSynchronizer(enabled=self.config.sync_scroll)

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: EditorConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(config=config, qsettings=qsettings)

    # ---------- Factories ----------

    def build_controller(self) -> PresentationController:
        return PresentationController(
            renderer=self.renderer,
            theme=self.theme_engine,
            scroll=self.scroll_sync,
            initial_mode=self.config.view_mode,
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        return MainWindow(
            controller=self.build_controller(),
            file_service=self.file_service,
            settings=self.settings_service,
            start_path=start_path,
            app_title=app_title,
        )
