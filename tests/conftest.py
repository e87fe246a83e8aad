from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

# Headless Qt for CI; must be set before QApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from jank.services.file_service import FileService
from jank.services.markdown_renderer import MarkdownRenderer
from jank.services.settings_service import SettingsService
from jank.services.theme.theme_engine import ThemeEngine


class MemoryPreferenceStore:
    """In-memory IPreferenceStore that records every write."""

    def __init__(self, selection: str | None = None, palette: dict[str, str] | None = None):
        self.selection = selection
        self.palette = palette
        self.writes: list[tuple[str, object]] = []

    def get_theme_selection(self) -> str | None:
        return self.selection

    def set_theme_selection(self, value: str) -> None:
        self.selection = value
        self.writes.append(("selection", value))

    def get_custom_palette(self) -> dict[str, str] | None:
        return self.palette

    def set_custom_palette(self, palette: Mapping[str, str]) -> None:
        self.palette = dict(palette)
        self.writes.append(("palette", dict(palette)))


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture()
def memory_store() -> MemoryPreferenceStore:
    return MemoryPreferenceStore()


@pytest.fixture()
def theme_engine(memory_store: MemoryPreferenceStore) -> ThemeEngine:
    return ThemeEngine(memory_store)


@pytest.fixture()
def make_store():
    """Factory for pre-populated in-memory preference stores."""
    return MemoryPreferenceStore
