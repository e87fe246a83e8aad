from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from PyQt6.QtCore import QByteArray, QSettings

from jank.domain.interfaces import ISettingsService
from jank.utils.constants import (
    SETTINGS_CUSTOM_PALETTE,
    SETTINGS_GEOMETRY,
    SETTINGS_SPLITTER,
    SETTINGS_THEME_SELECTION,
)

logger = logging.getLogger(__name__)


class SettingsService(ISettingsService):
    """Persist small UI bits (geometry, splitter) and the theme preference."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_splitter(self) -> bytes | None:
        v = self._s.value(SETTINGS_SPLITTER)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_splitter(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_SPLITTER, QByteArray(blob))

    # ---------- Theme preference ----------

    def get_theme_selection(self) -> str | None:
        v = self._s.value(SETTINGS_THEME_SELECTION)
        return str(v) if isinstance(v, str) and v else None

    def set_theme_selection(self, value: str) -> None:
        self._s.setValue(SETTINGS_THEME_SELECTION, value)
        self._s.sync()

    def get_custom_palette(self) -> dict[str, str] | None:
        raw = self._s.value(SETTINGS_CUSTOM_PALETTE)
        if not isinstance(raw, str):
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored custom palette is not valid JSON")
            return None
        if not isinstance(data, dict):
            return None
        return {str(k): str(v) for k, v in data.items()}

    def set_custom_palette(self, palette: Mapping[str, str]) -> None:
        self._s.setValue(SETTINGS_CUSTOM_PALETTE, json.dumps(dict(palette)))
        self._s.sync()
