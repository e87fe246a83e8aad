from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from jank.domain.interfaces import IConfigService
from jank.domain.models import ViewMode
from jank.services.config.ini_config_service import IniConfigService
from jank.services.theme.presets import DEFAULT_PRESET, PRESETS

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode walks upward from this file
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)
    # jank/services/config/app_config.py -> repository root
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class EditorConfig:
    """Typed view of the settings the editor reads at startup. Bad values fall back to defaults."""

    default_preset: str = DEFAULT_PRESET
    sync_scroll: bool = True
    view_mode: ViewMode = ViewMode.SIDE_BY_SIDE
    pygments_style: str = "default"
    guess_untagged: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_config(cls, cfg: IConfigService) -> EditorConfig:
        preset = (cfg.get("theme", "default_preset", DEFAULT_PRESET) or "").strip()
        if preset not in PRESETS:
            preset = DEFAULT_PRESET

        try:
            mode = ViewMode((cfg.get("editor", "view_mode", "") or "").strip())
        except ValueError:
            mode = ViewMode.SIDE_BY_SIDE

        level = (cfg.get("logging", "level", "WARNING") or "").strip().upper()
        if level not in _LOG_LEVELS:
            level = "WARNING"

        return cls(
            default_preset=preset,
            sync_scroll=bool(cfg.get_bool("editor", "sync_scroll", True)),
            view_mode=mode,
            pygments_style=(cfg.get("render", "pygments_style", "default") or "default").strip(),
            guess_untagged=bool(cfg.get_bool("render", "guess_untagged", True)),
            log_level=level,
        )

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


def build_editor_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> EditorConfig:
    root = project_root or _project_root_fallback()
    return EditorConfig.from_config(IniConfigService(explicit_path=explicit_ini, project_root=root))
