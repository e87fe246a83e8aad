"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import UnknownPresetError, UnknownViewModeError
from .interfaces import (
    IConfigService,
    IFileService,
    IMarkdownRenderer,
    IPreferenceStore,
    IPresentationView,
    ISettingsService,
)
from .models import CustomSelection, Document, Palette, PresetSelection, ThemeSelection, ViewMode

__all__ = [
    "IMarkdownRenderer",
    "IFileService",
    "IPreferenceStore",
    "ISettingsService",
    "IConfigService",
    "IPresentationView",
    "UnknownPresetError",
    "UnknownViewModeError",
    "Document",
    "ViewMode",
    "Palette",
    "PresetSelection",
    "CustomSelection",
    "ThemeSelection",
]
