"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_PREVIEW,
    CUSTOM_THEME,
    HTML_TEMPLATE,
    SETTINGS_CUSTOM_PALETTE,
    SETTINGS_GEOMETRY,
    SETTINGS_SPLITTER,
    SETTINGS_THEME_SELECTION,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CSS_PREVIEW",
    "CUSTOM_THEME",
    "HTML_TEMPLATE",
    "SETTINGS_GEOMETRY",
    "SETTINGS_SPLITTER",
    "SETTINGS_THEME_SELECTION",
    "SETTINGS_CUSTOM_PALETTE",
]
