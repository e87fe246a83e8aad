from __future__ import annotations

from collections.abc import Mapping

_QSS = """
QMainWindow, QMenuBar, QMenu, QToolBar {{ background: {toolbar_bg}; color: {text_primary}; }}
QMenuBar::item:selected, QMenu::item:selected {{ background: {accent_primary}; color: {accent_text}; }}
QToolButton:hover {{ background: {bg_tertiary}; }}
QToolButton:checked {{ background: {accent_primary}; color: {accent_text}; }}
QTextEdit {{ background: {editor_bg}; color: {text_primary}; selection-background-color: {accent_primary}; selection-color: {accent_text}; }}
QTextBrowser {{ background: {preview_bg}; color: {text_primary}; }}
QSplitter::handle {{ background: {bg_tertiary}; }}
QStatusBar {{ background: {status_bg}; color: {status_text}; }}
"""


def build_stylesheet(variables: Mapping[str, str]) -> str:
    """Qt stylesheet for the window chrome, filled from the theme variables."""
    return _QSS.format(**{k.lstrip("-").replace("-", "_"): v for k, v in variables.items()})
