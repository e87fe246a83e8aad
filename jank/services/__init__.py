"""Concrete service implementations."""

from .file_service import FileService
from .markdown_renderer import MarkdownRenderer, RenderedView
from .scroll_sync import ScrollSynchronizer, sync_scroll
from .settings_service import SettingsService

__all__ = [
    "FileService",
    "MarkdownRenderer",
    "RenderedView",
    "ScrollSynchronizer",
    "sync_scroll",
    "SettingsService",
]
