from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from jank.domain.models import ViewMode

if TYPE_CHECKING:
    from jank.services.file_service import SaveResult
    from jank.services.markdown_renderer import RenderedView


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to a presentation tree, and a tree to a full HTML page."""

    def render(self, markdown_text: str) -> RenderedView: ...
    def to_html(
        self,
        view: RenderedView,
        variables: Mapping[str, str] | None = None,
        *,
        checkbox_glyphs: bool = False,
    ) -> str: ...


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...
    def save(self, path: Path, text: str) -> SaveResult: ...


class IPreferenceStore(Protocol):
    """Persist and retrieve the theme preference."""

    def get_theme_selection(self) -> str | None: ...
    def set_theme_selection(self, value: str) -> None: ...
    def get_custom_palette(self) -> dict[str, str] | None: ...
    def set_custom_palette(self, palette: Mapping[str, str]) -> None: ...


class ISettingsService(IPreferenceStore, Protocol):
    """Preference store plus lightweight window state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_splitter(self) -> bytes | None: ...
    def set_splitter(self, blob: bytes) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...


@runtime_checkable
class IPresentationView(Protocol):
    """Passive view the presentation controller publishes into (implemented by the Qt window)."""

    def show_rendered(self, view: RenderedView) -> None: ...
    def apply_theme(self, variables: Mapping[str, str]) -> None: ...
    def show_view_mode(self, mode: ViewMode) -> None: ...
    def set_preview_scroll(self, top: float) -> None: ...
