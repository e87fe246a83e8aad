from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass
class Document:
    text: str = ""
    dirty: bool = False
    identifier: Path | None = None


class ViewMode(str, Enum):
    """Which combination of editor/preview panes is visible."""

    SIDE_BY_SIDE = "side-by-side"
    EDITOR_ONLY = "editor-only"
    PREVIEW_ONLY = "preview-only"

    @property
    def shows_preview(self) -> bool:
        return self is not ViewMode.EDITOR_ONLY

    @property
    def shows_editor(self) -> bool:
        return self is not ViewMode.PREVIEW_ONLY


@dataclass(frozen=True)
class Palette:
    """The four user-chosen base colors; everything else is derived from these."""

    background: str
    text: str
    accent: str
    editor_background: str

    def to_dict(self) -> dict[str, str]:
        return {
            "background": self.background,
            "text": self.text,
            "accent": self.accent,
            "editor_background": self.editor_background,
        }

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> Palette:
        """Raises KeyError if one of the four base colors is missing."""
        return cls(
            background=str(data["background"]),
            text=str(data["text"]),
            accent=str(data["accent"]),
            editor_background=str(data["editor_background"]),
        )


@dataclass(frozen=True)
class PresetSelection:
    name: str


@dataclass(frozen=True)
class CustomSelection:
    palette: Palette


ThemeSelection = PresetSelection | CustomSelection
