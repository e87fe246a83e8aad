from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from jank.domain.interfaces import IFileService

OPEN_FILTER = "Markdown Files (*.md *.markdown *.mdown *.mkd);;Text Files (*.txt);;All Files (*)"
SAVE_FILTER = "Markdown Files (*.md);;Text Files (*.txt);;All Files (*)"


@dataclass(frozen=True)
class SaveResult:
    success: bool
    error: str | None = None


class FileService(IFileService):
    """UTF-8 text files: BOM-tolerant reads, atomic writes via QSaveFile."""

    def read_text(self, path: Path) -> str:
        # utf-8-sig drops a BOM; universal newlines turn CRLF into LF.
        with path.open("r", encoding="utf-8-sig") as fh:
            return fh.read()

    def write_text_atomic(self, path: Path, text: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")

    def save(self, path: Path, text: str) -> SaveResult:
        """Write and report the outcome instead of raising."""
        try:
            self.write_text_atomic(path, text)
        except OSError as e:
            return SaveResult(success=False, error=str(e))
        return SaveResult(success=True)
