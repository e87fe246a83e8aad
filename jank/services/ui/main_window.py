from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from PyQt6.QtCore import QByteArray, Qt
from PyQt6.QtGui import QAction, QActionGroup, QColor, QKeySequence
from PyQt6.QtWidgets import (
    QColorDialog,
    QFileDialog,
    QMainWindow,
    QMessageBox,
    QSplitter,
    QStatusBar,
    QTextBrowser,
    QTextEdit,
    QToolBar,
)

from jank.domain.interfaces import IFileService, ISettingsService
from jank.domain.models import Palette, PresetSelection, ViewMode
from jank.services.file_service import OPEN_FILTER, SAVE_FILTER
from jank.services.markdown_renderer import MarkdownRenderer, RenderedView
from jank.services.theme.color_math import rgb_to_hex
from jank.services.ui.presenters.presentation_controller import PresentationController
from jank.services.ui.stylesheet import build_stylesheet

_VIEW_MODE_LABELS = {
    ViewMode.SIDE_BY_SIDE: ("Side by Side", "Ctrl+1"),
    ViewMode.EDITOR_ONLY: ("Editor Only", "Ctrl+2"),
    ViewMode.PREVIEW_ONLY: ("Preview Only", "Ctrl+3"),
}

_PALETTE_FIELDS = (
    ("background", "Background"),
    ("text", "Text"),
    ("accent", "Accent"),
    ("editor_background", "Editor Background"),
)


class MainWindow(QMainWindow):
    """Thin PyQt window: forwards events to the PresentationController and paints what it publishes."""

    def __init__(
        self,
        controller: PresentationController,
        file_service: IFileService,
        settings: ISettingsService,
        *,
        start_path: Path | None = None,
        app_title: str = "JANK",
    ) -> None:
        super().__init__()
        self.app_title = app_title
        self.resize(1200, 800)
        self.setMinimumSize(800, 600)

        self.controller = controller
        self.renderer: MarkdownRenderer = controller.renderer  # type: ignore[assignment]
        self.file_service = file_service
        self.settings = settings

        self._last_view: RenderedView | None = None
        self._variables: dict[str, str] = controller.current_variables()
        self._loading = False

        # Widgets
        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))
        self.preview = QTextBrowser(self)
        self.preview.setOpenExternalLinks(True)

        self.splitter = QSplitter(self)
        self.splitter.setOrientation(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.preview)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)
        self.setCentralWidget(self.splitter)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)
        self.editor.verticalScrollBar().valueChanged.connect(self._on_editor_scrolled)

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        # Restore UI state
        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))
        split = self.settings.get_splitter()
        if isinstance(split, (bytes, bytearray)):
            self.splitter.restoreState(QByteArray(split))

        self.controller.attach_view(self)
        self.apply_theme(self._variables)
        self.show_view_mode(self.controller.current_view_mode())

        if start_path:
            self._open_path(start_path)
        else:
            self.controller.render_now()
        self._update_title()

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_new = QAction(
            "New", self, shortcut=QKeySequence.StandardKey.New, triggered=self._new_file
        )
        self.act_open = QAction(
            "Open…", self, shortcut=QKeySequence.StandardKey.Open, triggered=self._open_dialog
        )
        self.act_save = QAction(
            "Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.act_save_as = QAction(
            "Save As…", self, shortcut=QKeySequence.StandardKey.SaveAs, triggered=self._save_as
        )
        self.act_exit = QAction("E&xit", self, shortcut="Ctrl+Q", triggered=self.close)

        # View modes (exclusive)
        self.view_mode_group = QActionGroup(self)
        self.view_mode_actions: dict[ViewMode, QAction] = {}
        for mode, (label, shortcut) in _VIEW_MODE_LABELS.items():
            act = QAction(label, self, shortcut=shortcut, checkable=True)
            act.triggered.connect(lambda chk=False, m=mode: self.controller.set_view_mode(m))
            self.view_mode_group.addAction(act)
            self.view_mode_actions[mode] = act

        self.act_sync_scroll = QAction(
            "Sync Scroll",
            self,
            checkable=True,
            triggered=self._toggle_sync_scroll,
        )
        self.act_sync_scroll.setChecked(self.controller.scroll.enabled)

        # Themes
        # Checked while the active theme is dark; triggering flips between light and dark.
        self.act_toggle_theme = QAction(
            "Dark Mode",
            self,
            checkable=True,
            triggered=lambda chk=False: self.controller.toggle_theme(),
        )
        self.theme_group = QActionGroup(self)
        self.theme_actions: dict[str, QAction] = {}
        for name in self.controller.theme.preset_names():
            act = QAction(name.title(), self, checkable=True)
            act.triggered.connect(lambda chk=False, n=name: self.controller.apply_preset(n))
            self.theme_group.addAction(act)
            self.theme_actions[name] = act
        self.act_custom_theme = QAction(
            "Customize…", self, checkable=True, triggered=self._customize_theme
        )
        self.theme_group.addAction(self.act_custom_theme)

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        for a in (self.act_new, self.act_open, self.act_save, self.act_save_as):
            tb.addAction(a)
        tb.addSeparator()
        for a in self.view_mode_actions.values():
            tb.addAction(a)
        tb.addAction(self.act_sync_scroll)
        tb.addSeparator()
        tb.addAction(self.act_toggle_theme)
        tb.addAction(self.act_custom_theme)
        self.addToolBar(tb)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        for a in (self.act_new, self.act_open):
            filem.addAction(a)
        filem.addSeparator()
        for a in (self.act_save, self.act_save_as):
            filem.addAction(a)
        filem.addSeparator()
        filem.addAction(self.act_exit)

        viewm = m.addMenu("&View")
        for a in self.view_mode_actions.values():
            viewm.addAction(a)
        viewm.addSeparator()
        viewm.addAction(self.act_sync_scroll)

        themem = m.addMenu("&Theme")
        themem.addAction(self.act_toggle_theme)
        themem.addSeparator()
        for a in self.theme_actions.values():
            themem.addAction(a)
        themem.addSeparator()
        themem.addAction(self.act_custom_theme)

    # ---------- IPresentationView ----------
    def show_rendered(self, view: RenderedView) -> None:
        self._last_view = view
        self._repaint_preview()

    def apply_theme(self, variables: Mapping[str, str]) -> None:
        self._variables = dict(variables)
        self.setStyleSheet(build_stylesheet(self._variables))
        self._sync_theme_actions()
        if self._last_view is not None:
            self._repaint_preview()

    def show_view_mode(self, mode: ViewMode) -> None:
        self.editor.setVisible(mode.shows_editor)
        self.preview.setVisible(mode.shows_preview)
        self.view_mode_actions[mode].setChecked(True)

    def set_preview_scroll(self, top: float) -> None:
        self.preview.verticalScrollBar().setValue(round(top))

    # ---------- Document actions ----------
    def _new_file(self):
        if not self._confirm_discard():
            return
        self._set_editor_text("")
        self.controller.new_document()
        self._update_title()
        self.statusBar().showMessage("Ready", 3000)

    def _open_dialog(self):
        path_str, _ = QFileDialog.getOpenFileName(self, "Open Markdown", "", OPEN_FILTER)
        if path_str:
            self._open_path(Path(path_str))

    def _open_path(self, path: Path):
        if not self._confirm_discard():
            return
        try:
            text = self.file_service.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            QMessageBox.critical(self, "Open Error", f"Failed to open file:\n{e}")
            return
        self._set_editor_text(text)
        self.controller.open_document(text, path)
        self._update_title()
        self.statusBar().showMessage(f"Opened: {path}", 3000)

    def _save(self):
        path = self.controller.current_identifier()
        if path is None:
            self._save_as()
            return
        self._write_to(path)

    def _save_as(self):
        start = str(self.controller.current_identifier() or "")
        path_str, _ = QFileDialog.getSaveFileName(self, "Save As", start, SAVE_FILTER)
        if path_str:
            self._write_to(Path(path_str))

    def _write_to(self, path: Path) -> bool:
        text = self.controller.request_save(path)
        result = self.file_service.save(path, text)
        ok = self.controller.report_save_result(path, result.success)
        self._update_title()
        if ok:
            self.statusBar().showMessage(f"Saved: {path}", 3000)
        else:
            QMessageBox.critical(self, "Save Error", f"Failed to save file:\n{result.error}")
        return ok

    # ---------- View / theme actions ----------
    def _toggle_sync_scroll(self, on: bool):
        self.controller.scroll.set_enabled(on)

    def _customize_theme(self):
        previous = self.controller.theme.selection
        base = self.controller.theme.custom_palette or self.controller.theme.current_palette()
        picked: dict[str, str] = {}
        for field, label in _PALETTE_FIELDS:
            color = QColorDialog.getColor(
                QColor(rgb_to_hex(getattr(base, field))), self, f"Choose {label} Color"
            )
            if not color.isValid():
                self._sync_theme_actions()
                return
            picked[field] = color.name()

        palette = Palette(**picked)
        self.controller.preview_custom(palette)
        resp = QMessageBox.question(
            self,
            "Custom Theme",
            "Keep this theme?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        if resp == QMessageBox.StandardButton.Yes:
            self.controller.apply_custom(palette)
        elif isinstance(previous, PresetSelection):
            self.controller.apply_preset(previous.name)
        else:
            self.controller.apply_custom(previous.palette)

    def _sync_theme_actions(self):
        selection = self.controller.theme.selection
        if isinstance(selection, PresetSelection):
            self.theme_actions[selection.name].setChecked(True)
        else:
            self.act_custom_theme.setChecked(True)
        self.act_toggle_theme.setChecked(self.controller.theme.is_dark)

    # ---------- Helpers ----------
    def _repaint_preview(self):
        if self._last_view is None:
            return
        bar = self.preview.verticalScrollBar()
        pos = bar.value()
        html = self.renderer.to_html(self._last_view, self._variables, checkbox_glyphs=True)
        self.preview.setHtml(html)
        bar.setValue(pos)

    def _set_editor_text(self, text: str) -> None:
        self._loading = True
        try:
            self.editor.setPlainText(text)
        finally:
            self._loading = False

    def _on_text_changed(self):
        if self._loading:
            return
        self.controller.on_text_changed(self.editor.toPlainText())
        self._update_title()

    def _on_editor_scrolled(self, value: int):
        src = self.editor.verticalScrollBar()
        dst = self.preview.verticalScrollBar()
        self.controller.on_source_scrolled(
            value,
            src.maximum() + src.pageStep(),
            src.pageStep(),
            dst.maximum() + dst.pageStep(),
            dst.pageStep(),
        )

    def _update_title(self):
        path = self.controller.current_identifier()
        name = path.name if path else "Untitled"
        star = " •" if self.controller.is_dirty() else ""
        self.setWindowTitle(f"{self.app_title} - {name}{star}")

    def _confirm_discard(self) -> bool:
        if not self.controller.is_dirty():
            return True
        resp = QMessageBox.question(
            self,
            "Discard changes?",
            "You have unsaved changes. Discard them?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        return resp == QMessageBox.StandardButton.Yes

    # ---------- Close ----------
    def closeEvent(self, event):
        if not self._confirm_discard():
            event.ignore()
            return
        self.settings.set_geometry(bytes(self.saveGeometry()))
        self.settings.set_splitter(bytes(self.splitter.saveState()))
        super().closeEvent(event)

