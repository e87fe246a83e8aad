# jank/services/ui/presenters/presentation_controller.py
from __future__ import annotations

import logging
from pathlib import Path

from jank.domain.errors import UnknownViewModeError
from jank.domain.interfaces import IMarkdownRenderer, IPresentationView
from jank.domain.models import Document, Palette, ViewMode
from jank.services.markdown_renderer import RenderedView
from jank.services.scroll_sync import ScrollSynchronizer
from jank.services.theme.theme_engine import ThemeEngine

logger = logging.getLogger(__name__)


class PresentationController:
    """
    Coordinates rendering, theming and scroll-sync for one document.

    The host window forwards its events here (text changed, file opened,
    view/theme commands, editor scrolled) and receives results back through
    the IPresentationView it registered. Everything runs synchronously on the
    GUI thread; every text change re-renders the whole document.
    """

    def __init__(
        self,
        renderer: IMarkdownRenderer,
        theme: ThemeEngine,
        scroll: ScrollSynchronizer | None = None,
        *,
        view: IPresentationView | None = None,
        initial_mode: ViewMode = ViewMode.SIDE_BY_SIDE,
    ) -> None:
        self.renderer = renderer
        self.theme = theme
        self.scroll = scroll or ScrollSynchronizer()
        self.view = view
        self.document = Document()
        self._mode = initial_mode

    def attach_view(self, view: IPresentationView) -> None:
        self.view = view

    # ---------- Document events ----------

    def on_text_changed(self, text: str) -> RenderedView:
        self.document.text = text
        self.document.dirty = True
        return self.render_now()

    def open_document(self, text: str, identifier: Path | None) -> RenderedView:
        self.document = Document(text=text, dirty=False, identifier=identifier)
        return self.render_now()

    def new_document(self) -> RenderedView:
        self.document = Document()
        return self.render_now()

    def request_save(self, identifier: Path) -> str:
        """Hand the current text to the host, which writes it to ``identifier``."""
        return self.document.text

    def report_save_result(self, identifier: Path, ok: bool) -> bool:
        if ok:
            self.document.identifier = identifier
            self.document.dirty = False
        else:
            logger.warning("Save to %s failed; document stays modified", identifier)
        return ok

    def current_text(self) -> str:
        return self.document.text

    def is_dirty(self) -> bool:
        return self.document.dirty

    def current_identifier(self) -> Path | None:
        return self.document.identifier

    # ---------- Rendering / view mode ----------

    def render_now(self) -> RenderedView:
        rendered = self.renderer.render(self.document.text)
        if self.view is not None:
            self.view.show_rendered(rendered)
        return rendered

    def current_view_mode(self) -> ViewMode:
        return self._mode

    def set_view_mode(self, mode: ViewMode | str) -> ViewMode:
        try:
            target = ViewMode(mode)
        except ValueError:
            raise UnknownViewModeError(mode) from None

        self._mode = target
        logger.info("View mode changed to %s", target.value)
        if self.view is not None:
            self.view.show_view_mode(target)
        # The preview may be stale after being hidden.
        if target.shows_preview:
            self.render_now()
        return target

    # ---------- Theme commands ----------

    def apply_preset(self, name: str) -> None:
        self.theme.apply_preset(name)
        self._publish_theme()

    def apply_custom(self, palette: Palette) -> None:
        self.theme.apply_custom(palette)
        self._publish_theme()

    def preview_custom(self, palette: Palette) -> None:
        self.theme.preview_custom(palette)
        self._publish_theme()

    def toggle_theme(self) -> str:
        name = self.theme.toggle()
        self._publish_theme()
        return name

    def current_variables(self) -> dict[str, str]:
        return self.theme.current_variables()

    def _publish_theme(self) -> None:
        if self.view is not None:
            self.view.apply_theme(self.theme.current_variables())

    # ---------- Scroll sync ----------

    def on_source_scrolled(
        self,
        scroll_top: float,
        scroll_height: float,
        view_height: float,
        target_scroll_height: float,
        target_view_height: float,
    ) -> float | None:
        top = self.scroll.sync_if_enabled(
            scroll_top, scroll_height, view_height, target_scroll_height, target_view_height
        )
        if top is not None and self.view is not None:
            self.view.set_preview_scroll(top)
        return top

    def toggle_sync_scroll(self) -> bool:
        return self.scroll.toggle()
