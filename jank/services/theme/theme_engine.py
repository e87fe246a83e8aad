# jank/services/theme/theme_engine.py
from __future__ import annotations

import logging
from collections.abc import Mapping

from jank.domain.errors import UnknownPresetError
from jank.domain.interfaces import IPreferenceStore
from jank.domain.models import CustomSelection, Palette, PresetSelection, ThemeSelection
from jank.services.theme.color_math import contrast_color, darken, lighten, luminance
from jank.services.theme.presets import DARK_PRESETS, DEFAULT_PRESET, PRESETS
from jank.utils.constants import CUSTOM_THEME

logger = logging.getLogger(__name__)

# The full set of variables the interface is painted with, in a stable order.
THEME_VARIABLES: tuple[str, ...] = (
    "--bg-primary",
    "--bg-secondary",
    "--bg-tertiary",
    "--text-primary",
    "--text-secondary",
    "--text-muted",
    "--accent-primary",
    "--accent-hover",
    "--accent-text",
    "--editor-bg",
    "--preview-bg",
    "--toolbar-bg",
    "--status-bg",
    "--status-text",
)


def derive_variables(palette: Palette) -> dict[str, str]:
    """Expand four base colors into the full variable set. Pure."""
    accent_text = contrast_color(palette.accent)
    return {
        "--bg-primary": palette.background,
        "--bg-secondary": lighten(palette.background, 0.97),
        "--bg-tertiary": lighten(palette.background, 0.94),
        "--text-primary": palette.text,
        "--text-secondary": lighten(palette.text, 0.7),
        "--text-muted": lighten(palette.text, 0.5),
        "--accent-primary": palette.accent,
        "--accent-hover": darken(palette.accent, 0.1),
        "--accent-text": accent_text,
        "--editor-bg": palette.editor_background,
        "--preview-bg": palette.editor_background,
        "--toolbar-bg": palette.background,
        "--status-bg": palette.accent,
        "--status-text": accent_text,
    }


class ThemeEngine:
    """
    Owns the active theme selection and the variables derived from it.

    Persistence goes through an IPreferenceStore: the selection marker
    (preset name or "custom") and the custom palette are stored separately,
    so picking a preset never throws away the user's custom palette.
    """

    def __init__(
        self,
        store: IPreferenceStore,
        *,
        presets: Mapping[str, Palette] | None = None,
        default_preset: str = DEFAULT_PRESET,
    ) -> None:
        self._store = store
        self._presets: dict[str, Palette] = dict(presets if presets is not None else PRESETS)
        if default_preset not in self._presets:
            logger.warning("Default preset %r is unknown; using %r", default_preset, DEFAULT_PRESET)
            default_preset = DEFAULT_PRESET
        self._default_preset = default_preset
        self._selection: ThemeSelection = PresetSelection(default_preset)
        self._custom_palette: Palette | None = None
        self._variables: dict[str, str] = derive_variables(self._presets[default_preset])

    # ---------- Queries ----------

    @property
    def selection(self) -> ThemeSelection:
        return self._selection

    @property
    def custom_palette(self) -> Palette | None:
        return self._custom_palette

    def preset_names(self) -> list[str]:
        return list(self._presets)

    def current_variables(self) -> dict[str, str]:
        return dict(self._variables)

    def current_palette(self) -> Palette:
        if isinstance(self._selection, CustomSelection):
            return self._selection.palette
        return self._presets[self._selection.name]

    @property
    def is_dark(self) -> bool:
        if isinstance(self._selection, PresetSelection):
            return self._selection.name in DARK_PRESETS
        return luminance(self._selection.palette.background) <= 0.5

    # ---------- Commands ----------

    def apply_preset(self, name: str) -> None:
        try:
            palette = self._presets[name]
        except KeyError:
            raise UnknownPresetError(name) from None
        self._activate(PresetSelection(name), palette)
        self._store.set_theme_selection(name)
        logger.info("Theme changed to preset %r", name)

    def apply_custom(self, base: Palette) -> None:
        self._activate(CustomSelection(base), base)
        self._custom_palette = base
        self._store.set_custom_palette(base.to_dict())
        self._store.set_theme_selection(CUSTOM_THEME)
        logger.info("Applied custom theme: %s", base)

    def preview_custom(self, base: Palette) -> None:
        """Show a custom palette without persisting it or replacing the stored one."""
        self._activate(CustomSelection(base), base)
        logger.debug("Previewing custom theme: %s", base)

    def toggle(self) -> str:
        """Flip light -> dark; anything else goes back to light. Returns the new preset."""
        current = self._selection
        target = "dark" if isinstance(current, PresetSelection) and current.name == "light" else "light"
        self.apply_preset(target)
        return target

    def restore(self) -> ThemeSelection:
        """Re-activate the persisted selection at startup. Never writes, never raises."""
        saved = self._store.get_theme_selection() or self._default_preset
        raw_custom = self._store.get_custom_palette()
        if raw_custom is not None:
            try:
                self._custom_palette = Palette.from_dict(raw_custom)
            except (KeyError, TypeError):
                logger.warning("Ignoring malformed stored custom palette: %r", raw_custom)

        if saved == CUSTOM_THEME and self._custom_palette is not None:
            self._activate(CustomSelection(self._custom_palette), self._custom_palette)
        elif saved in self._presets:
            self._activate(PresetSelection(saved), self._presets[saved])
        else:
            logger.warning("Stored theme %r is not available; using %r", saved, self._default_preset)
            self._activate(
                PresetSelection(self._default_preset), self._presets[self._default_preset]
            )
        return self._selection

    # ---------- Internals ----------

    def _activate(self, selection: ThemeSelection, palette: Palette) -> None:
        self._selection = selection
        self._variables = derive_variables(palette)
