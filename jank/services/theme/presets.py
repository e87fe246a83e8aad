from __future__ import annotations

from jank.domain.models import Palette

DEFAULT_PRESET = "light"

PRESETS: dict[str, Palette] = {
    "light": Palette(
        background="#ffffff", text="#24292f", accent="#0969da", editor_background="#ffffff"
    ),
    "dark": Palette(
        background="#0d1117", text="#c9d1d9", accent="#58a6ff", editor_background="#161b22"
    ),
    "monokai": Palette(
        background="#272822", text="#f8f8f2", accent="#a6e22e", editor_background="#1e1f1c"
    ),
    "dracula": Palette(
        background="#282a36", text="#f8f8f2", accent="#bd93f9", editor_background="#21222c"
    ),
    "sepia": Palette(
        background="#f4ecd8", text="#5b4636", accent="#a0522d", editor_background="#fbf5e6"
    ),
}

# Presets the toolbar treats as "dark" (shows the switch-to-light affordance).
DARK_PRESETS = frozenset({"dark", "monokai", "dracula"})
