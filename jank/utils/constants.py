APP_ORG = "JANK"
APP_NAME = "JANK - Just Another Note Keeper"

# Preview stylesheet. Placeholders are filled from the active theme's variables
# (``--bg-primary`` -> ``{bg_primary}``) so QTextBrowser, which has no CSS
# custom-property support, still gets concrete colors.
CSS_PREVIEW = """
:root {{ {custom_properties} }}
html,body {{ background:{preview_bg}; color:{text_primary}; }}
body {{ font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 1.25rem; line-height: 1.55; }}
h1,h2,h3,h4,h5 {{ margin-top: 1.2em; color:{text_primary}; }}
pre {{ padding:.75rem; overflow:auto; border-radius:8px; background:{bg_tertiary}; }}
code {{ background:{bg_secondary}; padding:.15rem .3rem; border-radius:6px; }}
blockquote {{ border-left:4px solid {accent_primary}; margin:1em 0; padding:.25em .75em; color:{text_muted}; }}
table {{ border-collapse: collapse; }}
th, td {{ border:1px solid {bg_tertiary}; padding:.4rem .6rem; }}
a {{ color:{accent_primary}; text-decoration:none; }} a:hover {{ color:{accent_hover}; text-decoration:underline; }}
hr {{ border:none; border-top:1px solid {bg_tertiary}; margin:1.5rem 0; }}
ul,ol {{ padding-left:1.5rem; }}
li.task-list-item {{ list-style-type:none; }}
input.task-list-item-checkbox {{ margin-right:.4em; }}
"""

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_SPLITTER = "window/splitter"
SETTINGS_THEME_SELECTION = "theme/selection"
SETTINGS_CUSTOM_PALETTE = "theme/custom_palette"

CUSTOM_THEME = "custom"
