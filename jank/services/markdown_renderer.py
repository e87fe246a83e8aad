# jank/services/markdown_renderer.py
from __future__ import annotations

import copy
import re
from collections.abc import Mapping
from dataclasses import dataclass

import markdown
from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from jank.domain.interfaces import IMarkdownRenderer
from jank.services.code_highlighter import CodeHighlighter
from jank.services.theme import DEFAULT_PRESET, PRESETS, derive_variables
from jank.utils.constants import CSS_PREVIEW, HTML_TEMPLATE

# "[ ]", "[x]" or "[X]" at the start of a list item's own text.
_TASK_MARKER_RE = re.compile(r"^\s*\[([ xX])\]\s*")
_LANG_PREFIX = "language-"

EXTENSIONS = [
    "extra",  # fenced code, tables, footnotes, attr_list
    "nl2br",  # a bare newline inside a paragraph is a line break
    "sane_lists",
    "toc",
    "pymdownx.tilde",  # ~~strike~~
    "pymdownx.magiclink",  # bare URL autolinks
]

EXTENSION_CONFIGS = {
    "pymdownx.tilde": {"subscript": False},
}


@dataclass(frozen=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class CodeBlock:
    language: str | None
    lexer: str | None
    markup: str


@dataclass(frozen=True)
class TaskItem:
    label: str
    checked: bool


@dataclass
class RenderedView:
    """
    Presentation tree produced by a single render pass.

    Regenerated wholesale on every change; nothing in here survives to the next pass.
    """

    tree: BeautifulSoup

    @property
    def html(self) -> str:
        return str(self.tree)

    @property
    def is_empty(self) -> bool:
        return self.tree.find(True) is None and not self.tree.get_text(strip=True)

    def headings(self) -> list[Heading]:
        return [
            Heading(level=int(h.name[1]), text=h.get_text(strip=True))
            for h in self.tree.find_all(re.compile(r"^h[1-6]$"))
        ]

    def code_blocks(self) -> list[CodeBlock]:
        blocks: list[CodeBlock] = []
        for code in self.tree.select("pre > code"):
            blocks.append(
                CodeBlock(
                    language=_language_of(code),
                    lexer=code.get("data-lexer"),
                    markup=code.decode_contents(),
                )
            )
        return blocks

    def task_items(self) -> list[TaskItem]:
        items: list[TaskItem] = []
        for li in self.tree.find_all("li", class_="task-list-item"):
            box = li.find("input", class_="task-list-item-checkbox")
            items.append(
                TaskItem(label=_own_text(li), checked=box is not None and box.has_attr("checked"))
            )
        return items


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts Markdown to a presentation tree.

    Pipeline: Python-Markdown (GFM-ish extensions, newlines as <br>) -> BeautifulSoup
    tree -> Pygments highlighting of every code block -> task-list checkboxes.
    Rendering degrades instead of failing; the worst case is unhighlighted code.
    """

    def __init__(
        self,
        highlighter: CodeHighlighter | None = None,
        *,
        pygments_style: str = "default",
        guess_untagged: bool = True,
    ) -> None:
        self.highlighter = highlighter or CodeHighlighter(
            pygments_style, guess_untagged=guess_untagged
        )
        self._md = markdown.Markdown(
            extensions=EXTENSIONS,
            extension_configs=EXTENSION_CONFIGS,
            output_format="html5",
        )

    def render(self, markdown_text: str) -> RenderedView:
        body = self._md.reset().convert(markdown_text or "")
        tree = BeautifulSoup(body, "html.parser")
        self._highlight_code_blocks(tree)
        self._materialize_task_lists(tree)
        return RenderedView(tree=tree)

    def to_html(
        self,
        view: RenderedView,
        variables: Mapping[str, str] | None = None,
        *,
        checkbox_glyphs: bool = False,
    ) -> str:
        """
        Wrap a rendered view into a full HTML page painted with the given theme variables.

        With ``checkbox_glyphs`` the task checkboxes become ☐/☑ text, for rich-text
        widgets (QTextBrowser) that drop ``<input>`` elements.
        """
        values = derive_variables(PRESETS[DEFAULT_PRESET])
        values.update(variables or {})
        css = CSS_PREVIEW.format(
            custom_properties=" ".join(f"{k}: {v};" for k, v in values.items()),
            **{k.lstrip("-").replace("-", "_"): v for k, v in values.items()},
        )
        body = _with_checkbox_glyphs(view.tree) if checkbox_glyphs else view.html
        return HTML_TEMPLATE.format(css=css, body=body)

    # -------------------- helpers --------------------

    def _highlight_code_blocks(self, tree: BeautifulSoup) -> None:
        for code in tree.select("pre > code"):
            result = self.highlighter.highlight(code.get_text(), _language_of(code))
            code.clear()
            fragment = BeautifulSoup(result.markup, "html.parser")
            for node in list(fragment.contents):
                code.append(node)
            if result.lexer:
                code["data-lexer"] = result.lexer

    def _materialize_task_lists(self, tree: BeautifulSoup) -> None:
        for li in tree.find_all("li"):
            marker_text = _first_own_text(li)
            if marker_text is None:
                continue
            m = _TASK_MARKER_RE.match(marker_text)
            if not m:
                continue

            attrs = {"type": "checkbox", "class": "task-list-item-checkbox", "disabled": ""}
            if m.group(1) in "xX":
                attrs["checked"] = ""
            marker_text.insert_before(tree.new_tag("input", attrs=attrs))

            rest = str(marker_text)[m.end() :]
            if rest:
                marker_text.replace_with(rest)
            else:
                marker_text.extract()
            li["class"] = [*li.get("class", []), "task-list-item"]


def _language_of(code: Tag) -> str | None:
    for cls in code.get("class", []):
        if cls.startswith(_LANG_PREFIX) and len(cls) > len(_LANG_PREFIX):
            return cls[len(_LANG_PREFIX) :]
    return None


def _first_own_text(li: Tag) -> NavigableString | None:
    """First non-blank text node of a list item, unless it belongs to a nested item."""
    for node in li.descendants:
        if not isinstance(node, NavigableString) or isinstance(node, Comment):
            continue
        if not node.strip():
            continue
        return node if node.find_parent("li") is li else None
    return None


def _own_text(li: Tag) -> str:
    """Text of a list item without the text of items nested inside it."""
    return "".join(
        str(node)
        for node in li.descendants
        if isinstance(node, NavigableString)
        and not isinstance(node, Comment)
        and node.find_parent("li") is li
    ).strip()


def _with_checkbox_glyphs(tree: BeautifulSoup) -> str:
    # The view's own tree keeps its <input> elements.
    display = copy.copy(tree)
    for box in display.select("input.task-list-item-checkbox"):
        box.replace_with("☑ " if box.has_attr("checked") else "☐ ")
    return str(display)
