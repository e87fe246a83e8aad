# tests/test_markdown_renderer.py
import pytest

from jank.services.code_highlighter import CodeHighlighter
from jank.services.markdown_renderer import MarkdownRenderer
from jank.services.theme import PRESETS, derive_variables


def test_renderer_basic_tree(renderer: MarkdownRenderer):
    view = renderer.render("# Title\n\nSome **bold** text.")
    assert [h.text for h in view.headings()] == ["Title"]
    assert view.tree.find("strong").get_text() == "bold"


def test_empty_text_renders_empty_view(renderer: MarkdownRenderer):
    view = renderer.render("")
    assert view is not None
    assert view.is_empty
    assert view.html == ""


@pytest.mark.parametrize(
    "text",
    [
        "```python\nprint('never closed')\n",
        "[broken link](http://example.com",
        "**unbalanced *emphasis",
        "- [ \n- [x",
        "<div>raw <b>html",
        "\n\n\n",
    ],
)
def test_render_never_raises_on_degenerate_input(renderer: MarkdownRenderer, text: str):
    view = renderer.render(text)
    assert view is not None
    assert isinstance(view.html, str)


def test_soft_line_break_becomes_br(renderer: MarkdownRenderer):
    view = renderer.render("line one\nline two")
    p = view.tree.find("p")
    assert p.find("br") is not None


def test_gfm_extensions(renderer: MarkdownRenderer):
    md = "| a | b |\n|---|---|\n| 1 | 2 |\n\n~~gone~~ and https://example.com"
    view = renderer.render(md)
    assert view.tree.find("table") is not None
    assert view.tree.find("del").get_text() == "gone"
    link = view.tree.find("a")
    assert link is not None and link["href"] == "https://example.com"


def test_task_list_items_get_disabled_checkboxes(renderer: MarkdownRenderer):
    view = renderer.render("- [ ] a\n- [x] b")
    items = view.tree.find_all("li")
    assert len(items) == 2

    tasks = view.task_items()
    assert [(t.label, t.checked) for t in tasks] == [("a", False), ("b", True)]

    for li in items:
        assert "[" not in li.get_text()
        box = li.find("input")
        assert box["type"] == "checkbox"
        assert box.has_attr("disabled")


def test_task_list_uppercase_x_is_checked(renderer: MarkdownRenderer):
    view = renderer.render("- [X] done")
    assert view.task_items()[0].checked is True


def test_task_list_loose_list_marker_inside_paragraph(renderer: MarkdownRenderer):
    view = renderer.render("- [ ] first\n\n- [x] second")
    tasks = view.task_items()
    assert [(t.label, t.checked) for t in tasks] == [("first", False), ("second", True)]


def test_plain_list_items_are_untouched(renderer: MarkdownRenderer):
    view = renderer.render("- plain\n- [y] not a marker\n- [link]")
    assert view.task_items() == []
    assert view.tree.find("input") is None
    assert "[y] not a marker" in view.tree.get_text()


def test_nested_task_only_marks_inner_item(renderer: MarkdownRenderer):
    view = renderer.render("- outer\n    - [x] inner")
    tasks = view.task_items()
    assert len(tasks) == 1
    assert tasks[0].label == "inner" and tasks[0].checked is True


def test_nested_task_labels_exclude_child_items(renderer: MarkdownRenderer):
    view = renderer.render("- [ ] a\n    - [x] b\n        - [ ] c")
    tasks = view.task_items()
    assert [(t.label, t.checked) for t in tasks] == [("a", False), ("b", True), ("c", False)]


def test_code_block_is_highlighted(renderer: MarkdownRenderer):
    view = renderer.render("```python\nprint('x')\n```")
    (block,) = view.code_blocks()
    assert block.language == "python"
    assert block.lexer == "Python"
    assert "<span" in block.markup and "print" in block.markup


def test_unknown_language_falls_back_without_raising(renderer: MarkdownRenderer):
    view = renderer.render("```nosuchlanguage-xyz\nsome words here\n```")
    (block,) = view.code_blocks()
    assert block.language == "nosuchlanguage-xyz"
    assert block.markup.strip()
    assert "some words here" in view.tree.find("code").get_text()


def test_code_is_escaped(renderer: MarkdownRenderer):
    view = renderer.render("```\n<script>alert(1)</script>\n```")
    assert view.tree.find("script") is None
    assert "<script>" in view.tree.find("code").get_text()


def test_highlighter_falls_back_to_escaped_text(monkeypatch):
    hl = CodeHighlighter()

    def boom(*_a, **_k):
        raise RuntimeError("lexer exploded")

    monkeypatch.setattr("jank.services.code_highlighter.get_lexer_by_name", boom)
    monkeypatch.setattr("jank.services.code_highlighter.guess_lexer", boom)

    result = hl.highlight("a < b", "python")
    assert result.lexer is None
    assert result.markup == "a &lt; b"


def test_highlighter_guesses_when_language_unknown(monkeypatch):
    hl = CodeHighlighter()
    result = hl.highlight("#!/usr/bin/env python\nimport os\n", "definitely-not-a-language")
    assert result.lexer is not None
    assert result.markup.strip()


def test_highlighter_untagged_without_guessing_is_plain():
    hl = CodeHighlighter(guess_untagged=False)
    result = hl.highlight("x = 1\n")
    assert result.lexer is None
    assert result.markup == "x = 1\n"


def test_unknown_pygments_style_falls_back():
    hl = CodeHighlighter("no-such-style")
    assert hl.highlight("x = 1\n", "python").lexer == "Python"


def test_rerender_produces_independent_trees(renderer: MarkdownRenderer):
    first = renderer.render("# One")
    second = renderer.render("# Two")
    assert [h.text for h in first.headings()] == ["One"]
    assert [h.text for h in second.headings()] == ["Two"]


def test_to_html_wraps_page_with_theme_colors(renderer: MarkdownRenderer):
    variables = derive_variables(PRESETS["dracula"])
    html = renderer.to_html(renderer.render("# Title"), variables)
    assert html.lower().startswith("<!doctype html")
    assert "<style>" in html
    assert "<h1" in html and "Title" in html
    assert variables["--bg-primary"] in html
    assert f"--accent-primary: {variables['--accent-primary']};" in html


def test_to_html_without_variables_uses_light_defaults(renderer: MarkdownRenderer):
    html = renderer.to_html(renderer.render("text"))
    assert PRESETS["light"].text in html


def test_to_html_checkbox_glyphs_for_rich_text(renderer: MarkdownRenderer):
    view = renderer.render("- [ ] a\n- [x] b")
    html = renderer.to_html(view, checkbox_glyphs=True)
    assert "<input" not in html
    assert "☐ a" in html and "☑ b" in html
    # The view itself still carries the real checkboxes.
    assert [t.checked for t in view.task_items()] == [False, True]
    assert "<input" in renderer.to_html(view)
