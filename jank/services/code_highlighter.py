# jank/services/code_highlighter.py
from __future__ import annotations

import html
import logging
from dataclasses import dataclass

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Highlighted:
    markup: str
    lexer: str | None  # Pygments lexer name, None when emitted as plain escaped text


class CodeHighlighter:
    """
    Pygments-backed highlighter with a fallback chain that never raises:

      1. lexer for the block's language tag
      2. automatic detection over the raw text (guess_lexer)
      3. escaped plain text

    Markup uses inline styles (noclasses) so QTextBrowser renders it without a stylesheet.
    """

    def __init__(self, style: str = "default", *, guess_untagged: bool = True) -> None:
        self.guess_untagged = guess_untagged
        try:
            self._formatter = HtmlFormatter(style=style, noclasses=True, nowrap=True)
        except ClassNotFound:
            logger.warning("Unknown Pygments style %r; using 'default'", style)
            self._formatter = HtmlFormatter(style="default", noclasses=True, nowrap=True)

    def highlight(self, code: str, language: str | None = None) -> Highlighted:
        if language:
            result = self._try(code, lambda: get_lexer_by_name(language))
            if result is not None:
                return result
            logger.debug("No usable lexer for %r; guessing", language)
        if language or self.guess_untagged:
            result = self._try(code, lambda: guess_lexer(code))
            if result is not None:
                return result
        return Highlighted(markup=html.escape(code, quote=False), lexer=None)

    def _try(self, code: str, make_lexer) -> Highlighted | None:
        try:
            lexer: Lexer = make_lexer()
            return Highlighted(markup=highlight(code, lexer, self._formatter), lexer=lexer.name)
        except Exception as e:  # lexers can fail in arbitrary ways on arbitrary input
            logger.debug("Highlighting failed: %s", e)
            return None
