"""Syntax highlighting of single source lines via Pygments."""

import logging
from functools import lru_cache

from pygments import highlight as _pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

_FORMATTER = HtmlFormatter(nowrap=True)


@lru_cache(maxsize=None)
def _lexer_for(language: str) -> Lexer:
    try:
        return get_lexer_by_name(language, stripnl=False, ensurenl=False)
    except ClassNotFound:
        logger.warning("No lexer for language %r, rendering source as plain text", language)
        return TextLexer(stripnl=False, ensurenl=False)


def highlight(language: str, code_line: str) -> str:
    """Return HTML markup for one source line.

    Tokens are wrapped in Pygments ``<span class=...>`` elements; text is
    HTML-escaped.  Unknown languages render as escaped plain text, so this
    never fails.
    """
    return _pygments_highlight(code_line, _lexer_for(language), _FORMATTER).rstrip("\n")


def style_definitions(style: str = "default", scope: str = ".heatmap-src-line-code") -> str:
    """CSS rules for highlighted tokens, scoped under ``scope``."""
    return HtmlFormatter(style=style).get_style_defs(scope)
