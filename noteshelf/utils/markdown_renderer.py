"""
Markdown rendering for NoteShelf.
Converts document text to HTML and highlights fenced code blocks with Pygments.
"""

import html as _html
import threading
from typing import Optional

import markdown
from loguru import logger
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer, TextLexer
from pygments.util import ClassNotFound

from .. import config
from ..models.document import CodeBlockResult
from .markdown_extensions import (
    FencedCodeExtension,
    GithubFlavorExtension,
    StrikethroughExtension,
)

# Keep code text exactly as authored
_LEXER_OPTIONS = {"stripnl": False, "ensurenl": False}


class CodeHighlighter:
    """Highlights code blocks, preferring the declared language."""

    def __init__(self, style: Optional[str] = None):
        self.style = style or config.HIGHLIGHT_STYLE
        self._formatter = HtmlFormatter(nowrap=True, style=self.style)

    def _lexer_for(self, language: str):
        """Return a lexer for a language tag, or None when Pygments has no grammar for it."""
        try:
            return get_lexer_by_name(language, **_LEXER_OPTIONS)
        except ClassNotFound:
            return None

    def _highlight(self, code: str, lexer) -> str:
        highlighted = highlight(code, lexer, self._formatter)
        # The formatter always ends its output with a newline
        if not code.endswith("\n") and highlighted.endswith("\n"):
            highlighted = highlighted[:-1]
        return highlighted

    def _highlight_auto(self, code: str) -> str:
        try:
            lexer = guess_lexer(code, **_LEXER_OPTIONS)
        except ClassNotFound:
            lexer = TextLexer(**_LEXER_OPTIONS)

        try:
            return self._highlight(code, lexer)
        except Exception as e:
            logger.error(f"Automatic highlighting failed with {lexer.name}: {e}")
            return _html.escape(code, quote=False)

    def highlight_code(self, code: str, language: Optional[str] = None) -> CodeBlockResult:
        """
        Render one fenced code block as <pre><code>.

        Args:
            code: Block text without the fences
            language: Declared language tag, if any

        Returns:
            CodeBlockResult whose html carries "hljs language-<lang>" when the
            declared language was used and plain "hljs" otherwise
        """
        error = None
        if language:
            lexer = self._lexer_for(language)
            if lexer is None:
                logger.debug(f"Unknown code language {language!r}, detecting automatically")
            else:
                try:
                    highlighted = self._highlight(code, lexer)
                    css_class = f"hljs language-{_html.escape(language, quote=True)}"
                    return CodeBlockResult(
                        html=f'<pre><code class="{css_class}">{highlighted}</code></pre>',
                        language=language,
                        highlighted=True,
                    )
                except Exception as e:
                    logger.error(f"Code highlighting failed for {language!r}: {e}")
                    error = str(e)

        highlighted = self._highlight_auto(code)
        return CodeBlockResult(
            html=f'<pre><code class="hljs">{highlighted}</code></pre>',
            language=language,
            error=error,
        )

    def stylesheet(self, selector: str = config.HIGHLIGHT_CSS_SELECTOR) -> str:
        return self._formatter.get_style_defs(selector)


class MarkdownRenderer:
    """Markdown to HTML with hard line breaks and GitHub flavoured extensions."""

    def __init__(self, highlighter: Optional[CodeHighlighter] = None):
        self.highlighter = highlighter or CodeHighlighter()
        self._md = markdown.Markdown(
            extensions=[
                FencedCodeExtension(self.highlighter),
                "tables",
                "nl2br",
                StrikethroughExtension(),
                GithubFlavorExtension(),
            ],
            output_format="html",
        )
        # A Markdown instance keeps state between convert() and reset()
        self._lock = threading.Lock()

    def render(self, markdown_text: str) -> str:
        with self._lock:
            try:
                return self._md.convert(markdown_text)
            finally:
                self._md.reset()

    def stylesheet(self, selector: str = config.HIGHLIGHT_CSS_SELECTOR) -> str:
        """Return the Pygments CSS matching the highlighted markup."""
        return self.highlighter.stylesheet(selector)


_renderer: Optional[MarkdownRenderer] = None
_renderer_lock = threading.Lock()


def get_renderer() -> MarkdownRenderer:
    """Return the shared renderer, constructing it on first use."""
    global _renderer
    with _renderer_lock:
        if _renderer is None:
            _renderer = MarkdownRenderer()
            logger.info(f"Markdown renderer ready (highlight style: {_renderer.highlighter.style})")
        return _renderer


def render_markdown(markdown_text: str) -> str:
    """Render Markdown text with the shared renderer."""
    return get_renderer().render(markdown_text)
