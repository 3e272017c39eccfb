"""
Markdown renderer implementation using Python-Markdown, pymdown-extensions
and Pygments.

The option table mirrors the flags slides are written against; each option
switches on the Python-Markdown extension (or output setting) that provides
the behaviour.
"""

from typing import List, Optional

import markdown
from pydantic import BaseModel

from presto_slide.application.ports import MarkdownRendererPort
from presto_slide.domain.exceptions import MarkdownRenderError
from presto_slide.infra.config.logging_config import get_logger


EXTENSION_CONFIGS = {
    "codehilite": {"guess_lang": False},
    # ~~del~~ only, ^sup^ only
    "pymdownx.tilde": {"subscript": False},
    "pymdownx.caret": {"insert": False},
}


class MarkdownOptions(BaseModel):
    """Markdown features enabled for slide content."""

    fenced_code_blocks: bool = True
    no_intra_emphasis: bool = True
    autolink: bool = True
    strikethrough: bool = True
    lax_html_blocks: bool = True
    superscript: bool = True
    hard_wrap: bool = True
    tables: bool = True
    xhtml: bool = True


class PythonMarkdownRenderer(MarkdownRendererPort):
    """
    Renders slide markdown to HTML.

    Code blocks are always highlighted with Pygments through ``codehilite``;
    ``fenced_code_blocks`` only controls whether triple-backtick fences are
    recognised.
    """

    def __init__(self, options: Optional[MarkdownOptions] = None):
        self.options = options or MarkdownOptions()
        self._log = get_logger("infra.markdown_renderer")

    def _extensions(self) -> List[str]:
        opts = self.options
        extensions: List[str] = ["codehilite"]
        if opts.fenced_code_blocks:
            extensions.append("fenced_code")
        if not opts.no_intra_emphasis:
            # Python-Markdown ignores intra-word underscores unless legacy_em is on
            extensions.append("legacy_em")
        if opts.autolink:
            extensions.append("pymdownx.magiclink")
        if opts.strikethrough:
            extensions.append("pymdownx.tilde")
        if opts.lax_html_blocks:
            extensions.append("md_in_html")
        if opts.superscript:
            extensions.append("pymdownx.caret")
        if opts.hard_wrap:
            extensions.append("nl2br")
        if opts.tables:
            extensions.append("tables")
        return extensions

    def render(self, text: str) -> str:
        """
        Convert markdown text to HTML.

        Args:
            text: Raw markdown

        Returns:
            str: HTML fragment

        Raises:
            MarkdownRenderError: If conversion fails
        """
        # New parser per call: Markdown instances carry state between conversions
        md = markdown.Markdown(
            extensions=self._extensions(),
            extension_configs=EXTENSION_CONFIGS,
            output_format="xhtml" if self.options.xhtml else "html",
        )
        try:
            return md.convert(text)
        except Exception as e:
            self._log.error("markdown.render_failed", error=str(e))
            raise MarkdownRenderError(str(e)) from e
