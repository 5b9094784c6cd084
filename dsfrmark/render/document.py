"""DocumentRenderer: transpile, then Markdown, then (optionally) page export."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from dsfrmark.config.models import DsfrmarkConfig
from dsfrmark.render.export import render_standalone
from dsfrmark.render.markdown import MarkdownRenderer
from dsfrmark.transpiler import Diagnostic, Transpiler

logger = logging.getLogger(__name__)


class RenderedDocument(BaseModel):
    html: str
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    slides: int = 0


class DocumentRenderer:
    """Runs the full editor pipeline on one source text.

    Normal mode transpiles the whole text once. Slide mode transpiles each
    slide on its own (accordion numbering restarts per slide) and wraps each
    in `<div class="slide">`, the first one marked `current`.
    """

    def __init__(self, config: DsfrmarkConfig | None = None) -> None:
        self.config = config or DsfrmarkConfig()
        self.transpiler = Transpiler.from_config(self.config.transpiler)
        self.markdown = MarkdownRenderer(self.config.markdown)

    def render(
        self,
        text: str,
        *,
        slides: bool = False,
        markdown: bool | None = None,
        standalone: bool = False,
    ) -> RenderedDocument:
        use_markdown = self.config.markdown.enabled if markdown is None else markdown

        if slides:
            doc = self._render_slides(text, use_markdown)
        else:
            result = self.transpiler.transpile(text)
            html = self.markdown.render(result.text) if use_markdown else result.text
            doc = RenderedDocument(html=html, diagnostics=result.diagnostics)

        if standalone:
            doc.html = render_standalone(doc.html, self.config.export)
        if self.config.transpiler.diagnostics == "off":
            doc.diagnostics = []
        return doc

    def _render_slides(self, text: str, use_markdown: bool) -> RenderedDocument:
        parts: list[str] = []
        diagnostics: list[Diagnostic] = []
        results = self.transpiler.transpile_slides(text)
        for n, result in enumerate(results, start=1):
            body = self.markdown.render(result.text) if use_markdown else result.text
            css_class = "slide current" if n == 1 else "slide"
            parts.append(f'<div class="{css_class}">\n{body.strip()}\n</div>')
            diagnostics.extend(d.model_copy(update={"slide": n}) for d in result.diagnostics)

        logger.debug("rendered %d slide(s)", len(results))
        return RenderedDocument(html="\n".join(parts), diagnostics=diagnostics, slides=len(results))
