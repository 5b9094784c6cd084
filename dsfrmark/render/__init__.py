"""Rendering collaborators around the transpiler: Markdown, slides, page export."""

from dsfrmark.render.document import DocumentRenderer, RenderedDocument
from dsfrmark.render.export import render_standalone, write_html
from dsfrmark.render.markdown import MarkdownRenderer

__all__ = [
    "DocumentRenderer",
    "MarkdownRenderer",
    "RenderedDocument",
    "render_standalone",
    "write_html",
]
