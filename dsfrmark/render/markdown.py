"""Markdown-to-HTML rendering of transpiled text, via markdown-it-py."""

from __future__ import annotations

from functools import cached_property

from markdown_it import MarkdownIt

from dsfrmark.config.models import MarkdownConfig


class MarkdownRenderer:
    """Renders standard Markdown; raw HTML (the rendered components) passes through."""

    def __init__(self, config: MarkdownConfig | None = None) -> None:
        self._config = config or MarkdownConfig()

    @cached_property
    def _md(self) -> MarkdownIt:
        md = MarkdownIt(
            self._config.preset,
            {"html": True, "typographer": self._config.typographer},
        )
        md.enable(["table", "strikethrough"])
        if self._config.typographer:
            md.enable(["replacements", "smartquotes"])
        return md

    def render(self, text: str) -> str:
        return self._md.render(text)
