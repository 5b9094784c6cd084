"""Transpiler: turns `///` component blocks into DSFR HTML.

Two strategies:

- "nested" (default): one scan builds the block tree, children render
  before their parent, accordions are numbered in document order.
- "passes": one non-greedy pass per component type, in PASS_ORDER.
  Inner component types come first so that, by the time a container's pass
  runs, the closing markers of its contents are already gone. Changing the
  order changes which blocks match.

Every call gets a fresh RenderContext, so accordion ids restart at 1 for
each document and for each slide.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Literal

from dsfrmark.config.models import TranspilerConfig

from .components import COMPONENTS, PICTOGRAM_PATH, AccordionComponent, RenderContext
from .grammar import BlockNode, join_lines, parse_document, split_lines, substitute_blocks
from .models import Block, Diagnostic, TranspileResult

logger = logging.getLogger(__name__)

PASS_ORDER: tuple[str, ...] = (
    "card",
    "tile",
    "col",
    "row",
    "alert",
    "callout",
    "accordion",
    "badge",
)

Strategy = Literal["nested", "passes"]


def split_slides(text: str, separator: str = "---") -> list[str]:
    """Split a deck on separator lines. Segments are trimmed, empty ones dropped."""
    segments: list[list[str]] = [[]]
    for line in split_lines(text):
        if line.strip() == separator:
            segments.append([])
        else:
            segments[-1].append(line)
    slides = (join_lines(seg).strip() for seg in segments)
    return [s for s in slides if s]


class Transpiler:
    def __init__(
        self,
        strategy: Strategy = "nested",
        pictogram_path: str = PICTOGRAM_PATH,
        slide_separator: str = "---",
    ) -> None:
        if strategy not in ("nested", "passes"):
            raise ValueError(f"Unknown transpile strategy: {strategy!r}")
        self.strategy = strategy
        self.pictogram_path = pictogram_path
        self.slide_separator = slide_separator

    @classmethod
    def from_config(cls, config: TranspilerConfig) -> Transpiler:
        return cls(
            strategy=config.strategy,
            pictogram_path=config.pictogram_path,
            slide_separator=config.slide_separator,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def transpile(self, text: str) -> TranspileResult:
        """Replace every well-formed component block in `text` with its HTML."""
        ctx = RenderContext(pictogram_path=self.pictogram_path)
        if self.strategy == "passes":
            output = self._run_passes(text, ctx)
        else:
            output = self._run_nested(text, ctx)

        diagnostics = sorted(ctx.diagnostics, key=lambda d: d.lineno or 0)
        logger.debug(
            "transpiled %d chars (%s), %d diagnostic(s)",
            len(text), self.strategy, len(diagnostics),
        )
        return TranspileResult(text=output, diagnostics=diagnostics)

    def transpile_slides(self, text: str) -> list[TranspileResult]:
        """Transpile each slide of a deck independently."""
        return [self.transpile(s) for s in split_slides(text, self.slide_separator)]

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def _run_passes(self, text: str, ctx: RenderContext) -> str:
        for keyword in PASS_ORDER:
            component = COMPONENTS[keyword]
            text = substitute_blocks(
                text,
                keyword,
                lambda block: component.render(block, ctx),
                ctx.diagnostics,
            )
        return text

    def _run_nested(self, text: str, ctx: RenderContext) -> str:
        doc = parse_document(text)
        ctx.diagnostics.extend(doc.diagnostics)
        return join_lines([self._render_node(n, ctx) for n in doc.children])

    def _render_node(self, node: str | BlockNode, ctx: RenderContext) -> str:
        """Render a block after everything inside it, without recursing."""
        if isinstance(node, str):
            return node

        frames = [self._open_frame(node, ctx)]
        while True:
            frame = frames[-1]
            child = next(frame.pending, None)
            if child is None:
                frames.pop()
                source = frame.source()
                html = self._close_frame(frame, source, ctx)
                if not frames:
                    return html
                frames[-1].rendered.append(html)
                frames[-1].sources.append(source)
            elif isinstance(child, str):
                frame.rendered.append(child)
                frame.sources.append(child)
            else:
                frames.append(self._open_frame(child, ctx))

    def _open_frame(self, node: BlockNode, ctx: RenderContext) -> _Frame:
        index = None
        if node.closed and not node.known:
            ctx.report(Diagnostic(
                line=node.head[0].strip(),
                reason=f"unknown component '{node.keyword}'",
                lineno=node.lineno,
            ))
        elif node.closed and isinstance(COMPONENTS[node.keyword], AccordionComponent):
            # Number before rendering children: ids follow document order
            index = ctx.next_accordion_id()
        return _Frame(node=node, pending=iter(node.children), index=index)

    def _close_frame(self, frame: _Frame, source: str, ctx: RenderContext) -> str:
        node = frame.node
        if not node.closed or not node.known:
            # Left as written, but blocks inside it are still rendered
            parts = [*node.head, *frame.rendered]
            if node.closer is not None:
                parts.append(node.closer)
            return join_lines(parts)

        component = COMPONENTS[node.keyword]
        block = Block(
            component=node.keyword,
            title=node.title,
            option_lines=node.option_lines,
            body=join_lines(frame.rendered),
            raw=source,
            lineno=node.lineno,
            end_lineno=node.end_lineno,
            options_lineno=node.options_lineno,
        )
        if frame.index is not None:
            return component.render(block, ctx, index=frame.index)
        return component.render(block, ctx)


@dataclass
class _Frame:
    """A block being rendered: its children so far and those still to go."""

    node: BlockNode
    pending: Iterator[str | BlockNode]
    rendered: list[str] = field(default_factory=list)
    # Children as written, to rebuild the block's source without a second walk
    sources: list[str] = field(default_factory=list)
    index: int | None = None

    def source(self) -> str:
        tail = [self.node.closer] if self.node.closer is not None else []
        return join_lines([*self.node.head, *self.sources, *tail])


def transpile(text: str, strategy: Strategy = "nested") -> str:
    """Shortcut: transpile and return the text only."""
    return Transpiler(strategy=strategy).transpile(text).text
