"""Block grammar for `///` component markup.

    /// card | Card title          <- opener: keyword, optional "| header"
    description: Short text        <- header option lines (optional)
    ///                            <- ends the option section
    Body text, possibly holding    <- body
    other blocks.
    ///                            <- closing marker, alone on its line

The option section is only recognized when it is a run of `key: value`
lines holding at least one key the component knows, directly followed by a
bare `///` that is not the last closing marker in the text. Otherwise the
body starts right after the opener, and that `///` may close the block.

Two matchers share this grammar:

- `find_blocks` finds one component type at a time and closes each block at
  the nearest closing marker. It cannot see nesting: a block of the same type
  nested inside another, or an inner block of a type not yet processed, ends
  the outer block early. The ordered passes in `pipeline.PASS_ORDER` work
  around this for the supported nestings (cards and tiles inside columns,
  columns inside rows).
- `parse_document` scans once with a stack of open blocks, so every closing
  marker goes to its own opener whatever the nesting.

Neither raises: unterminated blocks and stray closing markers stay in the
text as written and are reported as diagnostics.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .components import COMPONENTS, Component
from .models import Block, Diagnostic
from .options import is_option_line, parse_option_line

logger = logging.getLogger(__name__)

OPENER_RE = re.compile(r"^[ \t]*///[ \t]*([A-Za-z][\w-]*)[ \t\r]*(?:\|(.*))?$")
CLOSER_RE = re.compile(r"^[ \t]*///[ \t\r]*$")


def split_lines(text: str) -> list[str]:
    return text.split("\n")


def join_lines(lines: list[str]) -> str:
    return "\n".join(lines)


def match_opener(line: str) -> tuple[str, str] | None:
    """Return (keyword, header) for an opener line, else None."""
    m = OPENER_RE.match(line)
    if m is None:
        return None
    return m.group(1), (m.group(2) or "").strip()


def is_closer(line: str) -> bool:
    return CLOSER_RE.match(line) is not None


def last_closer_index(lines: list[str]) -> int:
    """Index of the last closing marker in `lines`, -1 if there is none."""
    for i in range(len(lines) - 1, -1, -1):
        if is_closer(lines[i]):
            return i
    return -1


def header_section_end(
    lines: list[str],
    start: int,
    component: Component,
    last_closer: int,
) -> int | None:
    """Index of the bare `///` ending an option section starting at `start`.

    Returns None when the lines after the opener are not an option section,
    in which case they belong to the body. A `///` with no other closing
    marker after it (`last_closer` is the last one in the text) closes the
    block instead.
    """
    if not component.header_options:
        return None
    i = start
    knows_a_key = False
    while i < len(lines) and is_option_line(lines[i]):
        parsed = parse_option_line(lines[i])
        if parsed is not None and parsed[0] in component.defaults:
            knows_a_key = True
        i += 1
    if i == start or i >= last_closer or not knows_a_key:
        return None
    return i if is_closer(lines[i]) else None


# ---------------------------------------------------------------------------
# Per-type, non-greedy matching (ordered passes)
# ---------------------------------------------------------------------------


def find_blocks(
    text: str,
    keyword: str,
    diagnostics: list[Diagnostic] | None = None,
) -> list[Block]:
    """Find every `keyword` block, each closed by the nearest closing marker."""
    component = COMPONENTS[keyword]
    lines = split_lines(text)
    last_closer = last_closer_index(lines)
    blocks: list[Block] = []

    i = 0
    while i < len(lines):
        opener = match_opener(lines[i])
        if opener is None or opener[0] != keyword:
            i += 1
            continue

        body_start = i + 1
        option_lines: list[str] = []
        options_lineno = 0
        sep = header_section_end(lines, i + 1, component, last_closer)
        if sep is not None:
            option_lines = lines[i + 1:sep]
            options_lineno = i + 2
            body_start = sep + 1

        end = body_start
        while end < len(lines) and not is_closer(lines[end]):
            end += 1
        if end == len(lines):
            # No closing marker left anywhere below: later openers of this
            # type cannot be closed either.
            if diagnostics is not None:
                diagnostics.append(Diagnostic(
                    line=lines[i].strip(),
                    reason="unterminated block",
                    lineno=i + 1,
                    component=keyword,
                ))
            break

        blocks.append(Block(
            component=keyword,
            title=opener[1],
            option_lines=option_lines,
            body=join_lines(lines[body_start:end]),
            raw=join_lines(lines[i:end + 1]),
            lineno=i + 1,
            end_lineno=end + 1,
            options_lineno=options_lineno,
        ))
        i = end + 1

    return blocks


def substitute_blocks(
    text: str,
    keyword: str,
    render: Callable[[Block], str],
    diagnostics: list[Diagnostic] | None = None,
) -> str:
    """Replace every `keyword` block in `text` by `render(block)`."""
    blocks = find_blocks(text, keyword, diagnostics)
    if not blocks:
        return text

    lines = split_lines(text)
    out: list[str] = []
    cursor = 0
    for block in blocks:
        out.extend(lines[cursor:block.lineno - 1])
        out.append(render(block))
        cursor = block.end_lineno
    out.extend(lines[cursor:])
    return join_lines(out)


# ---------------------------------------------------------------------------
# Single-scan nesting parser
# ---------------------------------------------------------------------------


@dataclass
class BlockNode:
    """An opened block in the document tree.

    `head` holds the opener, option lines and option separator as written;
    `children` holds body lines (str) and nested blocks.
    """

    keyword: str
    title: str
    lineno: int
    head: list[str]
    option_lines: list[str] = field(default_factory=list)
    options_lineno: int = 0
    children: list[str | BlockNode] = field(default_factory=list)
    closer: str | None = None
    end_lineno: int = 0

    @property
    def closed(self) -> bool:
        return self.closer is not None

    @property
    def known(self) -> bool:
        return self.keyword in COMPONENTS

    def iter_blocks(self) -> Iterator[BlockNode]:
        """This block and every block inside it, in document order."""
        # Explicit stack: nesting depth is bounded only by the input
        todo: list[BlockNode] = [self]
        while todo:
            node = todo.pop()
            yield node
            todo.extend(reversed([c for c in node.children if isinstance(c, BlockNode)]))

    def source(self) -> str:
        """The block's text exactly as written."""
        parts: list[str] = []
        todo: list[str | BlockNode] = [self]
        while todo:
            item = todo.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            tail = [item.closer] if item.closer is not None else []
            todo.extend(reversed([*item.head, *item.children, *tail]))
        return join_lines(parts)


@dataclass
class Document:
    children: list[str | BlockNode] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def iter_blocks(self) -> Iterator[BlockNode]:
        for child in self.children:
            if isinstance(child, BlockNode):
                yield from child.iter_blocks()


def parse_document(text: str) -> Document:
    """Parse `text` into a tree of blocks, matching each closer to its opener."""
    lines = split_lines(text)
    last_closer = last_closer_index(lines)
    doc = Document()
    stack: list[BlockNode] = []

    i = 0
    while i < len(lines):
        line = lines[i]
        target = stack[-1].children if stack else doc.children

        opener = match_opener(line)
        if opener is not None:
            keyword, header = opener
            node = BlockNode(keyword=keyword, title=header, lineno=i + 1, head=[line])
            component = COMPONENTS.get(keyword)
            if component is not None:
                sep = header_section_end(lines, i + 1, component, last_closer)
                if sep is not None:
                    node.option_lines = lines[i + 1:sep]
                    node.options_lineno = i + 2
                    node.head.extend(lines[i + 1:sep + 1])
                    i = sep
            target.append(node)
            stack.append(node)
        elif is_closer(line):
            if stack:
                node = stack.pop()
                node.closer = line
                node.end_lineno = i + 1
            else:
                target.append(line)
                doc.diagnostics.append(Diagnostic(
                    line=line.strip(),
                    reason="closing marker without an open block",
                    lineno=i + 1,
                ))
        else:
            target.append(line)
        i += 1

    for node in stack:
        doc.diagnostics.append(Diagnostic(
            line=node.head[0].strip(),
            reason="unterminated block",
            lineno=node.lineno,
            component=node.keyword,
        ))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "parsed %d block(s), %d unterminated",
            sum(1 for _ in doc.iter_blocks()), len(stack),
        )
    return doc
