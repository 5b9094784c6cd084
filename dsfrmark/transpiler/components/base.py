"""Component base class and the per-call render context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from ..models import Block, Diagnostic, Options
from ..options import parse_options

PICTOGRAM_PATH = "/artwork/pictograms"


class RenderContext:
    """State shared by renderers during one transpile call (or one slide).

    Holds the accordion counter, so a fresh context means numbering
    restarts at 1.
    """

    def __init__(self, pictogram_path: str = PICTOGRAM_PATH) -> None:
        self.pictogram_path = pictogram_path
        self.diagnostics: list[Diagnostic] = []
        self._accordion_count = 0

    def next_accordion_id(self) -> int:
        self._accordion_count += 1
        return self._accordion_count

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)


class Component(ABC):
    """One component type: its keyword, option table and renderer.

    `defaults` lists every recognized option key. A None default means
    "unset"; the renderer decides what absence means.
    """

    keyword: ClassVar[str]
    defaults: ClassVar[dict[str, str | bool | None]] = {}
    # Accepted values for options that take a fixed set of choices
    choices: ClassVar[dict[str, tuple[str, ...]]] = {}
    # Whether option lines may follow the opener, closed by a bare `///`
    header_options: ClassVar[bool] = True

    def parse_block_options(self, block: Block, ctx: RenderContext) -> Options:
        return self.parse_lines(block.option_lines, block.options_lineno, ctx)

    def parse_lines(self, lines: list[str], first_lineno: int, ctx: RenderContext) -> Options:
        result = parse_options(
            "\n".join(lines),
            known=self.defaults,
            component=self.keyword,
            first_lineno=first_lineno or None,
        )
        for diag in result.diagnostics:
            ctx.report(diag)
        self._check_choices(result.options, first_lineno, ctx)
        return result.options

    def _check_choices(self, options: Options, lineno: int, ctx: RenderContext) -> None:
        for key, allowed in self.choices.items():
            value = options.get(key)
            if value is None or value in allowed:
                continue
            ctx.report(Diagnostic(
                line=f"{key}: {value}",
                reason=f"unexpected value for '{key}' (expected one of: {', '.join(allowed)})",
                lineno=lineno or None,
                component=self.keyword,
            ))

    @abstractmethod
    def render(self, block: Block, ctx: RenderContext) -> str:
        """Render a matched block to its HTML fragment."""
        ...


def opt(options: Options, key: str, default: str = "") -> str:
    """String value of an option; booleans and absent keys fall back to `default`."""
    value = options.get(key)
    if isinstance(value, str):
        return value
    return default


_YES = frozenset({"true", "yes", "on", "1"})


def is_set(options: Options, key: str) -> bool:
    """True for a switch option written `true`, `yes`, `on` or `1` (any case).

    Anything else, including `no` and absence, leaves the switch off.
    """
    value = options.get(key)
    if isinstance(value, str):
        return value.strip().lower() in _YES
    return value is True


def enabled_unless_false(options: Options, key: str) -> bool:
    """True unless the option is literally `false`."""
    return options.get(key) is not False


def target_attrs(options: Options, key: str) -> str:
    return ' target="_blank" rel="noopener"' if is_set(options, key) else ""
