"""Pydantic models for the component transpiler."""

from __future__ import annotations

from pydantic import BaseModel, Field

Options = dict[str, str | bool]


class Diagnostic(BaseModel):
    """A non-fatal problem found in author input.

    The transpiler never fails on bad input; it renders what it can and
    reports the rest here.
    """

    line: str
    reason: str
    lineno: int | None = None  # 1-based, within the transpiled text
    component: str | None = None
    slide: int | None = None  # 1-based, set in slide-deck mode

    def __str__(self) -> str:
        where = f"line {self.lineno}: " if self.lineno is not None else ""
        if self.slide is not None:
            where = f"slide {self.slide}, {where}"
        who = f"[{self.component}] " if self.component else ""
        return f"{where}{who}{self.reason}: {self.line!r}"


class OptionsResult(BaseModel):
    options: Options = Field(default_factory=dict)
    diagnostics: list[Diagnostic] = Field(default_factory=list)


class Block(BaseModel):
    """A matched `///` block. Transient: lives only during one transpile call."""

    component: str
    title: str = ""
    option_lines: list[str] = Field(default_factory=list)
    body: str = ""
    raw: str = ""
    # 1-based line numbers of the opener and closing marker
    lineno: int = 0
    end_lineno: int = 0
    # Line number of the first header option line
    options_lineno: int = 0


class TranspileResult(BaseModel):
    text: str
    diagnostics: list[Diagnostic] = Field(default_factory=list)
