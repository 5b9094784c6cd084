"""Option mini-language: `key: value` lines inside a block."""

from __future__ import annotations

import re
from collections.abc import Collection

from .models import Diagnostic, Options, OptionsResult

# First colon separates key from value; the value keeps any later colons (URLs).
_OPTION_LINE_RE = re.compile(r"^\s*([A-Za-z0-9_]+):\s*(.+)$")


def _coerce(value: str) -> str | bool:
    if value == "true":
        return True
    if value == "false":
        return False
    return value


def parse_option_line(line: str) -> tuple[str, str | bool] | None:
    """Parse one option line. Returns None if the line is not `key: value`."""
    m = _OPTION_LINE_RE.match(line)
    if m is None:
        return None
    return m.group(1).strip(), _coerce(m.group(2).strip())


def is_option_line(line: str) -> bool:
    return _OPTION_LINE_RE.match(line) is not None


def parse_options(
    text: str,
    known: Collection[str] | None = None,
    *,
    component: str | None = None,
    first_lineno: int | None = None,
) -> OptionsResult:
    """Parse option-lines text into a flat mapping.

    Lines that are not `key: value` are left out of the mapping and reported.
    When `known` is given, keys outside it are kept but reported as unknown.
    Blank lines are skipped silently.
    """
    result = OptionsResult()
    if not text:
        return result

    for offset, line in enumerate(text.split("\n")):
        if not line.strip():
            continue
        lineno = first_lineno + offset if first_lineno is not None else None
        parsed = parse_option_line(line)
        if parsed is None:
            result.diagnostics.append(Diagnostic(
                line=line.strip(),
                reason="malformed option line",
                lineno=lineno,
                component=component,
            ))
            continue

        key, value = parsed
        if known is not None and key not in known:
            result.diagnostics.append(Diagnostic(
                line=line.strip(),
                reason=f"unknown option '{key}'",
                lineno=lineno,
                component=component,
            ))
        if key in result.options:
            result.diagnostics.append(Diagnostic(
                line=line.strip(),
                reason=f"duplicate option '{key}', last value wins",
                lineno=lineno,
                component=component,
            ))
        result.options[key] = value

    return result


def format_options(options: Options) -> str:
    """Serialize a mapping back to option lines."""
    lines = []
    for key, value in options.items():
        if isinstance(value, bool):
            value = "true" if value else "false"
        lines.append(f"{key}: {value}")
    return "\n".join(lines)
