"""Component markup transpiler: `///` blocks -> DSFR HTML."""

from dsfrmark.transpiler.grammar import find_blocks, parse_document, substitute_blocks
from dsfrmark.transpiler.models import Block, Diagnostic, Options, OptionsResult, TranspileResult
from dsfrmark.transpiler.options import format_options, parse_options
from dsfrmark.transpiler.pipeline import PASS_ORDER, Transpiler, split_slides, transpile
from dsfrmark.transpiler.text import generate_id, split_label

__all__ = [
    "Block",
    "Diagnostic",
    "Options",
    "OptionsResult",
    "PASS_ORDER",
    "TranspileResult",
    "Transpiler",
    "find_blocks",
    "format_options",
    "generate_id",
    "parse_document",
    "parse_options",
    "split_label",
    "split_slides",
    "substitute_blocks",
    "transpile",
]
