"""dsfrmark: Markdown with DSFR components."""

from dsfrmark.render import DocumentRenderer
from dsfrmark.transpiler import Transpiler, TranspileResult, transpile

__version__ = "0.1.0"

__all__ = ["DocumentRenderer", "TranspileResult", "Transpiler", "transpile"]
