from .loader import load_config
from .models import (
    DsfrmarkConfig,
    ExportConfig,
    MarkdownConfig,
    TranspilerConfig,
)

__all__ = [
    "DsfrmarkConfig",
    "ExportConfig",
    "MarkdownConfig",
    "TranspilerConfig",
    "load_config",
]
