from pydantic import BaseModel, Field
from typing import Literal


class TranspilerConfig(BaseModel):
    strategy: Literal["nested", "passes"] = "nested"
    slide_separator: str = "---"
    pictogram_path: str = "/artwork/pictograms"
    diagnostics: Literal["strict", "warn", "off"] = "warn"


class MarkdownConfig(BaseModel):
    enabled: bool = True
    preset: Literal["commonmark", "default", "zero"] = "commonmark"
    typographer: bool = False


class ExportConfig(BaseModel):
    title: str = "Export Markdown DSFR"
    lang: str = "fr"
    stylesheet_url: str = "https://cdn.jsdelivr.net/npm/@gouvfr/dsfr@latest/dist/dsfr.min.css"
    script_url: str = "https://cdn.jsdelivr.net/npm/@gouvfr/dsfr@latest/dist/dsfr.min.js"


class DsfrmarkConfig(BaseModel):
    transpiler: TranspilerConfig = Field(default_factory=TranspilerConfig)
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
