"""Standalone HTML export: wraps rendered HTML in a DSFR page."""

from __future__ import annotations

import logging
from pathlib import Path

from dsfrmark.config.models import ExportConfig

logger = logging.getLogger(__name__)


def render_standalone(body_html: str, config: ExportConfig | None = None) -> str:
    """Wrap a rendered fragment in a complete page loading the DSFR assets."""
    cfg = config or ExportConfig()
    return f"""<!DOCTYPE html>
<html lang="{cfg.lang}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{cfg.title}</title>
  <link rel="stylesheet" href="{cfg.stylesheet_url}">
  <style>
    body {{
      font-family: 'Marianne', Arial, sans-serif;
      max-width: 1200px;
      margin: 0 auto;
      padding: 40px 20px;
      line-height: 1.6;
    }}
  </style>
</head>
<body>
{body_html}
<script src="{cfg.script_url}"></script>
</body>
</html>"""


def write_html(path: str | Path, html: str) -> Path:
    """Write HTML to `path`, creating parent directories."""
    dest = Path(path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(html, encoding="utf-8")
    logger.info("Wrote %s (%d bytes)", dest, len(html.encode("utf-8")))
    return dest
