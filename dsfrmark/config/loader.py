"""YAML config loading with env var expansion.

Resolution order: `--config` path, then `$DSFRMARK_CONFIG`, then
`./dsfrmark.yaml`, then `~/.dsfrmark/config.yaml`, then built-in defaults.
The first file that exists and is not empty wins; files are not merged.
"""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import DsfrmarkConfig

CONFIG_ENV_VAR = "DSFRMARK_CONFIG"

# ${VAR} or ${VAR:-fallback}
_ENV_REF_RE = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def _explicit_path(value: str, origin: str) -> Path:
    path = Path(value).expanduser()
    if not path.exists():
        raise ValueError(f"{origin} not found: {value}")
    return path


def _config_paths(cli_path: str | None) -> list[Path]:
    """Candidate config files in priority order. Explicit paths must exist."""
    paths = []
    if cli_path:
        paths.append(_explicit_path(cli_path, "Config file"))
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        paths.append(_explicit_path(env_path, f"${CONFIG_ENV_VAR} file"))
    paths.append(Path("./dsfrmark.yaml"))
    paths.append(Path.home() / ".dsfrmark" / "config.yaml")
    return paths


def _read_config(path: Path) -> dict | None:
    """Parsed mapping from `path`, or None when the file is empty."""
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")
    return raw


def load_config(cli_path: str | None = None) -> DsfrmarkConfig:
    """Load the first config file found, or defaults when there is none."""
    for path in _config_paths(cli_path):
        if not path.is_file():
            continue
        raw = _read_config(path)
        if raw is None:
            continue
        try:
            return DsfrmarkConfig(**_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return DsfrmarkConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} and ${VAR:-fallback} references in strings.

    An unset variable without a fallback expands to "".
    """
    if isinstance(obj, str):
        return _ENV_REF_RE.sub(lambda m: os.environ.get(m.group(1), m.group(2) or ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `dsfrmark config init`
DEFAULT_CONFIG_TEMPLATE = """\
# dsfrmark.yaml

# Component transpiler
transpiler:
  strategy: "nested"           # nested | passes
  slide_separator: "---"
  pictogram_path: "${DSFRMARK_ASSETS:-/artwork}/pictograms"
  diagnostics: "warn"          # strict | warn | off

# Markdown rendering (markdown-it-py)
markdown:
  enabled: true
  preset: "commonmark"         # commonmark | default | zero
  typographer: false

# Standalone page export
export:
  title: "Export Markdown DSFR"
  lang: "fr"
  # stylesheet_url: "https://cdn.jsdelivr.net/npm/@gouvfr/dsfr@latest/dist/dsfr.min.css"
  # script_url: "https://cdn.jsdelivr.net/npm/@gouvfr/dsfr@latest/dist/dsfr.min.js"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
