"""Tests for dsfrmark.config: models and YAML loader."""

import os
from unittest.mock import patch

import pytest
import yaml
from pydantic import ValidationError

from dsfrmark.config.loader import DEFAULT_CONFIG_TEMPLATE, _expand_env_vars, load_config
from dsfrmark.config.models import (
    DsfrmarkConfig,
    ExportConfig,
    MarkdownConfig,
    TranspilerConfig,
)


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run in an empty directory with an empty home, so no config file is found."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("DSFRMARK_CONFIG", raising=False)
    monkeypatch.delenv("DSFRMARK_ASSETS", raising=False)
    monkeypatch.chdir(work)
    return work


# ── DsfrmarkConfig defaults ────────────────────────────────────────


class TestDsfrmarkConfigDefaults:
    def test_default_log_level(self, sample_config):
        assert sample_config.log_level == "info"

    def test_default_log_format(self, sample_config):
        assert sample_config.log_format == "text"

    def test_default_strategy(self, sample_config):
        assert sample_config.transpiler.strategy == "nested"

    def test_default_diagnostics(self, sample_config):
        assert sample_config.transpiler.diagnostics == "warn"

    def test_markdown_enabled(self, sample_config):
        assert sample_config.markdown.enabled is True


# ── Individual config model validations ─────────────────────────────


class TestTranspilerConfig:
    def test_defaults(self):
        cfg = TranspilerConfig()
        assert cfg.slide_separator == "---"
        assert cfg.pictogram_path == "/artwork/pictograms"

    def test_invalid_strategy_rejected(self):
        with pytest.raises(ValidationError):
            TranspilerConfig(strategy="greedy")

    def test_invalid_diagnostics_mode(self):
        with pytest.raises(ValidationError):
            TranspilerConfig(diagnostics="loud")


class TestMarkdownConfig:
    def test_defaults(self):
        cfg = MarkdownConfig()
        assert cfg.preset == "commonmark"
        assert cfg.typographer is False

    def test_invalid_preset(self):
        with pytest.raises(ValidationError):
            MarkdownConfig(preset="gfm")


class TestExportConfig:
    def test_defaults(self):
        cfg = ExportConfig()
        assert cfg.lang == "fr"
        assert cfg.stylesheet_url.endswith("dsfr.min.css")
        assert cfg.script_url.endswith("dsfr.min.js")


# ── _expand_env_vars ────────────────────────────────────────────────


class TestExpandEnvVars:
    def test_expands_string_variable(self):
        with patch.dict(os.environ, {"DSFR_CDN": "https://cdn.local"}):
            assert _expand_env_vars("${DSFR_CDN}/dsfr.css") == "https://cdn.local/dsfr.css"

    def test_missing_var_becomes_empty(self):
        os.environ.pop("DSFRMARK_UNSET_VAR", None)
        assert _expand_env_vars("a${DSFRMARK_UNSET_VAR}b") == "ab"

    def test_expands_nested_structures(self):
        with patch.dict(os.environ, {"A": "alpha", "B": "beta"}):
            result = _expand_env_vars({"outer": {"inner": "${A}"}, "list": ["${B}"]})
            assert result == {"outer": {"inner": "alpha"}, "list": ["beta"]}

    def test_fallback_when_unset(self):
        os.environ.pop("DSFRMARK_UNSET_VAR", None)
        assert _expand_env_vars("${DSFRMARK_UNSET_VAR:-/artwork}/p") == "/artwork/p"

    def test_fallback_ignored_when_set(self):
        with patch.dict(os.environ, {"DSFRMARK_ASSETS": "/static"}):
            assert _expand_env_vars("${DSFRMARK_ASSETS:-/artwork}/p") == "/static/p"

    def test_empty_fallback(self):
        os.environ.pop("DSFRMARK_UNSET_VAR", None)
        assert _expand_env_vars("a${DSFRMARK_UNSET_VAR:-}b") == "ab"

    def test_non_string_passthrough(self):
        assert _expand_env_vars(42) == 42
        assert _expand_env_vars(True) is True
        assert _expand_env_vars(None) is None


# ── load_config ─────────────────────────────────────────────────────


class TestLoadConfig:
    def test_defaults_when_no_file(self, isolated):
        assert load_config() == DsfrmarkConfig()

    def test_cli_path(self, isolated):
        path = isolated / "custom.yaml"
        path.write_text("transpiler:\n  strategy: passes\nlog_level: debug\n")
        cfg = load_config(str(path))
        assert cfg.transpiler.strategy == "passes"
        assert cfg.log_level == "debug"

    def test_missing_cli_path(self, isolated):
        with pytest.raises(ValueError, match="Config file not found"):
            load_config(str(isolated / "nope.yaml"))

    def test_project_local(self, isolated):
        (isolated / "dsfrmark.yaml").write_text("export:\n  title: Notes\n")
        assert load_config().export.title == "Notes"

    def test_user_global(self, isolated):
        global_dir = isolated.parent / "home" / ".dsfrmark"
        global_dir.mkdir()
        (global_dir / "config.yaml").write_text("markdown:\n  enabled: false\n")
        assert load_config().markdown.enabled is False

    def test_project_local_beats_user_global(self, isolated):
        global_dir = isolated.parent / "home" / ".dsfrmark"
        global_dir.mkdir()
        (global_dir / "config.yaml").write_text("log_level: error\n")
        (isolated / "dsfrmark.yaml").write_text("log_level: warn\n")
        assert load_config().log_level == "warn"

    def test_empty_file_falls_through(self, isolated):
        (isolated / "dsfrmark.yaml").write_text("")
        assert load_config() == DsfrmarkConfig()

    def test_invalid_yaml(self, isolated):
        (isolated / "dsfrmark.yaml").write_text("transpiler: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config()

    def test_not_a_mapping(self, isolated):
        (isolated / "dsfrmark.yaml").write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="expected a mapping"):
            load_config()

    def test_invalid_value(self, isolated):
        (isolated / "dsfrmark.yaml").write_text("transpiler:\n  strategy: greedy\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config()

    def test_env_vars_expanded(self, isolated, monkeypatch):
        monkeypatch.setenv("DSFR_ASSETS", "/assets")
        (isolated / "dsfrmark.yaml").write_text(
            'transpiler:\n  pictogram_path: "${DSFR_ASSETS}/pictograms"\n'
        )
        assert load_config().transpiler.pictogram_path == "/assets/pictograms"

    def test_default_template_loads(self, isolated):
        (isolated / "dsfrmark.yaml").write_text(DEFAULT_CONFIG_TEMPLATE)
        assert load_config() == DsfrmarkConfig()

    def test_default_template_is_valid_yaml(self):
        assert isinstance(yaml.safe_load(DEFAULT_CONFIG_TEMPLATE), dict)

    def test_default_template_follows_assets_var(self, isolated, monkeypatch):
        monkeypatch.setenv("DSFRMARK_ASSETS", "/static")
        (isolated / "dsfrmark.yaml").write_text(DEFAULT_CONFIG_TEMPLATE)
        assert load_config().transpiler.pictogram_path == "/static/pictograms"


class TestConfigEnvVar:
    def test_env_path_used(self, isolated, monkeypatch):
        path = isolated / "elsewhere.yaml"
        path.write_text("log_level: debug\n")
        monkeypatch.setenv("DSFRMARK_CONFIG", str(path))
        assert load_config().log_level == "debug"

    def test_env_path_beats_project_local(self, isolated, monkeypatch):
        (isolated / "dsfrmark.yaml").write_text("log_level: warn\n")
        path = isolated / "elsewhere.yaml"
        path.write_text("log_level: error\n")
        monkeypatch.setenv("DSFRMARK_CONFIG", str(path))
        assert load_config().log_level == "error"

    def test_cli_path_beats_env_path(self, isolated, monkeypatch):
        env_path = isolated / "env.yaml"
        env_path.write_text("log_level: error\n")
        cli_path = isolated / "cli.yaml"
        cli_path.write_text("log_level: debug\n")
        monkeypatch.setenv("DSFRMARK_CONFIG", str(env_path))
        assert load_config(str(cli_path)).log_level == "debug"

    def test_missing_env_path(self, isolated, monkeypatch):
        monkeypatch.setenv("DSFRMARK_CONFIG", str(isolated / "gone.yaml"))
        with pytest.raises(ValueError, match=r"\$DSFRMARK_CONFIG file not found"):
            load_config()

    def test_empty_env_var_ignored(self, isolated, monkeypatch):
        monkeypatch.setenv("DSFRMARK_CONFIG", "")
        assert load_config() == DsfrmarkConfig()
