"""Shared test fixtures for dsfrmark."""

import pytest

from dsfrmark.config.models import DsfrmarkConfig
from dsfrmark.transpiler import Transpiler
from dsfrmark.transpiler.components import RenderContext


ALERT_DOC = """\
/// alert | Warning
type: warning
///
Body text
///"""

GRID_DOC = """\
/// row
/// col | 6
Left
///
/// col | 6
Right
///
///"""

CARDS_IN_GRID_DOC = """\
# Services

/// row | fr-grid-row--gutters
/// col | 12 md-6
/// card | First
target: /first
///
One
///
///
/// col | 12 md-6
/// tile | Second
picto: city-hall
///
Two
///
///
///

The end."""


@pytest.fixture
def sample_config():
    return DsfrmarkConfig()


@pytest.fixture
def ctx():
    return RenderContext()


@pytest.fixture(params=["nested", "passes"])
def transpiler(request):
    """Both strategies; tests using this must hold for either."""
    return Transpiler(strategy=request.param)


@pytest.fixture
def nested():
    return Transpiler(strategy="nested")


@pytest.fixture
def passes():
    return Transpiler(strategy="passes")


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "doc.md"
    path.write_text(ALERT_DOC, encoding="utf-8")
    return path
