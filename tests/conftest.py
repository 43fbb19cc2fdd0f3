"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from scriptimport.config import ScriptImportSettings, reset_settings, set_settings

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import cli_invoke, clean_runner  # noqa: F401

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "scripts"

COFFEE_SHOP = """\
INT. COFFEE SHOP - DAY
John enters, scanning the room.
JOHN
Has anyone seen Sarah?
CUT TO:
EXT. ROOFTOP - NIGHT
SARAH
I'm right here.
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test with default settings and no SCRIPTIMPORT_ environment.

    Tests run from an empty directory so no project config file or .env is
    picked up.
    """
    for name in list(os.environ):
        if name.startswith("SCRIPTIMPORT_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    set_settings(ScriptImportSettings())
    yield
    reset_settings()


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample scripts."""
    return FIXTURES_DIR


@pytest.fixture
def coffee_shop_text() -> str:
    """Two-scene plain-text script."""
    return COFFEE_SHOP


@pytest.fixture
def script_copy(tmp_path, fixtures_dir):
    """Copy a fixture script into tmp_path and return the copy's path."""

    def _copy(name: str) -> Path:
        target = tmp_path / name
        target.write_bytes((fixtures_dir / name).read_bytes())
        return target

    return _copy
