"""Pytest configuration and fixtures."""

import os

import pytest

from scripter.config import ScripterSettings, reset_settings, set_settings

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import clean_runner  # noqa: F401


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test",
    )
    config.addinivalue_line(
        "markers",
        "unit: mark test as unit test",
    )


@pytest.fixture(autouse=True)
def isolated_test_environment(tmp_path, monkeypatch):
    """Run every test with default settings in a scratch working directory.

    Generated .fountain files land in tmp_path, and user or project config
    files cannot leak into the settings under test.
    """
    for var in [k for k in os.environ if k.startswith("SCRIPTER_")]:
        monkeypatch.delenv(var)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)

    reset_settings()
    set_settings(ScripterSettings(_env_file=None))

    yield

    reset_settings()
