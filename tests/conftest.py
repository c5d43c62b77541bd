"""Pytest configuration and fixtures."""

import pytest

from dos_datetime.models import DateTimeFields


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temporary directory so no test touches ~/.dosdt."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def config_file(isolated_home):
    """Path of the default config file inside the isolated home."""
    return isolated_home / ".dosdt" / "config.toml"


@pytest.fixture
def sample_fields():
    """2024-06-15 13:30:45.000, encodes to 0x58CF / 0x6BD6."""
    return DateTimeFields(2024, 6, 15, 13, 30, 45, 0)


@pytest.fixture
def epoch_fields():
    """1980-01-01 00:00:00.000, the smallest DOS date/time."""
    return DateTimeFields(1980, 1, 1, 0, 0, 0, 0)
