"""Shared pytest fixtures for probtree tests."""

import pytest

WEATHER_OUTLINE = """\
Weather
  0.3: Rain
    [umbrella] 0.9: Take umbrella
    0.1: Get wet
  0.7: Sun
    1: (umbrella)
"""


@pytest.fixture
def weather_outline():
    """A small outline with nesting, an explicit id and a link."""
    return WEATHER_OUTLINE


@pytest.fixture
def outline_file(tmp_path, weather_outline):
    """Weather outline written to a file."""
    path = tmp_path / "weather.txt"
    path.write_text(weather_outline, encoding="utf-8")
    return path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PROBTREE_* variables so config tests see defaults only."""
    import os

    for name in list(os.environ):
        if name.startswith("PROBTREE_"):
            monkeypatch.delenv(name)
    return monkeypatch
