"""Tests for environment-driven configuration."""
import importlib
from pathlib import Path

import pytest

from sleevelock import config


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config, monkeypatch):
    for key in ("SLEEVELOCK_OUT_DIR", "SLEEVELOCK_FORMATS", "SLEEVELOCK_TOLERANCE",
                "SLEEVELOCK_SPACING", "SLEEVELOCK_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    cfg = reload_config()
    assert cfg.EXPORT_FORMATS == ["stl"]
    assert cfg.STL_TOLERANCE == 0.05
    assert cfg.LAYOUT_SPACING == 5.0
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.OUT_DIR.name == "out"


def test_environment_overrides(reload_config, tmp_path):
    cfg = reload_config(
        SLEEVELOCK_OUT_DIR=str(tmp_path),
        SLEEVELOCK_FORMATS="STL, step",
        SLEEVELOCK_TOLERANCE="0.01",
        SLEEVELOCK_SPACING="12",
        SLEEVELOCK_LOG_LEVEL="debug",
    )
    assert cfg.OUT_DIR == Path(tmp_path)
    assert cfg.EXPORT_FORMATS == ["stl", "step"]
    assert cfg.STL_TOLERANCE == 0.01
    assert cfg.LAYOUT_SPACING == 12.0
    assert cfg.LOG_LEVEL == "DEBUG"
