"""Shared fixtures for the videoresolver test suite."""

import os
from pathlib import Path

import pytest

from videoresolver.utils import config as cfg


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file at a temp dir and clear VIDEORESOLVER_* env vars.

    Keeps tests independent from the developer's own configuration.
    """
    for name in list(os.environ):
        if name.startswith(cfg.ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    config_dir = tmp_path / "config" / "videoresolver"
    monkeypatch.setattr(cfg, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(cfg, "CONFIG_FILE", config_dir / "config.toml")
    return config_dir / "config.toml"
