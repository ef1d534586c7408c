"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from recording_format_toolkit.config.settings import _ConfigSingleton
from recording_format_toolkit.core import ConfigManager
from recording_format_toolkit.processors import FormatManager

CONFIG_YAML = """
selection:
  platform: ios
  default_recording_type: lecture

profiles:
  lecture:
    quality: medium
    channels: 1
    noise_reduction: true
    auto_gain_control: true
  studio:
    quality: ultra
    channels: 2
  broken:
    channels: 2
  surround:
    quality: high
    channels: 6

global:
  log_level: info
"""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without a stray config.yaml and with a fresh config singleton."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    _ConfigSingleton.reset()
    yield
    _ConfigSingleton.reset()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a config file with a custom platform and profiles."""
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


@pytest.fixture
def config_manager(config_file: Path) -> ConfigManager:
    return ConfigManager(config_file)


@pytest.fixture
def manager() -> FormatManager:
    """Format manager on the generic platform with built-in profiles."""
    return FormatManager(ConfigManager())
