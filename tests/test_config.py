"""Tests for YAML configuration loading and the config manager."""

import logging
from datetime import timedelta
from pathlib import Path

import pytest

from recording_format_toolkit.config import FormatToolkitConfig, get_config
from recording_format_toolkit.core.base import SizeConstraint
from recording_format_toolkit.core.config import ConfigManager, SelectionOptions, with_config_overrides


def test_defaults_without_config_file() -> None:
    config = get_config()

    assert config.source is None
    assert config.selection.platform == "generic"
    assert config.selection.default_recording_type == "meeting"
    assert config.profiles == {}
    assert config.global_.log_level == "WARNING"


def test_singleton_reads_working_directory() -> None:
    """Test get_config picks up config.yaml from the working directory."""
    (Path.cwd() / "config.yaml").write_text("selection:\n  platform: Desktop\n", encoding="utf-8")

    config = get_config()

    assert config.selection.platform == "desktop"
    assert get_config() is config


def test_load_from_file(config_file: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        config = FormatToolkitConfig.load_from_file(config_file)

    assert config.source == config_file
    assert config.selection.platform == "ios"
    assert config.selection.default_recording_type == "lecture"
    assert config.global_.log_level == "INFO"
    assert config.list_profiles() == ["lecture", "studio", "surround"]
    assert config.profiles["lecture"].noise_reduction
    assert config.profiles["studio"].quality == "ultra"
    assert "Incomplete profile data for 'broken'" in caplog.text


def test_invalid_yaml_falls_back_to_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("selection: [unclosed\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        config = FormatToolkitConfig.load_from_file(path)

    assert config.source is None
    assert config.selection.platform == "generic"
    assert "Failed to load config" in caplog.text


def test_missing_file_falls_back_to_defaults(tmp_path: Path) -> None:
    config = FormatToolkitConfig.load_from_file(tmp_path / "absent.yaml")
    assert config.source is None
    assert config.profiles == {}


def test_non_mapping_config_is_ignored(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        config = FormatToolkitConfig.load_from_file(path)

    assert config.selection.platform == "generic"
    assert "expected a mapping" in caplog.text


def test_invalid_log_level(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("global:\n  log_level: chatty\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        config = FormatToolkitConfig.load_from_file(path)

    assert config.global_.log_level == "WARNING"
    assert "Invalid log level 'CHATTY'" in caplog.text


def test_profile_model_dump(config_file: Path) -> None:
    profile = FormatToolkitConfig.load_from_file(config_file).profiles["lecture"]
    assert profile.model_dump() == {
        "quality": "medium",
        "channels": 1,
        "noise_reduction": True,
        "auto_gain_control": True,
        "echo_cancellation": False,
        "description": "",
    }


def test_manager_get_value(config_manager: ConfigManager) -> None:
    assert config_manager.get_value("selection.platform") == "ios"
    assert config_manager.get_value("global_.log_level") == "INFO"
    assert config_manager.get_value("selection.nothing", "fallback") == "fallback"


def test_manager_contexts_restore_overrides(config_manager: ConfigManager) -> None:
    """Test nested override contexts unwind in order."""
    with with_config_overrides(config_manager, selection__platform="android"):
        assert config_manager.get_value("selection.platform") == "android"
        with with_config_overrides(config_manager, selection__platform="desktop"):
            assert config_manager.get_value("selection.platform") == "desktop"
        assert config_manager.get_value("selection.platform") == "android"
    assert config_manager.get_value("selection.platform") == "ios"


def test_apply_selection_options(config_manager: ConfigManager) -> None:
    with with_config_overrides(config_manager):
        config_manager.apply_selection_options(SelectionOptions(platform="Android", default_recording_type="music"))
        assert config_manager.get_value("selection.platform") == "android"
        assert config_manager.get_value("selection.default_recording_type") == "music"
    assert config_manager.get_value("selection.platform") == "ios"


def test_apply_empty_selection_options(config_manager: ConfigManager) -> None:
    config_manager.apply_selection_options(SelectionOptions())
    assert config_manager.get_value("selection.platform") == "ios"


def test_size_constraint_requires_both_values() -> None:
    assert SizeConstraint.from_options(None, None) is None
    assert SizeConstraint.from_options(10, None) is None
    assert SizeConstraint.from_options(None, timedelta(minutes=5)) is None

    constraint = SizeConstraint.from_options(10, timedelta(minutes=5))
    assert constraint is not None
    assert constraint.allows(10.0)
    assert not constraint.allows(10.01)


def test_size_constraint_rejects_negative_values() -> None:
    with pytest.raises(ValueError, match="duration"):
        SizeConstraint(max_file_size_mb=5, expected_duration=timedelta(minutes=-1))
    with pytest.raises(ValueError, match="Maximum file size"):
        SizeConstraint(max_file_size_mb=-1, expected_duration=timedelta(minutes=1))
