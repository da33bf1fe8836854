"""Tests for dispatcher configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from evdispatch.config import DispatcherConfig, configure_logging
from evdispatch.errors import ConfigError
from evdispatch.paths import UserDirs, default_config_path
from evdispatch.sorter import TieBreak


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    config = DispatcherConfig.load(tmp_path / "absent.toml", env={})
    assert config == DispatcherConfig()
    assert config.tie_break is TieBreak.NAME
    assert not config.thread_safe


def test_file_values_are_read_from_dispatcher_table(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        '[dispatcher]\nthread_safe = true\ntie_break = "registration"\nlog_level = "debug"\n',
        encoding="utf-8",
    )
    config = DispatcherConfig.load(path, env={})
    assert config.thread_safe
    assert config.tie_break is TieBreak.REGISTRATION
    assert config.log_level == "DEBUG"


def test_env_overrides_file(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('[dispatcher]\nthread_safe = true\n', encoding="utf-8")
    env = {"EVDISPATCH_THREAD_SAFE": "no", "EVDISPATCH_TIE_BREAK": "Name"}
    config = DispatcherConfig.load(path, env=env)
    assert not config.thread_safe
    assert config.tie_break is TieBreak.NAME


def test_unreadable_toml_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("[dispatcher\n", encoding="utf-8")
    assert DispatcherConfig.load(path, env={}) == DispatcherConfig()


@pytest.mark.parametrize(
    "values",
    [
        {"thread_safe": "maybe"},
        {"tie_break": "random"},
        {"log_level": "chatty"},
        {"colour": "blue"},
    ],
)
def test_invalid_values_raise(values: dict[str, str]) -> None:
    with pytest.raises(ConfigError):
        DispatcherConfig.from_mapping(values)


def test_default_path_uses_user_config_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("evdispatch.paths.user_config_dir", lambda *args, **kwargs: str(tmp_path))
    assert default_config_path() == tmp_path / "config.toml"
    override = UserDirs(config_dir_override=tmp_path / "custom")
    assert override.config_file() == tmp_path / "custom" / "config.toml"


def test_configure_logging_sets_package_level() -> None:
    package_logger = configure_logging("DEBUG")
    try:
        assert package_logger is logging.getLogger("evdispatch")
        assert logging.getLogger("evdispatch.dispatcher").getEffectiveLevel() == logging.DEBUG
    finally:
        package_logger.setLevel(logging.NOTSET)


def test_numeric_log_levels_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("[dispatcher]\nlog_level = 10\n", encoding="utf-8")
    assert DispatcherConfig.load(path, env={}).log_level == logging.DEBUG
    env = {"EVDISPATCH_LOG_LEVEL": "20"}
    assert DispatcherConfig.load(path, env=env).log_level == logging.INFO
    with pytest.raises(ConfigError):
        DispatcherConfig.from_mapping({"log_level": True})
