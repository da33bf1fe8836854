"""Layered configuration for building dispatchers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import tomllib

from .errors import ConfigError
from .paths import default_config_path
from .sorter import TieBreak

__all__ = ["DispatcherConfig", "configure_logging"]

logger = logging.getLogger(__name__)

CONFIG_TABLE = "dispatcher"

_ENV_KEY_MAP: dict[str, str] = {
    "thread_safe": "EVDISPATCH_THREAD_SAFE",
    "tie_break": "EVDISPATCH_TIE_BREAK",
    "log_level": "EVDISPATCH_LOG_LEVEL",
}
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _load_config_from_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    table = data.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{CONFIG_TABLE}] in {path} must be a table")
    return table


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"{key} must be a boolean, got {value!r}")


def _as_tie_break(value: Any) -> TieBreak:
    if isinstance(value, TieBreak):
        return value
    try:
        return TieBreak(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(item.value for item in TieBreak)
        raise ConfigError(f"tie_break must be one of {choices}, got {value!r}") from None


def _as_log_level(value: Any) -> str | int:
    if isinstance(value, bool):
        raise ConfigError(f"unknown log_level {value!r}")
    if isinstance(value, int):
        return value
    level = str(value).strip().upper()
    if level.isdigit():
        return int(level)
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"unknown log_level {value!r}")
    return level


@dataclass(frozen=True)
class DispatcherConfig:
    """Settings applied when constructing a :class:`~evdispatch.Dispatcher`."""

    thread_safe: bool = False
    tie_break: TieBreak = TieBreak.NAME
    log_level: str | int = "WARNING"

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        *,
        env: Mapping[str, str] | None = None,
    ) -> "DispatcherConfig":
        """Resolve settings from env, then the TOML file, then defaults."""

        env = os.environ if env is None else env
        config_path = Path(path) if path is not None else default_config_path()
        values: dict[str, Any] = dict(_load_config_from_file(config_path))
        for key, variable in _ENV_KEY_MAP.items():
            if (value := env.get(variable)) is not None:
                values[key] = value
        return cls.from_mapping(values)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "DispatcherConfig":
        unknown = sorted(set(values) - set(_ENV_KEY_MAP))
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        defaults = cls()
        return cls(
            thread_safe=_as_bool("thread_safe", values.get("thread_safe", defaults.thread_safe)),
            tie_break=_as_tie_break(values.get("tie_break", defaults.tie_break)),
            log_level=_as_log_level(values.get("log_level", defaults.log_level)),
        )


def configure_logging(level: str | int) -> logging.Logger:
    """Apply ``level`` to the package logger and return it."""

    package_logger = logging.getLogger("evdispatch")
    package_logger.setLevel(level)
    return package_logger
