"""Platform-independent helpers for evdispatch paths."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

_DEFAULT_APP_NAME = "evdispatch"
CONFIG_FILE_NAME = "config.toml"


@dataclass(frozen=True)
class UserDirs:
    """Expose the platform-configured location of the config tree."""

    app_name: str = _DEFAULT_APP_NAME
    config_dir_override: Path | None = None

    def config_dir(self) -> Path:
        return (
            self.config_dir_override
            if self.config_dir_override
            else Path(user_config_dir(self.app_name, appauthor=False))
        )

    def config_file(self) -> Path:
        return self.config_dir() / CONFIG_FILE_NAME


def default_config_path() -> Path:
    """Return the platform-specific default config path."""

    return UserDirs().config_file()
