"""In-process priority event dispatcher."""

from .config import DispatcherConfig, configure_logging
from .dispatcher import Dispatcher
from .errors import (
    ConfigError,
    DispatcherError,
    EventExistsError,
    EventNotExistError,
    ListenerExistsError,
    ListenerNotExistError,
)
from .paths import UserDirs, default_config_path
from .sorter import PrioritySorter, TieBreak
from .types import Event, Listener, Subscription

__all__ = [
    "Dispatcher",
    "DispatcherConfig",
    "configure_logging",
    "Event",
    "Listener",
    "Subscription",
    "PrioritySorter",
    "TieBreak",
    "DispatcherError",
    "EventExistsError",
    "EventNotExistError",
    "ListenerExistsError",
    "ListenerNotExistError",
    "ConfigError",
    "UserDirs",
    "default_config_path",
]
