"""Errors raised by the evdispatch dispatcher."""

from __future__ import annotations


class DispatcherError(Exception):
    """Base class for dispatcher errors."""


class EventExistsError(DispatcherError):
    """Raised when an event name is already registered."""

    def __init__(self, event_name: str) -> None:
        super().__init__(f"event {event_name!r} already exists")
        self.event_name = event_name


class EventNotExistError(DispatcherError):
    """Raised when an event name is not registered."""

    def __init__(self, event_name: str) -> None:
        super().__init__(f"event {event_name!r} does not exist")
        self.event_name = event_name


class ListenerExistsError(DispatcherError):
    """Raised when a listener name is already registered."""

    def __init__(self, listener_name: str) -> None:
        super().__init__(f"listener {listener_name!r} already exists")
        self.listener_name = listener_name


class ListenerNotExistError(DispatcherError):
    """Raised when a listener name is not registered."""

    def __init__(self, listener_name: str) -> None:
        super().__init__(f"listener {listener_name!r} does not exist")
        self.listener_name = listener_name


class ConfigError(DispatcherError):
    """Raised when dispatcher configuration cannot be interpreted."""
