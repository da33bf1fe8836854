"""Event, subscription and listener descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence, runtime_checkable

__all__ = ["Event", "EventCallback", "Subscription", "Listener"]

EventCallback = Callable[..., None]


def _validate_name(label: str, value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{label} must be a string.")
    if not value:
        raise ValueError(f"{label} cannot be empty.")
    return value


@dataclass(frozen=True)
class Event:
    """A named event and the callback that delivers it to one listener.

    ``call`` receives the listener instance followed by the trigger
    parameters. It is expected to know the concrete listener type it was
    written for; handing it anything else is a programming error.
    """

    name: str
    call: EventCallback

    def __post_init__(self) -> None:
        _validate_name("name", self.name)
        if not callable(self.call):
            raise TypeError("call must be callable.")


@dataclass(frozen=True)
class Subscription:
    """Interest of a listener in one event; higher priority runs earlier."""

    name: str
    priority: int = 0

    def __post_init__(self) -> None:
        _validate_name("name", self.name)
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise TypeError("priority must be an int.")


@runtime_checkable
class Listener(Protocol):
    """Anything that can declare its listener name and subscriptions."""

    def get_subscribe(self) -> tuple[str, Sequence[Subscription]]:  # pragma: no cover - Protocol
        ...


def describe(listener: Any) -> tuple[str, tuple[Subscription, ...]]:
    """Return the validated ``(name, subscriptions)`` declared by ``listener``."""

    name, subscriptions = listener.get_subscribe()
    _validate_name("listener name", name)
    subscriptions = tuple(subscriptions)
    for item in subscriptions:
        if not isinstance(item, Subscription):
            raise TypeError(
                f"listener {name!r} declared {item!r}; expected a Subscription."
            )
    return name, subscriptions
