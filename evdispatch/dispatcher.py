"""Synchronous priority dispatcher for named events."""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from typing import Any, ContextManager, Iterable

from .config import DispatcherConfig, configure_logging
from .errors import (
    EventExistsError,
    EventNotExistError,
    ListenerExistsError,
    ListenerNotExistError,
)
from .sorter import PrioritySorter, TieBreak
from .types import Event, Listener, Subscription, describe

__all__ = ["Dispatcher"]

logger = logging.getLogger(__name__)


class Dispatcher:
    """Registry of events and listeners that fans triggers out by priority.

    All state lives in four mappings:

    * ``_events``: event name -> :class:`Event`
    * ``_listeners``: listener name -> listener instance
    * ``_priorities``: event name -> {listener name -> priority}
    * ``_sorted``: event name -> dispatch order

    A missing ``_sorted`` key means the order must be recomputed; an empty
    tuple is a computed order with no listeners. Every change to an event's
    priority table drops its ``_sorted`` entry.

    Without ``thread_safe`` no locking is done and callers must serialize
    access themselves. With it, one re-entrant lock covers every operation,
    including the whole callback fan-out of :meth:`trigger`.
    """

    def __init__(
        self,
        *,
        thread_safe: bool = False,
        tie_break: TieBreak = TieBreak.NAME,
    ) -> None:
        self._events: dict[str, Event] = {}
        self._listeners: dict[str, Any] = {}
        self._subscriptions: dict[str, tuple[Subscription, ...]] = {}
        self._priorities: dict[str, dict[str, int]] = {}
        self._sorted: dict[str, tuple[str, ...]] = {}
        self._tie_break = tie_break
        self._lock: ContextManager[Any] = threading.RLock() if thread_safe else nullcontext()
        self.thread_safe = thread_safe

    @classmethod
    def from_config(cls, config: "DispatcherConfig") -> "Dispatcher":
        """Build a dispatcher and apply the configured package log level."""

        configure_logging(config.log_level)
        return cls(thread_safe=config.thread_safe, tie_break=config.tie_break)

    @property
    def tie_break(self) -> TieBreak:
        return self._tie_break

    # ---------- Events ----------

    def add_event(self, event: Event) -> None:
        """Register ``event``, raising if its name is already taken."""

        with self._lock:
            if event.name in self._events:
                raise EventExistsError(event.name)
            self._events[event.name] = event
        logger.debug("event %s registered", event.name)

    def add_events(self, events: Iterable[Event]) -> None:
        """Register events in order, stopping at the first collision.

        Events registered before the collision stay registered.
        """

        with self._lock:
            for event in events:
                self.add_event(event)

    def has_event(self, name: str) -> bool:
        with self._lock:
            return name in self._events

    def events(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._events)

    # ---------- Listeners ----------

    def add_listener(self, *listeners: Listener) -> None:
        """Register listeners and their subscriptions.

        Processing stops at the first name collision; listeners handled
        earlier in the same call stay registered.
        """

        with self._lock:
            for listener in listeners:
                name, subscriptions = describe(listener)
                if name in self._listeners:
                    raise ListenerExistsError(name)
                self._listeners[name] = listener
                self._subscriptions[name] = subscriptions
                for subscription in subscriptions:
                    table = self._priorities.setdefault(subscription.name, {})
                    table[name] = subscription.priority
                    self._invalidate(subscription.name)
                logger.debug(
                    "listener %s registered for %s",
                    name,
                    ", ".join(s.name for s in subscriptions) or "no events",
                )

    def del_listener(self, name: str) -> None:
        """Remove a listener and its entries from every priority table."""

        with self._lock:
            if name not in self._listeners:
                raise ListenerNotExistError(name)
            del self._listeners[name]
            for subscription in self._subscriptions.pop(name, ()):
                table = self._priorities.get(subscription.name)
                if table is not None:
                    table.pop(name, None)
                    if not table:
                        del self._priorities[subscription.name]
                self._invalidate(subscription.name)
        logger.debug("listener %s removed", name)

    def has_listener(self, name: str) -> bool:
        with self._lock:
            return name in self._listeners

    def get_listener(self, name: str) -> Any:
        with self._lock:
            try:
                return self._listeners[name]
            except KeyError:
                raise ListenerNotExistError(name) from None

    def listener_names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._listeners)

    def priority(self, event_name: str, listener_name: str) -> int | None:
        """Return the priority ``listener_name`` holds for ``event_name``."""

        with self._lock:
            return self._priorities.get(event_name, {}).get(listener_name)

    # ---------- Dispatch ----------

    def listeners(self, event_name: str) -> tuple[str, ...]:
        """Return listener names in the order :meth:`trigger` would call them."""

        with self._lock:
            if event_name not in self._events:
                raise EventNotExistError(event_name)
            return self._order(event_name)

    def trigger(self, event_name: str, *params: Any) -> None:
        """Call every listener subscribed to ``event_name``, highest priority first.

        Callbacks run inline on the calling thread. An exception raised by a
        callback propagates and the remaining listeners are not called.
        """

        with self._lock:
            event = self._events.get(event_name)
            if event is None:
                raise EventNotExistError(event_name)
            order = self._order(event_name)
            logger.debug("trigger %s -> %d listener(s)", event_name, len(order))
            for listener_name in order:
                listener = self._listeners.get(listener_name)
                if listener is None:
                    # removed by an earlier callback of this trigger
                    continue
                event.call(listener, *params)

    def _order(self, event_name: str) -> tuple[str, ...]:
        cached = self._sorted.get(event_name)
        if cached is not None:
            return cached
        sorter = PrioritySorter(self._priorities.get(event_name, {}), self._tie_break)
        order = sorter.sort_reverse()
        self._sorted[event_name] = order
        logger.debug("sorted order rebuilt for %s: %s", event_name, order)
        return order

    def _invalidate(self, event_name: str) -> None:
        self._sorted.pop(event_name, None)
