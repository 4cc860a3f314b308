"""Synchronous event dispatcher keyed by event class."""

from __future__ import annotations

import inspect
import logging
from typing import Any

from eventdispatch.lib.exceptions import InvalidConfig
from eventdispatch.lib.factory import ObjectFactory, import_string
from eventdispatch.lib.listeners import (
    CallableListener,
    HandlerListener,
    make_listener,
    qualified_name,
)

EXTENSION_NAME = "event_dispatcher"


def event_type_key(event_type: type | str) -> type:
    """Resolve an event class or its dotted path to the class used as registry key.

    Raises:
        InvalidConfig: If a dotted path can't be imported or doesn't name a class.
    """
    if isinstance(event_type, str):
        event_type = import_string(event_type)
    if not inspect.isclass(event_type):
        raise InvalidConfig(f"Event type {event_type!r} is not a class")
    return event_type


class EventDispatcher:
    """Maps event classes to ordered listeners and calls them on dispatch.

    Listeners are called synchronously in registration order; exceptions bubble up
    and stop the remaining listeners for that dispatch. Only the exact class of the
    event is matched, so listeners of a parent class are not called for subclasses.

    Event types may be given as classes or dotted import paths. Paths are imported when
    the listener is registered, and the registry is keyed by the class itself.

    Registration is meant to happen at startup. ``on`` takes no lock, so registering
    while another thread dispatches is not supported.

    Example:
        ```python
        dispatcher = EventDispatcher(
            listen={
                PaymentEvent: [
                    "app.listeners.PaymentListener",
                    lambda event: print(event.amount),
                ],
            },
        )
        dispatcher.dispatch(PaymentEvent(amount=10))
        ```
    """

    def __init__(
        self,
        listen: dict[type | str, list[Any]] | None = None,
        log_events: bool = True,
        factory: ObjectFactory | None = None,
        logger: logging.Logger | None = None,
        app=None,
    ) -> None:
        self._listeners: dict[type, list[CallableListener | HandlerListener]] = {}
        self.log_events = log_events
        self.factory = factory if factory is not None else ObjectFactory()
        self.logger = logger if logger is not None else logging.getLogger(__name__)

        for event_type, listeners in (listen or {}).items():
            for listener in listeners:
                self.on(event_type, listener)

        if app is not None:
            self.init_app(app)

    def init_app(self, app) -> None:
        """Load listeners from the Flask config and attach to ``app.extensions``."""
        for identifier, definition in (app.config.get("EVENT_OBJECT_DEFINITIONS") or {}).items():
            self.factory.set(identifier, definition)
        for event_type, listeners in (app.config.get("EVENT_LISTENERS") or {}).items():
            for listener in listeners:
                self.on(event_type, listener)
        self.log_events = app.config.get("EVENT_LOG_EVENTS", self.log_events)
        app.extensions[EXTENSION_NAME] = self

    def on(self, event_type: type | str, listener: Any) -> None:
        """Register a listener for an event class."""
        key = event_type_key(event_type)
        if key not in self._listeners:
            self._listeners[key] = []
        self._listeners[key].append(make_listener(listener))

    def has_listeners(self, event_type: type | str) -> bool:
        return bool(self._listeners.get(event_type_key(event_type)))

    def listeners(self, event_type: type | str) -> list[CallableListener | HandlerListener]:
        """Listeners registered for an event class, in dispatch order."""
        return list(self._listeners.get(event_type_key(event_type), []))

    def dispatch(self, event: object) -> None:
        """Call all listeners registered for the class of ``event``."""
        listeners = self._listeners.get(type(event))
        if not listeners:
            return

        for listener in list(listeners):
            self.fire(event, listener)

    def fire(self, event: object, listener: Any) -> None:
        """Log and invoke a single listener with the event.

        Raises:
            InvalidListener: If a named handler has no ``handle`` method.
        """
        listener = make_listener(listener)
        self.log(event, listener)
        listener.fire(event, self.factory)

    def log(self, event: object, listener: CallableListener | HandlerListener) -> None:
        if not self.log_events:
            return
        try:
            self.logger.info(
                "Event: %s\nTrigger: %s", qualified_name(type(event)), listener.description
            )
        except Exception:
            # Dispatch continues even when the log handler fails
            pass
