"""Listener references and how they are invoked."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Protocol

from eventdispatch.lib.exceptions import InvalidListener
from eventdispatch.lib.factory import ObjectFactory, import_string

CLOSURE = "closure"


class Listener(Protocol):
    """Interface for named handler classes."""

    def handle(self, event: Any) -> None: ...


def qualified_name(cls: type) -> str:
    """Dotted name of a class used in log records, e.g. ``app.events.PaymentEvent``."""
    return f"{cls.__module__}.{cls.__qualname__}"


class CallableListener:
    """An inline callable invoked with the event."""

    description = CLOSURE

    def __init__(self, func: Callable[[Any], Any]) -> None:
        self.func = func

    def fire(self, event: Any, factory: ObjectFactory) -> None:
        self.func(event)

    def __repr__(self) -> str:
        return f"CallableListener({self.func!r})"


class HandlerListener:
    """A named handler, built by the factory each time it fires."""

    def __init__(self, ref: Any) -> None:
        self.ref = ref

    @property
    def description(self) -> str:
        ref = self.ref
        if inspect.isclass(ref):
            return qualified_name(ref)
        if isinstance(ref, dict):
            cls = ref.get("class")
            return qualified_name(cls) if inspect.isclass(cls) else str(cls)
        return str(ref)

    def fire(self, event: Any, factory: ObjectFactory) -> None:
        ref = self.ref
        if isinstance(ref, str) and not factory.has(ref):
            # A dotted path may name a plain function instead of a handler class
            ref = import_string(ref)
            if not inspect.isclass(ref):
                if not callable(ref):
                    raise InvalidListener(self.ref)
                ref(event)
                return
        handler = factory.create_object(ref)
        handle = getattr(handler, "handle", None)
        if not callable(handle):
            raise InvalidListener(self.ref)
        handle(event)

    def __repr__(self) -> str:
        return f"HandlerListener({self.ref!r})"


def make_listener(ref: Any) -> CallableListener | HandlerListener:
    """Classify a listener reference.

    Classes, strings and definition dicts are named handlers. A class is callable, but
    calling it with the event would only construct it, so it never counts as inline.
    Anything else callable is an inline listener. The rest is left to the factory,
    which rejects it when the listener fires.
    """
    if isinstance(ref, (CallableListener, HandlerListener)):
        return ref
    if isinstance(ref, (str, dict)) or inspect.isclass(ref):
        return HandlerListener(ref)
    if callable(ref):
        return CallableListener(ref)
    return HandlerListener(ref)
