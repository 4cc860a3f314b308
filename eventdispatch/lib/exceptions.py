"""Errors raised by the event dispatcher."""

from __future__ import annotations

from typing import Any


class EventDispatchError(Exception):
    """Base class for errors raised by eventdispatch."""


class InvalidListener(EventDispatchError, ValueError):
    """A registered listener is neither callable nor a class with a handle method."""

    def __init__(self, listener: Any, message: str | None = None) -> None:
        self.listener = listener
        if message is None:
            message = (
                f"Listener {listener!r} must be a class with handle method or a callable"
            )
        super().__init__(message)


class InvalidConfig(EventDispatchError, ValueError):
    """An object definition can't be turned into an instance."""
