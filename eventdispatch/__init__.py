from eventdispatch.event import Event
from eventdispatch.lib.events import EventDispatcher
from eventdispatch.lib.exceptions import EventDispatchError, InvalidConfig, InvalidListener
from eventdispatch.lib.factory import ObjectFactory
from eventdispatch.lib.listeners import Listener
from eventdispatch.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    Event.__name__,
    EventDispatcher.__name__,
    EventDispatchError.__name__,
    InvalidConfig.__name__,
    InvalidListener.__name__,
    Listener.__name__,
    ObjectFactory.__name__,
]
