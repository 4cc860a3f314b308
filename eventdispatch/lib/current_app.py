from flask import current_app

from eventdispatch.lib.events import EXTENSION_NAME, EventDispatcher


def get_event_dispatcher() -> EventDispatcher:
    """Get the current app's EventDispatcher instance
    This function returns the EventDispatcher registered on the current app by
    `EventDispatcher.init_app`.
    Returns:
        EventDispatcher: The dispatcher stored in the current app's extensions.
    """
    return current_app.extensions[EXTENSION_NAME]
