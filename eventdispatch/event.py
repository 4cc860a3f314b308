"""Helper for event dispatch."""

from eventdispatch.lib.current_app import get_event_dispatcher


class Event:
    """Dispatches events through the current Flask app's dispatcher.

    To trigger an event from a view or anything else running in an app context:

    ```python
    from eventdispatch import Event

    Event.dispatch(PaymentEvent(amount=10))
    ```
    """

    @staticmethod
    def dispatch(event: object) -> None:
        get_event_dispatcher().dispatch(event)
