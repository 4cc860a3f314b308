"""Tests for Event.dispatch and the Flask app wiring."""

import pytest
from flask import Flask
from sample_events import NoHandleListener, PaymentEvent, RecordingListener, RefundEvent

from eventdispatch import Event, EventDispatcher, InvalidListener
from eventdispatch.app import create_app
from eventdispatch.config import Config, ConfigType
from eventdispatch.lib.current_app import get_event_dispatcher


def test_create_app_installs_dispatcher(app):
    """create_app attaches a dispatcher loaded from EVENT_LISTENERS."""
    with app.app_context():
        dispatcher = get_event_dispatcher()

    assert isinstance(dispatcher, EventDispatcher)
    assert app.extensions["event_dispatcher"] is dispatcher
    assert dispatcher.has_listeners(PaymentEvent)
    assert dispatcher.log_events is True
    assert app.config["TESTING"] is True


def test_event_dispatch_uses_current_app(app):
    event = PaymentEvent(amount=10)

    with app.app_context():
        Event.dispatch(event)

    assert [e for _, e in RecordingListener.handled] == [event]


def test_event_dispatch_from_a_view(app):
    """Listeners run synchronously inside the request that dispatched the event."""

    @app.route("/pay/<int:amount>", methods=["POST"])
    def pay(amount):
        Event.dispatch(PaymentEvent(amount=amount))
        return {"handled": len(RecordingListener.handled)}

    response = app.test_client().post("/pay/25")

    assert response.status_code == 200
    assert response.get_json() == {"handled": 1}
    assert RecordingListener.handled[0][1].amount == 25


def test_event_dispatch_unregistered_event(app):
    with app.app_context():
        Event.dispatch(RefundEvent())

    assert RecordingListener.handled == []


def test_event_dispatch_propagates_invalid_listener():
    app = create_app(
        ConfigType.TESTING,
        {"EVENT_LISTENERS": {PaymentEvent: [NoHandleListener, RecordingListener]}},
    )

    with app.app_context(), pytest.raises(InvalidListener):
        Event.dispatch(PaymentEvent())

    assert RecordingListener.handled == []


def test_event_dispatch_outside_app_context():
    with pytest.raises(RuntimeError):
        Event.dispatch(PaymentEvent())


def test_each_app_has_its_own_dispatcher():
    captured = []
    first = create_app(ConfigType.TESTING, {"EVENT_LISTENERS": {PaymentEvent: [captured.append]}})
    second = create_app(ConfigType.TESTING)

    with second.app_context():
        Event.dispatch(PaymentEvent())
    assert captured == []

    with first.app_context():
        Event.dispatch(PaymentEvent())
    assert len(captured) == 1


def test_init_app_on_plain_flask_app():
    app = Flask(__name__)
    app.config["EVENT_LOG_EVENTS"] = False
    dispatcher = EventDispatcher(listen={PaymentEvent: [RecordingListener]})
    dispatcher.init_app(app)

    with app.app_context():
        assert get_event_dispatcher() is dispatcher
        Event.dispatch(PaymentEvent())

    assert dispatcher.log_events is False
    assert len(RecordingListener.handled) == 1


def test_create_app_with_log_dir(tmp_path):
    app = create_app(ConfigType.DEVELOPMENT, {"LOG_DIR": str(tmp_path / "logs")})

    assert app.config["DEBUG"] is True
    assert len(list((tmp_path / "logs").glob("*.log"))) == 1


def test_apps_do_not_share_listener_config():
    """Mutating one app's EVENT_LISTENERS leaves the Config classes and other apps alone."""
    first = create_app(ConfigType.TESTING)
    first.config["EVENT_LISTENERS"][PaymentEvent] = [print]
    first.config["EVENT_OBJECT_DEFINITIONS"]["payments"] = RecordingListener

    second = create_app(ConfigType.TESTING)

    assert Config.EVENT_LISTENERS is None
    assert Config.EVENT_OBJECT_DEFINITIONS is None
    assert second.config["EVENT_LISTENERS"] == {}
    assert second.config["EVENT_OBJECT_DEFINITIONS"] == {}
    assert not second.extensions["event_dispatcher"].has_listeners(PaymentEvent)
