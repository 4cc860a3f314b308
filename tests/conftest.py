"""Pytest fixtures for eventdispatch tests."""

import logging

import pytest
from sample_events import PaymentEvent, RecordingListener

from eventdispatch import PACKAGE
from eventdispatch.app import create_app
from eventdispatch.config import ConfigType


@pytest.fixture(autouse=True)
def reset_recording_listener():
    RecordingListener.handled = []
    yield
    RecordingListener.handled = []


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by configure_logger between tests."""
    yield
    logger = logging.getLogger(PACKAGE)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def app():
    """A testing app with RecordingListener bound to PaymentEvent."""
    return create_app(
        ConfigType.TESTING,
        {"EVENT_LISTENERS": {PaymentEvent: [RecordingListener]}},
    )
