"""Application factory wiring the event dispatcher into Flask."""

import logging
from pathlib import Path

from flask import Flask

from eventdispatch import PACKAGE
from eventdispatch.config import ConfigType
from eventdispatch.lib.events import EventDispatcher
from eventdispatch.lib.logger import configure_logger


def create_app(
    config_type: ConfigType = ConfigType.PRODUCTION, config: dict | None = None
) -> Flask:
    """Create a Flask app with an EventDispatcher installed.

    Args:
        config_type: Base configuration class to load.
        config: Extra settings applied on top, e.g. ``EVENT_LISTENERS``.

    Returns:
        Flask: The configured application. Its dispatcher is reachable through
            ``app.extensions["event_dispatcher"]``.
    """
    app = Flask(PACKAGE)
    app.config.from_object(config_type.value)
    # Per-app copies, the Config classes stay untouched
    app.config["EVENT_LISTENERS"] = dict(app.config["EVENT_LISTENERS"] or {})
    app.config["EVENT_OBJECT_DEFINITIONS"] = dict(app.config["EVENT_OBJECT_DEFINITIONS"] or {})
    if config:
        app.config.update(config)

    if app.config["LOG_DIR"]:
        log_file = configure_logger(
            log_level=app.config["LOG_LEVEL"], log_dir=Path(app.config["LOG_DIR"])
        )
        logging.getLogger(PACKAGE).debug(f"Logging to {log_file}")

    EventDispatcher(app=app)
    return app
