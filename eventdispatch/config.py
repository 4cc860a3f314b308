import enum
import logging
import secrets


class Config:
    """Base configuration."""

    SECRET_KEY = secrets.token_bytes(24)
    LOG_LEVEL = logging.INFO
    LOG_DIR = None
    # Event class (or dotted path) -> ordered list of listeners
    EVENT_LISTENERS = None
    # Named object definitions the listener factory can build
    EVENT_OBJECT_DEFINITIONS = None
    EVENT_LOG_EVENTS = True


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = logging.DEBUG


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True


class ConfigType(enum.Enum):
    DEVELOPMENT = DevelopmentConfig
    PRODUCTION = ProductionConfig
    TESTING = TestingConfig
