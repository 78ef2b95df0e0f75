"""
Application and test-run configuration module.

This module defines configuration classes for different environments
(development, testing, production). Configuration values are loaded
from environment variables with sensible defaults.

The same classes configure both the fixture login demo served by
``app`` and the browser test suite that drives it (live server
location, wait bound, demo credentials).
"""

import os


class Config:
    """Base configuration with default settings."""

    # Credentials accepted by the demo login form
    DEMO_USERNAME: str = os.environ.get("DEMO_USERNAME", "admin")
    DEMO_PASSWORD: str = os.environ.get("DEMO_PASSWORD", "admin123")

    # Where the local fixture server binds
    LIVE_SERVER_HOST: str = os.environ.get("LIVE_SERVER_HOST", "127.0.0.1")
    LIVE_SERVER_PORT: int = int(os.environ.get("LIVE_SERVER_PORT", "5001"))

    # Upper bound for every UI wait, in milliseconds
    UI_WAIT_TIMEOUT_MS: int = int(os.environ.get("UI_WAIT_TIMEOUT_MS", "5000"))


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = False
    TESTING: bool = True


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
