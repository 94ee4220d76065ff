"""Tests for settings_manager logging setup."""

import logging

import pytest

from settings_manager.core.config import SettingsManagerConfig
from settings_manager.shared.telemetry.logging import LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def package_logger():
    """The settings_manager logger, restored after the test."""
    logger = logging.getLogger(LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers


def test_setup_logging_level_follows_debug(package_logger) -> None:
    """DEBUG when debug is on, INFO otherwise."""
    assert setup_logging(SettingsManagerConfig(debug=True)) is package_logger
    assert package_logger.level == logging.DEBUG

    setup_logging(SettingsManagerConfig(debug=False))
    assert package_logger.level == logging.INFO


def test_setup_logging_adds_handler_once_without_host_logging(package_logger) -> None:
    """With an unconfigured root logger a single stdout handler is attached."""
    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers.clear()
    package_logger.handlers[:] = []
    try:
        setup_logging(SettingsManagerConfig())
        setup_logging(SettingsManagerConfig())
    finally:
        root.handlers[:] = saved

    assert len(package_logger.handlers) == 1


def test_setup_logging_leaves_configured_host_alone(package_logger) -> None:
    """A root handler means the host owns output; no handler is added."""
    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers[:] = [logging.NullHandler()]
    package_logger.handlers[:] = []
    try:
        setup_logging(SettingsManagerConfig())
    finally:
        root.handlers[:] = saved

    assert package_logger.handlers == []


def test_get_logger_is_under_package_tree() -> None:
    """Module loggers sit under the settings_manager logger tree."""
    logger = get_logger("settings_manager.application.services")
    assert logger.name.startswith(LOGGER_NAME + ".")
    assert logger is logging.getLogger("settings_manager.application.services")
