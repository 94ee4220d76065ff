"""Logging for the settings manager.

Modules log through get_logger(__name__), so every record lands under the
"settings_manager" logger tree. setup_logging() sets that tree's level and
only attaches its own stdout handler when the host application has not
configured logging itself.
"""

import logging
import sys

from settings_manager.core.config import SettingsManagerConfig, get_config

LOGGER_NAME = "settings_manager"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_HANDLER_NAME = "settings_manager.stdout"


def setup_logging(config: SettingsManagerConfig | None = None) -> logging.Logger:
    """Configure the settings_manager logger tree and return its root logger.

    Level is DEBUG when config.debug is True, otherwise INFO. Calling it
    again updates the level without adding a second handler.
    """
    c = config or get_config()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if c.debug else logging.INFO)

    has_own_handler = any(h.get_name() == _HANDLER_NAME for h in logger.handlers)
    if not has_own_handler and not logging.getLogger().handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually __name__)."""
    return logging.getLogger(name)
