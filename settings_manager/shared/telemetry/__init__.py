"""Shared telemetry: logging setup."""

from settings_manager.shared.telemetry.logging import get_logger, setup_logging

__all__ = ["setup_logging", "get_logger"]
