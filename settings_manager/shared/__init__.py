"""Shared utilities: logging."""
