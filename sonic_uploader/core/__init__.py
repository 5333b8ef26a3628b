"""Ambient configuration and logging for the uploader."""

from sonic_uploader.core.config import Settings, get_settings
from sonic_uploader.core.logging import configure_structlog

__all__ = ["Settings", "configure_structlog", "get_settings"]
