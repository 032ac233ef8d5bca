"""Configuration for gopen."""

from gopen.config.logging import configure_logging
from gopen.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
