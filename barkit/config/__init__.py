"""
Configuration management for barkit.
"""

from barkit.config.logging import configure_logging
from barkit.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
