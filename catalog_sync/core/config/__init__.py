"""
Configuration module for the catalog sync library
"""

from .settings import Settings, LoggingSettings, get_settings

__all__ = [
    "Settings",
    "LoggingSettings",
    "get_settings",
]
