"""Configuration management for WorkCatalog.

This module provides centralized configuration loaded from environment variables
with validation using Pydantic BaseSettings.

Usage:
    >>> from work_catalog.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.LOG_LEVEL)
"""

from work_catalog.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
