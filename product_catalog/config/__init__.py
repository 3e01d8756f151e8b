"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from product_catalog.config import get_settings, Settings

    settings = get_settings()
    print(settings.database_url)

==============================================================================
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
