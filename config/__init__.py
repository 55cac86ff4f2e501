"""
Configuration package for Taxonomy Guard.

Exports:
- Settings: Application settings
- Constants: Application constants
"""

from .settings import Settings, get_settings, reset_settings
from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_REPORTED_ISSUES,
    FIELD_HEADERS,
    HEADER_ALIASES,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reset_settings",
    # Constants
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_MAX_REPORTED_ISSUES",
    "FIELD_HEADERS",
    "HEADER_ALIASES",
]
