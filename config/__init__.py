"""
Configuration package for the Insurance Form Assistant.

This package provides centralized configuration management using Pydantic settings.
"""

from .logging_config import configure_logging
from .settings import (
    Settings,
    CatalogSettings,
    MatchingSettings,
    DiscoverySettings,
    ValidationSettings,
    DocumentSettings,
    LoggingSettings,
    settings,
)

__all__ = [
    "Settings",
    "CatalogSettings",
    "MatchingSettings",
    "DiscoverySettings",
    "ValidationSettings",
    "DocumentSettings",
    "LoggingSettings",
    "configure_logging",
    "settings",
]

# Version info
__version__ = "1.0.0"
