"""
Configuration package for the LyricLearn backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    DatabaseSettings,
    ScoringSettings,
    ExtractionSettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "DatabaseSettings",
    "ScoringSettings",
    "ExtractionSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
