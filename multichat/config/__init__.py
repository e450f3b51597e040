"""
Configuration Module

Environment-driven settings for the MultiChat SDK.
"""

from multichat.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
]
