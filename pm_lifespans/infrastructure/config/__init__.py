"""Configuration module for pm_lifespans.

settings.py is the single entry point for runtime configuration.
"""

from pm_lifespans.infrastructure.config.settings import (
    ENV_PREFIX,
    Settings,
    get_settings,
    reload_settings,
)


__all__ = [
    "ENV_PREFIX",
    "Settings",
    "get_settings",
    "reload_settings",
]
