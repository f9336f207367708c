"""Configuration module for sublang.

This module provides settings models and the loader that merges global,
project and environment configuration.
"""

from __future__ import annotations

from config.loader import load_settings, load_settings_from_cli
from config.models import AppSettings

__all__ = [
    # Models
    "AppSettings",
    # Loaders
    "load_settings",
    "load_settings_from_cli",
]
