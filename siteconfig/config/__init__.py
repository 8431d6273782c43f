"""Configuration module for siteconfig.

This module provides the site config models and the manager that loads and
serves them.
"""

from siteconfig.config.config_models import (
    LoaderConfig,
    SiteConfig,
    SiteConfigRegistry,
)
from siteconfig.config.config_manager import ConfigManager

__all__ = [
    "ConfigManager",
    "LoaderConfig",
    "SiteConfig",
    "SiteConfigRegistry",
]
