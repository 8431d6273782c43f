"""siteconfig - parser for per-site content extraction rules."""

from siteconfig.config import ConfigManager, LoaderConfig, SiteConfig, SiteConfigRegistry
from siteconfig.loader import ConfigLoader, LoaderRunner, load_config, load_configs
from siteconfig.parser import NO_MATCH, CallResult, parse_call, parse_config_lines

__version__ = "0.1.0"

__all__ = [
    "NO_MATCH",
    "CallResult",
    "ConfigLoader",
    "ConfigManager",
    "LoaderConfig",
    "LoaderRunner",
    "SiteConfig",
    "SiteConfigRegistry",
    "load_config",
    "load_configs",
    "parse_call",
    "parse_config_lines",
]
