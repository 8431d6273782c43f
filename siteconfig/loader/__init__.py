"""
Loader module for siteconfig.

This module contains the directory loader that reads a folder of site config
files with bounded concurrency, and a runner that drives it synchronously.
"""

from siteconfig.loader.loader import ConfigLoader, load_config
from siteconfig.loader.runner import LoaderRunner, load_configs

__all__ = ["ConfigLoader", "LoaderRunner", "load_config", "load_configs"]
