"""Configuration manager for siteconfig.

This module loads a directory of site config files and provides a
centralized interface for looking up the rules of a given site.
"""

import logging

from siteconfig.config.config_models import LoaderConfig, SiteConfig, SiteConfigRegistry
from siteconfig.config.settings import DEFAULT_CONFIG_DIR
from siteconfig.loader.runner import LoaderRunner
from siteconfig.utils.file_utils import site_name_candidates


class ConfigManager:
    """
    Manages the site configurations of a config directory.

    Loads every site config file once and provides an interface to access
    them by file name or by host name.
    """

    def __init__(
        self,
        config_dir: str | None = None,
        loader_config: LoaderConfig | None = None,
        registry: SiteConfigRegistry | None = None,
    ):
        """
        Initialize the configuration manager.

        Without a registry the directory is loaded through asyncio.run, so
        this constructor cannot be called from inside a running event loop.
        Use from_directory_async there instead.

        Args:
            config_dir: Optional path to the directory of site config files.
                        If not provided, the default directory is used.
            loader_config: Optional concurrency and decoding settings.
            registry: Optional registry that was already loaded from config_dir.
        """
        self.logger = logging.getLogger(__name__)
        self.config_dir = config_dir or DEFAULT_CONFIG_DIR
        if registry is None:
            registry = self._load_config_registry(self.config_dir, loader_config)
        self._config_registry = registry

    def _load_config_registry(self, config_dir: str, loader_config: LoaderConfig | None) -> SiteConfigRegistry:
        """
        Load the site configuration registry from a directory.

        Args:
            config_dir: Path to the directory of site config files.
            loader_config: Optional concurrency and decoding settings.

        Returns:
            SiteConfigRegistry containing all site configurations

        Raises:
            FileNotFoundError: If the configuration directory doesn't exist
            NotADirectoryError: If the configuration path is not a directory
        """
        try:
            return LoaderRunner().run(config_dir, loader_config=loader_config)
        except FileNotFoundError:
            self.logger.error(f"Configuration directory not found: {config_dir}")
            raise
        except NotADirectoryError:
            self.logger.error(f"Configuration path is not a directory: {config_dir}")
            raise

    def get_site_config(self, site: str) -> SiteConfig:
        """
        Get configuration for a specific site.

        Args:
            site: Site identifier (config file name) to get configuration for

        Returns:
            SiteConfig for the specified site

        Raises:
            ValueError: If the site doesn't exist in the configuration
        """
        if site not in self._config_registry.sites:
            raise ValueError(f"Site '{site}' not found in configuration")

        return self._config_registry.sites[site]

    def get_config_for_host(self, host: str) -> SiteConfig | None:
        """
        Find the configuration matching a host name.

        Tries the host itself, then with the config file suffix, then both
        again without a leading 'www.'.

        Args:
            host: Host name such as 'www.example.com'

        Returns:
            SiteConfig for the host, or None if no config file matches
        """
        for name in site_name_candidates(host):
            if name in self._config_registry.sites:
                self.logger.debug(f"Resolved host {host} to site config {name}")
                return self._config_registry.sites[name]
        return None

    def list_available_sites(self) -> list[str]:
        """
        List all available site configurations.

        Returns:
            List of site identifiers
        """
        return list(self._config_registry.sites.keys())

    @property
    def load_errors(self) -> dict[str, str]:
        """Files that failed to load, mapped to their error message."""
        return dict(self._config_registry.errors)

    @property
    def registry(self) -> SiteConfigRegistry:
        """The registry of loaded site configurations."""
        return self._config_registry

    @classmethod
    def from_directory(cls, config_dir: str) -> "ConfigManager":
        """
        Create a ConfigManager instance from a specific config directory.

        Args:
            config_dir: Path to the directory of site config files

        Returns:
            ConfigManager instance
        """
        return cls(config_dir=config_dir)

    @classmethod
    async def from_directory_async(
        cls,
        config_dir: str,
        loader_config: LoaderConfig | None = None,
    ) -> "ConfigManager":
        """
        Create a ConfigManager from within a running event loop.

        Args:
            config_dir: Path to the directory of site config files
            loader_config: Optional concurrency and decoding settings.

        Returns:
            ConfigManager instance

        Raises:
            FileNotFoundError: If the configuration directory doesn't exist
            NotADirectoryError: If the configuration path is not a directory
        """
        registry = await LoaderRunner().run_async(config_dir, loader_config=loader_config)
        return cls(config_dir=config_dir, registry=registry)
