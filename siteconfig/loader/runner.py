import asyncio
import logging

from siteconfig.config.config_models import LoaderConfig, SiteConfig, SiteConfigRegistry
from siteconfig.config.settings import LOG_FORMAT
from siteconfig.exceptions import SiteConfigLoadError
from siteconfig.loader.loader import ConfigLoader, Decoder

PACKAGE_LOGGER = "siteconfig"


class LoaderRunner:
    """
    Loads a directory of site configs into a registry.

    Wraps ConfigLoader with strict-mode handling and a synchronous entry
    point for callers that are not running an event loop.
    """

    def __init__(self, log_level: int | None = None) -> None:
        """
        Create a runner whose messages go to stderr.

        Args:
            log_level: Optional level for the 'siteconfig' package logger.
                       When omitted the current level is left unchanged.
        """
        self.logger = logging.getLogger(__name__)
        self.setup_logging(log_level)

    def setup_logging(self, log_level: int | None = None) -> None:
        """
        Attach a stderr handler with the timestamped siteconfig format to the
        root logger, unless the application already configured one, and
        optionally set the level of the 'siteconfig' package logger.

        Args:
            log_level: Optional level for the 'siteconfig' package logger.
        """
        logging.basicConfig(format=LOG_FORMAT)
        if log_level is not None:
            logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)

    async def run_async(
        self,
        config_dir: str,
        loader_config: LoaderConfig | None = None,
        decode: Decoder | None = None,
        strict: bool = False,
    ) -> SiteConfigRegistry:
        """
        Load a config directory asynchronously.

        Args:
            config_dir: Directory holding one config file per site.
            loader_config: Optional concurrency and decoding settings.
            decode: Optional function turning raw file bytes into text.
            strict: Raise once all files were attempted if any of them failed.

        Returns:
            SiteConfigRegistry with the loaded sites and per-file errors.

        Raises:
            FileNotFoundError: If the config directory doesn't exist.
            SiteConfigLoadError: If strict is set and a file failed to load.
        """
        self.logger.info(f"Starting site config load from {config_dir}")

        loader = ConfigLoader(config_dir, loader_config=loader_config, decode=decode)
        await loader.load_configs()
        registry = loader.registry()

        if registry.errors:
            self.logger.warning(f"{len(registry.errors)} site config files failed to load")
            if strict:
                raise SiteConfigLoadError(registry.errors)

        return registry

    def run(
        self,
        config_dir: str,
        loader_config: LoaderConfig | None = None,
        decode: Decoder | None = None,
        strict: bool = False,
    ) -> SiteConfigRegistry:
        """
        Load a config directory synchronously.

        This is a convenience method that wraps the async version.

        Args:
            config_dir: Directory holding one config file per site.
            loader_config: Optional concurrency and decoding settings.
            decode: Optional function turning raw file bytes into text.
            strict: Raise once all files were attempted if any of them failed.

        Returns:
            SiteConfigRegistry with the loaded sites and per-file errors.
        """
        return asyncio.run(
            self.run_async(
                config_dir=config_dir,
                loader_config=loader_config,
                decode=decode,
                strict=strict,
            ),
        )


def load_configs(config_dir: str, loader_config: LoaderConfig | None = None) -> dict[str, SiteConfig]:
    """
    Load a config directory and return the parsed configs keyed by file name.

    Files that fail to load are logged and left out of the result.

    Args:
        config_dir: Directory holding one config file per site.
        loader_config: Optional concurrency and decoding settings.

    Returns:
        Mapping of file base name to its SiteConfig.
    """
    return LoaderRunner().run(config_dir, loader_config=loader_config).sites
