import asyncio
import logging
import os
from collections.abc import Callable

from siteconfig.config.config_models import LoaderConfig, SiteConfig, SiteConfigRegistry
from siteconfig.parser.parser import parse_config_lines
from siteconfig.utils.file_utils import find_config_files

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes], str]


class ConfigLoader:
    """
    Loads every site config file of a directory.

    Files are read concurrently through worker threads, limited by a
    semaphore so only a few file handles are open at a time. Each file is
    parsed independently and stored under its base name.
    """

    def __init__(
        self,
        config_dir: str,
        loader_config: LoaderConfig | None = None,
        decode: Decoder | None = None,
    ) -> None:
        """
        Initialize the loader.

        Args:
            config_dir: Directory holding one config file per site.
            loader_config: Concurrency and decoding settings.
            decode: Function turning raw file bytes into text.
                Defaults to decoding with the configured encoding.
        """
        self.config_dir = config_dir
        self.loader_config = loader_config or LoaderConfig()
        self.decode = decode or self._default_decode

        self.site_configs: dict[str, SiteConfig] = {}
        self.errors: dict[str, str] = {}

        # Semaphore will be created in async context
        self._semaphore: asyncio.Semaphore | None = None

    @property
    def semaphore(self) -> asyncio.Semaphore:
        """Get or create the semaphore limiting concurrent file reads."""
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self.loader_config.max_concurrent)
        return self._semaphore

    def _default_decode(self, raw: bytes) -> str:
        return raw.decode(self.loader_config.encoding, errors=self.loader_config.errors)

    def _read_text(self, path: str) -> str:
        with open(path, "rb") as f:
            raw = f.read()
        return self.decode(raw)

    def load_config(self, path: str) -> SiteConfig:
        """
        Read and parse a single config file.

        Args:
            path: Path to the config file.

        Returns:
            The parsed SiteConfig.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file content cannot be decoded.
        """
        return parse_config_lines(self._read_text(path))

    async def _load_file(self, path: str) -> tuple[str, SiteConfig]:
        """
        Load one file while holding a semaphore slot.

        Args:
            path: Path to the config file.

        Returns:
            Tuple of the file base name and its parsed config.
        """
        name = os.path.basename(path)
        async with self.semaphore:
            logger.debug(f"Loading site config {path}")
            text = await asyncio.to_thread(self._read_text, path)
        return name, parse_config_lines(text)

    async def load_configs(self) -> dict[str, SiteConfig]:
        """
        Load all config files in the directory.

        A file that fails to load is logged and recorded in ``errors`` while
        the remaining files are still processed.

        Returns:
            Mapping of file base name to its SiteConfig.

        Raises:
            FileNotFoundError: If the config directory doesn't exist.
            NotADirectoryError: If the config path is not a directory.
        """
        paths = find_config_files(self.config_dir, include_hidden=self.loader_config.include_hidden)
        logger.info(f"Loading {len(paths)} site config files from {self.config_dir}")

        results = await asyncio.gather(*(self._load_file(path) for path in paths), return_exceptions=True)

        site_configs: dict[str, SiteConfig] = {}
        errors: dict[str, str] = {}
        for path, result in zip(paths, results, strict=True):
            name = os.path.basename(path)
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.error(f"Error loading site config {path}: {str(result)}")
                errors[name] = str(result)
                continue
            loaded_name, config = result
            site_configs[loaded_name] = config

        self.site_configs = site_configs
        self.errors = errors
        logger.info(f"Loaded {len(site_configs)} site configs ({len(errors)} failed)")

        return site_configs

    def registry(self) -> SiteConfigRegistry:
        """Build a registry of the most recent load."""
        return SiteConfigRegistry(sites=dict(self.site_configs), errors=dict(self.errors))


def load_config(path: str, loader_config: LoaderConfig | None = None) -> SiteConfig:
    """
    Read and parse a single site config file.

    Args:
        path: Path to the config file.
        loader_config: Optional decoding settings.

    Returns:
        The parsed SiteConfig.
    """
    return ConfigLoader(os.path.dirname(path), loader_config=loader_config).load_config(path)
