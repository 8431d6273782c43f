"""Utilities for locating site config files."""

import logging
import os

from siteconfig.config.settings import CONFIG_FILE_SUFFIX

logger = logging.getLogger(__name__)

WWW_PREFIX = "www."


def find_config_files(directory: str, include_hidden: bool = False) -> list[str]:
    """
    List the regular files directly inside a config directory.

    Args:
        directory: Directory holding one config file per site
        include_hidden: Whether to include dot-files

    Returns:
        Sorted list of paths to the config files

    Raises:
        FileNotFoundError: If the directory doesn't exist
        NotADirectoryError: If the path is not a directory
    """
    if not os.path.exists(directory):
        raise FileNotFoundError(f"Config directory not found: {directory}")
    if not os.path.isdir(directory):
        raise NotADirectoryError(f"Not a directory: {directory}")

    config_files = []
    for name in sorted(os.listdir(directory)):
        if name.startswith(".") and not include_hidden:
            continue
        path = os.path.join(directory, name)
        if os.path.isfile(path):
            config_files.append(path)
        else:
            logger.debug(f"Skipping non-file entry: {path}")

    return config_files


def site_name_candidates(host: str) -> list[str]:
    """
    Build the config names that may hold the rules for a host.

    Args:
        host: Host name such as 'www.example.com'

    Returns:
        Candidate names, most specific first
    """
    hosts = [host.strip().lower()]
    if hosts[0].startswith(WWW_PREFIX):
        hosts.append(hosts[0][len(WWW_PREFIX) :])

    candidates = []
    for name in hosts:
        candidates.extend([name, name + CONFIG_FILE_SUFFIX])
    return candidates
