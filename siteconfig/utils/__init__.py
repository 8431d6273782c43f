"""Utility modules for siteconfig."""

from siteconfig.utils.file_utils import find_config_files, site_name_candidates

__all__ = [
    "find_config_files",
    "site_name_candidates",
]
