"""Global configuration settings for the siteconfig package.

This module contains common settings used across the parser, the directory
loader and the command line interface.
"""

DEFAULT_CONFIG_DIR = "site_configs"

# Suffix used by the site config files (e.g. "example.com.txt")
CONFIG_FILE_SUFFIX = ".txt"

# Decoding defaults for raw config files
DEFAULT_ENCODING = "utf-8"
DEFAULT_DECODE_ERRORS = "strict"

# Maximum number of config files read at the same time
DEFAULT_MAX_CONCURRENT = 10

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
