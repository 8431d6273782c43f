"""
Parser module for siteconfig.

This module contains the line interpreter for site config files and the
parser for the ``prefix(key): value`` call syntax.
"""

from siteconfig.parser.call_parser import NO_MATCH, CallResult, parse_call
from siteconfig.parser.commands import (
    BOOLEAN_COMMANDS,
    MULTI_VALUE_COMMANDS,
    SINGLE_STRING_COMMANDS,
    ConfigField,
)
from siteconfig.parser.parser import parse_config_lines

__all__ = [
    "BOOLEAN_COMMANDS",
    "MULTI_VALUE_COMMANDS",
    "NO_MATCH",
    "SINGLE_STRING_COMMANDS",
    "CallResult",
    "ConfigField",
    "parse_call",
    "parse_config_lines",
]
