"""Line interpreter for site config files.

This module turns the text of one site config file into a ``SiteConfig``.
Each line holds one directive, except for ``find_string`` which pairs with a
``replace_string:`` line directly below it.
"""

import logging

from siteconfig.config.config_models import SiteConfig
from siteconfig.parser.call_parser import parse_call
from siteconfig.parser.commands import (
    BOOLEAN_COMMANDS,
    FIND_STRING,
    HTTP_HEADER,
    MULTI_VALUE_COMMANDS,
    REPLACE_STRING,
    SINGLE_STRING_COMMANDS,
    TRUE_TOKENS,
    ConfigField,
)

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
COMMAND_SEPARATOR = ":"
EXTRA_FIELD_SEPARATOR = "="


class _SiteConfigBuilder:
    """Mutable accumulator used while a single file is being parsed."""

    def __init__(self) -> None:
        self.multi_values: dict[ConfigField, list[str]] = {
            field: [] for field in MULTI_VALUE_COMMANDS.values() if field is not ConfigField.LOGIN_EXTRA_FIELDS
        }
        self.flags: dict[ConfigField, bool] = {field: False for field in BOOLEAN_COMMANDS.values()}
        self.strings: dict[ConfigField, str] = {field: "" for field in SINGLE_STRING_COMMANDS.values()}
        self.login_extra_fields: dict[str, list[str]] = {}
        self.http_headers: dict[str, str] = {}
        self.string_replacer: dict[str, str] = {}

    def append(self, field: ConfigField, value: str) -> None:
        if field is ConfigField.LOGIN_EXTRA_FIELDS:
            name, separator, extra_value = value.partition(EXTRA_FIELD_SEPARATOR)
            values = self.login_extra_fields.setdefault(name.strip(), [])
            if separator:
                values.append(extra_value.strip())
            return
        self.multi_values[field].append(value)

    def build(self) -> SiteConfig:
        return SiteConfig(
            **{field.value: values for field, values in self.multi_values.items()},
            **{field.value: flag for field, flag in self.flags.items()},
            **{field.value: text for field, text in self.strings.items()},
            login_extra_fields=[self.login_extra_fields],
            http_headers=self.http_headers,
            string_replacer=self.string_replacer,
        )


def _value_after_separator(line: str) -> str:
    """Return everything after the first colon of a line, untrimmed."""
    return line.partition(COMMAND_SEPARATOR)[2]


def parse_config_lines(raw_config: str) -> SiteConfig:
    """
    Parse the text of a site config file.

    Malformed or unknown lines are skipped, so the worst outcome for bad
    input is a config with fewer fields set.

    Args:
        raw_config: Decoded content of a site config file

    Returns:
        The SiteConfig described by the text
    """
    # Only "\n" ends a line; other Unicode line breaks stay inside the text
    lines = [line[:-1] if line.endswith("\r") else line for line in raw_config.split("\n")]
    builder = _SiteConfigBuilder()
    skip_next = False

    index = 0
    while index < len(lines):
        line = lines[index].strip()
        next_index = index + 1

        if not line or line.startswith(COMMENT_PREFIX):
            index = next_index
            continue

        if skip_next:
            # Already consumed as the replace half of a find_string pair
            skip_next = False
            index = next_index
            continue

        chunks = [chunk.strip() for chunk in line.split(COMMAND_SEPARATOR)]
        if len(chunks) < 2 or not chunks[0] or not chunks[1]:
            index = next_index
            continue
        command, command_value = chunks[0], chunks[1]

        if command in MULTI_VALUE_COMMANDS:
            logger.debug(f"Command used: {command}")
            builder.append(MULTI_VALUE_COMMANDS[command], command_value)
        elif command in BOOLEAN_COMMANDS:
            # Compares the command name, not the value; known boolean commands always end up False
            builder.flags[BOOLEAN_COMMANDS[command]] = command in TRUE_TOKENS
        elif command in SINGLE_STRING_COMMANDS:
            builder.strings[SINGLE_STRING_COMMANDS[command]] = command_value
        elif line.startswith(FIND_STRING):
            next_line = lines[next_index] if next_index < len(lines) else ""
            if next_line.strip().startswith(REPLACE_STRING + COMMAND_SEPARATOR):
                find_text = _value_after_separator(line)
                replace_text = _value_after_separator(next_line)
                if replace_text:
                    builder.string_replacer[find_text] = replace_text
                else:
                    logger.debug(f"Dropping find_string with empty replacement: {line}")
                skip_next = True
            else:
                logger.debug(f"Dropping find_string without replace_string: {line}")
        elif line.startswith(REPLACE_STRING + "("):
            key, value = parse_call(REPLACE_STRING, line)
            if key:
                builder.string_replacer[key] = value
        elif line.startswith(HTTP_HEADER + "("):
            key, value = parse_call(HTTP_HEADER, line)
            if key:
                builder.http_headers[key] = value
        else:
            logger.debug(f"Ignoring unknown command: {command}")

        index = next_index

    return builder.build()
