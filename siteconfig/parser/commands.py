"""Command tables of the site config language.

Every known command name resolves to a member of ``ConfigField``, whose value
is the name of the matching ``SiteConfig`` attribute. Lookups are
case-sensitive.
"""

from enum import Enum


class ConfigField(str, Enum):
    """Fields of a site config that plain ``command: value`` lines can set."""

    TITLE = "title"
    BODY = "body"
    AUTHOR = "author"
    DATE = "date"
    STRIP = "strip"
    STRIP_ID_OR_CLASS = "strip_id_or_class"
    STRIP_IMAGE_SRC = "strip_image_src"
    NATIVE_AD_CLUE = "native_ad_clue"
    SINGLE_PAGE_LINK = "single_page_link"
    NEXT_PAGE_LINK = "next_page_link"
    TEST_URL = "test_url"
    LOGIN_EXTRA_FIELDS = "login_extra_fields"

    PRUNE = "prune"
    AUTODETECT_ON_FAILURE = "autodetect_on_failure"
    REQUIRES_LOGIN = "requires_login"

    LOGIN_USERNAME_FIELD = "login_username_field"
    LOGIN_PASSWORD_FIELD = "login_password_field"
    NOT_LOGGED_IN = "not_logged_in"
    LOGIN_URI = "login_uri"


MULTI_VALUE_COMMANDS: dict[str, ConfigField] = {
    "title": ConfigField.TITLE,
    "body": ConfigField.BODY,
    "strip": ConfigField.STRIP,
    "strip_id_or_class": ConfigField.STRIP_ID_OR_CLASS,
    "strip_image_src": ConfigField.STRIP_IMAGE_SRC,
    "single_page_link": ConfigField.SINGLE_PAGE_LINK,
    "next_page_link": ConfigField.NEXT_PAGE_LINK,
    "test_url": ConfigField.TEST_URL,
    "login_extra_fields": ConfigField.LOGIN_EXTRA_FIELDS,
    "native_ad_clue": ConfigField.NATIVE_AD_CLUE,
    "date": ConfigField.DATE,
    "author": ConfigField.AUTHOR,
}

BOOLEAN_COMMANDS: dict[str, ConfigField] = {
    "prune": ConfigField.PRUNE,
    "autodetect_on_failure": ConfigField.AUTODETECT_ON_FAILURE,
    "requires_login": ConfigField.REQUIRES_LOGIN,
}

SINGLE_STRING_COMMANDS: dict[str, ConfigField] = {
    "login_username_field": ConfigField.LOGIN_USERNAME_FIELD,
    "login_password_field": ConfigField.LOGIN_PASSWORD_FIELD,
    "not_logged_in": ConfigField.NOT_LOGGED_IN,
    "login_uri": ConfigField.LOGIN_URI,
}

# Tokens a boolean command compares against
TRUE_TOKENS = frozenset({"yes", "true"})

# Two-line and call-syntax directives
FIND_STRING = "find_string"
REPLACE_STRING = "replace_string"
HTTP_HEADER = "http_header"
