"""Configuration models for site extraction rules.

This module contains Pydantic models that describe the parsed content of a
site config file, the settings of the directory loader, and the registry of
all loaded sites.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

from siteconfig.config.settings import (
    DEFAULT_DECODE_ERRORS,
    DEFAULT_ENCODING,
    DEFAULT_MAX_CONCURRENT,
)


def _read_only(value: Mapping) -> Mapping:
    """Wrap a validated mapping in a read-only view that keeps its key order."""
    return MappingProxyType(dict(value))


def _as_dict(value: Mapping) -> dict:
    return dict(value)


StringMap = Annotated[
    Mapping[str, str],
    AfterValidator(_read_only),
    PlainSerializer(_as_dict),
]
ExtraFieldMap = Annotated[
    Mapping[str, tuple[str, ...]],
    AfterValidator(_read_only),
    PlainSerializer(_as_dict),
]


def _empty_map() -> Mapping:
    return MappingProxyType({})


class SiteConfig(BaseModel):
    """Extraction rules for a single web site.

    Selector fields hold opaque selector expressions in file order; they are
    tried in that order by the extraction pipeline. The record is frozen once
    built by the line parser, and its sequences and mappings are read-only.
    """

    model_config = ConfigDict(frozen=True)

    title: tuple[str, ...] = Field(default=(), description="Selectors for the article title")
    body: tuple[str, ...] = Field(default=(), description="Selectors for the article body")
    author: tuple[str, ...] = Field(default=(), description="Selectors for the article author")
    date: tuple[str, ...] = Field(default=(), description="Selectors for the publication date")
    strip: tuple[str, ...] = Field(default=(), description="Selectors of elements to remove")
    strip_id_or_class: tuple[str, ...] = Field(
        default=(),
        description="Id or class fragments of elements to remove",
    )
    strip_image_src: tuple[str, ...] = Field(
        default=(),
        description="Image src fragments of images to remove",
    )
    native_ad_clue: tuple[str, ...] = Field(
        default=(),
        description="Selectors flagging the page as a native advertisement",
    )
    single_page_link: tuple[str, ...] = ()
    next_page_link: tuple[str, ...] = ()
    test_url: tuple[str, ...] = ()

    http_headers: StringMap = Field(
        default_factory=_empty_map,
        description="Custom request headers for fetching the site",
    )
    # Insertion order is the application order
    string_replacer: StringMap = Field(
        default_factory=_empty_map,
        description="Substring replacements applied to fetched HTML",
    )

    prune: bool = False
    autodetect_on_failure: bool = False
    requires_login: bool = False

    not_logged_in: str = ""
    login_uri: str = ""
    login_username_field: str = ""
    login_password_field: str = ""
    login_extra_fields: tuple[ExtraFieldMap, ...] = Field(default_factory=lambda: (_empty_map(),))

    @property
    def is_empty(self) -> bool:
        """Check whether no directive at all was recorded for this site."""
        return self == SiteConfig()

    def apply_string_replacements(self, html: str) -> str:
        """Apply the string replacements to raw HTML.

        Args:
            html: HTML fetched from the site

        Returns:
            The HTML with every find string replaced, in declaration order
        """
        for find, replace in self.string_replacer.items():
            html = html.replace(find, replace)
        return html


class LoaderConfig(BaseModel):
    """Settings for loading a directory of site config files."""

    max_concurrent: Annotated[
        int,
        Field(ge=1, le=50, description="Maximum number of files read at the same time"),
    ] = DEFAULT_MAX_CONCURRENT
    encoding: str = DEFAULT_ENCODING
    errors: str = Field(default=DEFAULT_DECODE_ERRORS, description="Error policy passed to bytes.decode")
    include_hidden: bool = False


class SiteConfigRegistry(BaseModel):
    """Registry of all site configurations loaded from a directory."""

    sites: dict[str, SiteConfig] = Field(default_factory=dict)
    errors: dict[str, str] = Field(
        default_factory=dict,
        description="Files that failed to load, mapped to the error message",
    )
