"""Custom exceptions for siteconfig."""


class SiteConfigError(Exception):
    """Base class for all siteconfig exceptions."""

    pass


class SiteConfigLoadError(SiteConfigError):
    """Raised by a strict load when one or more config files could not be read."""

    def __init__(self, errors: dict[str, str]):
        """Initialize the load error.

        Args:
            errors: Mapping of file name to the error message for that file

        """
        self.errors = errors
        failed = ", ".join(sorted(errors))
        super().__init__(f"Failed to load {len(errors)} site config file(s): {failed}")
