"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A configured resource, such as the GIF catalog file, cannot be loaded."""

    pass
