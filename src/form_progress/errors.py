"""Error types raised by the form progress service.

Every failure source has its own subclass and keeps the original exception
on ``cause``. The HTTP layer turns all of them into an opaque 500 response.
"""


class FormProgressError(Exception):
    """Base class for form progress failures."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class IoError(FormProgressError):
    """Operating-system level I/O failed."""


class StorageError(FormProgressError):
    """The storage backend rejected or failed a query."""


class ConfigurationError(FormProgressError):
    """Configuration could not be loaded."""


class ConfigurationReadError(ConfigurationError):
    """The configuration source could not be read."""


class ConfigurationParseError(ConfigurationError):
    """Configuration values were missing or invalid."""
