"""Exceptions raised by the catalog, the media model and the report writers."""


class MediaTrackerError(Exception):
    """Base class for every error this application raises on purpose."""


class ValidationError(MediaTrackerError, ValueError):
    """A rating, season count or username is not an allowed value."""


class InvalidMediaDataError(MediaTrackerError):
    """
    A catalog file could not be loaded.

    Attributes:
        path: the catalog file being read
        line_number: 1-based line that failed, or None when the file itself
            could not be opened or decoded
    """

    def __init__(self, message: str, path=None, line_number: int | None = None):
        super().__init__(message)
        self.path = path
        self.line_number = line_number


class ExportError(MediaTrackerError):
    """A report could not be written."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
