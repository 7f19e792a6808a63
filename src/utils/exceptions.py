"""Custom exception classes."""


class ValidationError(Exception):
    """Raised when data fails validation."""
    pass


class UnknownTrackError(ValidationError):
    """Raised when a track identifier is not in the reference table."""
    pass


class PersistenceError(Exception):
    """Raised when the registration could not be stored."""
    pass


class FileWriteError(Exception):
    """Raised when unable to write to JSON file."""
    pass
