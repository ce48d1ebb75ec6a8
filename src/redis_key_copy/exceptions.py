"""
Exceptions for Redis key copying.

Every stage of a copy raises one of these; the first one raised ends the run.
"""


class KeyCopyError(Exception):
    """Base exception for key copy errors."""

    pass


class ConfigInvalid(KeyCopyError):
    """Raised when an address cannot be turned into a Redis connection."""

    pass


class KeyNotFound(KeyCopyError):
    """Raised when the source key does not exist."""

    pass


class TypeQueryFailed(KeyCopyError):
    """Raised when the TYPE query against the source fails."""

    pass


class UnrecognizedTypeError(TypeQueryFailed):
    """Raised when TYPE answers with a tag outside the known set."""

    pass


class TypeMismatch(KeyCopyError):
    """Raised when a copier is invoked for a key of another type."""

    pass


class ScanFailed(KeyCopyError):
    """Raised when a page of HSCAN on the source fails."""

    pass


class ReadFailed(KeyCopyError):
    """Raised when reading a string value from the source fails."""

    pass


class WriteFailed(KeyCopyError):
    """Raised when the destination write errors or is not acknowledged."""

    pass


class UnsupportedType(KeyCopyError):
    """Raised when the key type has no copier."""

    pass
