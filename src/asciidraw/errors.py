class AsciiDrawError(Exception):
    """Base class for errors surfaced to callers as a short message."""


class InvalidImageError(AsciiDrawError):
    """The upload was rejected before conversion started."""


class ProcessingError(AsciiDrawError):
    """A validated image could not be converted."""
