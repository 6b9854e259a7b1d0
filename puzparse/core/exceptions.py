"""Custom exception hierarchy for puzzle decoding."""


class PuzError(Exception):
    """Base exception for decoder failures."""


class PuzFileNotFoundError(PuzError):
    """Raised when the requested puzzle file does not exist."""


class TruncatedFileError(PuzError):
    """Raised when a fixed-offset read runs past the end of the data."""


class InvalidDimensionsError(PuzError):
    """Raised when the header declares a zero width or height."""


class MalformedStringSectionError(PuzError):
    """Raised when the string section does not match the declared clue count."""


class PuzEncodingError(PuzError):
    """Raised when text bytes cannot be decoded with the configured charset."""
