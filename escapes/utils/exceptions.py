"""Custom exception classes for the escape codec."""


class EscapeError(Exception):
    """Base exception class for all escape codec errors."""
    pass


class MalformedEscapeError(EscapeError, ValueError):
    """
    Exception raised when an escape names a value above U+10FFFF.

    Attributes:
        sequence: The escape sequence as it appeared in the input
        position: Index of the sequence in the input string
    """

    def __init__(self, sequence: str, position: int):
        self.sequence = sequence
        self.position = position
        super().__init__(
            f"Malformed escape {sequence!r} at position {position}: "
            f"code point above U+10FFFF"
        )


class ConfigurationError(EscapeError):
    """Exception raised when configuration is invalid or missing."""
    pass
