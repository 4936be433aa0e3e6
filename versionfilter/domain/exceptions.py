"""Base exception classes for the versionfilter domain layer."""


class VersionFilterError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This lets callers catch every resolution failure with a single
    ``except VersionFilterError`` while regex compile errors (``re.error``)
    still surface on their own.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
