#
# src/rpbasic/exceptions.py
#
"""
Custom exceptions for rpbasic.

Finish conflicts reported by the service are not represented here: they come
back as ordinary responses and are handled by conflict recovery.
"""


class RpBasicError(Exception):
    """Base class for all rpbasic errors."""

    pass


class ConfigurationError(RpBasicError):
    """Configuration file is missing, unreadable, or contains invalid values."""

    pass


class TransportError(RpBasicError):
    """The HTTP request could not be completed."""

    def __init__(self, message: str, details: Exception | None = None):
        self.details = details
        super().__init__(message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class ReportPortalHTTPError(TransportError):
    """Raised for 4xx/5xx responses when HTTP error statuses are not allowed."""

    def __init__(
        self,
        message: str,
        status_code: int,
        response_text: str = "",
        details: Exception | None = None,
    ):
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(f"{message} (HTTP {status_code})", details=details)


class MissingIdentifierError(RpBasicError):
    """An operation needed a launch or item id that was never received."""

    pass


class ConflictParseError(RpBasicError):
    """The orphaned item list embedded in a conflict message is malformed."""

    def __init__(self, message: str, raw_message: str):
        self.raw_message = raw_message
        super().__init__(message)


# 🔼⚙️
