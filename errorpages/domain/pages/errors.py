"""
Domain-specific errors for the error pages bounded context.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class ErrorPagesDomainError(Exception):
    """Base error for all error pages domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidMediaTypeError(ErrorPagesDomainError):
    """Raised when the requested format is not a parseable media type."""

    def __init__(self, media_type: str) -> None:
        super().__init__(f"Invalid media type: {media_type!r}")
        self.media_type = media_type


class ErrorPageUnavailableError(ErrorPagesDomainError):
    """Raised by a page store when a file cannot be opened."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Error page {filename} unavailable: {reason}")
        self.filename = filename
        self.reason = reason


class ErrorPageNotFoundError(ErrorPagesDomainError):
    """Raised when neither the exact nor the class-level page exists."""

    def __init__(self, filename: str, fallback_filename: str) -> None:
        super().__init__(
            f"No error page found: tried {filename} and {fallback_filename}"
        )
        self.filename = filename
        self.fallback_filename = fallback_filename
