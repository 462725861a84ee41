"""Errors raised by the short link core.

Every error is an expected, caller-recoverable condition. The HTTP layer maps
each class to a status code (see ``web_app.api.routes``).

Classes:
    ShortLinkError:
        Base class for all short link errors.

    InvalidInputError:
        Raised when a required input is missing or out of range.

    InvalidUrlFormatError:
        Raised when the long URL is not an absolute URL.

    ShortcodeConflictError:
        Raised when the resulting short code already exists.

    ShortcodeNotFoundError:
        Raised when no record exists for a short code.

    ShortcodeExpiredError:
        Raised when resolving a short code past its expiry.
"""

from typing import Optional


class ShortLinkError(ValueError):
    """Base class for short link errors."""
    
    def __init__(self, message: str, short_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.short_code = short_code


class InvalidInputError(ShortLinkError):
    """A required input is missing or out of range."""

    pass


class InvalidUrlFormatError(ShortLinkError):
    """The long URL is not a well-formed absolute URL."""

    pass


class ShortcodeConflictError(ShortLinkError):
    """The short code is already taken."""

    pass


class ShortcodeNotFoundError(ShortLinkError):
    """No record exists for the short code."""

    pass


class ShortcodeExpiredError(ShortLinkError):
    """The short code exists but its validity window has passed."""

    pass
