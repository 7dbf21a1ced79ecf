"""
Error taxonomy for the Okta group assignment job.
"""

from typing import Optional

RATE_LIMIT_MARKER = "rate limit"


class OktaAssignmentError(Exception):
    """Base class for every error raised by the assignment job."""


class ValidationError(OktaAssignmentError):
    """Missing or malformed input parameter."""


class ConfigurationError(OktaAssignmentError):
    """Missing secret or unreadable configuration."""


class ProviderError(OktaAssignmentError):
    """Non-2xx response from the Okta API."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 error_code: Optional[str] = None, error_summary: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.error_summary = error_summary


class TransportError(OktaAssignmentError):
    """The request could not be sent or no response was received."""


def is_rate_limited(error: BaseException) -> bool:
    """Return True when the error message reports a rate limit (case-sensitive)."""
    return RATE_LIMIT_MARKER in str(error)
