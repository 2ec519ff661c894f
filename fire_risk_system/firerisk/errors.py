"""
Error types for the Fire Risk Monitor.

Every failure the monitor can recover from is a subclass of FireRiskError.
None of them are fatal: the caller reports the message, marks the status as
an error and keeps the previously displayed data and configuration.
"""

from typing import Optional


class FireRiskError(Exception):
    """Base class for all recoverable Fire Risk Monitor errors."""
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiRequestFailed(FireRiskError):
    """
    Raised when an upstream API call fails.
    
    Covers non-2xx HTTP responses (status_code is set) and transport-level
    failures such as timeouts, DNS errors or connection resets (status_code
    is None). The poll cycle is aborted and retried on the next tick.
    """
    
    def __init__(self, status_code: Optional[int], message: str):
        super().__init__(message)
        self.status_code = status_code
    
    def __str__(self) -> str:
        if self.status_code is None:
            return f"API request failed: {self.message}"
        return f"API request failed ({self.status_code}): {self.message}"


class MalformedResponse(FireRiskError):
    """Raised when an API response is missing a required field or has the wrong shape."""


class EmptyResult(FireRiskError):
    """Raised when the air quality API returns an empty result list."""


class InvalidInput(FireRiskError):
    """
    Raised when user input cannot be used.
    
    Attributes:
        fields: Names of the input fields that failed to parse
    """
    
    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.fields = fields
