"""
Errors
======

Exception hierarchy shared by every operation.

Every failure raised by this package derives from ``YouTubePlusError`` so the
item processor can tell a known failure apart from a programming error. The
item index is attached once the processor knows which input item failed.
"""

from typing import Optional


class YouTubePlusError(RuntimeError):
    """Base error for identifier, API and configuration failures."""

    def __init__(self, message: str, item_index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.item_index = item_index


class InvalidIdentifierError(YouTubePlusError):
    """Raised when the identifier does not fit the requested operation."""

    def __init__(self, operation: str, identifier: str, item_index: Optional[int] = None):
        super().__init__(f"Invalid identifier for {operation}: {identifier}", item_index)
        self.operation = operation
        self.identifier = identifier


class MissingCredentialError(YouTubePlusError):
    """A required API key, URL or model name is not configured."""
    pass


class RateLimitedError(YouTubePlusError):
    """Upstream answered HTTP 429."""
    pass


class AuthenticationFailedError(YouTubePlusError):
    """Upstream answered HTTP 401 or 403."""
    pass


class UpstreamRequestError(YouTubePlusError):
    """Any other HTTP, network or decoding failure."""
    pass


class UnexpectedResponseShapeError(YouTubePlusError):
    """Response parsed but lacks the expected fields."""
    pass


class NotFoundError(YouTubePlusError):
    """No transcript, channel or uploads playlist was found."""
    pass


class UnsupportedOperationError(YouTubePlusError):
    def __init__(self, operation: str, item_index: Optional[int] = None):
        super().__init__(f"Unsupported operation: {operation}", item_index)
        self.operation = operation
