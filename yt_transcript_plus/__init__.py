"""
YouTube Transcript Plus
=======================

Fetches YouTube transcripts, channel info and playlist/channel video lists,
with optional translation and LLM summarization, one workflow item at a time.
"""

__version__ = "1.0.0"

from .config import Credentials
from .errors import (
    YouTubePlusError,
    InvalidIdentifierError,
    MissingCredentialError,
    RateLimitedError,
    AuthenticationFailedError,
    UpstreamRequestError,
    UnexpectedResponseShapeError,
    NotFoundError,
    UnsupportedOperationError,
)
from .identifier import ClassificationResult, IdentifierKind, classify
from .models import ItemFailure, ItemInput, ItemOptions, ItemOutcome, ItemSuccess
from .processor import OPERATIONS, process_batch, process_item

__all__ = [
    "Credentials",
    "YouTubePlusError",
    "InvalidIdentifierError",
    "MissingCredentialError",
    "RateLimitedError",
    "AuthenticationFailedError",
    "UpstreamRequestError",
    "UnexpectedResponseShapeError",
    "NotFoundError",
    "UnsupportedOperationError",
    "ClassificationResult",
    "IdentifierKind",
    "classify",
    "ItemFailure",
    "ItemInput",
    "ItemOptions",
    "ItemOutcome",
    "ItemSuccess",
    "OPERATIONS",
    "process_batch",
    "process_item",
]
