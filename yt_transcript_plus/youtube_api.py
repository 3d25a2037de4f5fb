"""
YouTube Data API v3 client.

Thin GET wrapper: adds the API key, treats an embedded ``error`` object in a
200 body as a failure and prefixes every failure message so callers can tell
where it came from.
"""

import logging
from typing import Optional

from .api_request import DEFAULT_TIMEOUT, api_request
from .errors import MissingCredentialError, UpstreamRequestError, YouTubePlusError

logger = logging.getLogger(__name__)

YT_API = "https://www.googleapis.com/youtube/v3"


def youtube_get(path: str, api_key: Optional[str], timeout: float = DEFAULT_TIMEOUT, **params) -> dict:
    """Make a GET request to the YouTube Data API with an API key."""
    if not api_key:
        raise MissingCredentialError(
            "YouTube Data API Key is required for this operation but not configured in credentials."
        )
    params["key"] = api_key

    try:
        data = api_request("GET", f"{YT_API}/{path}", params=params, timeout=timeout)
        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, dict) and error.get("message"):
            raise UpstreamRequestError(
                f"YouTube API Error: {error['message']} (Code: {error.get('code') or 'N/A'})"
            )
    except YouTubePlusError as e:
        logger.error(f"YouTube Data API request failed for {path}: {e}")
        raise type(e)(f"YouTube Data API request failed: {e}") from e

    return data if isinstance(data, dict) else {}
