"""
Channel Resolver
================

Looks up a channel from the identifier produced by the classifier.

Supports:
- Direct channel IDs (UC... with 24 chars) -> ``id=``
- Anything else (/c/CustomName, /user/LegacyUser segments) -> ``forUsername=``

Custom segments are not validated; the API decides whether they exist.
"""

from typing import Dict, Optional

from .api_request import DEFAULT_TIMEOUT
from .errors import NotFoundError
from .identifier import is_channel_id
from .youtube_api import youtube_get

CHANNEL_INFO_PARTS = "snippet,statistics,brandingSettings"


def channel_lookup_params(channel: str) -> Dict[str, str]:
    """Pick ``id`` for canonical channel IDs, ``forUsername`` otherwise."""
    if is_channel_id(channel):
        return {"id": channel}
    return {"forUsername": channel}


def _first_item(data: dict) -> Optional[dict]:
    items = data.get("items")
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return None


def fetch_channel_info(channel: str, api_key: Optional[str], timeout: float = DEFAULT_TIMEOUT) -> dict:
    """
    Fetch snippet, statistics and branding for a channel.

    Raises:
        NotFoundError if the API returns no channel
    """
    data = youtube_get(
        "channels",
        api_key,
        timeout=timeout,
        part=CHANNEL_INFO_PARTS,
        **channel_lookup_params(channel),
    )
    ch = _first_item(data)
    if ch is None:
        raise NotFoundError(f"Could not find channel info for: {channel}")
    return ch


def fetch_uploads_playlist_id(channel: str, api_key: Optional[str], timeout: float = DEFAULT_TIMEOUT) -> str:
    """
    Resolve the playlist that holds every upload of a channel.

    Raises:
        NotFoundError if the channel or its uploads playlist is missing
    """
    data = youtube_get(
        "channels",
        api_key,
        timeout=timeout,
        part="contentDetails",
        **channel_lookup_params(channel),
    )
    ch = _first_item(data) or {}
    content = ch.get("contentDetails")
    related = content.get("relatedPlaylists") if isinstance(content, dict) else None
    uploads = related.get("uploads") if isinstance(related, dict) else None
    if not uploads or not isinstance(uploads, str):
        raise NotFoundError(f"Could not find uploads playlist ID for channel: {channel}")
    return uploads
