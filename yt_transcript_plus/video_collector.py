"""
Video Collector
===============

Fetch the first page of a playlist from YouTube Data API v3.

Pagination is not followed: one request, at most ``max_results`` items
(the API caps a page at 50).
"""

from typing import Dict, List, Optional

from .api_request import DEFAULT_TIMEOUT
from .youtube_api import youtube_get

MAX_PAGE_SIZE = 50


def fetch_playlist_videos(
    playlist_id: str,
    api_key: Optional[str],
    max_results: int = 10,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[Dict]:
    """
    Call playlistItems.list for one page of videos.

    Args:
        playlist_id: Playlist (or uploads playlist) ID
        api_key: YouTube Data API key
        max_results: Page size, 1-50

    Returns:
        Raw playlistItem resources (snippet + contentDetails)
    """
    data = youtube_get(
        "playlistItems",
        api_key,
        timeout=timeout,
        part="snippet,contentDetails",
        playlistId=playlist_id,
        maxResults=min(MAX_PAGE_SIZE, max_results),
    )
    items = data.get("items")
    return items if isinstance(items, list) else []


def video_id_of(item: Dict) -> str:
    """Video ID from contentDetails, or "N/A" if missing/malformed."""
    cd = item.get("contentDetails")
    if isinstance(cd, dict) and isinstance(cd.get("videoId"), str):
        return cd["videoId"]
    return "N/A"
