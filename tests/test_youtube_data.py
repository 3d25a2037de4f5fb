"""Tests for the YouTube Data API client, channel resolver and video collector."""

from unittest.mock import patch

import pytest

from yt_transcript_plus.channel_resolver import (
    channel_lookup_params,
    fetch_channel_info,
    fetch_uploads_playlist_id,
)
from yt_transcript_plus.errors import (
    MissingCredentialError,
    NotFoundError,
    RateLimitedError,
    UpstreamRequestError,
)
from yt_transcript_plus.video_collector import fetch_playlist_videos, video_id_of
from yt_transcript_plus.youtube_api import YT_API, youtube_get

CHANNEL_ID = "UCabcdefghijklmnopqrstuv"


class TestYoutubeGet:
    @patch("yt_transcript_plus.youtube_api.api_request")
    def test_missing_key(self, mock_api):
        with pytest.raises(MissingCredentialError, match="YouTube Data API Key"):
            youtube_get("channels", None, part="snippet")
        mock_api.assert_not_called()

    @patch("yt_transcript_plus.youtube_api.api_request")
    def test_adds_key_and_builds_url(self, mock_api):
        mock_api.return_value = {"items": []}

        assert youtube_get("channels", "k", timeout=7, part="snippet", id=CHANNEL_ID) == {"items": []}

        mock_api.assert_called_once_with(
            "GET", f"{YT_API}/channels",
            params={"part": "snippet", "id": CHANNEL_ID, "key": "k"},
            timeout=7,
        )

    @patch("yt_transcript_plus.youtube_api.api_request")
    def test_embedded_error_is_failure(self, mock_api):
        mock_api.return_value = {"error": {"message": "quotaExceeded", "code": 403}}
        with pytest.raises(UpstreamRequestError) as exc:
            youtube_get("channels", "k")
        assert str(exc.value) == (
            "YouTube Data API request failed: YouTube API Error: quotaExceeded (Code: 403)"
        )

    @patch("yt_transcript_plus.youtube_api.api_request")
    def test_embedded_error_without_code(self, mock_api):
        mock_api.return_value = {"error": {"message": "bad"}}
        with pytest.raises(UpstreamRequestError, match=r"\(Code: N/A\)"):
            youtube_get("channels", "k")

    @patch("yt_transcript_plus.youtube_api.api_request")
    def test_error_class_is_preserved(self, mock_api):
        mock_api.side_effect = RateLimitedError("Rate limit exceeded for API request.")
        with pytest.raises(RateLimitedError, match="^YouTube Data API request failed: Rate limit"):
            youtube_get("playlistItems", "k")


class TestChannelResolver:
    def test_lookup_params(self):
        assert channel_lookup_params(CHANNEL_ID) == {"id": CHANNEL_ID}
        assert channel_lookup_params("LegacyUser") == {"forUsername": "LegacyUser"}

    @patch("yt_transcript_plus.channel_resolver.youtube_get")
    def test_fetch_channel_info_by_id(self, mock_get):
        channel = {"id": CHANNEL_ID, "snippet": {"title": "T"}}
        mock_get.return_value = {"items": [channel]}

        assert fetch_channel_info(CHANNEL_ID, "k") == channel
        mock_get.assert_called_once_with(
            "channels", "k", timeout=30,
            part="snippet,statistics,brandingSettings",
            id=CHANNEL_ID,
        )

    @patch("yt_transcript_plus.channel_resolver.youtube_get")
    def test_fetch_channel_info_by_username(self, mock_get):
        mock_get.return_value = {"items": [{"id": CHANNEL_ID}]}
        fetch_channel_info("SomeCustomName", "k")
        assert mock_get.call_args.kwargs["forUsername"] == "SomeCustomName"
        assert "id" not in mock_get.call_args.kwargs

    @patch("yt_transcript_plus.channel_resolver.youtube_get")
    def test_fetch_channel_info_not_found(self, mock_get):
        mock_get.return_value = {"pageInfo": {"totalResults": 0}}
        with pytest.raises(NotFoundError, match="Could not find channel info for: ghost"):
            fetch_channel_info("ghost", "k")

    @patch("yt_transcript_plus.channel_resolver.youtube_get")
    def test_uploads_playlist(self, mock_get):
        mock_get.return_value = {
            "items": [{"contentDetails": {"relatedPlaylists": {"uploads": "UUabc"}}}]
        }
        assert fetch_uploads_playlist_id(CHANNEL_ID, "k") == "UUabc"
        assert mock_get.call_args.kwargs["part"] == "contentDetails"

    @pytest.mark.parametrize("data", [
        {"items": []},
        {"items": [{}]},
        {"items": [{"contentDetails": {}}]},
        {"items": [{"contentDetails": {"relatedPlaylists": {"likes": "LL"}}}]},
    ])
    @patch("yt_transcript_plus.channel_resolver.youtube_get")
    def test_uploads_playlist_missing(self, mock_get, data):
        mock_get.return_value = data
        with pytest.raises(NotFoundError, match="uploads playlist"):
            fetch_uploads_playlist_id(CHANNEL_ID, "k")


class TestVideoCollector:
    @patch("yt_transcript_plus.video_collector.youtube_get")
    def test_fetch_playlist_videos(self, mock_get):
        items = [{"snippet": {"title": "a"}}, {"snippet": {"title": "b"}}]
        mock_get.return_value = {"items": items, "nextPageToken": "ignored"}

        assert fetch_playlist_videos("PLxyz", "k", max_results=25) == items
        mock_get.assert_called_once_with(
            "playlistItems", "k", timeout=30,
            part="snippet,contentDetails",
            playlistId="PLxyz",
            maxResults=25,
        )

    @patch("yt_transcript_plus.video_collector.youtube_get")
    def test_no_items(self, mock_get):
        mock_get.return_value = {}
        assert fetch_playlist_videos("PLxyz", "k") == []

    def test_video_id_of(self):
        assert video_id_of({"contentDetails": {"videoId": "abc"}}) == "abc"
        assert video_id_of({"contentDetails": {"videoId": 12}}) == "N/A"
        assert video_id_of({"contentDetails": None}) == "N/A"
        assert video_id_of({}) == "N/A"
