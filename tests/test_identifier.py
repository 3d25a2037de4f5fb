"""Tests for identifier classification."""

import pytest

from yt_transcript_plus.identifier import (
    ClassificationResult,
    IdentifierKind,
    classify,
    is_channel_id,
)

VIDEO = IdentifierKind.VIDEO
PLAYLIST = IdentifierKind.PLAYLIST
CHANNEL = IdentifierKind.CHANNEL
UNKNOWN = IdentifierKind.UNKNOWN


class TestVideo:
    @pytest.mark.parametrize("raw", [
        "dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?t=42",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/v/dQw4w9WgXcQ",
        "https://www.youtube.com/e/dQw4w9WgXcQ",
        "  dQw4w9WgXcQ \n",
    ])
    def test_video_forms(self, raw):
        """All video URL forms and the bare ID extract the same 11-char ID."""
        assert classify(raw) == ClassificationResult(VIDEO, "dQw4w9WgXcQ")

    def test_video_url_wins_over_list_param(self):
        """A watch URL inside a playlist is still a video."""
        r = classify("https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=PLabcdef1234567890AB")
        assert r == ClassificationResult(VIDEO, "dQw4w9WgXcQ")

    def test_bare_id_with_dot_is_not_video(self):
        assert classify("example.com").kind == UNKNOWN

    def test_bare_eleven_chars_wins_over_later_rules(self):
        """11-char strings shaped like playlist/channel prefixes are videos."""
        assert classify("PLabcdefghi") == ClassificationResult(VIDEO, "PLabcdefghi")
        assert classify("UCabcdefghi") == ClassificationResult(VIDEO, "UCabcdefghi")


class TestPlaylist:
    def test_playlist_url(self):
        r = classify("https://www.youtube.com/playlist?list=PLabcdef1234567890AB")
        assert r == ClassificationResult(PLAYLIST, "PLabcdef1234567890AB")

    def test_playlist_param_stops_at_ampersand(self):
        r = classify("https://www.youtube.com/playlist?list=PLabcdef1234567890AB&index=3")
        assert r.id == "PLabcdef1234567890AB"

    def test_bare_playlist_id(self):
        r = classify("PLabcdef1234567890ABCD")
        assert r == ClassificationResult(PLAYLIST, "PLabcdef1234567890ABCD")

    def test_short_pl_string_is_unknown(self):
        """PL prefix needs more than 20 characters."""
        assert classify("PLabcdef12345678").kind == UNKNOWN


class TestChannel:
    def test_bare_channel_id(self):
        r = classify("UCabcdefghijklmnopqrstuv")
        assert r == ClassificationResult(CHANNEL, "UCabcdefghijklmnopqrstuv")

    def test_channel_url(self):
        r = classify("https://www.youtube.com/channel/UCabcdefghijklmnopqrstuv")
        assert r == ClassificationResult(CHANNEL, "UCabcdefghijklmnopqrstuv")

    @pytest.mark.parametrize("raw, expected", [
        ("https://www.youtube.com/c/SomeCustomName", "SomeCustomName"),
        ("https://www.youtube.com/user/LegacyUser", "LegacyUser"),
        ("youtube.com/c/x", "x"),
    ])
    def test_custom_and_legacy_segments_taken_verbatim(self, raw, expected):
        assert classify(raw) == ClassificationResult(CHANNEL, expected)

    def test_uc_prefix_wrong_length_is_unknown(self):
        assert classify("UCabcdefghijklmnopqrstuvw").kind == UNKNOWN

    def test_is_channel_id(self):
        assert is_channel_id("UCabcdefghijklmnopqrstuv")
        assert not is_channel_id("SomeCustomName")
        assert not is_channel_id("UCshort")


class TestUnknown:
    def test_free_text(self):
        assert classify("not a valid identifier") == ClassificationResult(UNKNOWN, None)

    @pytest.mark.parametrize("raw", [
        "",
        "   ",
        None,
        "?list=",
        "youtube.com/channel/",
        "https://",
        "https://www.youtube.com/",
        "https://www.youtube.com/watch?v=short",
        "a" * 200,
        "dQw4w9WgXcQ" * 3,
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "PLabcdef1234567890ABCD",
        "UCabcdefghijklmnopqrstuv",
        "https://www.youtube.com/c/Name",
    ])
    def test_id_is_none_iff_unknown(self, raw):
        """Classification is total and keeps the kind/id invariant."""
        r = classify(raw)
        assert (r.kind == UNKNOWN) == (r.id is None)
        if r.id is not None:
            assert r.id
