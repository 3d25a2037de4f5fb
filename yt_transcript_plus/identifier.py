"""
Identifier Classifier
=====================

Decides whether a free-form string names a video, a playlist or a channel.

Supports:
- Video URLs (watch?v=, youtu.be/, /v/, /embed/, /e/) and bare 11-char IDs
- Playlist URLs (?list=) and bare PL... IDs
- Channel URLs (/channel/, /c/, /user/) and bare UC... IDs

Checks run in a fixed order and the first match wins, so a bare 11-character
string is always a video even if a later rule would also accept it.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class IdentifierKind(str, Enum):
    VIDEO = "video"
    CHANNEL = "channel"
    PLAYLIST = "playlist"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ClassificationResult:
    kind: IdentifierKind
    id: Optional[str] = None


UNKNOWN = ClassificationResult(IdentifierKind.UNKNOWN, None)

# Regex patterns
RE_VIDEO_URL = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})"
)
RE_PLAYLIST_URL = re.compile(r"[?&]list=([^\"&?/\s]+)")
RE_CHANNEL_URL = re.compile(r"youtube\.com/(?:channel/|c/|user/)([^\"&?/\s]+)")


def is_channel_id(value: str) -> bool:
    """True for canonical channel IDs (UC + 22 chars)."""
    return value.startswith("UC") and len(value) == 24


def classify(raw: str) -> ClassificationResult:
    """
    Classify a YouTube URL or ID.

    Args:
        raw: URL or bare ID as typed by the user

    Returns:
        ClassificationResult; ``id`` is None exactly when kind is UNKNOWN
    """
    s = (raw or "").strip()

    # 1) Video URL
    m = RE_VIDEO_URL.search(s)
    if m:
        return ClassificationResult(IdentifierKind.VIDEO, m.group(1))

    # 2) Bare video ID
    if len(s) == 11 and "." not in s and "/" not in s:
        return ClassificationResult(IdentifierKind.VIDEO, s)

    # 3) Playlist URL
    m = RE_PLAYLIST_URL.search(s)
    if m:
        return ClassificationResult(IdentifierKind.PLAYLIST, m.group(1))

    # 4) Bare playlist ID
    if s.startswith("PL") and len(s) > 20 and "/" not in s:
        return ClassificationResult(IdentifierKind.PLAYLIST, s)

    # 5) Channel URL; custom and legacy segments are taken verbatim
    m = RE_CHANNEL_URL.search(s)
    if m:
        return ClassificationResult(IdentifierKind.CHANNEL, m.group(1))

    # 6) Bare channel ID
    if is_channel_id(s) and "/" not in s:
        return ClassificationResult(IdentifierKind.CHANNEL, s)

    return UNKNOWN
