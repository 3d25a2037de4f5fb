"""
Transcript Fetcher
==================

Download a YouTube video transcript as one plaintext string.

Features:
- Optional preferred languages (manual transcripts win over auto-generated)
- Falls back to the first available transcript in any language
- Returns text + detected language code
"""

import logging
from typing import Optional, Sequence, Tuple

import requests
from youtube_transcript_api import (
    YouTubeTranscriptApi,
    TranscriptsDisabled,
    NoTranscriptFound,
    CouldNotRetrieveTranscript,
)

from .errors import NotFoundError, UpstreamRequestError

logger = logging.getLogger(__name__)


def _pick_transcript(transcript_list, languages: Optional[Sequence[str]]):
    if languages:
        try:
            return transcript_list.find_transcript(list(languages))
        except NoTranscriptFound:
            logger.debug(f"No transcript in {list(languages)}, falling back to any language")

    # Manual transcripts come first when iterating
    for transcript in transcript_list:
        return transcript
    return None


def fetch_transcript_text(
    video_id: str,
    languages: Optional[Sequence[str]] = None,
) -> Tuple[str, str]:
    """
    Fetch a transcript and join its segments with single spaces.

    Args:
        video_id: YouTube video ID
        languages: Language codes to prefer, in order

    Returns:
        (text, language) where language is "unknown" if not reported

    Raises:
        NotFoundError if the video has no transcript
        UpstreamRequestError for any other retrieval failure
    """
    try:
        transcript_list = YouTubeTranscriptApi().list(video_id)
        transcript = _pick_transcript(transcript_list, languages)
        if transcript is None:
            raise NotFoundError(f"No transcript found for video ID: {video_id}")
        fetched = transcript.fetch()
    except (TranscriptsDisabled, NoTranscriptFound) as e:
        raise NotFoundError(f"No transcript found for video ID: {video_id}") from e
    except (CouldNotRetrieveTranscript, requests.RequestException) as e:
        logger.error(f"Error fetching transcript for {video_id}: {type(e).__name__}: {e}")
        raise UpstreamRequestError(f"Failed to fetch transcript for video {video_id}: {e}") from e

    parts = [snippet.text for snippet in fetched.snippets if snippet.text]
    if not parts:
        raise NotFoundError(f"No transcript found for video ID: {video_id}")

    language = getattr(fetched, "language_code", None) or "unknown"
    logger.info(f"Fetched transcript for {video_id} ({language}, {len(parts)} segments)")
    return " ".join(parts), language
