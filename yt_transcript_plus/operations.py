"""
Operations
==========

The four read-only operations. Each handler receives the ID extracted by the
classifier and returns ``(fields, warnings)``; the processor merges the fields
into the item result.

Translation problems are downgraded to warnings field by field. A missing
LLM configuration is fatal when a summary is requested, even though a failed
summarization call only produces a warning.
"""

import logging
from typing import Any, Dict, List, Tuple

from .channel_resolver import fetch_channel_info, fetch_uploads_playlist_id
from .config import Credentials
from .errors import MissingCredentialError
from .models import ItemOptions
from .summarizer import summarize_text
from .transcript_fetcher import fetch_transcript_text
from .translator import translate_text
from .video_collector import fetch_playlist_videos, video_id_of

logger = logging.getLogger(__name__)

Fields = Dict[str, Any]
HandlerResult = Tuple[Fields, List[str]]


def get_transcript(video_id: str, options: ItemOptions, creds: Credentials) -> HandlerResult:
    fields: Fields = {"videoId": video_id}
    warnings: List[str] = []

    text, language = fetch_transcript_text(video_id, creds.transcript_languages)
    fields["originalTranscript"] = text
    fields["sourceLanguage"] = language

    to_summarize = text
    if options.translate and creds.translation_api_url:
        translation = translate_text(
            text, creds.target_language, creds.translation_api_url, language, creds.request_timeout
        )
        fields["translatedTranscript"] = translation.text
        if translation.warning:
            warnings.append(translation.warning)
        if translation.text:
            to_summarize = translation.text

    if options.summarize:
        if not creds.llm_configured:
            raise MissingCredentialError("Summarization requires LLM API Key, URL, and Model in credentials.")
        summary = summarize_text(
            to_summarize,
            creds.llm_api_key,
            creds.llm_api_url,
            creds.llm_model,
            language=creds.summary_language,
            timeout=creds.request_timeout,
        )
        fields["summary"] = summary.summary
        if summary.warning:
            warnings.append(summary.warning)

    return fields, warnings


def get_channel_info(channel: str, options: ItemOptions, creds: Credentials) -> HandlerResult:
    fields: Fields = {"channelIdInput": channel}
    warnings: List[str] = []

    info = fetch_channel_info(channel, creds.youtube_api_key, creds.request_timeout)
    fields["channelInfo"] = info

    snippet = info.get("snippet")
    if options.translate and creds.translation_api_url and isinstance(snippet, dict):
        source = snippet.get("defaultLanguage")
        for key, label in (("title", "Title"), ("description", "Description")):
            translation = translate_text(
                snippet.get(key) or "",
                creds.target_language,
                creds.translation_api_url,
                source,
                creds.request_timeout,
            )
            snippet[f"translated{label}"] = translation.text
            if translation.warning:
                warnings.append(f"{label} translation warning: {translation.warning}")

    return fields, warnings


def _translate_videos(videos: List[Dict], creds: Credentials) -> List[str]:
    """Translate title and description of every video in order."""
    warnings: List[str] = []
    for video in videos:
        snippet = video.get("snippet") if isinstance(video, dict) else None
        if not isinstance(snippet, dict):
            continue
        vid = video_id_of(video)
        for key, label in (("title", "Title"), ("description", "Description")):
            translation = translate_text(
                snippet.get(key) or "",
                creds.target_language,
                creds.translation_api_url,
                None,
                creds.request_timeout,
            )
            snippet[f"translated{label}"] = translation.text
            if translation.warning:
                warnings.append(f"Video {vid} {key} warning: {translation.warning}")
    return warnings


def _list_videos(playlist_id: str, options: ItemOptions, creds: Credentials) -> HandlerResult:
    videos = fetch_playlist_videos(
        playlist_id, creds.youtube_api_key, options.max_results, creds.request_timeout
    )
    logger.debug(f"Playlist {playlist_id}: {len(videos)} videos")

    warnings: List[str] = []
    if options.translate and creds.translation_api_url:
        warnings = _translate_videos(videos, creds)
    return {"videos": videos}, warnings


def list_channel_videos(channel: str, options: ItemOptions, creds: Credentials) -> HandlerResult:
    uploads = fetch_uploads_playlist_id(channel, creds.youtube_api_key, creds.request_timeout)
    fields, warnings = _list_videos(uploads, options, creds)
    return {"channelIdInput": channel, "uploadsPlaylistId": uploads, **fields}, warnings


def list_playlist_videos(playlist_id: str, options: ItemOptions, creds: Credentials) -> HandlerResult:
    fields, warnings = _list_videos(playlist_id, options, creds)
    return {"playlistId": playlist_id, **fields}, warnings
