"""
Translator
==========

Client for a LibreTranslate-style endpoint:
``POST {q, source, target, format: "text"}`` -> ``{translatedText}``.

Failures never propagate: the original text comes back together with a
warning string so one bad field does not sink the whole item.
"""

import logging
from typing import NamedTuple, Optional

from .api_request import DEFAULT_TIMEOUT, api_request
from .errors import MissingCredentialError, UnexpectedResponseShapeError, YouTubePlusError

logger = logging.getLogger(__name__)


class TranslationResult(NamedTuple):
    text: str
    warning: Optional[str] = None


def source_language_code(language: Optional[str]) -> str:
    """Primary subtag of a detected language ("en-US" -> "en"), or "auto"."""
    if not language or language == "unknown":
        return "auto"
    return language.split("-")[0]


def _request_translation(text: str, target: str, api_url: str, source: str, timeout: float) -> str:
    body = {"q": text, "source": source, "target": target, "format": "text"}
    result = api_request(
        "POST", api_url,
        json_body=body,
        headers={"Content-Type": "application/json"},
        timeout=timeout,
    )
    if isinstance(result, dict) and isinstance(result.get("translatedText"), str):
        return result["translatedText"]
    raise UnexpectedResponseShapeError("Translation API response missing 'translatedText'")


def translate_text(
    text: str,
    target_language: str,
    api_url: Optional[str],
    source_language: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> TranslationResult:
    """
    Translate text, returning the original plus a warning on failure.

    Raises:
        MissingCredentialError if no endpoint is configured
    """
    if not text:
        return TranslationResult("")
    if not api_url:
        raise MissingCredentialError("Translation API URL is not configured in credentials.")

    try:
        translated = _request_translation(
            text, target_language, api_url, source_language_code(source_language), timeout
        )
        return TranslationResult(translated)
    except UnexpectedResponseShapeError:
        logger.warning("Translation API response missing 'translatedText', keeping original text")
        return TranslationResult(text, "Unexpected translation API response format. Returning original text.")
    except YouTubePlusError as e:
        logger.warning(f"Translation failed: {e}")
        return TranslationResult(text, f"Translation failed: {e}. Returning original text.")
