"""
Summarizer
==========

LLM-based transcript summarization over any OpenAI-compatible API.

Features:
- Works with OpenRouter, OpenAI or any ``<base>/chat/completions`` provider
- Summary language is configurable (Arabic by default)
- Execution failures become a warning instead of an error
- No retries: one request per summary
"""

import logging
from typing import NamedTuple, Optional

import openai
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI

from .api_request import DEFAULT_TIMEOUT
from .errors import (
    AuthenticationFailedError,
    MissingCredentialError,
    RateLimitedError,
    UpstreamRequestError,
    YouTubePlusError,
)

logger = logging.getLogger(__name__)


# Summarization prompt template
SUMMARY_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "You are a helpful assistant. Summarize the following text concisely in {language}."),
    ("human", "{text}"),
])


class SummaryResult(NamedTuple):
    summary: Optional[str]
    warning: Optional[str] = None


def _map_llm_error(e: openai.OpenAIError) -> YouTubePlusError:
    """Translate OpenAI client errors into the package's error classes."""
    if isinstance(e, openai.RateLimitError):
        return RateLimitedError("Rate limit exceeded for API request.")
    if isinstance(e, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return AuthenticationFailedError("Authentication failed for API request. Check credentials.")
    return UpstreamRequestError(f"API request error: {e}")


def summarize_text(
    text: str,
    api_key: Optional[str],
    api_url: Optional[str],
    model: Optional[str],
    language: str = "Arabic",
    timeout: float = DEFAULT_TIMEOUT,
) -> SummaryResult:
    """
    Summarize text with a chat-completion model.

    Args:
        text: Text to summarize (original or translated transcript)
        api_key: Bearer key for the provider
        api_url: Base URL; "/chat/completions" is appended by the client
        model: Provider model identifier
        language: Language the summary should be written in

    Returns:
        SummaryResult; summary is None when the call failed

    Raises:
        MissingCredentialError if key, URL or model is missing
    """
    if not text:
        return SummaryResult("")
    if not api_key or not api_url or not model:
        raise MissingCredentialError(
            "LLM API Key, URL, or Model not configured in credentials. Summarization requires these."
        )

    llm = ChatOpenAI(
        model=model,
        api_key=api_key,
        base_url=api_url.rstrip("/"),
        timeout=timeout,
        max_retries=0,
    )
    messages = SUMMARY_PROMPT.format_messages(text=text, language=language)

    try:
        result = llm.invoke(messages)
    except openai.OpenAIError as e:
        err = _map_llm_error(e)
        logger.warning(f"Summarization failed: {err}")
        return SummaryResult(None, f"Summarization failed: {err}. Could not generate summary.")
    except (KeyError, IndexError, TypeError, ValueError) as e:
        # 200 body without choices[0].message, or with an "error" object instead
        logger.warning(f"Summarization response could not be parsed: {e}")
        return SummaryResult(None, "Unexpected summarization API response format.")

    content = getattr(result, "content", None)
    if not isinstance(content, str) or not content.strip():
        logger.warning(f"Summarization response had no text content: {result!r}")
        return SummaryResult(None, "Unexpected summarization API response format.")

    return SummaryResult(content.strip())
