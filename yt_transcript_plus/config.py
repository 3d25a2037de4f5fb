"""
Configuration
=============

Credential bundle read once per batch and passed explicitly to every item.

Values come from the environment (``.env`` is loaded by the CLI and the MCP
server before calling ``Credentials.from_env``). A variable set to an empty
string disables that setting, e.g. ``TRANSLATION_API_URL=`` turns translation
off.
"""

import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_LLM_API_URL = "https://openrouter.ai/api/v1"
DEFAULT_LLM_MODEL = "openai/gpt-3.5-turbo"
DEFAULT_TRANSLATION_API_URL = "https://libretranslate.de/translate"
DEFAULT_TARGET_LANGUAGE = "ar"
DEFAULT_SUMMARY_LANGUAGE = "Arabic"
DEFAULT_TIMEOUT = 30.0


class Credentials(BaseModel):
    """API keys, endpoints and language settings."""
    youtube_api_key: Optional[str] = None
    llm_api_key: Optional[str] = None
    llm_api_url: Optional[str] = DEFAULT_LLM_API_URL
    llm_model: Optional[str] = DEFAULT_LLM_MODEL
    translation_api_url: Optional[str] = DEFAULT_TRANSLATION_API_URL
    target_language: str = DEFAULT_TARGET_LANGUAGE
    summary_language: str = DEFAULT_SUMMARY_LANGUAGE
    transcript_languages: List[str] = Field(default_factory=list)
    request_timeout: float = Field(DEFAULT_TIMEOUT, gt=0)

    @field_validator(
        "youtube_api_key", "llm_api_key", "llm_api_url", "llm_model", "translation_api_url",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("transcript_languages", mode="before")
    @classmethod
    def split_languages(cls, v):
        if isinstance(v, str):
            return [code.strip() for code in v.split(",") if code.strip()]
        return v or []

    @property
    def llm_configured(self) -> bool:
        return bool(self.llm_api_key and self.llm_api_url and self.llm_model)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Credentials":
        """
        Build credentials from environment variables.

        Unset variables fall back to the field defaults; variables set to ""
        become None.
        """
        env = os.environ if environ is None else environ
        mapping = {
            "youtube_api_key": "YT_API_KEY",
            "llm_api_url": "LLM_API_URL",
            "llm_model": "LLM_MODEL",
            "translation_api_url": "TRANSLATION_API_URL",
            "target_language": "TRANSLATION_TARGET_LANGUAGE",
            "summary_language": "SUMMARY_LANGUAGE",
            "transcript_languages": "TRANSCRIPT_LANGUAGES",
            "request_timeout": "REQUEST_TIMEOUT",
        }
        values = {field: env[var] for field, var in mapping.items() if var in env}

        llm_key = env.get("LLM_API_KEY", env.get("OPENAI_API_KEY"))
        if llm_key is not None:
            values["llm_api_key"] = llm_key

        return cls(**values)
