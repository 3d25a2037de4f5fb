"""Shared fixtures for the test suite."""

from unittest.mock import Mock

import pytest
import requests

from yt_transcript_plus import Credentials


@pytest.fixture
def creds():
    """Fully configured credentials pointing at fake endpoints."""
    return Credentials(
        youtube_api_key="yt-key",
        llm_api_key="llm-key",
        llm_api_url="https://llm.example/v1/",
        llm_model="test-model",
        translation_api_url="https://translate.example/translate",
    )


@pytest.fixture
def make_response():
    """Factory for fake ``requests`` responses."""
    def _make(status=200, json_data=None, text=""):
        resp = Mock()
        resp.status_code = status
        resp.text = text
        resp.json.return_value = json_data
        if status >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Client Error", response=resp)
        else:
            resp.raise_for_status.return_value = None
        return resp
    return _make
