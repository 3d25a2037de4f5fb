"""
API Request
===========

Single entry point for outgoing JSON HTTP calls.

Maps transport failures to the package's error classes:
- 429 -> RateLimitedError
- 401 / 403 -> AuthenticationFailedError
- anything else (other statuses, connection errors, bad JSON) -> UpstreamRequestError
"""

import logging
from typing import Any, Dict, Optional

import requests

from .errors import AuthenticationFailedError, RateLimitedError, UpstreamRequestError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


def api_request(
    method: str,
    url: str,
    *,
    json_body: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """
    Send a request and return the decoded JSON body.

    Raises:
        RateLimitedError, AuthenticationFailedError, UpstreamRequestError
    """
    try:
        r = requests.request(method, url, json=json_body, headers=headers, params=params, timeout=timeout)
        r.raise_for_status()
        return r.json()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        body = e.response.text[:200] if e.response is not None else ""
        logger.error(f"API request failed: {method} {url} (status {status}): {body}")

        if status == 429:
            raise RateLimitedError("Rate limit exceeded for API request.") from e
        if status in (401, 403):
            raise AuthenticationFailedError("Authentication failed for API request. Check credentials.") from e
        raise UpstreamRequestError(f"API request error: {e}") from e
    except (requests.RequestException, ValueError) as e:
        logger.error(f"API request failed: {method} {url}: {type(e).__name__}: {e}")
        raise UpstreamRequestError(f"API request error: {e}") from e
