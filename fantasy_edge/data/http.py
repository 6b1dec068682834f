"""Shared HTTP fetch for the upstream providers."""

import logging
from typing import Any, Dict, Optional

import requests

from fantasy_edge.config import settings
from fantasy_edge.exceptions import ProviderError

logger = logging.getLogger(__name__)


def _get(
    provider: str,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    session: Optional[requests.Session] = None,
) -> requests.Response:
    http = session or requests
    try:
        response = http.get(
            url,
            params=params,
            headers={"User-Agent": settings.USER_AGENT},
            timeout=settings.REQUEST_TIMEOUT,
        )
        response.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise ProviderError(provider, f"HTTP error from {url}: {e}", status_code=status) from e
    except requests.RequestException as e:
        raise ProviderError(provider, f"Request to {url} failed: {e}") from e
    return response


def get_json(
    provider: str,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    session: Optional[requests.Session] = None,
) -> Any:
    """
    GET a URL and decode the JSON body.

    Args:
        provider: Provider name used in log lines and errors
        url: Absolute URL
        params: Query string parameters
        session: Optional requests session (tests pass a stub)

    Returns:
        Decoded JSON payload

    Raises:
        ProviderError: On transport failure, non-2xx status or invalid JSON
    """
    response = _get(provider, url, params=params, session=session)
    try:
        return response.json()
    except ValueError as e:
        raise ProviderError(provider, f"Invalid JSON from {url}: {e}") from e


def get_text(provider: str, url: str, session: Optional[requests.Session] = None) -> str:
    """GET a URL and return the body as text (CSV release assets)."""
    return _get(provider, url, session=session).text
