"""Shared HTTP client used by every outbound call."""

from typing import Dict, Optional

import httpx

from src.utils.config import settings
from src.utils.errors import UpstreamStatusError
from src.utils.logger import get_logger

log = get_logger(__name__)

_client: httpx.Client | None = None


def get_client() -> httpx.Client:
    """Return the process-wide client (one connection pool for all calls)."""
    global _client
    if _client is None:
        _client = httpx.Client(timeout=settings.http_timeout, follow_redirects=True)
    return _client


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None


def fetch_text(
    url: str,
    params: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
    client: Optional[httpx.Client] = None,
) -> str:
    """GET *url* and return the body text.

    Raises ``UpstreamStatusError`` on a non-2xx answer; transport failures
    propagate as ``httpx`` exceptions.
    """
    resp = (client or get_client()).get(url, params=params, headers=headers)
    if not resp.is_success:
        log.warning("GET %s returned %d", resp.url, resp.status_code)
        raise UpstreamStatusError(resp.status_code, str(resp.url))
    log.debug("GET %s -> %d (%d bytes)", resp.url, resp.status_code, len(resp.content))
    return resp.text
