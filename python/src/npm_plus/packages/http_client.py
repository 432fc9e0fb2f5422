"""
HTTP fetch adapter for upstream JSON APIs.
"""

import logging
from typing import Any

import httpx

from .errors import UpstreamError

logger = logging.getLogger(__name__)


async def fetch_json(
    url: str,
    params: dict[str, Any] | None = None,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """GET a URL and return its parsed JSON body.

    Raises:
        UpstreamError: On a non-success status, a transport failure or a body
            that is not JSON.
    """
    logger.debug(f"GET {url} params={params}")
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url, params=params)
    except httpx.HTTPError as e:
        logger.warning(f"Request to {url} failed: {e}")
        raise UpstreamError(f"API error (network): {e}", url=url) from e

    if not response.is_success:
        error = UpstreamError.from_status(response.status_code, response.text, str(response.url))
        logger.warning(f"Upstream returned {response.status_code} for {response.url}")
        raise error

    try:
        return response.json()
    except ValueError as e:
        logger.warning(f"Invalid JSON from {response.url}: {e}")
        raise UpstreamError(
            f"API error ({response.status_code}): invalid JSON response",
            response.status_code,
            response.text,
            str(response.url),
        ) from e
