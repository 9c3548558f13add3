"""Fetch fragment markup over HTTP."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from fragedit.config import (
    FRAGEDIT_FETCH_BACKOFF_S,
    FRAGEDIT_FETCH_MAX_RETRIES,
    FRAGEDIT_FETCH_TIMEOUT_S,
    FRAGEDIT_USER_AGENT,
)
from fragedit.exceptions import FetchError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})
# Upper bound on a server-requested Retry-After delay.
MAX_RETRY_AFTER_S: Final[float] = 30.0

_MARKUP_CONTENT_TYPES: Final[tuple[str, ...]] = ("text/", "application/xhtml+xml", "application/xml")


async def fetch_markup(url: str, *, client: httpx.AsyncClient | None = None) -> str:
    """Return the HTML served at ``url``.

    Transient failures (transport errors and ``RETRY_STATUS_CODES``) are
    retried with exponential backoff, honoring a ``Retry-After`` header when
    the server sends one.

    Args:
        url: The URL to fetch.
        client: Optional client to reuse; a configured one is created otherwise.

    Raises:
        FetchError: On 404, on a non-markup content type, or once retries run out.
    """
    if client is None:
        async with _new_client() as new_client:
            return await _fetch(new_client, url)
    return await _fetch(client, url)


def _new_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(FRAGEDIT_FETCH_TIMEOUT_S),
        headers={"User-Agent": FRAGEDIT_USER_AGENT, "Accept": "text/html, */*;q=0.5"},
        follow_redirects=True,
        max_redirects=5,
    )


async def _fetch(client: httpx.AsyncClient, url: str) -> str:
    attempts = FRAGEDIT_FETCH_MAX_RETRIES + 1
    failure: str = "no attempt made"
    for attempt in range(attempts):
        response: httpx.Response | None = None
        try:
            response = await client.get(url)
        except httpx.RequestError as exc:
            failure = str(exc) or type(exc).__name__
        else:
            if response.status_code == 404:
                raise FetchError(f"Resource not found at {url}")
            if response.status_code not in RETRY_STATUS_CODES:
                if response.is_error:
                    raise FetchError(f"HTTP {response.status_code} from {url}")
                _check_content_type(response, url)
                return response.text
            failure = f"HTTP {response.status_code}"

        if attempt + 1 < attempts:
            delay = _retry_delay(attempt, response)
            logger.debug("Fetching %s failed (%s), retry %d in %.2fs", url, failure, attempt + 1, delay)
            await asyncio.sleep(delay)

    raise FetchError(f"Failed to fetch {url} after {attempts} attempts: {failure}")


def _retry_delay(attempt: int, response: httpx.Response | None) -> float:
    if response is not None:
        retry_after = response.headers.get("Retry-After", "")
        if retry_after.strip().isdigit():
            return min(float(retry_after), MAX_RETRY_AFTER_S)
    return FRAGEDIT_FETCH_BACKOFF_S * (2**attempt)


def _check_content_type(response: httpx.Response, url: str) -> None:
    content_type = response.headers.get("Content-Type", "").split(";")[0].strip().lower()
    if content_type and not content_type.startswith(_MARKUP_CONTENT_TYPES):
        raise FetchError(f"Expected HTML from {url}, got {content_type}")
