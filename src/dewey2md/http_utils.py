"""HTTP fetching with retries for transient failures."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from dewey2md.config import (
    DEWEY2MD_FETCH_BACKOFF_S,
    DEWEY2MD_FETCH_MAX_RETRIES,
    DEWEY2MD_FETCH_TIMEOUT_S,
    DEWEY2MD_USER_AGENT,
)
from dewey2md.exceptions import FetchError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def create_client() -> httpx.AsyncClient:
    """Client shared by all requests of one volume conversion."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(DEWEY2MD_FETCH_TIMEOUT_S),
        headers={"User-Agent": DEWEY2MD_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    )


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] | None = None,
) -> str:
    """Fetch ``url`` as text, retrying 429/5xx responses and network errors.

    Args:
        url: The URL to fetch.
        client: Optional shared client; a temporary one is created otherwise.
        on_404: Exception class raised for 404 responses (default FetchError).

    Raises:
        FetchError (or ``on_404``): If the page is missing or every attempt fails.
    """
    last_exc: Exception | None = None
    not_found_exc_class = on_404 or FetchError

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        nonlocal last_exc

        for attempt in range(DEWEY2MD_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code == 404:
                    raise not_found_exc_class(f"Page not found at {url}")

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < DEWEY2MD_FETCH_MAX_RETRIES:
                await asyncio.sleep(DEWEY2MD_FETCH_BACKOFF_S * (2**attempt))

        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with create_client() as new_client:
        return await do_fetch(new_client)
