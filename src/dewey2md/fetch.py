"""Fetch viewer pages through the local cache."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from dewey2md.cache_utils import (
    is_cache_fresh,
    mkdir_async,
    read_text_async,
    write_text_async,
)
from dewey2md.config import DEWEY2MD_CACHE_TTL_SECONDS
from dewey2md.exceptions import SourceNotAvailableError
from dewey2md.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)


async def fetch_page(
    url: str,
    *,
    cache_path: Path,
    use_cache: bool = True,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Return the page at ``url``, downloading it only when not cached.

    Raises:
        SourceNotAvailableError: If the server has no such page.
        FetchError: If the download fails after retries.
    """
    if use_cache and is_cache_fresh(cache_path, DEWEY2MD_CACHE_TTL_SECONDS):
        logger.debug("Using cached copy of %s at %s", url, cache_path)
        return await read_text_async(cache_path)

    logger.info("Downloading %s", url)
    html_text = await fetch_with_retries(url, client=client, on_404=SourceNotAvailableError)
    await mkdir_async(cache_path.parent, parents=True, exist_ok=True)
    await write_text_async(cache_path, html_text)
    return html_text
