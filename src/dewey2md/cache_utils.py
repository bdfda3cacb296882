"""On-disk cache of downloaded viewer pages."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from pathlib import Path

from dewey2md.schemas import VolumeQuery


def is_cache_fresh(path: Path, ttl_seconds: int) -> bool:
    """Whether ``path`` exists and is younger than ``ttl_seconds``.

    A TTL of zero or less keeps cached pages forever.
    """
    if not path.exists():
        return False
    if ttl_seconds <= 0:
        return True
    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    age_seconds = (datetime.now(timezone.utc) - mtime).total_seconds()
    return age_seconds <= ttl_seconds


def volume_cache_dir(query: VolumeQuery, base_path: Path) -> Path:
    return base_path / query.slug


def volume_page_path(query: VolumeQuery, base_path: Path) -> Path:
    return volume_cache_dir(query, base_path) / f"{query.period}.{query.volume}.html"


def section_page_path(query: VolumeQuery, section: str, base_path: Path) -> Path:
    return volume_cache_dir(query, base_path) / f"{query.period}_{query.volume}__{section}.html"


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    await asyncio.to_thread(path.write_text, content, encoding=encoding)


async def mkdir_async(path: Path, parents: bool = False, exist_ok: bool = False) -> None:
    await asyncio.to_thread(path.mkdir, parents=parents, exist_ok=exist_ok)
