"""Address volumes of the collected works on the library viewer."""

from __future__ import annotations

from dewey2md.config import DEWEY2MD_BASE_URI, VOLUME_COUNTS, VOLUME_OFFSETS
from dewey2md.schemas import VolumeQuery


def volume_url(running_volume: int, base_uri: str = DEWEY2MD_BASE_URI) -> str:
    return (
        f"{base_uri}view?docId=dewey_ii/dewey_ii.{running_volume:02d}.xml;"
        "chunk_id=div.mw.100.1;toc.depth=1"
    )


def parse_volume(period: str, volume: str | int) -> VolumeQuery:
    """Build a query for ``volume`` of ``period``.

    Raises:
        ValueError: If the period is unknown or the volume is out of range.
    """
    period = period.strip().lower()
    if period not in VOLUME_OFFSETS:
        raise ValueError(f"Choose one of {', '.join(VOLUME_OFFSETS)} for the period, got {period!r}")
    try:
        number = int(volume)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Volume must be a number, got {volume!r}") from exc
    if not 1 <= number <= VOLUME_COUNTS[period]:
        raise ValueError(
            f"The {period} period has volumes 1-{VOLUME_COUNTS[period]}, got {number}"
        )

    running_volume = number + VOLUME_OFFSETS[period]
    return VolumeQuery(
        period=period,
        volume=number,
        running_volume=running_volume,
        url=volume_url(running_volume),
    )
