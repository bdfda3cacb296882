"""Volume query model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Period = Literal["ew", "mw", "lw"]


class VolumeQuery(BaseModel):
    """A single volume of the collected works.

    Attributes:
        period: Period code (``ew`` early, ``mw`` middle, ``lw`` later works).
        volume: Volume number within the period.
        running_volume: Volume number across the whole collection.
        url: Viewer URL of the volume's first page.
    """

    period: Period
    volume: int = Field(..., ge=1)
    running_volume: int = Field(..., ge=1)
    url: str

    @property
    def slug(self) -> str:
        return f"{self.period}{self.volume}"
