"""Section conversion output."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dewey2md.schemas.diagnostics import Diagnostic


class SectionResult(BaseModel):
    """Markdown for one section plus the diagnostics raised producing it."""

    name: str
    markdown: str
    diagnostics: list[Diagnostic] = Field(default_factory=list)
