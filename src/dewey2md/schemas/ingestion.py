"""Volume conversion output model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from dewey2md.schemas.diagnostics import Diagnostic


class ConversionResult(BaseModel):
    """Files written for a volume and everything worth reporting about them."""

    markdown_path: Path
    pdf_path: Path | None = None
    sections: list[str] = Field(default_factory=list)
    failed_sections: list[str] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)
