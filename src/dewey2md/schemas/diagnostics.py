"""Diagnostic records."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

DiagnosticKind = Literal[
    "unresolved_reference",
    "duplicate_reference",
    "unhandled_paragraph",
    "malformed_page_marker",
    "section_failed",
]


class Diagnostic(BaseModel):
    """A non-fatal problem met while converting a section."""

    section: str
    kind: DiagnosticKind
    detail: str
