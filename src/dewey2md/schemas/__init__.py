"""Shared schemas for dewey2md."""

from dewey2md.schemas.diagnostics import Diagnostic, DiagnosticKind
from dewey2md.schemas.ingestion import ConversionResult
from dewey2md.schemas.query import VolumeQuery
from dewey2md.schemas.sections import SectionResult

__all__ = ["ConversionResult", "Diagnostic", "DiagnosticKind", "SectionResult", "VolumeQuery"]
