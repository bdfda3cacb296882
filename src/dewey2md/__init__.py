"""dewey2md: convert Dewey's collected works from the library viewer into Markdown."""

from dewey2md.exceptions import (
    ContentRootNotFoundError,
    Dewey2mdError,
    FetchError,
    ParseError,
    SourceNotAvailableError,
    TypesetError,
)
from dewey2md.ingestion import ConversionOptions, convert_volume
from dewey2md.pipeline import PASSES, transform_section
from dewey2md.query import parse_volume
from dewey2md.schemas import ConversionResult, Diagnostic, SectionResult, VolumeQuery

__all__ = [
    "ContentRootNotFoundError",
    "ConversionOptions",
    "ConversionResult",
    "Dewey2mdError",
    "Diagnostic",
    "FetchError",
    "PASSES",
    "ParseError",
    "SectionResult",
    "SourceNotAvailableError",
    "TypesetError",
    "VolumeQuery",
    "convert_volume",
    "parse_volume",
    "transform_section",
]
