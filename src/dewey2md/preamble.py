"""Document preamble and output file names for a converted volume."""

from __future__ import annotations

import re
from dataclasses import dataclass

from dewey2md.config import AUTHOR_FIRST, AUTHOR_LAST, PUBLICATION_DATE, PUBLISHER
from dewey2md.schemas import VolumeQuery
from dewey2md.toc import VolumeToc

_VOLUME_TITLE_RE = re.compile(r"Volume.*")
_SERIES_RE = re.compile(r"(?P<series>.*)\. Volume")
_VOLUME_CONTENT_RE = re.compile(r"Volume \d{1,2}: \d{4}(?:-\d{4})?, (?P<content>.*)")

# memoir/xelatex settings consumed by the book.latex template.
TYPESETTING_OPTIONS: tuple[tuple[str, str], ...] = (
    ("geometry", "left=0.5in, right=0.5in, bottom=0.5in"),
    ("classoption", "book,twoside,12pt"),
    ("documentclass", "memoir"),
    ("mainfont", "Minion Pro"),
    ("mainfontoptions", "BoldFont=Myriad Pro Bold"),
    ("sansfont", "Myriad Pro"),
    ("papersize", "ebook"),
    ("ismemoir", "True"),
    ("toc", "True"),
)


@dataclass(frozen=True)
class Author:
    first: str = AUTHOR_FIRST
    last: str = AUTHOR_LAST

    @property
    def full_name(self) -> str:
        return f"{self.first} {self.last}"


def _quoted(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def generate_preamble(toc: VolumeToc, *, author: Author | None = None) -> str:
    """Build the pandoc YAML metadata block that opens the document."""
    author = author or Author()
    title_match = _VOLUME_TITLE_RE.search(toc.volume_title)
    title = title_match.group(0) if title_match else toc.volume_title
    series_match = _SERIES_RE.search(toc.volume_title)
    subtitle = (
        f"{series_match.group('series')} in {toc.collection_title}"
        if series_match
        else toc.collection_title
    )

    lines = [
        "---",
        f"title: {_quoted(title)}",
        f"subtitle: {_quoted(subtitle)}",
        f"author: {_quoted(author.full_name)}",
        f"date: {PUBLICATION_DATE}",
        f"publisher: {PUBLISHER}",
    ]
    lines.extend(f"{key}: {value}" for key, value in TYPESETTING_OPTIONS)
    lines.append("...")
    return "\n".join(lines)


def markdown_filename(query: VolumeQuery, author: Author | None = None) -> str:
    author = author or Author()
    return f"{author.last}__{query.period}{query.volume}.md"


def section_filename(query: VolumeQuery, section: str) -> str:
    return f"{query.period}_{query.volume}_{section}_parsed.md"


def volume_content_slug(volume_title: str) -> str | None:
    """Condense the works listed in a volume title into a file-name fragment.

    ``Volume 1: 1899-1901, Essays, The School and Society, and The
    Educational Situation`` becomes
    ``Essays_TheSchoolAndSociety_TheEducationalSituation``.
    """
    match = _VOLUME_CONTENT_RE.search(volume_title)
    if match is None:
        return None
    parts = []
    for part in match.group("content").split(","):
        part = part.strip()
        if part.startswith("and "):
            part = part[len("and ") :]
        part = part.replace(":", "_").replace("-", "")
        words = "".join(word.capitalize() for word in part.split())
        if words:
            parts.append(words)
    return "_".join(parts) or None


def pdf_filename(query: VolumeQuery, volume_title: str, author: Author | None = None) -> str:
    author = author or Author()
    stem = f"{author.last}__{query.period.upper()}{query.volume}"
    content = volume_content_slug(volume_title)
    return f"{stem}__{content}.pdf" if content else f"{stem}.pdf"
