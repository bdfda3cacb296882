"""Transform one section page into Markdown."""

from __future__ import annotations

from typing import Callable

from dewey2md.diagnostics import DiagnosticLog
from dewey2md.footnotes import merge_adjacent_footnotes, merge_footnotes
from dewey2md.headings import rewrite_headings
from dewey2md.inline import elide_tables, format_inline
from dewey2md.page_markers import strip_page_markers
from dewey2md.paragraphs import rewrite_paragraphs
from dewey2md.references import resolve_references
from dewey2md.schemas import SectionResult
from dewey2md.tree import Element, find_content_root, parse_fragment, serialize

Pass = Callable[[Element, DiagnosticLog], None]

# Each pass relies on the ones before it: references assume footnote
# scaffolding is gone, headings assume their inline markup is already text.
PASSES: tuple[Pass, ...] = (
    merge_footnotes,
    resolve_references,
    strip_page_markers,
    format_inline,
    elide_tables,
    rewrite_headings,
    rewrite_paragraphs,
)


def transform_section(markup: str | bytes, *, section: str = "") -> SectionResult:
    """Convert a section page into Markdown.

    Args:
        markup: Raw HTML of the section page.
        section: Section name recorded on diagnostics.

    Returns:
        The section's Markdown and the diagnostics raised on the way.

    Raises:
        ContentRootNotFoundError: If the page has no content region.
    """
    content_root = find_content_root(parse_fragment(markup))
    diagnostics = DiagnosticLog(section=section)
    markdown = transform_tree(content_root, diagnostics)
    return SectionResult(name=section, markdown=markdown, diagnostics=diagnostics.records)


def transform_tree(content_root: Element, diagnostics: DiagnosticLog) -> str:
    """Run every pass over ``content_root`` in order and serialize the result."""
    for run_pass in PASSES:
        run_pass(content_root, diagnostics)
    return merge_adjacent_footnotes(serialize(content_root))
