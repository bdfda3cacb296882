"""Inline formatting and table elision passes."""

from __future__ import annotations

from dewey2md.config import TABLE_PLACEHOLDER
from dewey2md.diagnostics import DiagnosticLog
from dewey2md.predicates import is_element
from dewey2md.tree import Element, query, remove, replace, text_content

ITALIC_TAGS = ("i", "em")
BOLD_TAGS = ("b", "strong")


def _emphasize(text: str, marker: str) -> str:
    core = text.strip()
    if not core:
        return text
    leading = text[: len(text) - len(text.lstrip())]
    trailing = text[len(text.rstrip()) :]
    return f"{leading}{marker}{core}{marker}{trailing}"


def format_inline(root: Element, diagnostics: DiagnosticLog) -> None:
    """Rewrite italics and bold as Markdown emphasis; drop line breaks."""
    for node in query(root, lambda n: is_element(n, *ITALIC_TAGS)):
        replace(node, _emphasize(text_content(node), "*"))
    for node in query(root, lambda n: is_element(n, *BOLD_TAGS)):
        replace(node, _emphasize(text_content(node), "**"))
    for node in query(root, lambda n: is_element(n, "br")):
        remove(node)


def elide_tables(root: Element, diagnostics: DiagnosticLog) -> None:
    for table in query(root, lambda n: is_element(n, "table")):
        replace(table, f"\n\n{TABLE_PLACEHOLDER}\n\n")
