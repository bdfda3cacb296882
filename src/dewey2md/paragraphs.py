"""Render paragraph elements as Markdown blocks by their class."""

from __future__ import annotations

import re
from typing import Callable

from dewey2md.diagnostics import DiagnosticLog
from dewey2md.predicates import is_element
from dewey2md.tree import Element, query, remove, replace, text_content

_INDENT_RE = re.compile(r"indent_(\d{1,2})em")


def _plain(paragraph: Element) -> str:
    return f"\n\n{text_content(paragraph).strip()}"


def _line_block(paragraph: Element) -> str:
    lines = text_content(paragraph).strip().split("\n")
    return "\n\n" + "".join(f"| {line.strip()}\n" for line in lines) + "\n"


def _indented(paragraph: Element) -> str | None:
    match = _INDENT_RE.search(paragraph.get("class") or "")
    if match is None:
        return None
    depth = int(match.group(1)) // 2
    return f"\n\n|    {'  ' * depth} {text_content(paragraph).strip()}"


# Order is precedence: a paragraph takes the first rule whose class fragment it contains.
# A renderer returning "" deletes the paragraph.
PARAGRAPH_RULES: tuple[tuple[str, Callable[[Element], str | None]], ...] = (
    ("tbindent", _plain),
    ("block", _line_block),
    ("center", _plain),
    ("normal", _plain),
    ("spacer", lambda paragraph: ""),
    ("hang", _plain),
    ("indent_", _indented),
)


def render_paragraph(paragraph: Element) -> str | None:
    """Markdown for ``paragraph``, or None when no rule handles its class."""
    classes = paragraph.get("class") or ""
    for fragment, renderer in PARAGRAPH_RULES:
        if fragment in classes:
            return renderer(paragraph)
    return None


def rewrite_paragraphs(root: Element, diagnostics: DiagnosticLog) -> None:
    for paragraph in query(root, lambda node: is_element(node, "p")):
        rendered = render_paragraph(paragraph)
        if rendered is None:
            diagnostics.report(
                "unhandled_paragraph",
                f"class={paragraph.get('class')!r}: {text_content(paragraph).strip()[:60]!r}",
            )
        elif rendered:
            replace(paragraph, rendered)
        else:
            remove(paragraph)
