"""Turn the viewer's heading elements into Markdown headings.

The first ``h4.normal`` of a section is the chapter title. memoir prints a
short form of it in the running header, so long titles get a
``\\chaptermark`` of at most 40 characters.
"""

from __future__ import annotations

import re

from dewey2md.config import SHORT_TITLE_MAX_LENGTH, SHORT_TITLE_TRUNCATE_AT
from dewey2md.diagnostics import DiagnosticLog
from dewey2md.predicates import has_class, is_element
from dewey2md.tree import Element, Node, query, replace, text_content

_FOOTNOTE_MARKUP_RE = re.compile(r"\^\[|\[\^")
_SENTENCE_END_RE = re.compile(r"[.!?]")

# Spelled without "&", "<" and ">" so serialization leaves them intact.
_LATEX_ESCAPES = {
    "\\": r"\textbackslash{}",
    "&": r"\char38{}",
    "<": r"\textless{}",
    ">": r"\textgreater{}",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}
_LATEX_SPECIAL_RE = re.compile("|".join(re.escape(char) for char in _LATEX_ESCAPES))


def is_chapter_heading(node: Node) -> bool:
    return is_element(node, "h4") and has_class(node, "normal")


def is_section_heading(node: Node) -> bool:
    return is_element(node, "h2") and has_class(node, "normal")


def heading_text(element: Element) -> str:
    return text_content(element).strip().replace("\n", "")


def short_title(text: str) -> str:
    """Pick the running-header form of a chapter title.

    Footnote markup trailing the title does not count toward its length.
    """
    title = _FOOTNOTE_MARKUP_RE.split(text, maxsplit=1)[0].rstrip()
    if len(title) <= SHORT_TITLE_MAX_LENGTH:
        return title
    first_sentence = _SENTENCE_END_RE.split(title, maxsplit=1)[0].strip()
    if len(first_sentence) < SHORT_TITLE_MAX_LENGTH:
        return first_sentence
    return title[:SHORT_TITLE_TRUNCATE_AT].rstrip() + "..."


def latex_escape(text: str) -> str:
    return _LATEX_SPECIAL_RE.sub(lambda match: _LATEX_ESCAPES[match.group(0)], text)


def chapter_heading(text: str) -> str:
    return f"\n\n# {text}\n\\chaptermark{{{latex_escape(short_title(text))}}}\n\n"


def rewrite_headings(root: Element, diagnostics: DiagnosticLog) -> None:
    for index, heading in enumerate(query(root, is_chapter_heading)):
        text = heading_text(heading)
        if index == 0:
            replace(heading, chapter_heading(text))
        else:
            replace(heading, f"\n\n### {text}\n\n")

    for heading in query(root, is_section_heading):
        replace(heading, f"\n\n## {heading_text(heading)}\n\n")
