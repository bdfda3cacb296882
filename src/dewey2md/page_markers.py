"""Replace running-head page markers with inline page annotations."""

from __future__ import annotations

import re

from dewey2md.diagnostics import DiagnosticLog
from dewey2md.predicates import has_class, is_element
from dewey2md.tree import Element, Node, query, remove, replace, text_content

# Optional period code, optional chapter number, then an Arabic or lowercase Roman page.
PAGE_TOKEN_RE = re.compile(r"\b((?:ew|mw|lw)\.)?(\d{1,2}\.)?(\d{1,4}|[ivx]{1,5})\b")


def is_running_head(node: Node) -> bool:
    return is_element(node, "span") and has_class(node, "run-head")


def page_annotation(token: str) -> str:
    return f" **({token})** "


def strip_page_markers(root: Element, diagnostics: DiagnosticLog) -> None:
    for marker in query(root, is_running_head):
        container = marker.parent
        if container is None:
            continue
        text = text_content(marker).strip()
        match = PAGE_TOKEN_RE.search(text)
        if match is None:
            diagnostics.report("malformed_page_marker", f"unrecognized page token {text!r}")
            remove(marker)
            continue
        target = marker if container is root else container
        replace(target, page_annotation(match.group(0)))
