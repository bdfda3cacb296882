"""Inline endnote bodies as Markdown footnotes."""

from __future__ import annotations

from dewey2md.config import MERGED_FOOTNOTE_LABEL
from dewey2md.diagnostics import DiagnosticLog
from dewey2md.predicates import attr_contains, has_class, is_element
from dewey2md.tree import (
    Element,
    Node,
    Text,
    ancestors,
    append,
    following_siblings,
    next_sibling,
    preceding_siblings,
    previous_sibling,
    query,
    remove,
    replace,
    text_content,
)

_FOOTNOTE_OPEN = "^["


def is_endnote_anchor(node: Node | None) -> bool:
    return is_element(node, "a") and attr_contains(node, "endnote", "1")


def is_footnote_name(node: Node | None) -> bool:
    return is_element(node, "span") and attr_contains(node, "name", "footnote")


def is_footnote_body(node: Node) -> bool:
    """A span sitting between an endnote anchor and a footnote-name span.

    Matches when the nearest preceding ``a`` sibling carries an ``endnote``
    attribute containing ``1`` and the nearest following ``span`` sibling
    has a ``name`` containing ``footnote``.
    """
    if not is_element(node, "span"):
        return False
    return is_endnote_anchor(previous_sibling(node, "a")) and is_footnote_name(
        next_sibling(node, "span")
    )


def merge_footnotes(root: Element, diagnostics: DiagnosticLog) -> None:
    """Replace each footnote body span with ``^[...]`` and drop its scaffolding."""
    for span in query(root, is_footnote_body):
        anchor = previous_sibling(span, "a")
        name_span = next_sibling(span, "span")
        if anchor is not None:
            remove(anchor)
        if name_span is not None:
            remove(name_span)

        footnote = f"{_FOOTNOTE_OPEN}{normalize_footnote_text(text_content(span))}]"
        heading = _nearest_heading(span)
        if heading is not None:
            append(heading, Text(footnote))
            remove(span)
        else:
            replace(span, footnote)

    _strip_cluetip_scaffolding(root)


def normalize_footnote_text(text: str) -> str:
    """Flatten a footnote body to a single line.

    Page-break hyphenation leaves the last word doubled (``con- con``); when
    the next-to-last word without hyphens equals the last word, the earlier
    copy is dropped.
    """
    words = text.strip().replace("\n", " ").split()
    if len(words) >= 2 and words[-2].replace("-", "") == words[-1]:
        del words[-2]
    return " ".join(words)


def _nearest_heading(node: Node) -> Element | None:
    for ancestor in ancestors(node):
        if ancestor.tag in {"h2", "h4"}:
            return ancestor
    return None


def _is_cluetip_sup(node: Node | None) -> bool:
    return is_element(node, "sup") and any(
        is_element(child, "a") and has_class(child, "cluetip") for child in node.children
    )


def _strip_cluetip_scaffolding(root: Element) -> None:
    # Both sets are taken before anything is removed.
    sups = query(
        root,
        lambda node: is_element(node, "sup")
        and any(sibling.tag == "span" for sibling in following_siblings(node)),
    )
    spans = query(
        root,
        lambda node: is_element(node, "span")
        and any(_is_cluetip_sup(sibling) for sibling in preceding_siblings(node)),
    )
    for node in [*sups, *spans]:
        remove(node)


def merge_adjacent_footnotes(text: str) -> str:
    """Collapse footnotes that touch (``^[A]^[B]``) into one.

    Longer runs fold left to right, so ``^[A]^[B]^[C]`` keeps a single
    marker with both merge labels.
    """
    pieces: list[str] = []
    position = 0
    while True:
        start = text.find(_FOOTNOTE_OPEN, position)
        if start == -1:
            pieces.append(text[position:])
            break
        end = _footnote_end(text, start + 1)
        if end == -1:
            pieces.append(text[position:])
            break
        pieces.append(text[position:start])
        bodies = [text[start + 2 : end]]
        position = end + 1
        while text.startswith(_FOOTNOTE_OPEN, position):
            next_end = _footnote_end(text, position + 1)
            if next_end == -1:
                break
            bodies.append(text[position + 2 : next_end])
            position = next_end + 1
        merged = f" {MERGED_FOOTNOTE_LABEL}: ".join(bodies)
        pieces.append(f"{_FOOTNOTE_OPEN}{merged}]")
    return "".join(pieces)


def _footnote_end(text: str, open_index: int) -> int:
    """Index of the bracket closing a footnote opened at ``open_index``.

    A stray ``[`` in the note (``[sic``) leaves no balanced close; the note
    then ends at the first ``]``.
    """
    end = _closing_bracket(text, open_index)
    if end == -1:
        end = text.find("]", open_index)
    return end


def _closing_bracket(text: str, open_index: int) -> int:
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return index
    return -1
