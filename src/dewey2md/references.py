"""Resolve endnote cross-references into Markdown footnote syntax.

The viewer does not separate a reference's location from its target.
In-text anchors have a ``name`` ending in ``a`` and targets one ending in
``r``; both share the identifier left after stripping the positional suffix
(``n3.1a`` and ``n3.1r`` both resolve to ``n3``). Each reference anchor is
wrapped by two empty sibling anchors that carry no content.
"""

from __future__ import annotations

import re

from dewey2md.config import ENDMATTER_CLASSES, ENDMATTER_PLACEHOLDER
from dewey2md.diagnostics import DiagnosticLog
from dewey2md.predicates import has_attr, is_element, is_heading
from dewey2md.tree import (
    Element,
    Node,
    Text,
    append,
    describe,
    next_sibling,
    previous_sibling,
    query,
    remove,
    replace,
    text_content,
)

ANCHOR_ROLE = "a"
TARGET_ROLE = "r"

_POSITIONAL_SUFFIX_RE = re.compile(r"\..{1,2}\Z")


def is_reference_anchor(node: Node) -> bool:
    """An ``a[reference]`` whose nearest element siblings are both anchors."""
    return (
        is_element(node, "a")
        and has_attr(node, "reference")
        and is_element(previous_sibling(node), "a")
        and is_element(next_sibling(node), "a")
    )


def reference_identifier(name: str) -> str:
    """Strip the positional suffix (or, lacking one, the role letter)."""
    stripped = _POSITIONAL_SUFFIX_RE.sub("", name)
    if stripped == name:
        return name[:-1]
    return stripped


def resolve_references(root: Element, diagnostics: DiagnosticLog) -> None:
    """Rewrite reference anchors and targets, then report unpaired identifiers.

    Every in-text marker needs exactly one definition in the same section and
    every definition needs a marker. Targets sent to the end matter count as
    defined.
    """
    defined: set[str] = set()
    referenced: set[str] = set()
    for anchor in query(root, is_reference_anchor):
        parent = anchor.parent
        if parent is None:
            continue
        for scaffold in (previous_sibling(anchor), next_sibling(anchor)):
            if is_element(scaffold, "a"):
                remove(scaffold)

        name = anchor.get("name") or ""
        role = name[-1:]
        if role == TARGET_ROLE:
            _resolve_target(root, anchor, parent, defined, diagnostics)
        elif role == ANCHOR_ROLE:
            referenced.add(_resolve_anchor(anchor, parent))
        else:
            diagnostics.report(
                "unresolved_reference",
                f"cannot tell anchor from target: {describe(anchor)}",
            )

    for identifier in sorted(referenced - defined):
        diagnostics.report(
            "unresolved_reference", f"footnote [^{identifier}] has no definition"
        )
    for identifier in sorted(defined - referenced):
        diagnostics.report(
            "unresolved_reference", f"footnote [^{identifier}] is defined but never referenced"
        )


def _resolve_target(
    root: Element,
    anchor: Element,
    parent: Element,
    defined: set[str],
    diagnostics: DiagnosticLog,
) -> None:
    identifier = reference_identifier(anchor.get("name") or "")
    if (parent.get("class") or "") in ENDMATTER_CLASSES:
        defined.add(identifier)
        replace(parent, ENDMATTER_PLACEHOLDER)
        return

    if identifier in defined:
        diagnostics.report(
            "duplicate_reference",
            f"footnote {identifier!r} already defined: {describe(anchor)}",
        )
        return
    defined.add(identifier)

    if parent is root:
        # Loose text in the content region: the definition runs to the next block.
        replace(anchor, f"\n\n[^{identifier}]: ")
        return

    remove(anchor)
    definition = f"[^{identifier}]: {text_content(parent).strip()}"
    for child in list(parent.children):
        remove(child)
    append(parent, Text(definition))


def _resolve_anchor(anchor: Element, parent: Element) -> str:
    identifier = reference_identifier(anchor.get("name") or "")
    marker = f"[^{identifier}]"
    if is_heading(parent):
        append(parent, Text(marker))
        remove(anchor)
    else:
        replace(anchor, marker)
    return identifier
