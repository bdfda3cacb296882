"""Structural predicates over the markup tree.

Class and attribute tests use substring containment on the raw attribute
value, which is how the library viewer's markup is meant to be read
(``hang pad`` contains ``hang``, ``indent_4em`` contains ``indent_``).
"""

from __future__ import annotations

from dewey2md.tree import Element, Node

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4"})


def is_element(node: Node, *tags: str) -> bool:
    """True for an element, restricted to ``tags`` when any are given."""
    return isinstance(node, Element) and (not tags or node.tag in tags)


def has_attr(node: Node | None, name: str) -> bool:
    return isinstance(node, Element) and name in node.attrs


def attr_contains(node: Node | None, name: str, fragment: str) -> bool:
    return isinstance(node, Element) and fragment in (node.get(name) or "")


def has_class(node: Node | None, fragment: str) -> bool:
    return attr_contains(node, "class", fragment)


def is_heading(node: Node | None) -> bool:
    return isinstance(node, Element) and node.tag in HEADING_TAGS
