"""Mutable markup tree shared by the section transformation passes.

Pages are parsed with BeautifulSoup (lxml backend) and copied into a small
Element/Text tree. Every pass works through the helpers in this module, so no
pass depends on the parser's own node classes.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Callable, Iterator, Sequence, Union

from dewey2md.config import CONTENT_ROOT_ID
from dewey2md.exceptions import ContentRootNotFoundError, ParseError

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)
DOCUMENT_TAG = "#document"


@dataclass(eq=False)
class Text:
    """A run of character data."""

    value: str
    parent: Element | None = field(default=None, repr=False)


@dataclass(eq=False)
class Element:
    """A markup element with ordered children."""

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    parent: Element | None = field(default=None, repr=False)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attrs.get(name, default)


Node = Union[Element, Text]
Replacement = Union[Node, str, Sequence[Union[Node, str]]]


def parse_fragment(markup: str | bytes) -> Element:
    """Parse markup into a detached document element."""
    soup = BeautifulSoup(markup, "lxml")
    document = Element(DOCUMENT_TAG)
    for child in soup.contents:
        _copy_into(document, child)
    return document


def _copy_into(parent: Element, source: Tag | NavigableString) -> None:
    if isinstance(source, Tag):
        attrs = {
            name: " ".join(value) if isinstance(value, list) else str(value)
            for name, value in source.attrs.items()
        }
        element = Element(source.name, attrs)
        append(parent, element)
        for child in source.children:
            _copy_into(element, child)
    elif isinstance(source, PreformattedString):
        # Comments, doctypes, CDATA and processing instructions carry no content.
        return
    elif isinstance(source, NavigableString):
        append(parent, Text(str(source)))


def find_content_root(document: Element) -> Element:
    """Return the section's content region.

    Raises:
        ContentRootNotFoundError: If no ``div`` carries the content id.
    """
    for node in iter_descendants(document):
        if (
            isinstance(node, Element)
            and node.tag == "div"
            and CONTENT_ROOT_ID in (node.get("id") or "")
        ):
            return node
    raise ContentRootNotFoundError(f"No div with id containing {CONTENT_ROOT_ID!r}")


def children(node: Node) -> list[Node]:
    if isinstance(node, Element):
        return list(node.children)
    return []


def append(parent: Element, node: Node | str) -> Node:
    child = Text(node) if isinstance(node, str) else node
    if child.parent is not None:
        remove(child)
    child.parent = parent
    parent.children.append(child)
    return child


def replace(node: Node, replacement: Replacement) -> list[Node]:
    """Splice ``replacement`` into the position held by ``node``.

    Strings become Text nodes. Detached nodes are left alone and nothing is
    inserted.
    """
    parent = node.parent
    if parent is None:
        return []
    if isinstance(replacement, (str, Element, Text)):
        items = [replacement]
    else:
        items = list(replacement)
    new_nodes = [Text(item) if isinstance(item, str) else item for item in items]
    for new_node in new_nodes:
        if new_node.parent is not None:
            remove(new_node)
    index = _index_in_parent(node)
    parent.children[index : index + 1] = new_nodes
    for new_node in new_nodes:
        new_node.parent = parent
    node.parent = None
    return new_nodes


def remove(node: Node) -> None:
    parent = node.parent
    if parent is None:
        return
    del parent.children[_index_in_parent(node)]
    node.parent = None


def _index_in_parent(node: Node) -> int:
    assert node.parent is not None
    for index, sibling in enumerate(node.parent.children):
        if sibling is node:
            return index
    raise ValueError("node is not among its parent's children")


def iter_descendants(root: Element) -> Iterator[Node]:
    """Yield every node below ``root`` in document order."""
    stack: list[Node] = list(reversed(root.children))
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Element):
            stack.extend(reversed(node.children))


def query(root: Element, predicate: Callable[[Node], bool]) -> list[Node]:
    """Return matching descendants in document order.

    The result is a snapshot, so callers may mutate the tree while iterating.
    """
    return [node for node in iter_descendants(root) if predicate(node)]


def text_content(node: Node) -> str:
    if isinstance(node, Text):
        return node.value
    return "".join(
        descendant.value
        for descendant in iter_descendants(node)
        if isinstance(descendant, Text)
    )


def ancestors(node: Node) -> Iterator[Element]:
    parent = node.parent
    while parent is not None:
        yield parent
        parent = parent.parent


def _sibling_elements(node: Node, step: int) -> Iterator[Element]:
    if node.parent is None:
        return
    siblings = node.parent.children
    index = _index_in_parent(node) + step
    while 0 <= index < len(siblings):
        sibling = siblings[index]
        if isinstance(sibling, Element):
            yield sibling
        index += step


def previous_sibling(node: Node, tag: str | None = None) -> Element | None:
    """Nearest preceding element sibling, optionally the nearest with ``tag``."""
    for sibling in _sibling_elements(node, -1):
        if tag is None or sibling.tag == tag:
            return sibling
    return None


def next_sibling(node: Node, tag: str | None = None) -> Element | None:
    """Nearest following element sibling, optionally the nearest with ``tag``."""
    for sibling in _sibling_elements(node, 1):
        if tag is None or sibling.tag == tag:
            return sibling
    return None


def following_siblings(node: Node) -> list[Element]:
    return list(_sibling_elements(node, 1))


def preceding_siblings(node: Node) -> list[Element]:
    return list(_sibling_elements(node, -1))


def serialize(node: Node) -> str:
    """Write a subtree back out as text.

    Text is HTML-escaped; surviving elements are written as HTML except
    ``div`` wrappers, whose tags are dropped.
    """
    if isinstance(node, Text):
        return html.escape(node.value, quote=False)
    inner = "".join(serialize(child) for child in node.children)
    if node.tag in {DOCUMENT_TAG, "div"}:
        return inner
    attrs = "".join(
        f' {name}="{html.escape(value, quote=True)}"' for name, value in node.attrs.items()
    )
    if node.tag in _VOID_TAGS:
        return f"<{node.tag}{attrs}>"
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


def describe(element: Element) -> str:
    """Short human-readable rendering of an element's identity."""
    attrs = " ".join(f"{name}={value!r}" for name, value in element.attrs.items())
    return f"<{element.tag} {attrs}>" if attrs else f"<{element.tag}>"
