"""Tests for the markup tree model."""

from __future__ import annotations

import pytest

from dewey2md.exceptions import ContentRootNotFoundError
from dewey2md.tree import (
    Element,
    Text,
    ancestors,
    append,
    children,
    find_content_root,
    next_sibling,
    parse_fragment,
    previous_sibling,
    query,
    remove,
    replace,
    serialize,
    text_content,
)


class TestParseFragment:
    """Tests for parse_fragment and find_content_root."""

    def test_finds_content_root_by_id_fragment(self) -> None:
        """The first div whose id contains article_content is the root."""
        document = parse_fragment(
            '<div id="nav">x</div><div id="main_article_content">body</div>'
        )
        root = find_content_root(document)
        assert root.get("id") == "main_article_content"
        assert text_content(root) == "body"

    def test_missing_content_root_raises(self) -> None:
        """A page without the content div is rejected."""
        with pytest.raises(ContentRootNotFoundError):
            find_content_root(parse_fragment("<div id='other'><p>x</p></div>"))

    def test_class_values_are_joined(self, make_root) -> None:
        """Multi-valued class attributes become one space-separated string."""
        root = make_root('<p class="hang   pad">x</p>')
        assert root.children[0].get("class") == "hang pad"

    def test_comments_are_dropped(self, make_root) -> None:
        """Comments carry no content and do not survive parsing."""
        root = make_root("<p>a<!-- note -->b</p>")
        assert serialize(root) == "<p>ab</p>"

    def test_parent_links_are_set(self, make_root) -> None:
        """Every node points back at its parent."""
        root = make_root("<p><i>x</i></p>")
        italic = query(root, lambda n: isinstance(n, Element) and n.tag == "i")[0]
        assert [a.tag for a in ancestors(italic)][:2] == ["p", "div"]
        assert italic.children[0].parent is italic


class TestMutation:
    """Tests for replace, remove and append."""

    def test_replace_with_text_preserves_order(self, make_root) -> None:
        """The replacement takes the node's place between its siblings."""
        root = make_root("<p><i>a</i><b>b</b><i>c</i></p>")
        bold = query(root, lambda n: isinstance(n, Element) and n.tag == "b")[0]
        replace(bold, "X")
        assert serialize(root) == "<p><i>a</i>X<i>c</i></p>"
        assert bold.parent is None

    def test_replace_with_sequence(self, make_root) -> None:
        """Several nodes and strings can be spliced in at once."""
        root = make_root("<p><b>b</b></p>")
        bold = root.children[0].children[0]
        replace(bold, ["1", Element("i", children=[]), "2"])
        assert serialize(root) == "<p>1<i></i>2</p>"
        assert all(child.parent is root.children[0] for child in children(root.children[0]))

    def test_replace_detached_node_is_noop(self) -> None:
        """A node already removed from the tree cannot be replaced."""
        assert replace(Text("x"), "y") == []

    def test_remove(self, make_root) -> None:
        """Removed nodes disappear from serialization."""
        root = make_root("<p>a<span>b</span>c</p>")
        span = root.children[0].children[1]
        remove(span)
        assert serialize(root) == "<p>ac</p>"
        assert span.parent is None

    def test_append_moves_node(self, make_root) -> None:
        """Appending an attached node detaches it from its old parent."""
        root = make_root("<p>a</p><h4>b</h4>")
        paragraph, heading = root.children
        append(heading, paragraph.children[0])
        assert serialize(root) == "<p></p><h4>ba</h4>"


class TestNavigation:
    """Tests for query and sibling lookups."""

    def test_query_is_in_document_order(self, make_root) -> None:
        """Nested matches come before later siblings."""
        root = make_root(
            '<p><span id="1"><span id="2"></span></span><span id="3"></span></p>'
        )
        spans = query(root, lambda n: isinstance(n, Element) and n.tag == "span")
        assert [span.get("id") for span in spans] == ["1", "2", "3"]

    def test_sibling_lookup_skips_text(self, make_root) -> None:
        """Nearest element siblings ignore text nodes in between."""
        root = make_root("<p><a>1</a> text <span>s</span> more <b>x</b></p>")
        span = root.children[0].children[2]
        assert previous_sibling(span).tag == "a"
        assert next_sibling(span).tag == "b"

    def test_sibling_lookup_by_tag(self, make_root) -> None:
        """A tag filter finds the nearest sibling with that tag."""
        root = make_root("<p><a>1</a><b>x</b><span>s</span><i>y</i><span>t</span></p>")
        middle = root.children[0].children[2]
        assert previous_sibling(middle, "a").tag == "a"
        assert next_sibling(middle, "span").children[0].value == "t"
        assert next_sibling(middle, "a") is None


class TestSerialize:
    """Tests for serialize."""

    def test_escapes_text_and_drops_divs(self, make_root) -> None:
        """Text is escaped, div wrappers vanish and void elements stay open."""
        root = make_root('<div class="w">a &amp; b<br><span class="x">y</span></div>')
        assert serialize(root) == 'a &amp; b<br><span class="x">y</span>'

    def test_escapes_attribute_values(self, make_root) -> None:
        """Attribute values are quoted safely."""
        root = make_root('<a title="say &quot;hi&quot;">x</a>')
        assert serialize(root) == '<a title="say &quot;hi&quot;">x</a>'
