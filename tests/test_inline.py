"""Tests for inline formatting and table elision."""

from __future__ import annotations

from dewey2md.config import TABLE_PLACEHOLDER
from dewey2md.diagnostics import DiagnosticLog
from dewey2md.inline import elide_tables, format_inline
from dewey2md.tree import serialize


class TestFormatInline:
    """Tests for format_inline."""

    def test_italic(self, make_root) -> None:
        root = make_root("<i>word</i>")
        format_inline(root, DiagnosticLog())
        assert serialize(root) == "*word*"

    def test_bold_and_emphasis_aliases(self, make_root) -> None:
        """em/strong are treated like i/b."""
        root = make_root("<b>a</b> <em>b</em> <strong>c</strong>")
        format_inline(root, DiagnosticLog())
        assert serialize(root) == "**a** *b* **c**"

    def test_whitespace_stays_outside_markers(self, make_root) -> None:
        """Emphasis markers hug the words so Markdown recognizes them."""
        root = make_root("a<i> word </i>b")
        format_inline(root, DiagnosticLog())
        assert serialize(root) == "a *word* b"

    def test_empty_element_leaves_no_markers(self, make_root) -> None:
        root = make_root("a<i> </i>b")
        format_inline(root, DiagnosticLog())
        assert serialize(root) == "a b"

    def test_nested_italic_in_bold(self, make_root) -> None:
        """Italics are rewritten first, then the surrounding bold."""
        root = make_root("<b><i>x</i></b>")
        format_inline(root, DiagnosticLog())
        assert serialize(root) == "***x***"

    def test_line_breaks_removed(self, make_root) -> None:
        """Line breaks vanish without a paragraph break."""
        root = make_root('<p class="x">one<br>two<br/>three</p>')
        format_inline(root, DiagnosticLog())
        assert serialize(root) == '<p class="x">onetwothree</p>'


class TestElideTables:
    """Tests for elide_tables."""

    def test_table_replaced_by_placeholder(self, make_root) -> None:
        """Any table, whatever it holds, becomes the placeholder."""
        root = make_root(
            '<p class="x">before</p>'
            "<table><tr><td><i>x</i></td><td>y</td></tr></table>"
            '<p class="x">after</p>'
        )
        elide_tables(root, DiagnosticLog())
        output = serialize(root)
        assert TABLE_PLACEHOLDER in output
        for tag in ("<table", "<tr", "<td", "<tbody"):
            assert tag not in output

    def test_nested_tables_leave_one_placeholder(self, make_root) -> None:
        root = make_root("<table><tr><td><table><tr><td>x</td></tr></table></td></tr></table>")
        elide_tables(root, DiagnosticLog())
        assert serialize(root) == f"\n\n{TABLE_PLACEHOLDER}\n\n"
