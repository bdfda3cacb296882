"""Tests for the paragraph rewriter."""

from __future__ import annotations

import pytest

from dewey2md.diagnostics import DiagnosticLog
from dewey2md.paragraphs import rewrite_paragraphs
from dewey2md.tree import serialize


def _rewrite(make_root, body: str) -> tuple[str, DiagnosticLog]:
    root = make_root(body)
    diagnostics = DiagnosticLog()
    rewrite_paragraphs(root, diagnostics)
    return serialize(root), diagnostics


class TestRewriteParagraphs:
    """Tests for rewrite_paragraphs."""

    @pytest.mark.parametrize("css_class", ["tbindent", "center", "normal", "hang", "hang pad"])
    def test_plain_paragraphs(self, make_root, css_class: str) -> None:
        """Body, centered, normal and hanging paragraphs become plain blocks."""
        output, _ = _rewrite(make_root, f'<p class="{css_class}">  Hello world </p>')
        assert output == "\n\nHello world"

    def test_block_quotation_becomes_line_block(self, make_root) -> None:
        """Each line of a block quotation keeps its own line."""
        output, _ = _rewrite(make_root, '<p class="block">line one\n   line two  </p>')
        assert output == "\n\n| line one\n| line two\n\n"

    def test_block_takes_precedence(self, make_root) -> None:
        """A paragraph matching several classes uses the first rule."""
        output, _ = _rewrite(make_root, '<p class="block center">quoted</p>')
        assert output == "\n\n| quoted\n\n"

    def test_spacer_removed(self, make_root) -> None:
        output, _ = _rewrite(make_root, '<p class="spacer"> </p><p class="normal">x</p>')
        assert output == "\n\nx"

    @pytest.mark.parametrize(("size", "depth"), [(2, 1), (4, 2), (5, 2), (10, 5)])
    def test_numeric_indent(self, make_root, size: int, depth: int) -> None:
        """Indent depth is half the em size, rounded down."""
        output, _ = _rewrite(make_root, f'<p class="indent_{size}em"> verse </p>')
        assert output == f"\n\n|    {'  ' * depth} verse"

    def test_unhandled_paragraph_reported(self, make_root) -> None:
        """Unknown classes are left as they are and reported."""
        body = '<p class="mystery">odd</p>'
        output, diagnostics = _rewrite(make_root, body)
        assert output == body
        [record] = diagnostics.of_kind("unhandled_paragraph")
        assert "mystery" in record.detail

    def test_paragraph_without_class_reported(self, make_root) -> None:
        output, diagnostics = _rewrite(make_root, "<p>bare</p>")
        assert output == "<p>bare</p>"
        assert len(diagnostics.records) == 1
