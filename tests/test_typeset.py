"""Tests for the pandoc step."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from dewey2md.exceptions import TypesetError
from dewey2md.typeset import build_pandoc_command, typeset_document


class TestBuildPandocCommand:
    """Tests for build_pandoc_command."""

    def test_with_template(self, tmp_path: Path) -> None:
        md = tmp_path / "Dewey__mw1.md"
        out = tmp_path / "Dewey__MW1.pdf"
        command = build_pandoc_command(md, out, template="book.latex", engine="xelatex")
        assert command[1:] == [
            "--pdf-engine=xelatex",
            "--template=book.latex",
            "--toc",
            "Dewey__mw1.md",
            "-o",
            str(out.resolve()),
        ]

    def test_without_template(self, tmp_path: Path) -> None:
        command = build_pandoc_command(tmp_path / "a.md", tmp_path / "a.pdf", template=None)
        assert not any(arg.startswith("--template") for arg in command)


class TestTypesetDocument:
    """Tests for typeset_document."""

    def test_runs_in_document_directory(self, tmp_path: Path) -> None:
        md = tmp_path / "Dewey__mw1.md"
        out = tmp_path / "Dewey__MW1.pdf"
        completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
        with patch("dewey2md.typeset.subprocess.run", return_value=completed) as mock_run:
            result = typeset_document(md, out)

        assert result == out
        assert mock_run.call_args.kwargs["cwd"] == tmp_path.resolve()

    def test_nonzero_exit_raises(self, tmp_path: Path) -> None:
        completed = subprocess.CompletedProcess(
            args=[], returncode=43, stdout="", stderr="! LaTeX Error: File `memoir.cls' not found."
        )
        with patch("dewey2md.typeset.subprocess.run", return_value=completed):
            with pytest.raises(TypesetError, match="memoir.cls"):
                typeset_document(tmp_path / "a.md", tmp_path / "a.pdf")

    def test_missing_pandoc_raises(self, tmp_path: Path) -> None:
        with patch("dewey2md.typeset.subprocess.run", side_effect=FileNotFoundError("pandoc")):
            with pytest.raises(TypesetError, match="not installed"):
                typeset_document(tmp_path / "a.md", tmp_path / "a.pdf")
