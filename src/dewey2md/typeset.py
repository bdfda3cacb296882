"""Run pandoc on the assembled Markdown document."""

from __future__ import annotations

import subprocess
from pathlib import Path

from dewey2md.config import DEWEY2MD_PANDOC, DEWEY2MD_PANDOC_TEMPLATE, DEWEY2MD_PDF_ENGINE
from dewey2md.exceptions import TypesetError


def build_pandoc_command(
    markdown_path: Path,
    output_path: Path,
    *,
    template: str | None = DEWEY2MD_PANDOC_TEMPLATE,
    engine: str = DEWEY2MD_PDF_ENGINE,
) -> list[str]:
    command = [DEWEY2MD_PANDOC, f"--pdf-engine={engine}"]
    if template:
        command.append(f"--template={template}")
    command.extend(["--toc", markdown_path.name, "-o", str(output_path.resolve())])
    return command


def typeset_document(
    markdown_path: Path,
    output_path: Path,
    *,
    template: str | None = DEWEY2MD_PANDOC_TEMPLATE,
    engine: str = DEWEY2MD_PDF_ENGINE,
) -> Path:
    """Typeset ``markdown_path`` into ``output_path``.

    pandoc runs in the Markdown file's directory so that a relative template
    path resolves next to the document.

    Raises:
        TypesetError: If pandoc is missing or exits with an error.
    """
    command = build_pandoc_command(markdown_path, output_path, template=template, engine=engine)
    try:
        result = subprocess.run(
            command,
            cwd=markdown_path.parent.resolve(),
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise TypesetError(f"{DEWEY2MD_PANDOC} is not installed") from exc

    if result.returncode != 0:
        raise TypesetError(f"pandoc failed: {result.stderr}")
    return output_path
