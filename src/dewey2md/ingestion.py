"""Convert a whole volume: fetch, transform sections, assemble, typeset."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from dewey2md.cache_utils import section_page_path, volume_page_path
from dewey2md.config import (
    DEWEY2MD_CACHE_PATH,
    DEWEY2MD_MAX_CONCURRENCY,
    DEWEY2MD_PANDOC_TEMPLATE,
)
from dewey2md.exceptions import Dewey2mdError, TypesetError
from dewey2md.fetch import fetch_page
from dewey2md.http_utils import create_client
from dewey2md.pipeline import transform_section
from dewey2md.preamble import (
    Author,
    generate_preamble,
    markdown_filename,
    pdf_filename,
    section_filename,
)
from dewey2md.schemas import ConversionResult, Diagnostic, SectionResult, VolumeQuery
from dewey2md.toc import parse_volume_toc, section_url
from dewey2md.typeset import typeset_document

logger = logging.getLogger(__name__)


@dataclass
class ConversionOptions:
    """Options for a volume conversion.

    Attributes:
        output_dir: Directory receiving a ``<period><volume>`` folder of results.
        cache_dir: Directory holding downloaded pages.
        use_cache: If False, always download pages again.
        typeset: If True, run pandoc on the assembled Markdown.
        write_section_files: If True, also write each section's Markdown.
        max_concurrency: Sections fetched and transformed at once.
        template: pandoc template, relative to the output folder.
        author: Author named in the preamble and file names.
    """

    output_dir: Path = Path(".")
    cache_dir: Path = DEWEY2MD_CACHE_PATH
    use_cache: bool = True
    typeset: bool = True
    write_section_files: bool = False
    max_concurrency: int = DEWEY2MD_MAX_CONCURRENCY
    template: str | None = DEWEY2MD_PANDOC_TEMPLATE
    author: Author = field(default_factory=Author)


async def convert_volume(
    query: VolumeQuery, options: ConversionOptions | None = None
) -> ConversionResult:
    """Fetch every section of a volume and write it out as one Markdown book.

    Sections are fetched and transformed concurrently; a section that fails is
    left out and reported, the others are unaffected. Output keeps table of
    contents order.

    Raises:
        FetchError: If the volume page itself cannot be fetched.
        ParseError: If the volume page has no table of contents.
    """
    opts = options or ConversionOptions()
    out_dir = opts.output_dir / query.slug

    async with create_client() as client:
        volume_html = await fetch_page(
            query.url,
            cache_path=volume_page_path(query, opts.cache_dir),
            use_cache=opts.use_cache,
            client=client,
        )
        toc = parse_volume_toc(volume_html)
        logger.info("Found %s, %s", toc.collection_title, toc.volume_title)

        semaphore = asyncio.Semaphore(max(1, opts.max_concurrency))
        outcomes = await asyncio.gather(
            *(
                _convert_section(query, name, href, opts, client, semaphore)
                for name, href in toc.sections.items()
            )
        )

    diagnostics: list[Diagnostic] = []
    failed: list[str] = []
    converted: list[SectionResult] = []
    for name, outcome in zip(toc.sections, outcomes):
        if isinstance(outcome, SectionResult):
            converted.append(outcome)
            diagnostics.extend(outcome.diagnostics)
        else:
            failed.append(name)
            diagnostics.append(Diagnostic(section=name, kind="section_failed", detail=outcome))

    for diagnostic in diagnostics:
        logger.warning("[%s] %s: %s", diagnostic.section, diagnostic.kind, diagnostic.detail)

    out_dir.mkdir(parents=True, exist_ok=True)
    markdown_path = out_dir / markdown_filename(query, opts.author)
    document = generate_preamble(toc, author=opts.author) + "".join(
        section.markdown for section in converted
    )
    markdown_path.write_text(document, encoding="utf-8")
    if opts.write_section_files:
        for section in converted:
            (out_dir / section_filename(query, section.name)).write_text(
                section.markdown, encoding="utf-8"
            )

    pdf_path = None
    if opts.typeset:
        target = out_dir / pdf_filename(query, toc.volume_title, opts.author)
        logger.info("Running pandoc on %s", markdown_path)
        try:
            pdf_path = await asyncio.to_thread(
                typeset_document, markdown_path, target, template=opts.template
            )
            logger.info("Created PDF file and saved as %s", pdf_path)
        except TypesetError as exc:
            logger.error("%s. Parsed Markdown file saved as %s", exc, markdown_path)

    return ConversionResult(
        markdown_path=markdown_path,
        pdf_path=pdf_path,
        sections=[section.name for section in converted],
        failed_sections=failed,
        diagnostics=diagnostics,
    )


async def _convert_section(
    query: VolumeQuery,
    name: str,
    href: str,
    opts: ConversionOptions,
    client: httpx.AsyncClient,
    semaphore: asyncio.Semaphore,
) -> SectionResult | str:
    """Fetch and transform one section; failures come back as a message.

    Transport errors and cache file errors are reported like package errors.
    """
    async with semaphore:
        try:
            html = await fetch_page(
                section_url(href),
                cache_path=section_page_path(query, name, opts.cache_dir),
                use_cache=opts.use_cache,
                client=client,
            )
            logger.info("Parsing section %s", name)
            return await asyncio.to_thread(transform_section, html, section=name)
        except (
            Dewey2mdError,
            httpx.HTTPError,
            httpx.InvalidURL,
            OSError,
            UnicodeDecodeError,
        ) as exc:
            logger.debug("Section %s failed", name, exc_info=True)
            return f"{type(exc).__name__}: {exc}"
