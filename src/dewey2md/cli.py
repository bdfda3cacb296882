"""Command line interface: ``dewey2md PERIOD VOLUME``."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from dewey2md.config import DEWEY2MD_CACHE_PATH, DEWEY2MD_MAX_CONCURRENCY, VOLUME_OFFSETS
from dewey2md.exceptions import Dewey2mdError
from dewey2md.ingestion import ConversionOptions, convert_volume
from dewey2md.query import parse_volume
from dewey2md.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dewey2md",
        description="Convert a volume of Dewey's collected works into Markdown and PDF.",
    )
    parser.add_argument("period", choices=sorted(VOLUME_OFFSETS), help="ew, mw or lw")
    parser.add_argument("volume", help="Volume number within the period")
    parser.add_argument("--output-dir", type=Path, default=Path("."), help="Where to write results")
    parser.add_argument("--cache-dir", type=Path, default=DEWEY2MD_CACHE_PATH, help="Downloaded page cache")
    parser.add_argument("--no-cache", action="store_true", help="Download pages even if cached")
    parser.add_argument("--no-pdf", action="store_true", help="Skip running pandoc")
    parser.add_argument("--section-files", action="store_true", help="Also write one Markdown file per section")
    parser.add_argument("--template", default=None, help="pandoc template (default: book.latex)")
    parser.add_argument(
        "--concurrency",
        type=int,
        default=DEWEY2MD_MAX_CONCURRENCY,
        help="Sections processed at once",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        query = parse_volume(args.period, args.volume)
    except ValueError as exc:
        parser.error(str(exc))

    options = ConversionOptions(
        output_dir=args.output_dir,
        cache_dir=args.cache_dir,
        use_cache=not args.no_cache,
        typeset=not args.no_pdf,
        write_section_files=args.section_files,
        max_concurrency=args.concurrency,
    )
    if args.template:
        options.template = args.template

    logger.info("Converting volume %s of %s from %s", query.volume, query.period, query.url)
    try:
        result = asyncio.run(convert_volume(query, options))
    except Dewey2mdError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Markdown written to %s", result.markdown_path)
    if result.failed_sections:
        logger.error("Sections left out: %s", ", ".join(result.failed_sections))
        return 1
    return 0
