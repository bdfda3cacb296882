"""Local configuration for dewey2md."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_BASE_URI = "http://library.nlx.com/xtf/"
DEFAULT_CACHE_DIR = ".dewey2md_cache"
DEFAULT_CACHE_TTL_SECONDS = 0
DEFAULT_FETCH_TIMEOUT_S = 30.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "dewey2md/0.1"
DEFAULT_MAX_CONCURRENCY = 4

DEWEY2MD_BASE_URI = os.getenv("DEWEY2MD_BASE_URI", DEFAULT_BASE_URI)
# Downloaded pages never change, so the cache keeps them forever unless a TTL is set.
DEWEY2MD_CACHE_PATH = Path(os.getenv("DEWEY2MD_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
DEWEY2MD_CACHE_TTL_SECONDS = int(os.getenv("DEWEY2MD_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
DEWEY2MD_FETCH_TIMEOUT_S = float(os.getenv("DEWEY2MD_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
DEWEY2MD_FETCH_MAX_RETRIES = int(os.getenv("DEWEY2MD_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
DEWEY2MD_FETCH_BACKOFF_S = float(os.getenv("DEWEY2MD_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
DEWEY2MD_USER_AGENT = os.getenv("DEWEY2MD_USER_AGENT", DEFAULT_USER_AGENT)
DEWEY2MD_MAX_CONCURRENCY = int(os.getenv("DEWEY2MD_MAX_CONCURRENCY", str(DEFAULT_MAX_CONCURRENCY)))
DEWEY2MD_LOG_LEVEL = os.getenv("DEWEY2MD_LOG_LEVEL", "INFO").upper()

DEWEY2MD_PANDOC = os.getenv("DEWEY2MD_PANDOC", "pandoc")
DEWEY2MD_PDF_ENGINE = os.getenv("DEWEY2MD_PDF_ENGINE", "xelatex")
DEWEY2MD_PANDOC_TEMPLATE = os.getenv("DEWEY2MD_PANDOC_TEMPLATE", "book.latex") or None

# Running volume numbers continue across the three periods of the collected works.
VOLUME_OFFSETS = {"ew": 0, "mw": 5, "lw": 20}
VOLUME_COUNTS = {"ew": 5, "mw": 15, "lw": 17}

AUTHOR_FIRST = os.getenv("DEWEY2MD_AUTHOR_FIRST", "John")
AUTHOR_LAST = os.getenv("DEWEY2MD_AUTHOR_LAST", "Dewey")
PUBLICATION_DATE = "1996"
PUBLISHER = "Center for Dewey Studies"

CONTENT_ROOT_ID = "article_content"
TABLE_PLACEHOLDER = "Table removed for now"
ENDMATTER_PLACEHOLDER = "Endnote included in running text as footnote.\n\n"
ENDMATTER_CLASSES = frozenset({"hang", "hang pad"})
MERGED_FOOTNOTE_LABEL = "**consecutive footnote merged**"

# Running headers in the memoir class overflow past this many characters.
SHORT_TITLE_MAX_LENGTH = 40
SHORT_TITLE_TRUNCATE_AT = 37
