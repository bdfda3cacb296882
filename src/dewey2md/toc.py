"""Discover a volume's sections from the viewer's table of contents."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urljoin

from dewey2md.config import DEWEY2MD_BASE_URI
from dewey2md.exceptions import ParseError

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


@dataclass
class VolumeToc:
    """Titles and ordered sections of one volume."""

    collection_title: str
    volume_title: str
    sections: dict[str, str] = field(default_factory=dict)


def parse_volume_toc(html: str | bytes) -> VolumeToc:
    """Read titles and the section name -> href mapping from a volume page.

    Raises:
        ParseError: If the page has no selected volume in its contents tree.
    """
    soup = BeautifulSoup(html, "lxml")
    volume = soup.select_one(".selectedVolume")
    if volume is None:
        raise ParseError("No selected volume found in the table of contents")

    sections: dict[str, str] = {}
    for link in volume.find_all("a"):
        label = _link_label(link)
        if label is None:
            continue
        name = section_name(label)
        href = link.get("href")
        if name and href:
            sections[name] = href

    return VolumeToc(
        collection_title=_div_text(soup, "collection_title"),
        volume_title=_div_text(soup, "volume_title"),
        sections=sections,
    )


def section_name(label: str) -> str:
    """CamelCase a contents label (``the school and society`` -> ``TheSchoolAndSociety``).

    The name is used in file names, so slashes become underscores.
    """
    return "".join(word.capitalize() for word in label.split()).replace("/", "_")


def section_url(href: str, base_uri: str = DEWEY2MD_BASE_URI) -> str:
    return urljoin(base_uri, href)


def _div_text(soup: BeautifulSoup, class_fragment: str) -> str:
    node = soup.select_one(f'div[class*="{class_fragment}"]')
    return node.get_text().strip() if node else ""


def _link_label(link: Tag) -> str | None:
    """Label for a contents link, or None if the link is not a section entry.

    Ordinary entries sit in ``div.l1``. The entry for the page being viewed
    is rendered differently: its text lives in a highlighted span in the
    following table cell.
    """
    parent = link.parent
    highlighted = _highlighted_label(parent) if isinstance(parent, Tag) else None
    if isinstance(parent, Tag) and parent.name == "div" and "l1" in " ".join(
        parent.get("class", [])
    ):
        text = link.get_text().strip()
        return text or highlighted
    if highlighted is None:
        return None
    return link.get_text().strip() or highlighted


def _highlighted_label(parent: Tag) -> str | None:
    for cell in parent.find_next_siblings("td"):
        for span in cell.select("div > span"):
            if span.get("class") == ["toc-hi"]:
                return span.get_text().strip()
    return None
