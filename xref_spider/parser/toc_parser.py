# File: xref_spider/parser/toc_parser.py
"""xref_spider.parser.toc_parser: extracts page links from an HTML table of contents."""

from __future__ import annotations

from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag


def parse_toc(html: str, base_url: str, list_class: str = "awstoc") -> List[str]:
    """Return the absolute URL of the first link of every list item in the TOC.

    Items of ``<ul class="{list_class}">`` are used when that list exists,
    otherwise every ``<li>`` in the document.  Duplicates are dropped, order is kept.
    """
    soup = BeautifulSoup(html, "html.parser")
    toc = soup.find("ul", class_=list_class)
    items = toc.find_all("li") if isinstance(toc, Tag) else soup.find_all("li")

    seen: set[str] = set()
    links: List[str] = []
    for item in items:
        anchor = item.find("a", href=True)
        if not isinstance(anchor, Tag):
            continue
        href = str(anchor["href"]).strip()
        if not href or href.startswith(("#", "mailto:", "javascript:")):
            continue
        absolute = urljoin(base_url, href)
        if absolute not in seen:
            seen.add(absolute)
            links.append(absolute)
    return links


__all__ = ["parse_toc"]
