# File: xref_spider/parser/sitemap_parser.py
"""xref_spider.parser.sitemap_parser: parses sitemap.xml and extracts page URLs."""

from __future__ import annotations

from typing import List, Union

from lxml import etree


def parse_sitemap(xml_content: Union[str, bytes]) -> List[str]:
    """Parse sitemap XML and return the URLs found in ``<loc>`` tags, in document order.

    Args:
        xml_content: sitemap.xml content.

    Returns:
        List of URLs; empty when the document has no recoverable root.

    Example:
    ```python
    from xref_spider.parser.sitemap_parser import parse_sitemap

    with open('sitemap.xml', encoding='utf-8') as f:
        content = f.read()
    urls = parse_sitemap(content)
    print(urls)
    ```
    """
    data = xml_content.encode("utf-8") if isinstance(xml_content, str) else xml_content
    if not data.strip():
        return []
    parser = etree.XMLParser(ns_clean=True, recover=True)
    root = etree.fromstring(data, parser=parser)
    if root is None:
        return []
    locs = root.findall(".//{*}loc")
    return [loc.text.strip() for loc in locs if loc.text and loc.text.strip()]


def filter_by_prefix(urls: List[str], prefix: str, exclude: tuple[str, ...] = ()) -> List[str]:
    """Keep URLs under *prefix* that are not listed in *exclude*, preserving order."""
    return [u for u in urls if u.startswith(prefix) and u not in exclude]


__all__ = ["parse_sitemap", "filter_by_prefix"]
