# File: tests/html_fixtures.py
"""Small HTML/XML builders mirroring the markup of both reference sites, plus a fake fetch client."""
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple, Union

from xref_spider.crawler.fetcher import FetchError
from xref_spider.models import PageData

AWS_DOCS = "https://docs.example.com/sdkfornet/v3/apidocs/"
UNITY_DOCS = "https://docs.unity3d.com/ScriptReference/"
UNITY_SITEMAP = "https://docs.unity3d.com/sitemap.xml"

Entry = Union[str, Tuple[int, str], Tuple[int, str, str], Exception]


def _rows(links: Sequence[str]) -> str:
    rows = "".join(f'<tr><td><img src="pub.gif"/></td><td><a href="{href}">{href}</a></td><td>Summary.</td></tr>' for href in links)
    return f"<table><tr><th></th><th>Name</th><th>Description</th></tr>{rows}</table>"


def aws_page(
    kind: str,
    title: str,
    *,
    hierarchy: Sequence[str] = (),
    namespace: str = "",
    params: Sequence[str] = (),
    constructors: Sequence[str] = (),
    methods: Sequence[str] = (),
) -> str:
    parts = [f'<div id="titles"><h1>{title}</h1><h2>{kind}</h2></div>']
    if namespace:
        parts.append(f'<div id="namespaceblurb">Namespace: {namespace}<br/>Assembly: AWSSDK.Core.dll</div>')
    if hierarchy:
        lines = "".join(f"{'&nbsp;' * 2 * i}{name}<br/>\n" for i, name in enumerate(hierarchy))
        parts.append(f'<div id="inheritancehierarchy"><p>{lines}</p></div>')
    if params:
        items = "".join(
            f'<dt><i>arg{i}</i></dt><dd>Type: <a href="#">{t}</a><p>Parameter {i}.</p></dd>' for i, t in enumerate(params)
        )
        parts.append(f'<div id="parameters"><h3>Parameters</h3><dl>{items}</dl></div>')
    if constructors:
        parts.append(f'<div id="constructors"><h3>Constructors</h3>{_rows(constructors)}</div>')
    if methods:
        parts.append(f'<div id="methods"><h3>Methods</h3>{_rows(methods)}</div>')
    return f"<html><head><title>{title}</title></head><body>{''.join(parts)}</body></html>"


def aws_toc(items: Sequence[Tuple[str, Sequence[str]]]) -> str:
    """``items``: (namespace link, [type links]) pairs."""
    lis = []
    for ns_href, type_hrefs in items:
        nested = "".join(f'<li><a href="{h}" target="contentpane">{h}</a></li>' for h in type_hrefs)
        lis.append(f'<li id="ns"><a href="{ns_href}" target="contentpane">{ns_href}</a><ul>{nested}</ul></li>')
    return f'<html><body><ul class="awstoc">{"".join(lis)}</ul></body></html>'


def unity_page(heading_html: str, *, subheading: str = "", signature: str | None = "") -> str:
    parts = [f"<h1>{heading_html}</h1>"]
    if subheading:
        parts.append(f"<p>{subheading}</p>")
    if signature is not None:
        parts.append(f'<div class="subsection"><div class="signature">{signature}</div></div>')
    parts.append("<h2>Description</h2><p>Some text.</p>")
    return (
        '<html><body><div class="header-wrapper">Unity</div>'
        f'<div class="content-block"><div class="section">{"".join(parts)}</div></div></body></html>'
    )


def sitemap(urls: Sequence[str]) -> str:
    locs = "".join(f"<url><loc>{u}</loc><lastmod>2024-01-01</lastmod></url>" for u in urls)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{locs}</urlset>'
    )


class FakeFetcher:
    """In-memory fetch client: unknown URLs answer 404, exceptions are raised.

    A ``(status, body, final_url)`` entry answers as if redirected to *final_url*.
    """

    def __init__(self, pages: Dict[str, Entry]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str) -> PageData:
        self.calls.append(url)
        entry = self.pages.get(url)
        if entry is None:
            return PageData(url=url, status=404, content="Not Found", final_url=url)
        if isinstance(entry, Exception):
            raise entry
        if isinstance(entry, tuple):
            status, body, *final = entry
            return PageData(url=url, status=status, content=body, final_url=final[0] if final else url)
        return PageData(url=url, status=200, content=entry, final_url=url)


__all__ = [
    "AWS_DOCS",
    "UNITY_DOCS",
    "UNITY_SITEMAP",
    "aws_page",
    "aws_toc",
    "unity_page",
    "sitemap",
    "FakeFetcher",
    "FetchError",
]
