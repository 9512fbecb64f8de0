# File: xref_spider/crawler/aws_sdk.py
"""Spider for the AWS SDK for .NET V3 API reference."""
from __future__ import annotations

import dataclasses
import logging
from typing import Dict, List, Optional, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from xref_spider.classifier import parse_aws_page
from xref_spider.config import AWS_DOCS_URL
from xref_spider.crawler.base import BaseSpider
from xref_spider.crawler.fetcher import FetchClient
from xref_spider.models import PageData, Xref
from xref_spider.pages import AWS_MEMBER_PAGE_TYPES, ConstructorPage, MethodPage, Page, PageKind, TypePage
from xref_spider.parser.toc_parser import parse_toc

__all__ = ("AwsSdkSpider", "member_links")

TOC_PAGE = "TOC.html"
# member tables crawled below a class or interface, in this order
MEMBER_SECTIONS = ("constructors", "methods")
_EXPANDED_KINDS = frozenset({PageKind.CLASS, PageKind.INTERFACE})

AwsMemberPage = Union[ConstructorPage, MethodPage]


def member_links(html: str, page_url: str) -> List[str]:
    """First link of every row in the constructor and method tables, absolute."""
    soup = BeautifulSoup(html, "html.parser")
    links: List[str] = []
    for section_id in MEMBER_SECTIONS:
        section = soup.find("div", id=section_id)
        if not isinstance(section, Tag):
            continue
        for row in section.find_all("tr"):
            anchor = row.find("a", href=True)
            if not isinstance(anchor, Tag):
                continue
            href = str(anchor["href"]).strip()
            if not href:
                continue
            absolute = urljoin(page_url, href)
            if absolute not in links:
                links.append(absolute)
    return links


class AwsSdkSpider(BaseSpider):
    """Walks the table of contents, then each class's constructors and methods.

    A member is identified by the type that declares it, which is not always
    the class whose table linked it (inherited members are listed by derived
    classes too).  The declaring type is taken from the member page:

    1. the title link, crawled first if it has not been visited;
    2. otherwise the type the title names, once it has been recorded (members
       met earlier wait until then);
    3. otherwise the class whose member table linked the page.
    """

    name = "aws"

    def __init__(
        self,
        fetcher: FetchClient,
        docs_url: str = AWS_DOCS_URL,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(fetcher, logger)
        self.docs_url = docs_url
        # declaring type full name -> members waiting for its record
        self.pending: Dict[str, List[AwsMemberPage]] = {}

    @property
    def seed_url(self) -> str:
        return urljoin(self.docs_url, TOC_PAGE)

    def seed_urls(self, seed: PageData) -> List[str]:
        return parse_toc(seed.content, seed.final_url or seed.url)

    async def parse_page(self, data: PageData, enclosing: Optional[Xref]) -> Optional[Page]:
        page = parse_aws_page(data.content, data.url, enclosing, base_url=data.final_url or data.url)
        if not isinstance(page, AWS_MEMBER_PAGE_TYPES):
            return page
        owner = await self.declaring_type(page)
        if owner is None and page.type_name:
            self.logger.debug("Holding %s until %s is recorded", page.url, page.type_name)
            self.pending.setdefault(page.type_name, []).append(page)
        return dataclasses.replace(page, enclosing=owner)

    async def declaring_type(self, page: AwsMemberPage) -> Optional[Xref]:
        if page.type_url:
            owner = await self.resolve(page.type_url)
            if owner is not None:
                return owner
        if page.type_name:
            if page.enclosing is not None and page.enclosing.uid == page.type_name:
                return page.enclosing
            return self.frontier.find(page.type_name)
        return page.enclosing

    async def expand(self, page: Page, record: Xref, data: PageData) -> None:
        if not isinstance(page, TypePage):
            return
        for member in self.pending.pop(record.uid, []):
            self.record(dataclasses.replace(member, enclosing=record))
        if page.kind not in _EXPANDED_KINDS:
            return
        for link in member_links(data.content, data.final_url or data.url):
            await self.crawl_page(link, enclosing=record)
