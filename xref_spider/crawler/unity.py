# File: xref_spider/crawler/unity.py
"""Spider for the Unity scripting reference."""
from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional

from xref_spider.classifier import parse_unity_page
from xref_spider.config import UNITY_DOCS_URL, UNITY_SITEMAP_URL
from xref_spider.crawler.base import BaseSpider
from xref_spider.crawler.fetcher import FetchClient
from xref_spider.models import PageData, Xref
from xref_spider.pages import MEMBER_PAGE_TYPES, Page
from xref_spider.parser.sitemap_parser import filter_by_prefix, parse_sitemap

__all__ = ("UnitySpider",)


class UnitySpider(BaseSpider):
    """Walks the sitemap; member pages pull their declaring type in first."""

    name = "unity"

    def __init__(
        self,
        fetcher: FetchClient,
        docs_url: str = UNITY_DOCS_URL,
        sitemap_url: str = UNITY_SITEMAP_URL,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(fetcher, logger)
        self.docs_url = docs_url
        self.sitemap_url = sitemap_url

    @property
    def seed_url(self) -> str:
        return self.sitemap_url

    def seed_urls(self, seed: PageData) -> List[str]:
        urls = parse_sitemap(seed.content)
        return filter_by_prefix(urls, self.docs_url, exclude=(f"{self.docs_url}index.html",))

    async def parse_page(self, data: PageData, enclosing: Optional[Xref]) -> Optional[Page]:
        page = parse_unity_page(data.content, data.url, base_url=data.final_url or data.url)
        if isinstance(page, MEMBER_PAGE_TYPES) and page.type_url:
            # the member's identifier is built from its type's record
            owner = await self.resolve(page.type_url)
            page = dataclasses.replace(page, enclosing=owner)
        return page
