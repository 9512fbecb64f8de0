# === FILE: xref_spider/crawler/base.py ===
"""Common crawl loop shared by the per-site spiders."""
from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Optional

from xref_spider.crawler.fetcher import FetchClient, FetchError
from xref_spider.crawler.frontier import Frontier
from xref_spider.identifiers import build_xref
from xref_spider.logger import get_logger
from xref_spider.models import PageData, Xref
from xref_spider.pages import Page

__all__ = ("BaseSpider",)


class BaseSpider(ABC):
    """Sequential, depth-first crawler that turns reference pages into xref records.

    Subclasses say where the seed lives, how to enumerate pages from it and how
    to classify a page; they may also crawl related pages from ``expand``.
    Each page goes through ``crawl_page`` at most once per spider instance.
    """

    name: str = "base"

    def __init__(self, fetcher: FetchClient, logger: Optional[logging.Logger] = None) -> None:
        self.fetcher = fetcher
        self.frontier = Frontier()
        self.logger = logger or get_logger(self.name)

    # ------------------------------------------------------------------ hooks

    @property
    @abstractmethod
    def seed_url(self) -> str:
        """Index page the crawl starts from."""

    @abstractmethod
    def seed_urls(self, seed: PageData) -> List[str]:
        """Candidate page URLs listed by the seed page."""

    @abstractmethod
    async def parse_page(self, data: PageData, enclosing: Optional[Xref]) -> Optional[Page]:
        """Classify a fetched page; None when it documents nothing recognizable."""

    async def expand(self, page: Page, record: Xref, data: PageData) -> None:
        """Crawl pages that hang off a freshly recorded one."""

    # ------------------------------------------------------------------ crawl

    async def crawl(self) -> Optional[List[Xref]]:
        """Crawl everything reachable from the seed; None if the seed is unreachable."""
        self.logger.info("Crawling %s", self.seed_url)
        start = time.monotonic()
        try:
            seed = await self.fetcher.fetch(self.seed_url)
        except FetchError as exc:
            self.logger.error("Unable to access %s: %s", self.seed_url, exc.reason)
            return None
        if not seed.ok:
            self.logger.error("Unable to access %s (HTTP %s)", self.seed_url, seed.status)
            return None

        urls = self.seed_urls(seed)
        self.logger.info("Seed lists %d pages", len(urls))
        for url in urls:
            await self.crawl_page(url)

        duration = time.monotonic() - start
        self.logger.info(
            "Finished: %d xrefs from %d pages in %.2f s",
            len(self.frontier),
            len(self.frontier.visited),
            duration,
        )
        return list(self.frontier.records)

    async def crawl_page(self, url: str, enclosing: Optional[Xref] = None) -> Optional[Xref]:
        """Fetch, classify and record one page; returns its record if one was built."""
        if not self.frontier.mark_visited(url):
            return None

        self.logger.info("Crawling %s", url)
        try:
            data = await self.fetcher.fetch(url)
        except FetchError as exc:
            self.logger.warning("Unable to access %s: %s", url, exc.reason)
            return None
        if not data.ok:
            self.logger.warning("Unable to access %s (HTTP %s)", url, data.status)
            return None

        try:
            page = await self.parse_page(data, enclosing)
        except (AttributeError, IndexError, KeyError, ValueError) as exc:
            self.logger.warning("Unable to parse %s: %s", url, exc)
            return None
        if page is None:
            self.logger.debug("Unrecognized page %s", url)
            return None

        record = self.record(page)
        if record is not None:
            await self.expand(page, record, data)
        return record

    def record(self, page: Page) -> Optional[Xref]:
        """Build and store the record of a classified page."""
        record = build_xref(page)
        if record is None:
            self.logger.debug("No xref built for %s (%s)", page.url, type(page).__name__)
            return None
        self.frontier.add(record)
        return record

    async def resolve(self, url: str) -> Optional[Xref]:
        """Record for *url*, crawling the page first if it has not been visited."""
        if not self.frontier.is_visited(url):
            await self.crawl_page(url)
        return self.frontier.lookup(url)
