# File: xref_spider/engine.py
"""xref_spider.engine: picks the spider for the configured site and runs one crawl."""

from __future__ import annotations

from typing import List, Optional

from xref_spider.config import SpiderConfig
from xref_spider.crawler.aws_sdk import AwsSdkSpider
from xref_spider.crawler.base import BaseSpider
from xref_spider.crawler.fetcher import FetchClient, Fetcher
from xref_spider.crawler.unity import UnitySpider
from xref_spider.logger import logger
from xref_spider.models import Xref

__all__ = ["make_spider", "start_crawl"]


def make_spider(config: SpiderConfig, fetcher: FetchClient) -> BaseSpider:
    """Spider for ``config.site`` wired to *fetcher*."""
    if config.site == "aws":
        return AwsSdkSpider(fetcher, docs_url=config.resolved_docs_url)
    if config.site == "unity":
        return UnitySpider(
            fetcher,
            docs_url=config.resolved_docs_url,
            sitemap_url=config.resolved_sitemap_url,
        )
    raise ValueError(f"Unknown site: {config.site}")


async def start_crawl(config: SpiderConfig) -> Optional[List[Xref]]:
    """Open an HTTP session, crawl the configured site and return its records.

    Returns None when the seed page cannot be fetched.
    """
    logger.info("Starting %s crawl", config.site)
    async with Fetcher(config) as fetcher:
        spider = make_spider(config, fetcher)
        return await spider.crawl()
