# File: xref_spider/crawler/__init__.py
"""xref_spider.crawler: fetch client, traversal state and per-site spiders."""

from .aws_sdk import AwsSdkSpider
from .base import BaseSpider
from .fetcher import Fetcher, FetchError
from .frontier import Frontier
from .unity import UnitySpider

__all__ = ["BaseSpider", "AwsSdkSpider", "UnitySpider", "Fetcher", "FetchError", "Frontier"]
