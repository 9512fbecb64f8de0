# File: xref_spider/parser/__init__.py
"""xref_spider.parser: seed page parsers (HTML table of contents, XML sitemap)."""

from .sitemap_parser import filter_by_prefix, parse_sitemap
from .toc_parser import parse_toc

__all__ = ["parse_sitemap", "filter_by_prefix", "parse_toc"]
