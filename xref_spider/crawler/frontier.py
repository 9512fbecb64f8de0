# File: xref_spider/crawler/frontier.py
"""
Traversal state of one crawl: the URLs already taken, and the records built so far.
"""
from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Set

from xref_spider.models import Xref


class Frontier:
    """Visited-URL set plus the ordered xref output, indexed by page URL.

    A URL is marked visited before it is fetched and is never fetched again in
    the same crawl.  Only pages that produced a record appear in ``records``.
    """

    def __init__(self) -> None:
        self.visited: Set[str] = set()
        self.records: List[Xref] = []
        self._by_url: Dict[str, Xref] = {}
        self._by_uid: Dict[str, Xref] = {}

    def is_visited(self, url: str) -> bool:
        return url in self.visited

    def mark_visited(self, url: str) -> bool:
        """Mark *url* visited; False if it already was."""
        if url in self.visited:
            return False
        self.visited.add(url)
        return True

    def add(self, record: Xref) -> None:
        self.records.append(record)
        self._by_url.setdefault(record.href, record)
        self._by_uid.setdefault(record.uid, record)

    def lookup(self, url: str) -> Optional[Xref]:
        return self._by_url.get(url)

    def find(self, uid: str) -> Optional[Xref]:
        return self._by_uid.get(uid)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Xref]:
        return iter(self.records)


__all__ = ["Frontier"]
