# File: xref_spider/crawler/fetcher.py
"""
Fetcher module: one GET per call over a shared aiohttp session, with an
optional request-rate limit.  Nothing is retried.
"""
from __future__ import annotations

import asyncio
import time
from collections import deque
from typing import Deque, Optional, Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout

from xref_spider.config import SpiderConfig
from xref_spider.models import PageData


class FetchError(Exception):
    """The request never produced an HTTP response (DNS, connection, timeout...)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class FetchClient(Protocol):
    async def fetch(self, url: str) -> PageData: ...


class Fetcher:
    """GETs pages and reports status, body and final URL; usable as an async context manager."""

    def __init__(self, config: SpiderConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None
        self._req_times: Deque[float] = deque()

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its PageData whatever the status code.

        Raises FetchError when no response was received.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        await self._wait_for_rate_limit()
        try:
            async with self.session.get(url) as resp:
                text = await resp.text(errors="replace")
                return PageData(url=url, status=resp.status, content=text, final_url=str(resp.url))
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "timed out") from exc
        except ClientError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

    async def _wait_for_rate_limit(self) -> None:
        if not self.config.rate_limit:
            return
        now = time.monotonic()
        self._req_times.append(now)
        # remove timestamps older than 1 second
        while self._req_times and now - self._req_times[0] > 1.0:
            self._req_times.popleft()
        if len(self._req_times) > self.config.rate_limit:
            sleep_for = 1.0 - (now - self._req_times[0])
            if sleep_for > 0:
                await asyncio.sleep(sleep_for)


__all__ = ["Fetcher", "FetchClient", "FetchError"]
