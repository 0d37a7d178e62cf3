# robots_scout/crawler/fetcher.py
"""
Fetcher module: downloads robots.txt with a size cap, redirect limit and timeout.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientResponse, ClientResponseError, ClientSession, ClientTimeout
from robots_scout.config import FetchConfig
from robots_scout.crawler.models import FetchResult
from robots_scout.errors import FetchFailed
from robots_scout.logger import logger


class RobotsFetcher:
    """Streams a robots.txt body and stops reading at the configured size limit."""

    def __init__(self, session: ClientSession, config: FetchConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> FetchResult:
        """
        Download *url* (already normalised to a robots.txt location).

        HTTP 4xx/5xx responses, transport errors, too many redirects and
        timeouts raise FetchFailed; the status is kept when there is one.
        """
        cfg = self.config
        try:
            async with self.session.get(
                url,
                raise_for_status=True,
                allow_redirects=cfg.max_redirects > 0,
                max_redirects=max(cfg.max_redirects, 1),
                timeout=ClientTimeout(total=cfg.timeout),
                headers={"User-Agent": cfg.user_agent},
            ) as resp:
                content, truncated = await self._read_capped(resp)
                result = FetchResult(
                    url=url,
                    content=content,
                    status=resp.status,
                    redirected=bool(resp.history),
                    truncated=truncated,
                )
        except asyncio.TimeoutError as exc:
            raise FetchFailed(url, f"timed out after {cfg.timeout} seconds") from exc
        except ClientResponseError as exc:
            raise FetchFailed(url, exc.message or exc, exc.status) from exc
        except ClientError as exc:
            raise FetchFailed(url, exc) from exc

        logger.info(
            "Fetched %s: HTTP %d, %d bytes%s",
            url,
            result.status,
            len(result.content),
            " (truncated)" if result.truncated else "",
        )
        return result

    async def _read_capped(self, resp: ClientResponse) -> tuple[bytes, bool]:
        """Read the body chunk by chunk; drop the chunk that crosses the limit."""
        buffer = bytearray()
        total = 0
        async for chunk in resp.content.iter_chunked(self.config.chunk_size):
            total += len(chunk)
            if total > self.config.size_limit:
                logger.warning(
                    "robots.txt at %s exceeds %d bytes, keeping partial content",
                    resp.url,
                    self.config.size_limit,
                )
                return bytes(buffer), True
            buffer.extend(chunk)
        return bytes(buffer), False
