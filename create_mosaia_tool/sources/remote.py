"""Streaming download of the starter archive."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import httpx

from create_mosaia_tool.errors import FileSystemError, HttpStatusError, NetworkError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


class RemoteFetcher:
    """Downloads a single URL to a local file.

    No retries and no timeout: a stalled connection blocks until the
    process is terminated.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=None, transport=self._transport)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str, destination: Path) -> int:
        """Stream the body of ``url`` into ``destination``.

        The destination file is only created once a 200 response arrives.
        Returns the number of bytes written.
        """
        written = 0
        try:
            async with self.client.stream("GET", url) as response:
                if response.status_code != 200:
                    raise HttpStatusError(url, response.status_code)
                try:
                    f = await asyncio.to_thread(open, destination, "wb")
                except OSError as e:
                    raise FileSystemError(destination, str(e), action="write") from e
                try:
                    async for chunk in response.aiter_bytes(CHUNK_SIZE):
                        await asyncio.to_thread(f.write, chunk)
                        written += len(chunk)
                finally:
                    await asyncio.to_thread(f.close)
        except httpx.TransportError as e:
            raise NetworkError(url, str(e) or type(e).__name__) from e

        logger.info("Downloaded %d bytes from %s", written, url)
        return written
