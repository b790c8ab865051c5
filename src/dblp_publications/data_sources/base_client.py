"""
Base client for external data source clients.

Provides: lazy aiohttp session management, a single-shot XML GET,
structured logging, and a common exception type.
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import BaseModel

logger = logging.getLogger("dblp_publications.data_sources")


# ---------------------------------------------------------------------------
# Request context (for structured logging)
# ---------------------------------------------------------------------------


class RequestContext(BaseModel):
    """Metadata attached to every outgoing request for logging."""

    source: str  # e.g. "dblp"
    method: str  # e.g. "fetch_feed"
    params: dict[str, Any] = {}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DataSourceError(Exception):
    """Base exception for data source failures."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for feed clients.

    Subclasses implement `_source_name` and their own typed methods that
    call `_rest_get_xml()`. Requests are made exactly once: no retry,
    no cache, and no client-side timeout beyond aiohttp's own default.
    """

    def __init__(self) -> None:
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'dblp'."""
        ...

    # -- Session management --------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- Core request --------------------------------------------------------

    async def _rest_get_xml(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        context: RequestContext | None = None,
    ) -> str:
        """
        GET a URL once and return the response body as text.

        Parameters
        ----------
        url : str
            Full URL.
        params : dict, optional
            Query string parameters.
        context : RequestContext, optional
            Logging context.

        Raises
        ------
        DataSourceError
            On a non-2xx status, a transport error, a timeout, or a body
            that cannot be decoded.
        """
        ctx = context or RequestContext(source=self._source_name, method="unknown")
        start = time.monotonic()

        try:
            session = await self._get_session()

            logger.info("Request [%s.%s] url=%s", ctx.source, ctx.method, url)

            resp = await session.get(url, params=params)

            if not 200 <= resp.status < 300:
                body = await resp.text(errors="replace")
                raise DataSourceError(
                    ctx.source,
                    f"HTTP {resp.status}: {body[:500]}",
                    status_code=resp.status,
                )

            text = await resp.text(errors="replace")

        except asyncio.TimeoutError:
            elapsed = time.monotonic() - start
            raise DataSourceError(ctx.source, f"Timeout after {elapsed:.1f}s")

        except aiohttp.ClientError as e:
            raise DataSourceError(ctx.source, f"Connection error: {e}")

        except UnicodeDecodeError as e:
            raise DataSourceError(ctx.source, f"Undecodable response body: {e}")

        logger.info(
            "Success [%s.%s] elapsed=%.2fs bytes=%d",
            ctx.source,
            ctx.method,
            time.monotonic() - start,
            len(text),
        )
        return text
