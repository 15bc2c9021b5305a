"""HTTP access to the Pokemon TCG card API with retry logic."""

import asyncio
import logging
from typing import Optional

import httpx

from ..config import Settings
from ..models.cards import PtcgResponse
from .errors import UpstreamUnavailable

logger = logging.getLogger("ptcg_mcp.client")

RETRY_STATUS_CODES = (408, 429)


class PtcgClient:
    """Issues compiled queries against the /cards endpoint."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        max_retries: int = 3,
        backoff_ms: int = 500,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.backoff_ms = backoff_ms
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "PtcgClient":
        return cls(
            settings.base_url,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
            backoff_ms=settings.backoff_ms,
            **kwargs,
        )

    def _should_retry(self, status_code: int) -> bool:
        return status_code >= 500 or status_code in RETRY_STATUS_CODES

    async def _get(self, path: str, params: dict) -> httpx.Response:
        """
        GET with retries on 5xx/408/429 and transport errors.

        Raises:
            UpstreamUnavailable: when every attempt failed or the final status is not 2xx
        """
        url = f"{self.base_url}{path}"
        query = params.get("q")

        for attempt in range(1, self.max_retries + 1):
            try:
                async with httpx.AsyncClient(transport=self._transport) as client:
                    resp = await client.get(url, params=params, timeout=self.timeout)
            except (httpx.TransportError, httpx.TimeoutException) as e:
                if attempt < self.max_retries:
                    delay = self.backoff_ms / 1000.0
                    logger.warning(
                        f"Retrying GET {path} after transport/timeout error: {e} "
                        f"(attempt {attempt}/{self.max_retries}) in {delay:.2f}s"
                    )
                    await asyncio.sleep(delay)
                    continue
                raise UpstreamUnavailable(
                    f"Card API request failed: {e}", query=query
                ) from e

            if self._should_retry(resp.status_code) and attempt < self.max_retries:
                delay = self.backoff_ms / 1000.0
                logger.warning(
                    f"Retrying GET {path} after status {resp.status_code} "
                    f"(attempt {attempt}/{self.max_retries}) in {delay:.2f}s"
                )
                await asyncio.sleep(delay)
                continue

            try:
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise UpstreamUnavailable(
                    f"Card API returned HTTP {resp.status_code}",
                    query=query,
                    status_code=resp.status_code,
                ) from e
            return resp

    async def search(self, query: str) -> PtcgResponse:
        """Run a compiled query and return the decoded response body."""
        resp = await self._get("/cards", {"q": query})
        try:
            body = resp.json()
        except ValueError as e:
            raise UpstreamUnavailable(
                "Card API returned a non-JSON body",
                query=query,
                status_code=resp.status_code,
            ) from e

        if not isinstance(body, dict) or not isinstance(body.get("data"), list):
            raise UpstreamUnavailable(
                "Card API response has no data list",
                query=query,
                status_code=resp.status_code,
            )

        logger.debug(f"Query {query!r} matched {body.get('totalCount')} cards")
        return body
