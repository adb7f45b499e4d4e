"""Download import bundles over HTTP."""

import json

import httpx
import structlog

from flashdeck.exceptions import BundleFetchError

logger = structlog.get_logger(__name__)


class HttpBundleFetcher:
    """HTTP client fetching JSON bundles from arbitrary URLs."""

    def __init__(self, timeout: float = 30.0, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._client = httpx.AsyncClient(timeout=timeout, follow_redirects=True, transport=transport)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def fetch(self, url: str) -> object:
        """
        Download and decode a bundle.

        Raises:
            BundleFetchError: On a transport error, a non-2xx status or a
                body that is not JSON
        """
        try:
            response = await self._client.get(url, headers={"Accept": "application/json"})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise BundleFetchError(url, f"HTTP {status}: {e.response.reason_phrase}") from e
        except httpx.HTTPError as e:
            raise BundleFetchError(url, str(e) or type(e).__name__) from e

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise BundleFetchError(url, "response is not valid JSON") from e

        logger.debug("fetched_bundle", url=url, bytes=len(response.content))
        return payload
