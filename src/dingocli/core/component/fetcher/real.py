"""HTTP catalog fetcher."""

import logging

import httpx

from dingocli.core.component.errors import FetchError
from dingocli.core.component.fetcher.abc import CatalogFetcher

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class RealCatalogFetcher(CatalogFetcher):
    """Fetches metadata over HTTP with httpx.

    No retries: a failed request surfaces as FetchError immediately.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def fetch(self, url: str) -> bytes:
        logger.debug("Fetching component metadata from %s", url)
        try:
            with httpx.Client(
                timeout=self._timeout, transport=self._transport, follow_redirects=True
            ) as client:
                response = client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"request {url} failed: {e}", url=url) from e

        if not response.is_success:
            raise FetchError(
                f"request {url} failed: {response.status_code} {response.reason_phrase}",
                url=url,
                status_code=response.status_code,
            )

        if not response.content:
            raise FetchError(
                f"response body of {url} is empty", url=url, status_code=response.status_code
            )

        logger.debug("Fetched %d bytes from %s", len(response.content), url)
        return response.content
