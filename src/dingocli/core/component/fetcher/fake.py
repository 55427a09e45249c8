"""In-memory catalog fetcher for testing."""

from dingocli.core.component.errors import FetchError
from dingocli.core.component.fetcher.abc import CatalogFetcher


class FakeCatalogFetcher(CatalogFetcher):
    """Serves pre-configured payloads keyed by URL.

    Unknown URLs behave like a 404 from the mirror; `status_codes` makes a
    URL fail with another HTTP status.
    """

    def __init__(
        self,
        *,
        responses: dict[str, bytes] | None = None,
        status_codes: dict[str, int] | None = None,
    ) -> None:
        self._responses = responses or {}
        self._status_codes = status_codes or {}
        self._fetched_urls: list[str] = []

    @property
    def fetched_urls(self) -> list[str]:
        """Read-only access to requested URLs for test assertions."""
        return self._fetched_urls

    def fetch(self, url: str) -> bytes:
        self._fetched_urls.append(url)
        if url in self._status_codes:
            status = self._status_codes[url]
            raise FetchError(f"request {url} failed: {status}", url=url, status_code=status)
        if url not in self._responses:
            raise FetchError(f"request {url} failed: 404 Not Found", url=url, status_code=404)
        body = self._responses[url]
        if not body:
            raise FetchError(f"response body of {url} is empty", url=url, status_code=200)
        return body
