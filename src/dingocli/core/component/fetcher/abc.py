"""Abstract interface for fetching raw catalog metadata."""

from abc import ABC, abstractmethod


class CatalogFetcher(ABC):
    """Retrieves the raw bytes of a `<component>.version` document."""

    @abstractmethod
    def fetch(self, url: str) -> bytes:
        """Fetch the body at `url`.

        Returns:
            Non-empty response body

        Raises:
            FetchError: On transport failure, non-2xx status, or empty body
        """
        ...
