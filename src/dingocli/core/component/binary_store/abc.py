"""Abstract interface for placing and deleting component binaries on disk."""

from abc import ABC, abstractmethod
from pathlib import Path


class BinaryStore(ABC):
    """Downloads build artifacts and removes installed binaries."""

    @abstractmethod
    def download(self, url: str, destination: Path) -> None:
        """Download `url` to `destination` and make it executable.

        Raises:
            FetchError: If the artifact cannot be retrieved
        """
        ...

    @abstractmethod
    def remove(self, path: Path) -> None:
        """Delete an installed binary. A missing path is not an error."""
        ...
