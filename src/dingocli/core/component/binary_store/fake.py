"""In-memory binary store for testing."""

from pathlib import Path

from dingocli.core.component.binary_store.abc import BinaryStore
from dingocli.core.component.errors import FetchError


class FakeBinaryStore(BinaryStore):
    """Records downloads and removals without touching the filesystem."""

    def __init__(self, *, failing_urls: set[str] | None = None) -> None:
        self._failing_urls = failing_urls or set()
        self._downloads: list[tuple[str, Path]] = []
        self._removed_paths: list[Path] = []

    @property
    def downloads(self) -> list[tuple[str, Path]]:
        """Read-only access to (url, destination) pairs for test assertions."""
        return self._downloads

    @property
    def removed_paths(self) -> list[Path]:
        """Read-only access to removed paths for test assertions."""
        return self._removed_paths

    def download(self, url: str, destination: Path) -> None:
        if url in self._failing_urls:
            raise FetchError(f"request {url} failed: 404 Not Found", url=url, status_code=404)
        self._downloads.append((url, destination))

    def remove(self, path: Path) -> None:
        self._removed_paths.append(path)
