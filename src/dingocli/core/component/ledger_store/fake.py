"""In-memory ledger store for testing."""

from pathlib import Path

from dingocli.core.component.ledger_store.abc import LedgerStore


class FakeLedgerStore(LedgerStore):
    """Keeps the document in memory.

    All state is provided via constructor; writes are captured for assertions.
    """

    def __init__(self, *, content: str | None = None) -> None:
        self._content = content
        self._writes: list[str] = []

    @property
    def content(self) -> str | None:
        return self._content

    @property
    def writes(self) -> list[str]:
        """Read-only access to every written document, oldest first."""
        return self._writes

    def read(self) -> str | None:
        return self._content

    def write(self, content: str) -> None:
        self._content = content
        self._writes.append(content)

    def path(self) -> Path:
        return Path("/fake/dingo/components/installed.json")
