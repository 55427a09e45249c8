"""Abstract interface for ledger persistence."""

from abc import ABC, abstractmethod
from pathlib import Path


class LedgerStore(ABC):
    """Reads and writes the serialized installed-components document.

    Implementations deal in text only; (de)serialization belongs to
    InstalledLedger.
    """

    @abstractmethod
    def read(self) -> str | None:
        """Return the stored document, or None if nothing was saved yet.

        Raises:
            CorruptLedgerError: If the stored bytes are not text
        """
        ...

    @abstractmethod
    def write(self, content: str) -> None:
        """Replace the stored document.

        Readers must observe either the previous content or `content`, never
        a partial write.
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Location of the document (for error messages)."""
        ...
