"""Filesystem-backed ledger store."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from dingocli.core.component.errors import CorruptLedgerError
from dingocli.core.component.ledger_store.abc import LedgerStore

logger = logging.getLogger(__name__)


@contextmanager
def atomic_write(destination: Path) -> Iterator[TextIO]:
    """Open a temporary sibling of `destination` for writing.

    On normal exit the temporary file replaces `destination`. If the body
    raises, the temporary file is removed and `destination` keeps its
    previous content.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    temp_path = destination.with_suffix(destination.suffix + ".tmp")

    try:
        with temp_path.open("w", encoding="utf-8") as f:
            yield f
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise

    temp_path.replace(destination)


class RealLedgerStore(LedgerStore):
    """Stores the installed-components document as a JSON file."""

    def __init__(self, ledger_path: Path) -> None:
        self._ledger_path = ledger_path

    def read(self) -> str | None:
        if not self._ledger_path.exists():
            logger.debug("No installed components file at %s", self._ledger_path)
            return None
        try:
            return self._ledger_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CorruptLedgerError(self._ledger_path, f"not valid UTF-8 ({e.reason})") from e

    def write(self, content: str) -> None:
        with atomic_write(self._ledger_path) as f:
            f.write(content)
        logger.debug("Wrote installed components to %s", self._ledger_path)

    def path(self) -> Path:
        return self._ledger_path
