from dingocli.core.component.ledger_store.abc import LedgerStore
from dingocli.core.component.ledger_store.fake import FakeLedgerStore
from dingocli.core.component.ledger_store.real import RealLedgerStore, atomic_write

__all__ = ["FakeLedgerStore", "LedgerStore", "RealLedgerStore", "atomic_write"]
