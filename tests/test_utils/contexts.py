"""Helpers for building DingoContext instances in command tests."""

from dataclasses import dataclass

from dingocli.core.component.binary_store import FakeBinaryStore
from dingocli.core.component.fetcher import FakeCatalogFetcher
from dingocli.core.component.ledger import serialize_components
from dingocli.core.component.ledger_store import FakeLedgerStore
from dingocli.core.component.types import InstalledComponent
from dingocli.core.context import DingoContext
from tests.test_utils.catalogs import MIRROR, mds_payload

MDS_URL = f"{MIRROR}/dingo-mds.version"


@dataclass(frozen=True)
class ComponentTestEnv:
    """Context plus the fakes behind it, for assertions."""

    ctx: DingoContext
    fetcher: FakeCatalogFetcher
    binaries: FakeBinaryStore
    ledger_store: FakeLedgerStore


def component_env(
    *,
    responses: dict[str, bytes] | None = None,
    entries: list[InstalledComponent] | None = None,
) -> ComponentTestEnv:
    """Build a test context serving the dingo-mds catalog by default.

    `entries` are written to the fake ledger store as if installed earlier.
    """
    if responses is None:
        responses = {MDS_URL: mds_payload()}
    fetcher = FakeCatalogFetcher(responses=responses)
    binaries = FakeBinaryStore()
    content = serialize_components(entries) if entries is not None else None
    ledger_store = FakeLedgerStore(content=content)
    ctx = DingoContext.for_test(fetcher=fetcher, binaries=binaries, ledger_store=ledger_store)
    return ComponentTestEnv(ctx=ctx, fetcher=fetcher, binaries=binaries, ledger_store=ledger_store)
