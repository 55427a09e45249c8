"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from dingocli.core.component.binary_store import BinaryStore, RealBinaryStore
from dingocli.core.component.fetcher import CatalogFetcher, RealCatalogFetcher
from dingocli.core.component.ledger import InstalledLedger
from dingocli.core.component.ledger_store import LedgerStore, RealLedgerStore
from dingocli.core.component.manager import ComponentManager
from dingocli.core.global_config import (
    FilesystemGlobalConfigOps,
    GlobalConfig,
    GlobalConfigOps,
    apply_env_overrides,
)


@dataclass(frozen=True)
class DingoContext:
    """Immutable context holding all dependencies for dingo operations.

    Created at CLI entry point and threaded through the application via
    click's `ctx.obj`. Tests build one with `DingoContext.for_test()`.
    """

    fetcher: CatalogFetcher
    binaries: BinaryStore
    ledger_store: LedgerStore
    config_ops: GlobalConfigOps
    global_config: GlobalConfig

    def component_manager(self) -> ComponentManager:
        """Load the ledger and build a manager around it.

        Raises:
            CorruptLedgerError: If the installed components file is unreadable
        """
        return ComponentManager(
            ledger=InstalledLedger.load(self.ledger_store),
            fetcher=self.fetcher,
            binaries=self.binaries,
            mirror_url=self.global_config.mirror_url,
            components_dir=self.global_config.components_dir,
        )

    @staticmethod
    def for_test(
        fetcher: CatalogFetcher | None = None,
        binaries: BinaryStore | None = None,
        ledger_store: LedgerStore | None = None,
        config_ops: GlobalConfigOps | None = None,
        global_config: GlobalConfig | None = None,
    ) -> "DingoContext":
        """Create test context with in-memory defaults for anything not given.

        Example:
            >>> fetcher = FakeCatalogFetcher(responses={url: payload})
            >>> ctx = DingoContext.for_test(fetcher=fetcher)
        """
        from dingocli.core.component.binary_store import FakeBinaryStore
        from dingocli.core.component.fetcher import FakeCatalogFetcher
        from dingocli.core.component.ledger_store import FakeLedgerStore
        from dingocli.core.global_config import InMemoryGlobalConfigOps

        if global_config is None:
            global_config = GlobalConfig(
                mirror_url="https://mirror.test/components",
                components_dir=Path("/test/dingo/components"),
                request_timeout=5.0,
            )

        return DingoContext(
            fetcher=fetcher if fetcher is not None else FakeCatalogFetcher(),
            binaries=binaries if binaries is not None else FakeBinaryStore(),
            ledger_store=ledger_store if ledger_store is not None else FakeLedgerStore(),
            config_ops=(
                config_ops if config_ops is not None else InMemoryGlobalConfigOps(global_config)
            ),
            global_config=global_config,
        )


def create_context(config_ops: GlobalConfigOps | None = None) -> DingoContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    if config_ops is None:
        config_ops = FilesystemGlobalConfigOps()

    global_config = apply_env_overrides(config_ops.load(), os.environ)

    return DingoContext(
        fetcher=RealCatalogFetcher(timeout=global_config.request_timeout),
        binaries=RealBinaryStore(timeout=global_config.request_timeout),
        ledger_store=RealLedgerStore(global_config.ledger_path),
        config_ops=config_ops,
        global_config=global_config,
    )
