from dingocli.core.component.fetcher.abc import CatalogFetcher
from dingocli.core.component.fetcher.fake import FakeCatalogFetcher
from dingocli.core.component.fetcher.real import RealCatalogFetcher

__all__ = ["CatalogFetcher", "FakeCatalogFetcher", "RealCatalogFetcher"]
