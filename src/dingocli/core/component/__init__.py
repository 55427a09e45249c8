"""Component catalog resolution and installed-build management."""

from dingocli.core.component.catalog import catalog_url, parse_catalog, url_join
from dingocli.core.component.errors import (
    ActiveComponentError,
    AlreadyInstalledError,
    AlreadyLatestError,
    ComponentError,
    CorruptLedgerError,
    FetchError,
    NoActiveVersionError,
    NotFoundError,
    NotInstalledError,
    ParseError,
)
from dingocli.core.component.ledger import InstalledLedger
from dingocli.core.component.manager import ComponentManager
from dingocli.core.component.resolver import resolve_component_version, resolve_version
from dingocli.core.component.types import (
    ALL_COMPONENTS,
    BuildDescriptor,
    InstalledComponent,
    RepositoryCatalog,
    ResolvedBuild,
)

__all__ = [
    "ALL_COMPONENTS",
    "ActiveComponentError",
    "AlreadyInstalledError",
    "AlreadyLatestError",
    "BuildDescriptor",
    "ComponentError",
    "ComponentManager",
    "CorruptLedgerError",
    "FetchError",
    "InstalledComponent",
    "InstalledLedger",
    "NoActiveVersionError",
    "NotFoundError",
    "NotInstalledError",
    "ParseError",
    "RepositoryCatalog",
    "ResolvedBuild",
    "catalog_url",
    "parse_catalog",
    "resolve_component_version",
    "resolve_version",
    "url_join",
]
