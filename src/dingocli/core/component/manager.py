"""Component manager: orchestrates catalogs, resolution and the ledger.

The manager owns one InstalledLedger and a per-process cache of fetched
catalogs. Every mutation of the ledger is saved before the operation
returns, except for dry-run removal.
"""

import logging
from collections.abc import Collection, Mapping
from dataclasses import replace
from pathlib import Path
from types import MappingProxyType

from dingocli.core.component.binary_store import BinaryStore
from dingocli.core.component.catalog import catalog_url, parse_catalog, url_join
from dingocli.core.component.errors import (
    AlreadyInstalledError,
    AlreadyLatestError,
    ComponentError,
    FetchError,
    NotFoundError,
)
from dingocli.core.component.fetcher import CatalogFetcher
from dingocli.core.component.ledger import InstalledLedger
from dingocli.core.component.resolver import is_branch_build, resolve_component_version
from dingocli.core.component.types import (
    ALL_COMPONENTS,
    LATEST_VERSION,
    MAIN_VERSION,
    BuildDescriptor,
    InstalledComponent,
    RepositoryCatalog,
    ResolvedBuild,
)

logger = logging.getLogger(__name__)


class ComponentManager:
    """Install, activate, update-check and remove component builds."""

    def __init__(
        self,
        *,
        ledger: InstalledLedger,
        fetcher: CatalogFetcher,
        binaries: BinaryStore,
        mirror_url: str | None,
        components_dir: Path,
        known_components: Collection[str] = ALL_COMPONENTS,
    ) -> None:
        self._ledger = ledger
        self._fetcher = fetcher
        self._binaries = binaries
        self._mirror_url = mirror_url
        self._components_dir = components_dir
        self._known_components = known_components
        self._catalogs: dict[str, RepositoryCatalog] = {}

    @property
    def ledger(self) -> InstalledLedger:
        return self._ledger

    @property
    def catalogs(self) -> Mapping[str, RepositoryCatalog]:
        """Catalogs fetched so far in this process."""
        return MappingProxyType(self._catalogs)

    def _require_mirror(self) -> str:
        if self._mirror_url is None:
            raise ComponentError(
                "mirror URL is not configured: set mirror_url in ~/.dingo/config.toml "
                "or the DINGO_MIRROR_URL environment variable"
            )
        return self._mirror_url

    def load_catalog(self, name: str, *, refresh: bool = False) -> RepositoryCatalog:
        """Return the catalog for `name`, fetching it on first use.

        Raises:
            NotFoundError: If `name` is not a known component or the mirror has no catalog
            FetchError: If the metadata cannot be retrieved
            ParseError: If the metadata cannot be parsed
        """
        if name not in self._known_components:
            raise NotFoundError(f"{name} not found in repository", name=name)

        if not refresh and name in self._catalogs:
            return self._catalogs[name]

        url = catalog_url(self._require_mirror(), name)
        try:
            payload = self._fetcher.fetch(url)
        except FetchError as e:
            if e.status_code == 404:
                raise NotFoundError(f"{name} not found in repository", name=name) from e
            e.name = name
            raise

        catalog = parse_catalog(payload, name=name)
        logger.debug(
            "Loaded catalog for %s: %d tags, %d branches, %d commits",
            name,
            len(catalog.tags),
            len(catalog.branches),
            len(catalog.commits),
        )
        self._catalogs[name] = catalog
        return catalog

    def list_available_versions(self, name: str) -> list[InstalledComponent]:
        """Describe every remote tag and branch build of a component.

        Commits are not listed. Records are not installed and not active;
        `url` points at the artifact on the mirror.
        """
        catalog = self.load_catalog(name)
        mirror = self._require_mirror()

        available: list[InstalledComponent] = []
        for entries in (catalog.list_tags(), catalog.list_branches()):
            for label, descriptor in entries.items():
                available.append(
                    InstalledComponent(
                        name=name,
                        version=label,
                        commit=descriptor.commit or "",
                        installed=False,
                        active=False,
                        release=descriptor.build_time,
                        path=descriptor.path,
                        url=url_join(mirror, descriptor.path),
                    )
                )
        return available

    def find_version(self, name: str, requested: str) -> ResolvedBuild:
        """Resolve a version token against the component's catalog."""
        self.load_catalog(name)
        return resolve_component_version(self._catalogs, name, requested)

    def _binary_path(self, name: str, version: str) -> Path:
        return self._components_dir / name / version / name

    def _add_build(self, name: str, resolved: ResolvedBuild) -> InstalledComponent:
        if self._ledger.is_installed(name, resolved.label):
            raise AlreadyInstalledError(name, resolved.label)

        url = url_join(self._require_mirror(), resolved.descriptor.path)
        destination = self._binary_path(name, resolved.label)
        self._binaries.download(url, destination)

        has_active = any(c.active for c in self._ledger.entries(name))
        component = InstalledComponent(
            name=name,
            version=resolved.label,
            commit=resolved.descriptor.commit or "",
            installed=True,
            active=not has_active,
            release=resolved.descriptor.build_time,
            path=str(destination),
            url=url,
        )
        self._ledger.add(component)
        return component

    def install(self, name: str, requested: str = LATEST_VERSION) -> InstalledComponent:
        """Resolve, download and record a build.

        The first build installed for a component becomes its active build.

        Raises:
            AlreadyInstalledError: If the resolved build is already in the ledger
        """
        resolved = self.find_version(name, requested or LATEST_VERSION)
        logger.debug("Resolved %s:%s to %s", name, requested, resolved.label)
        component = self._add_build(name, resolved)
        self._ledger.save()
        return component

    def activate(self, name: str, version: str) -> InstalledComponent:
        """Make an installed build the active one."""
        component = self._ledger.set_active(name, version)
        self._ledger.save()
        return component

    def _tracks_main(self, component: InstalledComponent) -> bool:
        """Whether an installed build follows the main branch rather than a tag.

        A published tag wins over the `main-` label prefix, so a tag such as
        `main-lts` is still updated from its tag entry.
        """
        catalog = self.load_catalog(component.name)
        if catalog.find_tag(component.version) is not None:
            return False
        return is_branch_build(component.version)

    def _remote_build(self, component: InstalledComponent) -> BuildDescriptor | None:
        catalog = self.load_catalog(component.name)
        if self._tracks_main(component):
            return catalog.get_main()
        return catalog.find_tag(component.version)

    def check_updates(self, name: str | None = None) -> list[InstalledComponent]:
        """Flag installed builds that have a newer remote build.

        Returns:
            Entries flagged updatable, in ledger order
        """
        for component in self._ledger.entries(name):
            remote = self._remote_build(component)
            if remote is None:
                logger.debug("%s %s no longer published", component.name, component.version)
                continue
            self._ledger.update_state(component.name, component.version, remote.build_time)
        return [c for c in self._ledger.entries(name) if c.updatable]

    def update(self, name: str, version: str) -> InstalledComponent:
        """Replace an installed build with its newer remote build.

        Tag builds are refreshed in place. A main-branch build is replaced by
        a new entry for the current main build, which inherits the active flag.

        Raises:
            NotInstalledError: If (name, version) is not installed
            NotFoundError: If the build is no longer published
            AlreadyLatestError: If the remote build is not newer
        """
        current = self._ledger.find_installed(name, version)
        remote = self._remote_build(current)
        if remote is None:
            raise NotFoundError(f"version '{version}' not found", name=name, version=version)

        if not self._ledger.update_state(name, version, remote.build_time):
            raise AlreadyLatestError(name, version)

        if self._tracks_main(current):
            resolved = self.find_version(name, MAIN_VERSION)
            if resolved.label != version:
                component = self._add_build(name, resolved)
                if current.active:
                    component = self._ledger.set_active(name, component.version)
                self._ledger.save()
                return component

        url = url_join(self._require_mirror(), remote.path)
        self._binaries.download(url, Path(current.path))
        refreshed = replace(
            current,
            commit=remote.commit or "",
            release=remote.build_time,
            url=url,
            updatable=False,
        )
        self._ledger.replace(refreshed)
        self._ledger.save()
        return refreshed

    def remove(
        self, name: str, version: str, *, force: bool = False, dry_run: bool = False
    ) -> InstalledComponent:
        """Remove a build from the ledger and delete its binary.

        With `dry_run` the binary and the persisted ledger are left alone.
        """
        removed = self._ledger.remove(name, version, force=force)
        if dry_run:
            return removed

        if removed.path:
            self._binaries.remove(Path(removed.path))
        self._ledger.save()
        return removed

    def installed(self, name: str | None = None) -> list[InstalledComponent]:
        return self._ledger.entries(name)

    def get_active(self, name: str) -> InstalledComponent:
        return self._ledger.get_active(name)
