"""Installed-component ledger.

The ledger is the ordered list of builds present on this host. It enforces
that at most one build per component name is active, and that the active
build is only removed when explicitly forced.
"""

import json

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from dingocli.core.component.errors import (
    ActiveComponentError,
    AlreadyInstalledError,
    CorruptLedgerError,
    NoActiveVersionError,
    NotInstalledError,
)
from dingocli.core.component.ledger_store import LedgerStore
from dingocli.core.component.types import InstalledComponent


class LedgerRecord(BaseModel):
    """On-disk schema of one ledger entry. `updatable` is never stored."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    commit: str = ""
    installed: bool = False
    active: bool = False
    release: str = ""
    path: str = ""
    url: str = ""

    @staticmethod
    def from_component(component: InstalledComponent) -> "LedgerRecord":
        return LedgerRecord(
            name=component.name,
            version=component.version,
            commit=component.commit,
            installed=component.installed,
            active=component.active,
            release=component.release,
            path=component.path,
            url=component.url,
        )

    def to_component(self) -> InstalledComponent:
        return InstalledComponent(
            name=self.name,
            version=self.version,
            commit=self.commit,
            installed=self.installed,
            active=self.active,
            release=self.release,
            path=self.path,
            url=self.url,
        )


_RECORDS = TypeAdapter(list[LedgerRecord])


def serialize_components(components: list[InstalledComponent]) -> str:
    """Render entries as the JSON document stored on disk."""
    records = [LedgerRecord.from_component(c).model_dump() for c in components]
    return json.dumps(records, indent=2) + "\n"


def _check_invariants(store: LedgerStore, components: list[InstalledComponent]) -> None:
    """Reject documents with a repeated (name, version) or two active builds of one name."""
    seen: set[tuple[str, str]] = set()
    active: dict[str, str] = {}
    for component in components:
        if component.key in seen:
            raise CorruptLedgerError(
                store.path(), f"duplicate entry {component.name} {component.version}"
            )
        seen.add(component.key)

        if not component.active:
            continue
        if component.name in active:
            raise CorruptLedgerError(
                store.path(),
                f"{component.name} has more than one active version: "
                f"{active[component.name]}, {component.version}",
            )
        active[component.name] = component.version


class InstalledLedger:
    """Ordered collection of installed builds backed by a LedgerStore.

    Entries keep insertion order. Lookups return the live entry objects, so
    flags set by `update_state` are visible to later callers in the same
    process.
    """

    def __init__(
        self, store: LedgerStore, components: list[InstalledComponent] | None = None
    ) -> None:
        self._store = store
        self._components: list[InstalledComponent] = list(components or [])

    @classmethod
    def load(cls, store: LedgerStore) -> "InstalledLedger":
        """Read the ledger from its store.

        A store with no document yields an empty ledger.

        Raises:
            CorruptLedgerError: If the stored document cannot be parsed, repeats
                an entry, or marks two builds of one component active
        """
        content = store.read()
        if content is None:
            return cls(store)

        try:
            records = _RECORDS.validate_json(content)
        except ValidationError as e:
            reason = e.errors()[0]["msg"] if e.error_count() else str(e)
            raise CorruptLedgerError(store.path(), reason) from e

        components = [record.to_component() for record in records]
        _check_invariants(store, components)
        return cls(store, components)

    def save(self) -> None:
        """Persist all entries, replacing the stored document."""
        self._store.write(serialize_components(self._components))

    def entries(self, name: str | None = None) -> list[InstalledComponent]:
        """Entries in insertion order, optionally limited to one component."""
        if name is None:
            return list(self._components)
        return [c for c in self._components if c.name == name]

    def __len__(self) -> int:
        return len(self._components)

    def _find(self, name: str, version: str) -> InstalledComponent | None:
        for component in self._components:
            if component.name == name and component.version == version:
                return component
        return None

    def find_installed(self, name: str, version: str) -> InstalledComponent:
        """Exact lookup on (name, version).

        Raises:
            NotInstalledError: If no such entry exists
        """
        component = self._find(name, version)
        if component is None:
            raise NotInstalledError(name, version)
        return component

    def is_installed(self, name: str, version: str) -> bool:
        return self._find(name, version) is not None

    def get_active(self, name: str) -> InstalledComponent:
        """The active entry for a component.

        Raises:
            NoActiveVersionError: If the component has no active entry
        """
        for component in self._components:
            if component.name == name and component.active:
                return component
        raise NoActiveVersionError(name)

    def set_active(self, name: str, version: str) -> InstalledComponent:
        """Make (name, version) the active build and deactivate its siblings.

        Raises:
            NotInstalledError: If (name, version) is not in the ledger
        """
        target = self.find_installed(name, version)
        for component in self._components:
            if component.name == name:
                component.active = component is target
        return target

    def update_state(self, name: str, version: str, remote_release: str) -> bool:
        """Flag an entry updatable when the remote build is strictly newer.

        Build times are compared as plain strings; the fixed-width ISO 8601
        format makes string order match time order.

        Returns:
            True if the entry was flagged, False otherwise (including when
            the entry does not exist)
        """
        component = self._find(name, version)
        if component is None:
            return False
        if remote_release > component.release:
            component.updatable = True
            return True
        return False

    def add(self, component: InstalledComponent) -> None:
        """Append a new entry.

        Raises:
            AlreadyInstalledError: If (name, version) is already present
        """
        if self.is_installed(component.name, component.version):
            raise AlreadyInstalledError(component.name, component.version)
        self._components.append(component)

    def replace(self, component: InstalledComponent) -> None:
        """Swap the entry with the same identity, keeping its position.

        Raises:
            NotInstalledError: If no entry has that identity
        """
        for index, existing in enumerate(self._components):
            if existing.key == component.key:
                self._components[index] = component
                return
        raise NotInstalledError(component.name, component.version)

    def remove(self, name: str, version: str, *, force: bool = False) -> InstalledComponent:
        """Drop an entry from the ledger.

        Removing the active entry requires `force` and leaves the component
        without an active build until one is activated again.

        Raises:
            NotInstalledError: If (name, version) is not in the ledger
            ActiveComponentError: If the entry is active and force is False
        """
        target = self.find_installed(name, version)
        if target.active and not force:
            raise ActiveComponentError(name, version)
        self._components = [c for c in self._components if c is not target]
        return target
