"""Component data types shared by the catalog, resolver and ledger."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

DINGO_CLIENT = "dingo-client"
DINGO_CACHE = "dingo-cache"
DINGO_MDS = "dingo-mds"
DINGO_MDS_CLIENT = "dingo-mds-client"

ALL_COMPONENTS: tuple[str, ...] = (
    DINGO_CLIENT,
    DINGO_CACHE,
    DINGO_MDS,
    DINGO_MDS_CLIENT,
)

LATEST_VERSION = "latest"
MAIN_VERSION = "main"
INSTALLED_FILE = "installed.json"

BuildSource = Literal["tag", "branch"]


def default_components_dir() -> Path:
    """Directory holding installed binaries and the ledger file."""
    return Path.home() / ".dingo" / "components"


@dataclass(frozen=True)
class BuildDescriptor:
    """One remote build entry (tag, branch or commit) from a catalog."""

    path: str
    build_time: str  # ISO 8601, fixed width
    size: str  # As published by the mirror, e.g. "10MB"
    commit: str | None = None


@dataclass(frozen=True)
class RepositoryCatalog:
    """Remote build catalog for a single component.

    The three maps are read-only views. A catalog may be cached by the
    component manager and shared between callers, so it is never mutated
    after parsing.
    """

    name: str
    generated_at: str
    tags: Mapping[str, BuildDescriptor]
    branches: Mapping[str, BuildDescriptor]
    commits: Mapping[str, BuildDescriptor]

    def list_tags(self) -> Mapping[str, BuildDescriptor]:
        return self.tags

    def list_branches(self) -> Mapping[str, BuildDescriptor]:
        return self.branches

    def list_commits(self) -> Mapping[str, BuildDescriptor]:
        return self.commits

    def find_tag(self, label: str) -> BuildDescriptor | None:
        return self.tags.get(label)

    def get_main(self) -> BuildDescriptor | None:
        return self.branches.get(MAIN_VERSION)

    def get_latest(self) -> tuple[str, BuildDescriptor] | None:
        """Return the tag with the lexicographically greatest label.

        Labels are compared as plain strings, so "v10.0.0" sorts above
        "v9.0.0" and "v1.0.0-beta" above "v1.0.0".
        """
        if not self.tags:
            return None
        label = max(self.tags)
        return label, self.tags[label]


@dataclass(frozen=True)
class ResolvedBuild:
    """Concrete build chosen for a requested version token."""

    label: str  # Never "latest" or "main"
    descriptor: BuildDescriptor
    source: BuildSource


@dataclass
class InstalledComponent:
    """Ledger entry for one installed build.

    Identity is the (name, version) pair. `updatable` is recomputed by the
    update check and is never written to disk.
    """

    name: str
    version: str
    commit: str = ""
    installed: bool = False
    active: bool = False
    release: str = ""  # Remote build time recorded at install
    path: str = ""
    url: str = ""
    updatable: bool = field(default=False, compare=False)

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.version)


def parse_component_version(value: str) -> tuple[str, str]:
    """Split a "name:version" argument on its first colon.

    Examples:
        >>> parse_component_version("dingo-mds:v1.0.0")
        ('dingo-mds', 'v1.0.0')
        >>> parse_component_version("dingo-client")
        ('dingo-client', '')
    """
    name, _, version = value.partition(":")
    return name, version
