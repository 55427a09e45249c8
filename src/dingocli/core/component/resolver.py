"""Resolution of a requested version token to a concrete build."""

from collections.abc import Mapping

from dingocli.core.component.errors import NotFoundError
from dingocli.core.component.types import (
    LATEST_VERSION,
    MAIN_VERSION,
    BuildDescriptor,
    RepositoryCatalog,
    ResolvedBuild,
)

BRANCH_LABEL_PREFIX = f"{MAIN_VERSION}-"


def branch_build_label(descriptor: BuildDescriptor) -> str:
    """Concrete version label recorded for a build of the main branch.

    Uses the first 8 characters of the commit hash, or the build time with
    separators removed when the mirror did not publish a commit.

    Examples:
        >>> branch_build_label(BuildDescriptor("p", "2025-01-02T03:04:05Z", "1MB", "abcdef123456"))
        'main-abcdef12'
        >>> branch_build_label(BuildDescriptor("p", "2025-01-02T03:04:05Z", "1MB"))
        'main-20250102T030405Z'
    """
    if descriptor.commit:
        return f"{BRANCH_LABEL_PREFIX}{descriptor.commit[:8]}"
    compact = descriptor.build_time.replace("-", "").replace(":", "")
    return f"{BRANCH_LABEL_PREFIX}{compact}"


def is_branch_build(version: str) -> bool:
    """Whether an installed version label came from the main branch."""
    return version.startswith(BRANCH_LABEL_PREFIX)


def resolve_version(
    catalog: RepositoryCatalog, requested: str, name: str | None = None
) -> ResolvedBuild:
    """Resolve `latest`, `main` or an exact tag against a catalog.

    Branches and commits are only reachable through `main`; any other token
    must match a tag label exactly. `name` labels errors when given, otherwise
    the catalog's own `binary` name is used.

    Raises:
        NotFoundError: If the token cannot be resolved
    """
    name = name or catalog.name
    if requested == LATEST_VERSION:
        latest = catalog.get_latest()
        if latest is None:
            raise NotFoundError(
                f"version '{requested}' not found: {name or 'component'} has no tags",
                name=name,
                version=requested,
            )
        label, descriptor = latest
        return ResolvedBuild(label=label, descriptor=descriptor, source="tag")

    if requested == MAIN_VERSION:
        main = catalog.get_main()
        if main is None:
            raise NotFoundError(
                f"version '{requested}' not found: no main branch build",
                name=name,
                version=requested,
            )
        return ResolvedBuild(label=branch_build_label(main), descriptor=main, source="branch")

    descriptor = catalog.find_tag(requested)
    if descriptor is None:
        raise NotFoundError(
            f"version '{requested}' not found", name=name, version=requested
        )
    return ResolvedBuild(label=requested, descriptor=descriptor, source="tag")


def resolve_component_version(
    catalogs: Mapping[str, RepositoryCatalog], name: str, requested: str
) -> ResolvedBuild:
    """Resolve a version for a component looked up by name.

    Raises:
        NotFoundError: If no catalog is known for `name`, or the version is absent
    """
    catalog = catalogs.get(name)
    if catalog is None:
        raise NotFoundError(f"{name} not found in repository", name=name, version=requested)
    return resolve_version(catalog, requested, name=name)
