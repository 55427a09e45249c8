"""Repository metadata model: parsing of `<component>.version` documents.

The mirror publishes one JSON document per component:

    {
      "binary": "dingo-mds",
      "generated_at": "2025-01-01T00:00:00Z",
      "branches": {"main": {"path": "...", "build_time": "...", "size": "..."}},
      "tags": {"v1.0.0": {...}},
      "commits": {"abc123": {..., "commit": "abc123"}}
    }

The document is validated with pydantic models, then converted into the
immutable `RepositoryCatalog` used everywhere else.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from dingocli.core.component.errors import ParseError
from dingocli.core.component.types import BuildDescriptor, RepositoryCatalog


class BuildEntryModel(BaseModel):
    """Wire schema for a single tag/branch/commit entry."""

    model_config = ConfigDict(frozen=True)

    path: str = ""
    build_time: str = ""
    size: str = ""
    commit: str | None = None

    @field_validator("size", mode="before")
    @classmethod
    def coerce_size(cls, v: Any) -> Any:
        """Some mirrors publish size as a number of bytes."""
        if isinstance(v, int | float) and not isinstance(v, bool):
            return str(v)
        return v


class CatalogDocument(BaseModel):
    """Wire schema for a whole `<component>.version` document."""

    model_config = ConfigDict(frozen=True)

    binary: str = ""
    generated_at: str = ""
    branches: dict[str, BuildEntryModel] | None = None
    tags: dict[str, BuildEntryModel] | None = None
    commits: dict[str, BuildEntryModel] | None = None

    def to_catalog(self) -> RepositoryCatalog:
        return RepositoryCatalog(
            name=self.binary,
            generated_at=self.generated_at,
            tags=_freeze(self.tags),
            branches=_freeze(self.branches),
            commits=_freeze(self.commits),
        )


def _freeze(entries: dict[str, BuildEntryModel] | None) -> MappingProxyType[str, BuildDescriptor]:
    if not entries:
        return MappingProxyType({})
    return MappingProxyType(
        {
            label: BuildDescriptor(
                path=entry.path,
                build_time=entry.build_time,
                size=entry.size,
                commit=entry.commit,
            )
            for label, entry in entries.items()
        }
    )


def parse_catalog(payload: bytes, name: str | None = None) -> RepositoryCatalog:
    """Parse raw metadata bytes into a catalog.

    A JSON `null` document yields an empty catalog; unknown top-level
    fields are ignored.

    Args:
        payload: Raw response body or file content
        name: Component name, for error context only

    Returns:
        Immutable RepositoryCatalog

    Raises:
        ParseError: If the payload is empty, not JSON, or has the wrong shape
    """
    if not payload.strip():
        raise ParseError("failed to parse JSON: payload is empty", payload=payload, name=name)

    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"failed to parse JSON: {e}", payload=payload, name=name) from e

    if data is None:
        data = {}

    try:
        document = CatalogDocument.model_validate(data)
    except ValidationError as e:
        raise ParseError(
            f"failed to parse JSON: unexpected document structure ({e.error_count()} errors)",
            payload=payload,
            name=name,
        ) from e

    return document.to_catalog()


def parse_catalog_file(path: Path) -> RepositoryCatalog:
    """Parse a catalog stored on local disk.

    Raises:
        FileNotFoundError: If the file does not exist
        ParseError: If the content cannot be parsed
    """
    return parse_catalog(path.read_bytes())


def url_join(base: str, *paths: str) -> str:
    """Join URL path segments onto a base URL.

    Empty segments are skipped and slashes between segments are collapsed.

    Examples:
        >>> url_join("https://example.com/", "api")
        'https://example.com/api'
        >>> url_join("https://example.com/v1", "", "components", "")
        'https://example.com/v1/components'
    """
    result = base.rstrip("/")
    for segment in paths:
        segment = segment.strip("/")
        if not segment:
            continue
        result = f"{result}/{segment}"
    return result


def catalog_url(mirror_url: str, name: str) -> str:
    """URL of the metadata document for a component."""
    return url_join(mirror_url, f"{name}.version")
