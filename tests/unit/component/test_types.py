"""Tests for component data types."""

import pytest

from dingocli.core.component.types import (
    ALL_COMPONENTS,
    DINGO_CACHE,
    DINGO_CLIENT,
    DINGO_MDS,
    DINGO_MDS_CLIENT,
    InstalledComponent,
    parse_component_version,
)


def test_component_names() -> None:
    """Test that the component names match the published binaries."""
    assert DINGO_CLIENT == "dingo-client"
    assert DINGO_CACHE == "dingo-cache"
    assert DINGO_MDS == "dingo-mds"
    assert DINGO_MDS_CLIENT == "dingo-mds-client"
    assert ALL_COMPONENTS == ("dingo-client", "dingo-cache", "dingo-mds", "dingo-mds-client")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("dingo-mds:v1.0.0", ("dingo-mds", "v1.0.0")),
        ("dingo-client", ("dingo-client", "")),
        ("dingo-mds:main", ("dingo-mds", "main")),
        ("dingo-mds:v1.0.0:extra", ("dingo-mds", "v1.0.0:extra")),
        ("dingo-mds:", ("dingo-mds", "")),
        ("", ("", "")),
    ],
)
def test_parse_component_version(value: str, expected: tuple[str, str]) -> None:
    """Test that NAME[:VERSION] arguments split on the first colon."""
    assert parse_component_version(value) == expected


def test_installed_component_defaults() -> None:
    """Test that a bare InstalledComponent is not installed, active or updatable."""
    component = InstalledComponent(name="dingo-mds", version="v1.0.0")

    assert component.commit == ""
    assert component.installed is False
    assert component.active is False
    assert component.updatable is False
    assert component.key == ("dingo-mds", "v1.0.0")


def test_installed_component_equality_ignores_updatable() -> None:
    """Test that the updatable flag does not affect equality."""
    first = InstalledComponent(name="dingo-mds", version="v1.0.0")
    second = InstalledComponent(name="dingo-mds", version="v1.0.0", updatable=True)

    assert first == second
