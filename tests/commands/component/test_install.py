"""Tests for the component install command."""

import json
from pathlib import Path

from click.testing import CliRunner

from dingocli.cli.cli import cli
from tests.test_utils.catalogs import MIRROR, installed
from tests.test_utils.contexts import component_env


def test_install_latest_by_default() -> None:
    """A bare name installs the latest tag and makes it active."""
    env = component_env()

    result = CliRunner().invoke(cli, ["component", "install", "dingo-mds"], obj=env.ctx)

    assert result.exit_code == 0, result.output
    assert "Installed dingo-mds v1.1.0 (active)" in result.output
    assert env.binaries.downloads == [
        (
            f"{MIRROR}/dingo-mds/tags/v1.1.0",
            Path("/test/dingo/components/dingo-mds/v1.1.0/dingo-mds"),
        )
    ]
    assert env.ledger_store.content is not None
    saved = json.loads(env.ledger_store.content)
    assert [(r["name"], r["version"], r["active"]) for r in saved] == [
        ("dingo-mds", "v1.1.0", True)
    ]


def test_install_exact_tag_when_other_build_active() -> None:
    """Test that an extra install stays inactive and hints at use."""
    env = component_env(entries=[installed("dingo-mds", "v1.1.0", active=True)])

    result = CliRunner().invoke(cli, ["component", "install", "dingo-mds:v1.0.0"], obj=env.ctx)

    assert result.exit_code == 0, result.output
    assert "Installed dingo-mds v1.0.0" in result.output
    assert "(active)" not in result.output
    assert "dingo component use dingo-mds:v1.0.0" in result.output


def test_install_main_uses_concrete_label() -> None:
    """Test that installing main reports the main-<commit> label."""
    env = component_env()

    result = CliRunner().invoke(cli, ["component", "install", "dingo-mds:main"], obj=env.ctx)

    assert result.exit_code == 0, result.output
    assert "Installed dingo-mds main-01234567" in result.output


def test_install_already_installed() -> None:
    """Test that installing an existing build fails."""
    env = component_env(entries=[installed("dingo-mds", "v1.1.0", active=True)])

    result = CliRunner().invoke(cli, ["component", "install", "dingo-mds:latest"], obj=env.ctx)

    assert result.exit_code == 1
    assert "dingo-mds v1.1.0 already exist" in result.output
    assert env.binaries.downloads == []


def test_install_unknown_version() -> None:
    """Test that an unknown version fails without saving."""
    env = component_env()

    result = CliRunner().invoke(cli, ["component", "install", "dingo-mds:v9.9.9"], obj=env.ctx)

    assert result.exit_code == 1
    assert "version 'v9.9.9' not found" in result.output
    assert env.ledger_store.writes == []


def test_install_unknown_component() -> None:
    """Test that an unknown component fails before fetching."""
    env = component_env()

    result = CliRunner().invoke(cli, ["component", "install", "nonexistent:v1.0.0"], obj=env.ctx)

    assert result.exit_code == 1
    assert "unknown component 'nonexistent'" in result.output
    assert env.fetcher.fetched_urls == []
