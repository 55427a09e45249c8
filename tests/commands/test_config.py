"""Tests for the config commands."""

from pathlib import Path

from click.testing import CliRunner

from dingocli.cli.cli import cli
from dingocli.core.context import DingoContext
from dingocli.core.global_config import GlobalConfig, InMemoryGlobalConfigOps


def test_config_list_prints_effective_config() -> None:
    """Test that config list prints every effective setting."""
    ctx = DingoContext.for_test()

    result = CliRunner().invoke(cli, ["config", "list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "mirror_url=https://mirror.test/components" in result.output
    assert "components_dir=/test/dingo/components" in result.output
    assert "request_timeout=5.0" in result.output


def test_config_list_without_mirror() -> None:
    """Test that config list prints an empty mirror when unset."""
    config = GlobalConfig(
        mirror_url=None, components_dir=Path("/test/components"), request_timeout=30.0
    )
    ctx = DingoContext.for_test(global_config=config)

    result = CliRunner().invoke(cli, ["config", "list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "mirror_url=\n" in result.output


def test_config_set_mirror_saves_stripped_url() -> None:
    """Test that set-mirror saves the URL without a trailing slash."""
    stored = GlobalConfig(
        mirror_url=None, components_dir=Path("/stored/components"), request_timeout=10.0
    )
    config_ops = InMemoryGlobalConfigOps(stored)
    ctx = DingoContext.for_test(config_ops=config_ops)

    result = CliRunner().invoke(
        cli, ["config", "set-mirror", "https://new-mirror.test/dingo/"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert "Mirror set to https://new-mirror.test/dingo" in result.output
    saved = config_ops.load()
    assert saved.mirror_url == "https://new-mirror.test/dingo"
    assert saved.components_dir == Path("/stored/components")
    assert saved.request_timeout == 10.0
