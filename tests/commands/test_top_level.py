"""Tests for the top-level dingo command group."""

from click.testing import CliRunner

from dingocli.cli.cli import cli
from dingocli.core.context import DingoContext


def test_help_lists_command_groups() -> None:
    """Test that top-level help lists the command groups."""
    result = CliRunner().invoke(cli, ["-h"], obj=DingoContext.for_test())

    assert result.exit_code == 0, result.output
    assert "component" in result.output
    assert "config" in result.output


def test_component_help_lists_commands() -> None:
    """Test that component help lists every command."""
    result = CliRunner().invoke(cli, ["component", "--help"], obj=DingoContext.for_test())

    assert result.exit_code == 0, result.output
    for command in ["list", "install", "use", "update", "check-update", "remove"]:
        assert command in result.output
