"""Update installed builds and report available updates."""

import click

from dingocli.cli.core import load_manager, parse_target
from dingocli.cli.ensure import Ensure
from dingocli.cli.output import user_output
from dingocli.core.component.errors import ComponentError
from dingocli.core.component.types import ALL_COMPONENTS
from dingocli.core.context import DingoContext


@click.command("update")
@click.argument("target", metavar="NAME:VERSION")
@click.pass_obj
def update_cmd(ctx: DingoContext, target: str) -> None:
    """Download the newer remote build of an installed version."""
    name, version = parse_target(target, require_version=True)
    manager = load_manager(ctx)

    try:
        component = manager.update(name, version)
    except ComponentError as e:
        Ensure.component_error(e)

    user_output(
        click.style("✓ ", fg="green")
        + f"Updated {component.name} {component.version} (build {component.release})"
    )


@click.command("check-update")
@click.argument("name", required=False, type=click.Choice(ALL_COMPONENTS))
@click.pass_obj
def check_update_cmd(ctx: DingoContext, name: str | None) -> None:
    """Report installed builds with a newer remote build."""
    manager = load_manager(ctx)

    try:
        updatable = manager.check_updates(name)
    except ComponentError as e:
        Ensure.component_error(e)

    if not updatable:
        user_output("All installed components are up to date")
        return

    for component in updatable:
        user_output(f"{component.name} {component.version}: newer build available")
