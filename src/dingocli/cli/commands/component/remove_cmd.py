"""Remove an installed component build."""

import click

from dingocli.cli.core import load_manager, parse_target
from dingocli.cli.ensure import Ensure
from dingocli.cli.output import user_output
from dingocli.core.component.errors import ComponentError
from dingocli.core.context import DingoContext


@click.command("remove")
@click.argument("target", metavar="NAME:VERSION")
@click.option("-f", "--force", is_flag=True, help="Remove the build even if it is active.")
@click.option("--dry-run", is_flag=True, help="Show what would be removed without removing it.")
@click.pass_obj
def remove_cmd(ctx: DingoContext, target: str, force: bool, dry_run: bool) -> None:
    """Remove an installed build and its binary."""
    name, version = parse_target(target, require_version=True)
    manager = load_manager(ctx)

    try:
        removed = manager.remove(name, version, force=force, dry_run=dry_run)
    except ComponentError as e:
        Ensure.component_error(e)

    if dry_run:
        user_output(f"[DRY RUN] Would remove {removed.name} {removed.version} ({removed.path})")
        return

    user_output(f"Removed {removed.name} {removed.version}")
    if removed.active:
        user_output(
            click.style("Warning: ", fg="yellow")
            + f"{removed.name} has no active version, run 'dingo component use' to pick one"
        )
