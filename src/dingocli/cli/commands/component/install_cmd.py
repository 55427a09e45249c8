"""Install a component build."""

import click

from dingocli.cli.core import load_manager, parse_target
from dingocli.cli.ensure import Ensure
from dingocli.cli.output import user_output
from dingocli.core.component.errors import ComponentError
from dingocli.core.component.types import LATEST_VERSION
from dingocli.core.context import DingoContext


@click.command("install")
@click.argument("target", metavar="NAME[:VERSION]")
@click.pass_obj
def install_cmd(ctx: DingoContext, target: str) -> None:
    """Install a build: an exact tag, `latest` (default) or `main`."""
    name, version = parse_target(target, require_version=False)
    manager = load_manager(ctx)

    try:
        component = manager.install(name, version or LATEST_VERSION)
    except ComponentError as e:
        Ensure.component_error(e)

    suffix = " (active)" if component.active else ""
    user_output(
        click.style("✓ ", fg="green") + f"Installed {component.name} {component.version}{suffix}"
    )
    if not component.active:
        target = f"{component.name}:{component.version}"
        user_output(f"Run 'dingo component use {target}' to activate it")
