"""Switch the active build of a component."""

import click

from dingocli.cli.core import load_manager, parse_target
from dingocli.cli.ensure import Ensure
from dingocli.cli.output import user_output
from dingocli.core.component.errors import ComponentError
from dingocli.core.context import DingoContext


@click.command("use")
@click.argument("target", metavar="NAME:VERSION")
@click.pass_obj
def use_cmd(ctx: DingoContext, target: str) -> None:
    """Make an installed build the default one."""
    name, version = parse_target(target, require_version=True)
    manager = load_manager(ctx)

    try:
        component = manager.activate(name, version)
    except ComponentError as e:
        Ensure.component_error(e)

    user_output(f"Now using {component.name} {component.version}")
