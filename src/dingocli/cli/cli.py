import logging

import click

from dingocli.cli.commands.component import component_group
from dingocli.cli.commands.config import config_group
from dingocli.cli.ensure import Ensure
from dingocli.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="dingocli")
@click.option("--debug", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Manage DingoFS component builds on this machine."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            Ensure.fail(str(e))


cli.add_command(component_group)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `dingo` console script."""
    cli()
