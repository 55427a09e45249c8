import click

from dingocli.cli.commands.component.install_cmd import install_cmd
from dingocli.cli.commands.component.list_cmd import list_cmd
from dingocli.cli.commands.component.remove_cmd import remove_cmd
from dingocli.cli.commands.component.update_cmd import check_update_cmd, update_cmd
from dingocli.cli.commands.component.use_cmd import use_cmd


@click.group("component")
def component_group() -> None:
    """Install, switch and remove component builds."""


component_group.add_command(check_update_cmd)
component_group.add_command(install_cmd)
component_group.add_command(list_cmd)
component_group.add_command(remove_cmd)
component_group.add_command(update_cmd)
component_group.add_command(use_cmd)
