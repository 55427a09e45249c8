"""List available and installed component builds."""

import logging

import click
from rich.console import Console
from rich.table import Table

from dingocli.cli.core import load_manager
from dingocli.cli.ensure import Ensure
from dingocli.cli.json_schemas import ComponentInfo, ComponentListResponse
from dingocli.cli.output import machine_output, user_output
from dingocli.core.component.errors import ComponentError, NotFoundError
from dingocli.core.component.manager import ComponentManager
from dingocli.core.component.resolver import is_branch_build
from dingocli.core.component.types import ALL_COMPONENTS, MAIN_VERSION, InstalledComponent
from dingocli.core.context import DingoContext

logger = logging.getLogger(__name__)


def _installed_entry(
    manager: ComponentManager, available: InstalledComponent
) -> InstalledComponent | None:
    """Find the ledger entry matching a remote tag or branch record."""
    for entry in manager.installed(available.name):
        if entry.version == available.version:
            return entry
        # Branch builds are recorded under "main-<commit>"
        if (
            available.version == MAIN_VERSION
            and is_branch_build(entry.version)
            and available.commit
            and entry.commit == available.commit
        ):
            return entry
    return None


def _collect_available(
    manager: ComponentManager, names: list[str], *, skip_missing: bool
) -> list[InstalledComponent]:
    rows: list[InstalledComponent] = []
    for name in names:
        try:
            manager.check_updates(name)
            available_builds = manager.list_available_versions(name)
        except NotFoundError:
            if not skip_missing:
                raise
            logger.debug("Skipping %s: not published on the mirror", name)
            continue
        for available in available_builds:
            entry = _installed_entry(manager, available)
            if entry is not None:
                available.installed = True
                available.active = entry.active
                available.updatable = entry.updatable
            rows.append(available)
    return rows


def _render_table(rows: list[InstalledComponent]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("version", no_wrap=True)
    table.add_column("release", no_wrap=True)
    table.add_column("installed", no_wrap=True)
    table.add_column("active", no_wrap=True)
    table.add_column("update", no_wrap=True)

    for row in rows:
        table.add_row(
            row.name,
            row.version,
            row.release,
            "yes" if row.installed else "",
            "*" if row.active else "",
            "available" if row.updatable else "",
        )

    Console(stderr=True, width=120).print(table)


@click.command("list")
@click.argument("name", required=False, type=click.Choice(ALL_COMPONENTS))
@click.option("--installed", "installed_only", is_flag=True, help="Only show installed builds.")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table.")
@click.pass_obj
def list_cmd(ctx: DingoContext, name: str | None, installed_only: bool, as_json: bool) -> None:
    """List component builds available on the mirror."""
    manager = load_manager(ctx)
    names = [name] if name is not None else list(ALL_COMPONENTS)

    try:
        if installed_only:
            rows = manager.installed(name)
        else:
            rows = _collect_available(manager, names, skip_missing=name is None)
    except ComponentError as e:
        Ensure.component_error(e)

    if as_json:
        response = ComponentListResponse(
            components=[ComponentInfo.from_component(row) for row in rows]
        )
        machine_output(response.model_dump_json(indent=2))
        return

    if not rows:
        user_output("No components found")
        return

    _render_table(rows)
