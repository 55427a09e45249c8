"""Shared helpers for component commands."""

from dingocli.cli.ensure import Ensure
from dingocli.core.component.errors import ComponentError
from dingocli.core.component.manager import ComponentManager
from dingocli.core.component.types import ALL_COMPONENTS, parse_component_version
from dingocli.core.context import DingoContext


def load_manager(ctx: DingoContext) -> ComponentManager:
    """Build the component manager, exiting with a styled error on a corrupt ledger."""
    try:
        return ctx.component_manager()
    except ComponentError as e:
        Ensure.component_error(e)


def parse_target(value: str, *, require_version: bool) -> tuple[str, str]:
    """Parse and validate a NAME[:VERSION] argument."""
    name, version = parse_component_version(value)
    Ensure.invariant(
        name in ALL_COMPONENTS,
        f"unknown component '{name}', expected one of: {', '.join(ALL_COMPONENTS)}",
    )
    if require_version:
        Ensure.invariant(bool(version), f"a version is required, e.g. {name}:v1.0.0")
    return name, version
