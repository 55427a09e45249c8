"""Show and edit ~/.dingo/config.toml."""

from dataclasses import replace

import click

from dingocli.cli.output import machine_output, user_output
from dingocli.core.context import DingoContext


@click.group("config")
def config_group() -> None:
    """Manage dingo configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: DingoContext) -> None:
    """Print the effective configuration."""
    config = ctx.global_config
    machine_output(f"mirror_url={config.mirror_url or ''}")
    machine_output(f"components_dir={config.components_dir}")
    machine_output(f"request_timeout={config.request_timeout}")


@config_group.command("set-mirror")
@click.argument("url")
@click.pass_obj
def config_set_mirror(ctx: DingoContext, url: str) -> None:
    """Set the mirror that publishes component builds."""
    # Start from the stored file so env overrides are not persisted
    stored = ctx.config_ops.load()
    ctx.config_ops.save(replace(stored, mirror_url=url.rstrip("/")))
    user_output(f"Mirror set to {url.rstrip('/')} in {ctx.config_ops.path()}")
