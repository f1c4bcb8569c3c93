"""``mdfront`` entry point."""

from __future__ import annotations

from typing import Any

import click

from mdfront import __version__
from mdfront.commands import register_commands
from mdfront.commands._context import AppContext
from mdfront.config.settings import MdfrontSettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="mdfront")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only OK/ERROR lines.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logs and error details.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", help="Use this mdfront.toml instead of searching.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """mdfront: read #####-delimited TOML front matter from markdown articles."""
    ctx.obj = AppContext(MdfrontSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
