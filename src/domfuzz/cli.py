"""Root CLI group for domfuzz with global flags and command registration."""

from __future__ import annotations

import click

from domfuzz import __version__
from domfuzz.commands import register_commands
from domfuzz.commands._base import PROG_NAME, DomfuzzGroup
from domfuzz.commands._context import AppContext
from domfuzz.config.settings import DomfuzzSettings


@click.group(
    cls=DomfuzzGroup,
    invoke_without_command=True,
    examples=(
        "list",
        "generate example.com -t all",
        "-c ./domfuzz.toml generate example.com -s",
    ),
)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """domfuzz — domain typosquatting variation generator."""
    settings = DomfuzzSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
