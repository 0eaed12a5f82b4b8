"""Subcommand modules for domfuzz.

register_commands() uses deferred imports so ``domfuzz --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from domfuzz.commands.generate import generate
    from domfuzz.commands.list_cmd import list_cmd

    cli.add_command(generate)
    cli.add_command(list_cmd)
