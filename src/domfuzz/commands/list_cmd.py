"""Command: list transformations, bundles and aliases."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domfuzz.commands._base import DomfuzzCommand

if TYPE_CHECKING:
    from domfuzz.commands._context import AppContext


@click.command(
    "list",
    cls=DomfuzzCommand,
    examples=("list", "-q list", "--json list"),
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """Show available transformations and bundles."""
    from domfuzz.services.fuzz import FuzzService

    app.emit(FuzzService().describe())
