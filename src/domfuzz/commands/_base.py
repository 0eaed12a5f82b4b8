"""Click base classes with ``--examples`` support.

Commands declare ``examples`` as argument lines without the program name;
``--examples`` prints each line behind ``domfuzz`` and exits, keeping
``--help`` short.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

PROG_NAME = "domfuzz"


def format_examples(lines: Sequence[str]) -> str:
    return "\n".join(f"  {PROG_NAME} {line}" for line in lines)


def _add_examples_option(cmd: click.Command, examples: Sequence[str]) -> None:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(format_examples(examples))
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class DomfuzzCommand(click.Command):
    """Click Command that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            _add_examples_option(self, self.examples)


class DomfuzzGroup(click.Group):
    """Click Group whose subcommands default to :class:`DomfuzzCommand`."""

    command_class = DomfuzzCommand

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            _add_examples_option(self, self.examples)
